"""Typed domain errors for the Delivery Path Optimizer.

Every failure of a graph operation is reported through one of these
types. None of them is fatal: the caller reports the problem and
carries on with an unchanged graph.

All errors inherit from DeliveryPlannerError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DeliveryPlannerError(Exception):
    """Base error for the delivery planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateLocationError(DeliveryPlannerError):
    """A location with the same name is already in the graph.

    Attributes:
        location: The name that was already taken
    """

    location: str = ""


@dataclass
class LocationNotFoundError(DeliveryPlannerError):
    """An operation referenced a location that is not in the graph.

    Attributes:
        location: The name that could not be resolved
    """

    location: str = ""
