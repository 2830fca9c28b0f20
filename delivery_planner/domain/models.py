"""Immutable result models for the Delivery Path Optimizer.

All models are frozen dataclasses with slots. They carry the results
of the two graph queries back to the caller and have no dependency on
the graph itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True, slots=True)
class DeliveryEstimate:
    """Shortest-path result for a single location.

    Attributes:
        location: Name of the location
        distance: Minimum total route cost from the source, or None
            when the location cannot be reached
        cost: Delivery cost derived from ``distance``, or None when
            unreachable
    """

    location: str
    distance: Optional[int] = None
    cost: Optional[int] = None

    @property
    def is_reachable(self) -> bool:
        """Check if the location can be reached from the source."""
        return self.distance is not None


@dataclass(frozen=True, slots=True)
class DeliveryPlan:
    """Shortest-path results from one source to every location.

    Attributes:
        source: Name of the starting location
        estimates: One estimate per live location, in handle order
    """

    source: str
    estimates: tuple[DeliveryEstimate, ...] = field(default_factory=tuple)

    @property
    def reachable(self) -> tuple[DeliveryEstimate, ...]:
        """Estimates for the locations that can be reached."""
        return tuple(e for e in self.estimates if e.is_reachable)

    @property
    def unreachable(self) -> tuple[str, ...]:
        """Names of the locations that cannot be reached."""
        return tuple(e.location for e in self.estimates if not e.is_reachable)

    @property
    def distances(self) -> Dict[str, Optional[int]]:
        """Map each location name to its distance (None if unreachable)."""
        return {e.location: e.distance for e in self.estimates}

    def estimate_for(self, location: str) -> Optional[DeliveryEstimate]:
        """Return the estimate for ``location``, or None if not in the plan."""
        for estimate in self.estimates:
            if estimate.location == location:
                return estimate
        return None


@dataclass(frozen=True, slots=True)
class DeliverySimulation:
    """Breadth-first visitation order from a source.

    Attributes:
        source: Name of the starting location
        visits: Reachable location names in discovery order, source first
    """

    source: str
    visits: tuple[str, ...] = field(default_factory=tuple)

    @property
    def num_stops(self) -> int:
        """Return the number of locations visited."""
        return len(self.visits)
