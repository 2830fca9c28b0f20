"""Top-level package for the Delivery Path Optimizer project.

The package keeps an in-memory network of delivery locations and
routes, and answers two questions about it: the cheapest route cost
from a location to every other one, and the order in which a
breadth-first delivery run reaches them.
"""

from .domain import (
    DeliveryEstimate,
    DeliveryPlan,
    DeliveryPlannerError,
    DeliverySimulation,
    DuplicateLocationError,
    LocationNotFoundError,
)
from .graph import LocationGraph
from .services import DeliveryPlannerService

__all__ = [
    "DeliveryEstimate",
    "DeliveryPlan",
    "DeliveryPlannerError",
    "DeliveryPlannerService",
    "DeliverySimulation",
    "DuplicateLocationError",
    "LocationGraph",
    "LocationNotFoundError",
]
