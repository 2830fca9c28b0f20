"""Domain layer - Result models and errors.

This module contains immutable result models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    DeliveryPlannerError,
    DuplicateLocationError,
    LocationNotFoundError,
)
from .models import DeliveryEstimate, DeliveryPlan, DeliverySimulation

__all__ = [
    # Models
    "DeliveryEstimate",
    "DeliveryPlan",
    "DeliverySimulation",
    # Errors
    "DeliveryPlannerError",
    "DuplicateLocationError",
    "LocationNotFoundError",
]
