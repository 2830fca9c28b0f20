"""Services layer - Application orchestration.

Available services:
- DeliveryPlannerService: Graph edits and delivery queries
"""

from .delivery_planner import DeliveryPlannerService

__all__ = ["DeliveryPlannerService"]
