"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and the
algorithm adapters. They enable dependency injection and make the
query algorithms swappable in tests.
"""

from .graph import Adjacency, LocationGraphView, PlanSolverPort, RouteSimulatorPort

__all__ = [
    "Adjacency",
    "LocationGraphView",
    "PlanSolverPort",
    "RouteSimulatorPort",
]
