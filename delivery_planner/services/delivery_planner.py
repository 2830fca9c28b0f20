"""Delivery planner service - Main entry point for callers.

This service owns the location graph and exposes every operation a
front-end may call: graph edits, the location listing, and the two
queries delegated to injectable adapters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Tuple, TypeVar

from ..domain.errors import DeliveryPlannerError
from ..domain.models import DeliveryPlan, DeliverySimulation
from ..graph.location_graph import LocationGraph
from ..ports.graph import PlanSolverPort, RouteSimulatorPort

T = TypeVar("T")


@dataclass
class DeliveryPlannerService:
    """Facade over a LocationGraph and its query adapters.

    Every failing call raises a DeliveryPlannerError subclass and
    leaves the graph unchanged.

    Attributes:
        plan_solver: Computes shortest-path delivery plans
        route_simulator: Computes breadth-first visitation order
        graph: The location graph being edited
    """

    plan_solver: PlanSolverPort
    route_simulator: RouteSimulatorPort
    graph: LocationGraph = field(default_factory=LocationGraph)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_location(self, name: str) -> None:
        """Add a location.

        Raises:
            DuplicateLocationError: If the name is already taken.
        """
        self._run("add_location", self.graph.add_location, name)
        self._logger.info("Location added", extra={"location": name})

    def remove_location(self, name: str) -> None:
        """Remove a location and all of its routes.

        Raises:
            LocationNotFoundError: If the location does not exist.
        """
        self._run("remove_location", self.graph.remove_location, name)
        self._logger.info("Location removed", extra={"location": name})

    def add_route(self, origin: str, destination: str, cost: int) -> None:
        """Add an undirected route.

        Raises:
            LocationNotFoundError: If either endpoint does not exist.
        """
        self._run("add_route", self.graph.add_route, origin, destination, cost)
        self._logger.info(
            "Route added",
            extra={"origin": origin, "destination": destination, "cost": cost},
        )

    def remove_route(self, origin: str, destination: str) -> None:
        """Remove every route between two locations (no-op if none).

        Raises:
            LocationNotFoundError: If either endpoint does not exist.
        """
        self._run("remove_route", self.graph.remove_route, origin, destination)
        self._logger.info(
            "Route removed",
            extra={"origin": origin, "destination": destination},
        )

    def list_locations(self) -> Tuple[str, ...]:
        """Return location names in handle order."""
        return self.graph.list_locations()

    def optimize_delivery_plan(self, source: str) -> DeliveryPlan:
        """Compute shortest route costs from ``source`` to every location.

        Raises:
            LocationNotFoundError: If ``source`` does not exist.
        """
        return self._run(
            "optimize_delivery_plan", self.plan_solver.solve, self.graph, source
        )

    def simulate_delivery(self, source: str) -> DeliverySimulation:
        """List the locations reachable from ``source`` in breadth-first order.

        Raises:
            LocationNotFoundError: If ``source`` does not exist.
        """
        return self._run(
            "simulate_delivery", self.route_simulator.simulate, self.graph, source
        )

    def _run(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        """Call ``func`` and log any domain error before re-raising it."""
        try:
            return func(*args)
        except DeliveryPlannerError as e:
            self._logger.info(
                "Operation rejected",
                extra={"operation": operation, "error": type(e).__name__},
            )
            raise
