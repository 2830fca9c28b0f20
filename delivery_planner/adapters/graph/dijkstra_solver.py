"""Dijkstra delivery plan solver adapter.

Computes single-source shortest route costs over a location graph
and turns them into a DeliveryPlan:
- Binary-heap frontier with lazy deletion of stale entries
- Derived delivery cost from configuration
- Logging
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ...config import PlannerConfig, get_config
from ...domain.models import DeliveryEstimate, DeliveryPlan
from ...ports.graph import LocationGraphView

INFINITY = float("inf")


@dataclass
class DijkstraPlanSolver:
    """Plan solver using Dijkstra's shortest path algorithm.

    This adapter implements PlanSolverPort.

    Attributes:
        config: Planner configuration (cost per distance unit)
    """

    config: PlannerConfig = field(default_factory=lambda: get_config().planner)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: LocationGraphView, source: str) -> DeliveryPlan:
        """Compute the cheapest route cost from ``source`` to every location.

        Args:
            graph: The location graph to explore.
            source: Name of the starting location.

        Returns:
            DeliveryPlan with one estimate per location, in handle order.

        Raises:
            LocationNotFoundError: If ``source`` is not in the graph.
        """
        src = graph.handle(source)
        self._logger.debug(
            "Solving delivery plan",
            extra={"source": source, "locations": len(graph)},
        )

        distances = self._dijkstra(graph, src)

        estimates = []
        for handle, distance in enumerate(distances):
            name = graph.name_of(handle)
            if distance == INFINITY:
                estimates.append(DeliveryEstimate(location=name))
            else:
                estimates.append(
                    DeliveryEstimate(
                        location=name,
                        distance=int(distance),
                        cost=int(distance) * self.config.cost_per_unit,
                    )
                )

        plan = DeliveryPlan(source=source, estimates=tuple(estimates))
        self._logger.info(
            "Delivery plan computed",
            extra={
                "source": source,
                "reachable": len(plan.reachable),
                "unreachable": len(plan.unreachable),
            },
        )
        return plan

    def _dijkstra(self, graph: LocationGraphView, src: int) -> List[float]:
        """Shortest distance from ``src`` to every handle (inf if unreachable)."""
        distances: List[float] = [INFINITY] * len(graph)
        distances[src] = 0

        heap: List[Tuple[float, int]] = [(0, src)]
        settled: set[int] = set()

        while heap:
            current_distance, u = heapq.heappop(heap)

            # Stale entry, a shorter one was pushed since
            if current_distance > distances[u]:
                continue

            # Each handle is expanded once
            if u in settled:
                continue
            settled.add(u)

            for v, cost in graph.neighbors(u):
                new_distance = current_distance + cost
                if new_distance < distances[v]:
                    distances[v] = new_distance
                    heapq.heappush(heap, (new_distance, v))

        return distances
