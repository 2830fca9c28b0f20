"""Breadth-first delivery simulation adapter."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List

from ...domain.models import DeliverySimulation
from ...ports.graph import LocationGraphView


@dataclass
class BreadthFirstRouteSimulator:
    """Route simulator visiting locations in breadth-first order.

    This adapter implements RouteSimulatorPort. Neighbors are enqueued
    in the order their routes were added, so the visitation order
    follows the history of add_route calls.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def simulate(
        self, graph: LocationGraphView, source: str
    ) -> DeliverySimulation:
        """Visit every location reachable from ``source``.

        Raises:
            LocationNotFoundError: If ``source`` is not in the graph.
        """
        src = graph.handle(source)

        visited: List[bool] = [False] * len(graph)
        queue: Deque[int] = deque([src])
        visited[src] = True
        visits: List[str] = []

        while queue:
            current = queue.popleft()
            visits.append(graph.name_of(current))

            for neighbor, _cost in graph.neighbors(current):
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

        self._logger.info(
            "Delivery simulated",
            extra={"source": source, "stops": len(visits)},
        )
        return DeliverySimulation(source=source, visits=tuple(visits))
