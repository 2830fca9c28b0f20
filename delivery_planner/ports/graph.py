"""Graph ports - Abstractions for the location graph and its queries.

These protocols define the read surface that query algorithms need
from a location graph, and the contracts of the two queries
(shortest-path planning and breadth-first simulation).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import DeliveryPlan, DeliverySimulation

# One adjacency row: (neighbor handle, cost) pairs in insertion order
Adjacency = Sequence[Tuple[int, int]]


class LocationGraphView(Protocol):
    """Read-only view of a location graph.

    Implementation: graph/location_graph.py (LocationGraph)

    Handles are dense integers in ``[0, len(graph))``. They are only
    stable until the next location removal.
    """

    def __len__(self) -> int:
        ...

    def __contains__(self, name: object) -> bool:
        ...

    def __iter__(self) -> Iterator[str]:
        ...

    def handle(self, name: str) -> int:
        """Return the current handle of ``name``.

        Raises:
            LocationNotFoundError: If ``name`` is not in the graph.
        """
        ...

    def name_of(self, handle: int) -> str:
        """Return the name currently assigned to ``handle``."""
        ...

    def neighbors(self, handle: int) -> Adjacency:
        """Return the adjacency row of ``handle``."""
        ...


class PlanSolverPort(Protocol):
    """Port for single-source shortest-path planning.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: LocationGraphView, source: str) -> DeliveryPlan:
        """Compute the cheapest route cost from ``source`` to every location.

        Args:
            graph: The location graph to explore.
            source: Name of the starting location.

        Returns:
            DeliveryPlan with one estimate per location.

        Raises:
            LocationNotFoundError: If ``source`` is not in the graph.
        """
        ...


class RouteSimulatorPort(Protocol):
    """Port for reachability traversal.

    Implementation: adapters/graph/bfs_simulator.py
    """

    def simulate(
        self, graph: LocationGraphView, source: str
    ) -> DeliverySimulation:
        """Visit every location reachable from ``source``.

        Args:
            graph: The location graph to explore.
            source: Name of the starting location.

        Returns:
            DeliverySimulation with names in discovery order.

        Raises:
            LocationNotFoundError: If ``source`` is not in the graph.
        """
        ...
