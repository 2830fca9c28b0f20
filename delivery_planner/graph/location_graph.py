"""In-memory undirected weighted graph of named locations.

Locations are addressed by name from the outside and by a dense
integer handle on the inside. Handles always cover ``[0, len(graph))``:
removing a location compacts every structure so no holes remain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from ..domain.errors import DuplicateLocationError, LocationNotFoundError


@dataclass
class LocationGraph:
    """Undirected multigraph keyed by unique location names.

    Each route is stored twice, once in the adjacency row of each
    endpoint. Adding the same route twice keeps both copies.

    Example:
        graph = LocationGraph()
        graph.add_location("Depot")
        graph.add_location("Market")
        graph.add_route("Depot", "Market", 4)
    """

    _names: List[str] = field(default_factory=list, repr=False)
    _handles: Dict[str, int] = field(default_factory=dict, repr=False)
    _adjacency: List[List[Tuple[int, int]]] = field(default_factory=list, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._handles

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    @property
    def route_count(self) -> int:
        """Number of routes, counting each duplicate separately."""
        entries = sum(len(row) for row in self._adjacency)
        return entries // 2

    def handle(self, name: str) -> int:
        """Return the current handle of ``name``.

        Raises:
            LocationNotFoundError: If ``name`` is not in the graph.
        """
        try:
            return self._handles[name]
        except KeyError:
            raise LocationNotFoundError(
                f"Location not found: {name}",
                location=name,
            ) from None

    def name_of(self, handle: int) -> str:
        """Return the name currently assigned to ``handle``."""
        return self._names[handle]

    def neighbors(self, handle: int) -> Tuple[Tuple[int, int], ...]:
        """Snapshot of the (neighbor handle, cost) pairs of ``handle``."""
        return tuple(self._adjacency[handle])

    def list_locations(self) -> Tuple[str, ...]:
        """Return live location names in handle order."""
        return tuple(self._names)

    def add_location(self, name: str) -> None:
        """Add a location with the next free handle.

        Raises:
            DuplicateLocationError: If ``name`` is already present.
        """
        if name in self._handles:
            raise DuplicateLocationError(
                f"Location already exists: {name}",
                location=name,
            )

        self._handles[name] = len(self._names)
        self._names.append(name)
        self._adjacency.append([])
        self._logger.debug(
            "Location added",
            extra={"location": name, "handle": self._handles[name]},
        )

    def remove_location(self, name: str) -> None:
        """Remove a location and every route touching it.

        Handles above the removed one shift down by one.

        Raises:
            LocationNotFoundError: If ``name`` is not in the graph.
        """
        idx = self.handle(name)
        self._compact(idx)
        self._logger.debug(
            "Location removed",
            extra={"location": name, "handle": idx, "remaining": len(self)},
        )

    def add_route(self, origin: str, destination: str, cost: int) -> None:
        """Add an undirected route between two existing locations.

        A route from a location to itself is stored twice in its own row.

        Raises:
            LocationNotFoundError: If either endpoint is missing.
        """
        u, v = self._endpoints(origin, destination)

        if cost < 0:
            self._logger.warning(
                "Negative route cost, shortest paths will be unreliable",
                extra={"origin": origin, "destination": destination, "cost": cost},
            )

        self._adjacency[u].append((v, cost))
        self._adjacency[v].append((u, cost))
        self._logger.debug(
            "Route added",
            extra={"origin": origin, "destination": destination, "cost": cost},
        )

    def remove_route(self, origin: str, destination: str) -> None:
        """Remove every route between two locations.

        All duplicate copies go at once. Removing a route that does not
        exist is a no-op.

        Raises:
            LocationNotFoundError: If either endpoint is missing.
        """
        u, v = self._endpoints(origin, destination)

        self._adjacency[u] = [e for e in self._adjacency[u] if e[0] != v]
        self._adjacency[v] = [e for e in self._adjacency[v] if e[0] != u]
        self._logger.debug(
            "Route removed",
            extra={"origin": origin, "destination": destination},
        )

    def _endpoints(self, origin: str, destination: str) -> Tuple[int, int]:
        """Resolve both endpoints before anything is mutated."""
        if origin not in self._handles or destination not in self._handles:
            missing = origin if origin not in self._handles else destination
            raise LocationNotFoundError(
                f"One or both locations not found: {origin}, {destination}",
                location=missing,
            )
        return self._handles[origin], self._handles[destination]

    def _compact(self, idx: int) -> None:
        """Drop handle ``idx`` and renumber everything above it."""
        del self._adjacency[idx]
        del self._names[idx]

        self._adjacency = [
            [(t - 1 if t > idx else t, cost) for t, cost in row if t != idx]
            for row in self._adjacency
        ]
        self._handles = {name: i for i, name in enumerate(self._names)}
