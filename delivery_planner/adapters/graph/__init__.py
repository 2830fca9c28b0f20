"""Graph adapters - Implementations of graph query ports.

Available implementations:
- DijkstraPlanSolver: Shortest route costs using Dijkstra's algorithm
- BreadthFirstRouteSimulator: Reachability in breadth-first order
"""

from .bfs_simulator import BreadthFirstRouteSimulator
from .dijkstra_solver import DijkstraPlanSolver

__all__ = ["BreadthFirstRouteSimulator", "DijkstraPlanSolver"]
