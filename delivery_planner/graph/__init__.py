"""Graph store for the delivery network.

This subpackage holds the mutable in-memory graph of locations and
routes that the query adapters run over.
"""

from .location_graph import LocationGraph

__all__ = ["LocationGraph"]
