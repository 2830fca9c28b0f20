"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph queries (Dijkstra planning, breadth-first simulation)
"""
