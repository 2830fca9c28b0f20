"""Tests for the breadth-first route simulator."""

import pytest

from delivery_planner.adapters.graph import BreadthFirstRouteSimulator
from delivery_planner.domain.errors import LocationNotFoundError
from delivery_planner.graph import LocationGraph


def make_graph(names, routes):
    graph = LocationGraph()
    for name in names:
        graph.add_location(name)
    for origin, destination in routes:
        graph.add_route(origin, destination, 1)
    return graph


def test_visits_follow_route_insertion_order():
    graph = make_graph(
        ["S", "A", "B", "C", "D"],
        [("S", "B"), ("S", "A"), ("A", "D"), ("B", "C")],
    )

    simulation = BreadthFirstRouteSimulator().simulate(graph, "S")

    assert simulation.source == "S"
    assert simulation.visits == ("S", "B", "A", "C", "D")
    assert simulation.num_stops == 5


def test_each_location_is_visited_once():
    graph = make_graph(
        ["A", "B", "C"],
        [("A", "B"), ("B", "C"), ("C", "A"), ("A", "B"), ("C", "C")],
    )

    simulation = BreadthFirstRouteSimulator().simulate(graph, "A")

    assert simulation.visits == ("A", "B", "C")


def test_only_the_connected_component_is_visited():
    graph = make_graph(
        ["A", "B", "C", "D", "E"],
        [("A", "B"), ("C", "D"), ("D", "E")],
    )

    simulator = BreadthFirstRouteSimulator()

    assert simulator.simulate(graph, "A").visits == ("A", "B")
    assert simulator.simulate(graph, "E").visits == ("E", "D", "C")


def test_isolated_source_visits_only_itself():
    graph = make_graph(["A", "B"], [])

    simulation = BreadthFirstRouteSimulator().simulate(graph, "B")

    assert simulation.visits == ("B",)


def test_simulation_after_location_removal():
    graph = make_graph(["A", "B", "C", "D"], [("A", "B"), ("B", "C"), ("A", "D")])
    graph.remove_location("B")

    simulation = BreadthFirstRouteSimulator().simulate(graph, "A")

    assert simulation.visits == ("A", "D")


def test_unknown_source_raises():
    graph = make_graph(["A"], [])

    with pytest.raises(LocationNotFoundError):
        BreadthFirstRouteSimulator().simulate(graph, "B")
