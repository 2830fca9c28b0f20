"""Tests for the Dijkstra delivery plan solver."""

import pytest

from delivery_planner.adapters.graph import DijkstraPlanSolver
from delivery_planner.config import PlannerConfig
from delivery_planner.domain.errors import LocationNotFoundError
from delivery_planner.domain.models import DeliveryEstimate
from delivery_planner.graph import LocationGraph


@pytest.fixture
def triangle():
    graph = LocationGraph()
    for name in ("A", "B", "C"):
        graph.add_location(name)
    graph.add_route("A", "B", 1)
    graph.add_route("B", "C", 2)
    graph.add_route("A", "C", 5)
    return graph


@pytest.fixture
def solver():
    return DijkstraPlanSolver(PlannerConfig(cost_per_unit=5))


def test_solver_prefers_cheaper_two_hop_route(triangle, solver):
    plan = solver.solve(triangle, "A")

    assert plan.source == "A"
    assert plan.distances == {"A": 0, "B": 1, "C": 3}
    assert plan.estimates == (
        DeliveryEstimate(location="A", distance=0, cost=0),
        DeliveryEstimate(location="B", distance=1, cost=5),
        DeliveryEstimate(location="C", distance=3, cost=15),
    )


def test_isolated_location_is_unreachable(triangle, solver):
    triangle.add_location("D")

    plan = solver.solve(triangle, "A")

    estimate = plan.estimate_for("D")
    assert estimate is not None
    assert not estimate.is_reachable
    assert estimate.distance is None
    assert estimate.cost is None
    assert plan.unreachable == ("D",)
    assert len(plan.reachable) == 3


def test_estimates_follow_handle_order(triangle, solver):
    triangle.add_location("D")
    triangle.add_route("D", "A", 1)

    plan = solver.solve(triangle, "C")

    assert [e.location for e in plan.estimates] == ["A", "B", "C", "D"]
    assert plan.distances == {"A": 3, "B": 2, "C": 0, "D": 4}


def test_duplicate_routes_use_the_cheapest_copy(solver):
    graph = LocationGraph()
    graph.add_location("X")
    graph.add_location("Y")
    graph.add_route("X", "Y", 9)
    graph.add_route("X", "Y", 2)

    plan = solver.solve(graph, "Y")

    assert plan.distances == {"X": 2, "Y": 0}


def test_stale_frontier_entries_are_skipped(solver):
    # B is first pushed at 10, then improved to 2 through C
    graph = LocationGraph()
    for name in ("A", "B", "C", "D"):
        graph.add_location(name)
    graph.add_route("A", "B", 10)
    graph.add_route("A", "C", 1)
    graph.add_route("C", "B", 1)
    graph.add_route("B", "D", 1)

    plan = solver.solve(graph, "A")

    assert plan.distances == {"A": 0, "B": 2, "C": 1, "D": 3}


def test_zero_cost_routes(solver):
    graph = LocationGraph()
    graph.add_location("A")
    graph.add_location("B")
    graph.add_route("A", "B", 0)

    plan = solver.solve(graph, "A")

    assert plan.estimate_for("B") == DeliveryEstimate("B", 0, 0)


def test_cost_multiplier_comes_from_config(triangle):
    solver = DijkstraPlanSolver(PlannerConfig(cost_per_unit=7))

    plan = solver.solve(triangle, "A")

    assert plan.estimate_for("C").cost == 21


def test_unknown_source_raises(triangle, solver):
    with pytest.raises(LocationNotFoundError) as exc_info:
        solver.solve(triangle, "Z")

    assert exc_info.value.location == "Z"


def test_single_location_graph(solver):
    graph = LocationGraph()
    graph.add_location("Solo")

    plan = solver.solve(graph, "Solo")

    assert plan.estimates == (DeliveryEstimate("Solo", 0, 0),)


def test_negative_route_still_returns_a_plan(solver):
    # Distances are meaningless here, the call only has to finish
    graph = LocationGraph()
    graph.add_location("A")
    graph.add_location("B")
    graph.add_location("C")
    graph.add_route("A", "B", -3)

    plan = solver.solve(graph, "A")

    assert [e.location for e in plan.estimates] == ["A", "B", "C"]
    assert plan.estimate_for("B").is_reachable
    assert plan.unreachable == ("C",)
