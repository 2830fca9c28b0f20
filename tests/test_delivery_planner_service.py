"""Tests for the DeliveryPlannerService facade."""

import logging

import pytest

from delivery_planner.adapters.graph import BreadthFirstRouteSimulator, DijkstraPlanSolver
from delivery_planner.config import PlannerConfig
from delivery_planner.domain.errors import DuplicateLocationError, LocationNotFoundError
from delivery_planner.domain.models import DeliveryPlan, DeliverySimulation
from delivery_planner.services import DeliveryPlannerService


@pytest.fixture
def planner():
    return DeliveryPlannerService(
        plan_solver=DijkstraPlanSolver(PlannerConfig()),
        route_simulator=BreadthFirstRouteSimulator(),
    )


@pytest.fixture
def city(planner):
    for name in ("Depot", "Market", "Harbor", "Farm"):
        planner.add_location(name)
    planner.add_route("Depot", "Market", 1)
    planner.add_route("Market", "Harbor", 2)
    planner.add_route("Depot", "Harbor", 5)
    return planner


def test_full_operation_table(city):
    assert city.list_locations() == ("Depot", "Market", "Harbor", "Farm")

    plan = city.optimize_delivery_plan("Depot")
    assert plan.distances == {"Depot": 0, "Market": 1, "Harbor": 3, "Farm": None}
    assert plan.estimate_for("Harbor").cost == 15

    simulation = city.simulate_delivery("Depot")
    assert simulation.visits == ("Depot", "Market", "Harbor")


def test_queries_see_edits(city):
    city.remove_route("Market", "Harbor")
    city.add_route("Harbor", "Farm", 1)

    assert city.optimize_delivery_plan("Depot").distances == {
        "Depot": 0,
        "Market": 1,
        "Harbor": 5,
        "Farm": 6,
    }

    city.remove_location("Depot")

    assert city.list_locations() == ("Market", "Harbor", "Farm")
    assert city.simulate_delivery("Market").visits == ("Market",)
    assert city.simulate_delivery("Farm").visits == ("Farm", "Harbor")


def test_errors_propagate_and_leave_graph_unchanged(city):
    with pytest.raises(DuplicateLocationError):
        city.add_location("Depot")
    with pytest.raises(LocationNotFoundError):
        city.remove_location("Nowhere")
    with pytest.raises(LocationNotFoundError):
        city.add_route("Depot", "Nowhere", 3)
    with pytest.raises(LocationNotFoundError):
        city.remove_route("Nowhere", "Depot")
    with pytest.raises(LocationNotFoundError):
        city.optimize_delivery_plan("Nowhere")
    with pytest.raises(LocationNotFoundError):
        city.simulate_delivery("Nowhere")

    assert city.list_locations() == ("Depot", "Market", "Harbor", "Farm")
    assert city.graph.route_count == 3


def test_rejected_operation_is_logged(city, caplog):
    with caplog.at_level(logging.INFO, logger="delivery_planner.services"):
        with pytest.raises(DuplicateLocationError):
            city.add_location("Market")

    record = caplog.records[-1]
    assert record.getMessage() == "Operation rejected"
    assert record.operation == "add_location"
    assert record.error == "DuplicateLocationError"


def test_remove_missing_route_is_not_an_error(city):
    city.remove_route("Market", "Farm")

    assert city.graph.route_count == 3


class _FixedSolver:
    def solve(self, graph, source):
        return DeliveryPlan(source=source)


class _FixedSimulator:
    def simulate(self, graph, source):
        return DeliverySimulation(source=source, visits=(source,))


def test_query_adapters_are_injectable():
    planner = DeliveryPlannerService(
        plan_solver=_FixedSolver(),
        route_simulator=_FixedSimulator(),
    )
    planner.add_location("A")

    assert planner.optimize_delivery_plan("A") == DeliveryPlan(source="A")
    assert planner.simulate_delivery("A").visits == ("A",)
