"""Mini README: Tests for the flight plan value and its GeoJSON export.

Covers the non-empty invariant, label validation, the leg and distance
helpers renderers rely on, and the LineString conversion.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from strikeplanner.flight_planning import FlightPlan
from strikeplanner.geometry import Point
from strikeplanner.utils import flight_plan_to_geojson


def _square_plan() -> FlightPlan:
    return FlightPlan(
        waypoints=[Point(0, 0), Point(50, 0), Point(50, 50), Point(0, 0)],
        labels=["Takeoff", "Ingress", "Target", "Landing"],
        planner="test",
    )


def test_flight_plan_requires_waypoints() -> None:
    with pytest.raises(ValueError):
        FlightPlan(waypoints=[])


def test_flight_plan_rejects_mismatched_labels() -> None:
    with pytest.raises(ValueError, match="labels"):
        FlightPlan(waypoints=[Point(0, 0), Point(1, 1)], labels=["Takeoff"])


def test_flight_plan_is_frozen_and_copies_input() -> None:
    source = [Point(0, 0), Point(5, 5)]
    plan = FlightPlan(source)
    source.append(Point(10, 10))

    assert len(plan) == 2
    assert isinstance(plan.waypoints, tuple)
    with pytest.raises(FrozenInstanceError):
        plan.planner = "other"  # type: ignore[misc]


def test_legs_and_distance() -> None:
    plan = _square_plan()

    assert plan.legs() == [
        (Point(0, 0), Point(50, 0)),
        (Point(50, 0), Point(50, 50)),
        (Point(50, 50), Point(0, 0)),
    ]
    # 10 nm + 10 nm + diagonal of a 10 nm square.
    assert plan.total_distance_nm() == pytest.approx(20 + 200**0.5)
    assert plan.departure == plan.arrival == Point(0, 0)


def test_single_waypoint_plan_has_no_legs() -> None:
    plan = FlightPlan([Point(3, 4)])
    assert plan.legs() == []
    assert plan.total_distance_nm() == 0
    assert plan.labelled() == [("0", Point(3, 4))]


def test_as_commands_pairs_labels_with_coordinates() -> None:
    commands = _square_plan().as_commands()
    assert commands[0] == {"label": "Takeoff", "x": 0, "y": 0}
    assert commands[2] == {"label": "Target", "x": 50, "y": 50}


def test_geojson_linestring_follows_waypoints() -> None:
    feature = flight_plan_to_geojson(_square_plan())

    assert feature["type"] == "Feature"
    assert feature["geometry"]["type"] == "LineString"
    assert feature["geometry"]["coordinates"] == [[0, 0], [50, 0], [50, 50], [0, 0]]
    assert feature["properties"]["planner"] == "test"
    assert feature["properties"]["labels"][-1] == "Landing"
