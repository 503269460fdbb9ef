"""Mini README: Tests for the Typer command-line interface.

Runs the commands in-process with ``CliRunner`` against the demo theater.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from plan_strike import cli
from strikeplanner.configuration import get_settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("STRIKEPLANNER_DEFAULT_PLANNER", raising=False)
    monkeypatch.delenv("STRIKEPLANNER_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_planners_lists_registry() -> None:
    result = runner.invoke(cli, ["planners"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["2.2.0", "2.2.x rev 1", "2.2.x rev 2"]


def test_strike_uses_default_planner() -> None:
    result = runner.invoke(cli, ["strike"])
    assert result.exit_code == 0
    assert "Planner 2.2.x rev 2: 8 waypoints" in result.stdout
    assert "Takeoff" in result.stdout
    assert "Landing" in result.stdout


def test_strike_with_baseline_planner_and_overrides() -> None:
    result = runner.invoke(
        cli,
        ["strike", "--planner", "2.2.0", "--origin-x", "0", "--origin-y", "0",
         "--target-x", "500", "--target-y", "0"],
    )
    assert result.exit_code == 0
    assert "Planner 2.2.0: 10 waypoints" in result.stdout
    assert "Runway" in result.stdout


def test_strike_geojson_output() -> None:
    result = runner.invoke(cli, ["strike", "--planner", "2.2.x rev 1", "--geojson"])
    assert result.exit_code == 0
    feature = json.loads(result.stdout)
    coordinates = feature["geometry"]["coordinates"]
    assert len(coordinates) == 8
    assert coordinates[0] == coordinates[-1] == [100, 100]


def test_unknown_planner_fails() -> None:
    result = runner.invoke(cli, ["strike", "--planner", "9.9.9"])
    assert result.exit_code != 0


def test_unknown_airbase_fails() -> None:
    result = runner.invoke(cli, ["strike", "--target", "Kutaisi"])
    assert result.exit_code != 0


def test_compare_runs_every_planner() -> None:
    result = runner.invoke(cli, ["compare", "--target", "Nalchik"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 3
    assert "10 waypoints" in lines[0]
    assert "8 waypoints" in lines[2]
