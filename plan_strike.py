"""Mini README: Entry point CLI for planning strikes from the terminal.

This script exposes a Typer CLI that lists the registered planners, prints
the waypoints of a strike between two airbases, and compares planners on the
same airbase pair. Airbases come from the demo theater by name, and any
coordinate can be overridden in map pixels.
"""

from __future__ import annotations

import json
from typing import Optional

import typer

from strikeplanner.airbase import Airbase
from strikeplanner.configuration import get_settings
from strikeplanner.flight_planning import REGISTRY, FlightPlanner
from strikeplanner.geometry import Point
from strikeplanner.logging_utils import configure_root_logger
from strikeplanner.theater import DEFAULT_ORIGIN, DEFAULT_TARGET, demo_theater
from strikeplanner.utils import flight_plan_to_geojson

cli = typer.Typer(help="Plan strike flight paths between airbases.")


def _planner(name: Optional[str]) -> FlightPlanner:
    try:
        return REGISTRY.get(name or get_settings().default_planner)
    except KeyError as error:
        raise typer.BadParameter(str(error), param_hint="--planner") from error


def _airbase(name: str, x: Optional[float], y: Optional[float], hint: str) -> Airbase:
    try:
        airbase = demo_theater().airbase(name)
    except KeyError as error:
        raise typer.BadParameter(str(error), param_hint=hint) from error
    if x is None and y is None:
        return airbase
    position = airbase.position
    return airbase.update(
        Point(position.x if x is None else x, position.y if y is None else y)
    )


@cli.callback()
def main() -> None:
    """Configure logging from settings before any command runs."""

    configure_root_logger(get_settings().log_level)


@cli.command()
def planners() -> None:
    """List the registered planner names."""

    for name in REGISTRY.available_planners():
        typer.echo(name)


@cli.command()
def strike(
    planner: Optional[str] = typer.Option(None, help="Planner name, see `planners`."),
    origin: str = typer.Option(DEFAULT_ORIGIN, help="Origin airbase name."),
    target: str = typer.Option(DEFAULT_TARGET, help="Target airbase name."),
    origin_x: Optional[float] = typer.Option(None, help="Origin x override in pixels."),
    origin_y: Optional[float] = typer.Option(None, help="Origin y override in pixels."),
    target_x: Optional[float] = typer.Option(None, help="Target x override in pixels."),
    target_y: Optional[float] = typer.Option(None, help="Target y override in pixels."),
    geojson: bool = typer.Option(False, help="Emit a GeoJSON Feature instead of a table."),
) -> None:
    """Print the waypoints of a strike from ORIGIN against TARGET."""

    selected = _planner(planner)
    plan = selected.strike(
        _airbase(origin, origin_x, origin_y, "--origin"),
        _airbase(target, target_x, target_y, "--target"),
    )
    if geojson:
        typer.echo(json.dumps(flight_plan_to_geojson(plan), indent=2))
        return
    typer.echo(f"Planner {selected.name()}: {len(plan)} waypoints")
    for label, point in plan.labelled():
        typer.echo(f"{label:<8} {point.x:10.2f} {point.y:10.2f}")
    typer.echo(f"Total distance: {plan.total_distance_nm():.1f} nm")


@cli.command()
def compare(
    origin: str = typer.Option(DEFAULT_ORIGIN, help="Origin airbase name."),
    target: str = typer.Option(DEFAULT_TARGET, help="Target airbase name."),
) -> None:
    """Run every registered planner against the same pair of airbases."""

    origin_airbase = _airbase(origin, None, None, "--origin")
    target_airbase = _airbase(target, None, None, "--target")
    for name in REGISTRY.available_planners():
        plan = REGISTRY.get(name).strike(origin_airbase, target_airbase)
        typer.echo(f"{name:<12} {len(plan):>3} waypoints {plan.total_distance_nm():8.1f} nm")


if __name__ == "__main__":
    cli()
