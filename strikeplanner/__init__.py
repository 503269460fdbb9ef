"""Mini README: Core package initializer for the strike planner.

This module re-exports the value types and planners most callers need so a
map front-end can compute a strike with a single import:

    from strikeplanner import Airbase, Point, REGISTRY

    plan = REGISTRY.get("2.2.x rev 2").strike(origin, target)
"""

from .airbase import Airbase
from .flight_planning import (
    REGISTRY,
    FlightPlan,
    FlightPlanner,
    FlightPlanner22XRev1,
    FlightPlanner22XRev2,
    FlightPlanner220,
    PlannerRegistry,
)
from .geometry import Point, nm_to_px, px_to_nm
from .logging_utils import get_logger

__all__ = [
    "Airbase",
    "FlightPlan",
    "FlightPlanner",
    "FlightPlanner220",
    "FlightPlanner22XRev1",
    "FlightPlanner22XRev2",
    "PlannerRegistry",
    "Point",
    "REGISTRY",
    "get_logger",
    "nm_to_px",
    "px_to_nm",
]
