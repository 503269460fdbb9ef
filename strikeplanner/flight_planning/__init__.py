"""Mini README: Strike flight planning subsystem.

Exports the flight plan value, the planner strategies and the registry used
by interfaces to pick a planner by name.
"""

from .plan import FlightPlan
from .planners import (
    FlightPlanner,
    FlightPlanner22XRev1,
    FlightPlanner22XRev2,
    FlightPlanner220,
)
from .registry import REGISTRY, PlannerRegistry

__all__ = [
    "FlightPlan",
    "FlightPlanner",
    "FlightPlanner220",
    "FlightPlanner22XRev1",
    "FlightPlanner22XRev2",
    "PlannerRegistry",
    "REGISTRY",
]
