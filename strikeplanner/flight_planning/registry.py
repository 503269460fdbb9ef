"""Mini README: Planner registry backing the planner selection control.

Structure:
    * PlannerRegistry - maps planner display names to shared instances.
    * REGISTRY - module-level registry holding the built-in planners.

Planners are stateless, so a single instance per algorithm is shared by all
callers.
"""

from __future__ import annotations

from typing import Dict, Iterable

from ..logging_utils import get_logger
from .planners import (
    FlightPlanner,
    FlightPlanner22XRev1,
    FlightPlanner22XRev2,
    FlightPlanner220,
)

LOGGER = get_logger(__name__)


class PlannerRegistry:
    """Simple registry keyed by ``FlightPlanner.name()``."""

    def __init__(self) -> None:
        self._planners: Dict[str, FlightPlanner] = {}

    def register(self, planner: FlightPlanner) -> None:
        """Register ``planner``, replacing any planner with the same name."""

        identifier = planner.name()
        LOGGER.debug("Registering planner '%s'", identifier)
        self._planners[identifier] = planner

    def available_planners(self) -> Iterable[str]:
        """Return planner names in registration order for display."""

        return list(self._planners.keys())

    def get(self, name: str) -> FlightPlanner:
        planner = self._planners.get(name)
        if planner is None:
            raise KeyError(f"Unknown flight planner '{name}'")
        return planner

    def __contains__(self, name: object) -> bool:
        return name in self._planners


REGISTRY = PlannerRegistry()
REGISTRY.register(FlightPlanner220())
REGISTRY.register(FlightPlanner22XRev1())
REGISTRY.register(FlightPlanner22XRev2())
