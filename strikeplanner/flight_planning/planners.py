"""Mini README: Strike flight planning algorithms.

Structure:
    * FlightPlanner - abstract strategy exposing ``name`` and ``strike``.
    * FlightPlanner220 - fixed-offset baseline with an assumed runway heading.
    * FlightPlanner22XRev1 - solves join and hold points from the geometry.
    * FlightPlanner22XRev2 - revision 1 with a different join retreat test.

All planners are stateless: they hold distance constants in nautical miles
and compute a fresh ``FlightPlan`` from the two airbase positions on every
call. Every plan starts and ends on the origin airbase.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import List

from ..airbase import Airbase
from ..geometry import Point, px_to_nm, radians_to_degrees
from ..logging_utils import get_logger
from .plan import FlightPlan

LOGGER = get_logger(__name__)

# Ingress and egress are offset this many degrees either side of the
# target-to-origin axis.
ATTACK_AXIS_OFFSET = 25


class FlightPlanner(ABC):
    """Strategy interface used by the planner selection control."""

    @abstractmethod
    def name(self) -> str:
        """Return the stable identifier shown to users."""

    @abstractmethod
    def strike(self, origin_airbase: Airbase, target_airbase: Airbase) -> FlightPlan:
        """Plan a round trip from ``origin_airbase`` against ``target_airbase``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name()!r})"


class FlightPlanner220(FlightPlanner):
    """Baseline planner using fixed offsets from each airfield."""

    # Modelling simplification: every origin is treated as if its runway
    # pointed this way.
    runway_heading = 120
    runway_distance = 5
    hold_distance = 15
    ingress_distance = 25
    join_distance = 20

    def name(self) -> str:
        return "2.2.0"

    def strike(self, origin_airbase: Airbase, target_airbase: Airbase) -> FlightPlan:
        origin = origin_airbase.position
        target = target_airbase.position
        airfield_heading = target.heading_to(origin)
        ingress = target.from_heading(
            airfield_heading + ATTACK_AXIS_OFFSET, self.ingress_distance
        )
        join = ingress.from_heading(ingress.heading_to(origin), self.join_distance)
        egress = target.from_heading(
            airfield_heading - ATTACK_AXIS_OFFSET, self.ingress_distance
        )
        split = egress.from_heading(egress.heading_to(origin), self.join_distance)

        waypoints = [
            ("Takeoff", origin),
            ("Runway", origin.from_heading(self.runway_heading, self.runway_distance)),
            ("Hold", origin.from_heading(origin.heading_to(target), self.hold_distance)),
            ("Join", join),
            ("Ingress", ingress),
            ("Target", target),
            ("Egress", egress),
            ("Split", split),
            (
                "Descent",
                origin.from_heading(self.runway_heading + 180, self.runway_distance),
            ),
            ("Landing", origin),
        ]
        LOGGER.info("Planner %s produced %s waypoints", self.name(), len(waypoints))
        return _build_plan(self.name(), waypoints)


class FlightPlanner22XRev1(FlightPlanner):
    """Planner that places hold and join points relative to each other.

    The join point sits ``join_distance`` from the ingress point and the hold
    point sits ``hold_distance`` from the origin. Where both can be satisfied
    while keeping the hold ``join_distance`` from the join point, the hold is
    found by solving the triangle between origin, hold and join.
    """

    hold_distance = 15
    push_distance = 20
    join_distance = 20
    ingress_distance = 45

    def __init__(self) -> None:
        LOGGER.debug(
            "Initialised %s with hold=%s push=%s join=%s ingress=%s",
            type(self).__name__,
            self.hold_distance,
            self.push_distance,
            self.join_distance,
            self.ingress_distance,
        )

    def name(self) -> str:
        return "2.2.x rev 1"

    def join_should_retreat(self, origin: Point, target: Point, ingress: Point) -> bool:
        """Return True when the join point must be pushed back past the ingress."""

        return px_to_nm(origin.distance_to(ingress)) < self.join_distance

    def join_point(self, origin: Point, target: Point, ingress: Point) -> Point:
        if self.join_should_retreat(origin, target, ingress):
            # Back the join point away from the target rather than towards
            # the origin.
            LOGGER.debug("Join point for %s retreats from target", ingress)
            return ingress.from_heading(target.heading_to(origin), self.join_distance)
        return ingress.from_heading(ingress.heading_to(origin), self.join_distance)

    def hold_point(self, origin: Point, target: Point, join: Point) -> Point:
        if origin.distance_to(target) < join.distance_to(target):
            # Origin is nearer the target than the join point is.
            LOGGER.debug("Hold point pushed back from join point %s", join)
            return join.from_heading(target.heading_to(origin), self.push_distance)

        heading_to_join = origin.heading_to(join)
        hold = origin.from_heading(heading_to_join, self.hold_distance)
        if px_to_nm(hold.distance_to(join)) >= self.push_distance:
            return hold

        theta = self._hold_angle(px_to_nm(origin.distance_to(join)))
        if theta is None:
            LOGGER.debug(
                "No hold point keeps both hold and join distances; retreating"
            )
            return origin.from_heading(target.heading_to(origin), self.hold_distance)
        return origin.from_heading(heading_to_join - theta, self.hold_distance)

    def _hold_angle(self, origin_join_distance: float) -> float | None:
        """Angle in degrees at the origin between the join and hold points.

        Uses the law of cosines on the triangle with sides ``hold_distance``,
        ``origin_join_distance`` and ``join_distance``. Returns None when the
        three lengths cannot form a triangle.
        """

        denominator = 2 * self.hold_distance * origin_join_distance
        if denominator == 0:
            return None
        ratio = (
            self.hold_distance**2
            + origin_join_distance**2
            - self.join_distance**2
        ) / denominator
        if not -1 <= ratio <= 1:
            return None
        return radians_to_degrees(math.acos(ratio))

    def strike(self, origin_airbase: Airbase, target_airbase: Airbase) -> FlightPlan:
        origin = origin_airbase.position
        target = target_airbase.position
        airfield_heading = target.heading_to(origin)
        ingress = target.from_heading(
            airfield_heading + ATTACK_AXIS_OFFSET, self.ingress_distance
        )
        join = self.join_point(origin, target, ingress)
        egress = target.from_heading(
            airfield_heading - ATTACK_AXIS_OFFSET, self.ingress_distance
        )

        waypoints = [
            ("Takeoff", origin),
            ("Hold", self.hold_point(origin, target, join)),
            ("Join", join),
            ("Ingress", ingress),
            ("Target", target),
            ("Egress", egress),
            ("Split", self.join_point(origin, target, egress)),
            ("Landing", origin),
        ]
        LOGGER.info("Planner %s produced %s waypoints", self.name(), len(waypoints))
        return _build_plan(self.name(), waypoints)


class FlightPlanner22XRev2(FlightPlanner22XRev1):
    """Revision 1 retreating the join point whenever the ingress point lies
    farther from the target than the origin does."""

    def name(self) -> str:
        return "2.2.x rev 2"

    def join_should_retreat(self, origin: Point, target: Point, ingress: Point) -> bool:
        return origin.distance_to(target) < ingress.distance_to(target)


def _build_plan(planner_name: str, labelled: List[tuple[str, Point]]) -> FlightPlan:
    return FlightPlan(
        waypoints=[point for _, point in labelled],
        labels=[label for label, _ in labelled],
        planner=planner_name,
    )
