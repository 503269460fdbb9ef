"""Mini README: Flight plan value produced by every planner.

Structure:
    * FlightPlan - frozen, ordered, non-empty sequence of waypoints with
      optional role labels and helpers for renderers.

Waypoint order is flight order. A renderer draws ``legs()`` as line
segments; previews can use ``as_commands``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..geometry import Point, px_to_nm


@dataclass(frozen=True, slots=True)
class FlightPlan:
    """Ordered waypoints from takeoff to landing."""

    waypoints: Tuple[Point, ...]
    labels: Optional[Tuple[str, ...]] = None
    planner: str = ""

    def __init__(
        self,
        waypoints: Sequence[Point],
        labels: Optional[Sequence[str]] = None,
        planner: str = "",
    ) -> None:
        waypoints = tuple(waypoints)
        if not waypoints:
            raise ValueError("A flight plan requires at least one waypoint")
        if labels is not None:
            labels = tuple(labels)
            if len(labels) != len(waypoints):
                raise ValueError(
                    f"Expected {len(waypoints)} waypoint labels, got {len(labels)}"
                )
        object.__setattr__(self, "waypoints", waypoints)
        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "planner", planner)

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.waypoints)

    @property
    def departure(self) -> Point:
        return self.waypoints[0]

    @property
    def arrival(self) -> Point:
        return self.waypoints[-1]

    def labelled(self) -> List[Tuple[str, Point]]:
        """Pair each waypoint with its label, numbering unlabelled plans."""

        labels = self.labels or tuple(str(index) for index in range(len(self.waypoints)))
        return list(zip(labels, self.waypoints))

    def legs(self) -> List[Tuple[Point, Point]]:
        """Return consecutive waypoint pairs in flight order."""

        return list(zip(self.waypoints, self.waypoints[1:]))

    def total_distance_nm(self) -> float:
        return sum(px_to_nm(start.distance_to(end)) for start, end in self.legs())

    def as_commands(self) -> List[Dict[str, object]]:
        """Convert waypoints to dictionaries for UI previews."""

        return [
            {"label": label, "x": point.x, "y": point.y}
            for label, point in self.labelled()
        ]
