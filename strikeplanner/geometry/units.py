"""Mini README: Units and the immutable map point.

Structure:
    * nm_to_px / px_to_nm - linear scale between nautical miles and pixels.
    * degrees_to_radians / radians_to_degrees - angle conversions.
    * Point - frozen value type with heading and distance helpers.

Headings follow compass convention on a screen whose y axis grows downward:
0 degrees points up (north, negative y) and 90 degrees points right (east,
positive x). ``heading_to`` returns values in roughly (-90, 270]; callers must
not assume a canonical [0, 360) range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

PX_PER_NM = 5


def nm_to_px(nm: float) -> float:
    return nm * PX_PER_NM


def px_to_nm(px: float) -> float:
    return px / PX_PER_NM


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def radians_to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


@dataclass(frozen=True, slots=True)
class Point:
    """Position on the map in pixel coordinates."""

    x: float
    y: float

    @classmethod
    def from_nm(cls, x_nm: float, y_nm: float) -> Point:
        """Build a point from coordinates given in nautical miles."""

        return cls(nm_to_px(x_nm), nm_to_px(y_nm))

    def translate(self, other: Point) -> Point:
        """Return the vector sum of this point and ``other``."""

        return Point(self.x + other.x, self.y + other.y)

    def from_heading(self, heading: float, distance_nm: float) -> Point:
        """Return the point ``distance_nm`` away along compass ``heading``."""

        angle = degrees_to_radians(heading - 90)
        distance = nm_to_px(distance_nm)
        return self.translate(
            Point(math.cos(angle) * distance, math.sin(angle) * distance)
        )

    def heading_to(self, other: Point) -> float:
        """Return the compass heading from this point towards ``other``."""

        angle = math.atan2(other.y - self.y, other.x - self.x)
        return radians_to_degrees(angle) + 90

    def distance_to(self, other: Point) -> float:
        """Return the Euclidean distance to ``other`` in pixels."""

        return math.hypot(other.x - self.x, other.y - self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)
