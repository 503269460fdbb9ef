"""Mini README: Airbase value type consumed by the planners.

Structure:
    * Airbase - frozen pairing of a map position with an allegiance flag.

Airbases are never mutated. Dragging a marker on the map produces a new
value through ``update`` or ``translate`` and the caller swaps it in, so a
planner can never observe a position changing underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .geometry import Point


@dataclass(frozen=True, slots=True)
class Airbase:
    """Airfield marker on the map.

    ``friendly`` only controls how the marker is drawn; planners ignore it.
    """

    position: Point
    friendly: bool

    def update(self, position: Point) -> Airbase:
        """Return a copy of this airbase moved to ``position``."""

        return replace(self, position=position)

    def translate(self, delta: Point) -> Airbase:
        """Return a copy moved by a pixel ``delta`` such as a drag offset."""

        return self.update(self.position.translate(delta))
