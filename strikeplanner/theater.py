"""Mini README: Named airbases used to seed the map.

Structure:
    * Theater - case-insensitive lookup of named airbases.
    * demo_theater - the three airfields the map starts with.

The default strike flies from Anapa against Mozdok.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from .airbase import Airbase
from .geometry import Point
from .logging_utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_ORIGIN = "Anapa"
DEFAULT_TARGET = "Mozdok"


@dataclass(slots=True)
class Theater:
    """Collection of named airbases."""

    airbases: Dict[str, Airbase] = field(default_factory=dict)

    def names(self) -> Iterable[str]:
        return list(self.airbases.keys())

    def airbase(self, name: str) -> Airbase:
        """Return the airbase called ``name`` ignoring case."""

        for known, airbase in self.airbases.items():
            if known.lower() == name.lower():
                return airbase
        raise KeyError(f"Unknown airbase '{name}'")

    def default_strike(self) -> Tuple[Airbase, Airbase]:
        return self.airbase(DEFAULT_ORIGIN), self.airbase(DEFAULT_TARGET)


def demo_theater() -> Theater:
    """Return a fresh theater with the demo airfields."""

    theater = Theater(
        airbases={
            "Anapa": Airbase(Point.from_nm(20, 20), friendly=True),
            "Mozdok": Airbase(Point.from_nm(120, 120), friendly=False),
            "Nalchik": Airbase(Point.from_nm(120, 20), friendly=False),
        }
    )
    LOGGER.debug("Loaded demo theater with airbases %s", list(theater.names()))
    return theater
