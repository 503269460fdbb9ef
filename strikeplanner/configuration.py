"""Mini README: Centralised configuration for the strike planner.

Structure:
    * StrikePlannerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``STRIKEPLANNER_`` environment variables
    (or a ``.env`` file). The map scale is fixed and deliberately absent here.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StrikePlannerSettings(BaseSettings):
    """Runtime configuration for the strike planner."""

    model_config = SettingsConfigDict(
        env_prefix="STRIKEPLANNER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    default_planner: str = Field(
        "2.2.x rev 2",
        description="Planner used when no planner is selected explicitly.",
        min_length=1,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name, e.g. DEBUG to trace planner branches.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept level names in any case and reject unknown ones."""

        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level '{value}'")
        return level


@lru_cache()
def get_settings() -> StrikePlannerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return StrikePlannerSettings()
