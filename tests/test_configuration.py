"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from strikeplanner.configuration import StrikePlannerSettings


def test_defaults() -> None:
    settings = StrikePlannerSettings()
    assert settings.default_planner == "2.2.x rev 2"
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRIKEPLANNER_DEFAULT_PLANNER", "2.2.0")
    monkeypatch.setenv("STRIKEPLANNER_LOG_LEVEL", "debug")

    settings = StrikePlannerSettings()

    assert settings.default_planner == "2.2.0"
    assert settings.log_level == "DEBUG"


def test_invalid_log_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRIKEPLANNER_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        StrikePlannerSettings()
