"""Shared fixtures: a synthetic astronomy provider and observer configs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from day_schedule.schemas import ScheduleConfig

if TYPE_CHECKING:
    from day_schedule.datasources.astronomy import AstronomyParams
    from day_schedule.datecontext import DateContext

# 2024-06-21 12:00:00 Europe/Berlin (CEST, UTC+2)
BERLIN_SOLSTICE_NOON = 1718964000


def base_record(lat: float = 52.52, lon: float = 13.405, obs_date: str = "2024-06-21") -> dict[str, Any]:
    """A plausible midsummer record for Berlin."""
    return {
        "ObsDate": obs_date,
        "ObsLat": lat,
        "ObsLon": lon,
        "ObsSeason": "Summer",
        "ObsSeasonN": 1,
        "SunAlt": 60.9,
        "SunAz": 165.0,
        "SunRise": 4.7,
        "SunSet": 21.5,
        "SunTransit": 13.1,
        "SunHrsVisible": 16.8,
        "SunHrsInvisible": 7.2,
        "SunSign": "Gemini",
        "CivilTwilightMorning": 3.9,
        "CivilTwilightEvening": 22.3,
        "NauticTwilightMorning": 2.6,
        "NauticTwilightEvening": 23.6,
        "AstroTwilightMorning": "---",
        "AstroTwilightEvening": "---",
        "CustomTwilightMorning": 4.7,
        "CustomTwilightEvening": 21.5,
        "MoonAlt": -12.0,
        "MoonAz": 95.0,
        "MoonRise": 22.1,
        "MoonSet": 4.2,
        "MoonTransit": 1.0,
        "MoonSign": "Sagittarius",
        "MoonPhaseS": "Full Moon",
        "MoonPhaseI": 4,
    }


class FakeAstronomy:
    """
    Provider returning ``base_record`` for every day.

    ``by_date`` maps ``YYYY-MM-DD`` to per-day overrides; ``defaults`` apply
    to every day.
    """

    def __init__(self, by_date: dict[str, dict[str, Any]] | None = None, **defaults: Any) -> None:
        self.by_date = by_date or {}
        self.defaults = defaults
        self.calls: list[tuple[DateContext, AstronomyParams]] = []

    def __call__(self, context: DateContext, params: AstronomyParams) -> dict[str, Any]:
        self.calls.append((context, params))
        record = base_record(params.latitude, params.longitude, context.iso_date)
        record.update(self.defaults)
        record.update(self.by_date.get(context.iso_date, {}))
        return record


@pytest.fixture
def fake_astronomy() -> FakeAstronomy:
    return FakeAstronomy()


@pytest.fixture
def berlin_config() -> ScheduleConfig:
    return ScheduleConfig(latitude=52.52, longitude=13.405, timezone="Europe/Berlin")
