"""
Domain models for day schedule configuration.

Pydantic models validate everything the host hands in. Once a
``ScheduleConfig`` exists, the compute core trusts it and never re-validates.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from day_schedule.reference.seasons import DEFAULT_EARLYFALL, DEFAULT_EARLYSPRING

# =============================================================================
# Event kinds
# =============================================================================


class EventKind(StrEnum):
    """Every event kind that can be tracked on a day's timeline."""

    MOON_PHASE_S = "MoonPhaseS"
    MOON_RISE = "MoonRise"
    MOON_SET = "MoonSet"
    MOON_SIGN = "MoonSign"
    MOON_TRANSIT = "MoonTransit"
    OBS_DATE = "ObsDate"
    OBS_IS_DST = "ObsIsDST"
    SEASON_METEO = "SeasonMeteo"
    SEASON_PHENO = "SeasonPheno"
    OBS_SEASON = "ObsSeason"
    DAY_SEASONAL_HR = "DaySeasonalHr"
    DAYTIME = "Daytime"
    SUN_RISE = "SunRise"
    SUN_SET = "SunSet"
    SUN_SIGN = "SunSign"
    SUN_TRANSIT = "SunTransit"
    ASTRO_TWILIGHT_EVENING = "AstroTwilightEvening"
    ASTRO_TWILIGHT_MORNING = "AstroTwilightMorning"
    CIVIL_TWILIGHT_EVENING = "CivilTwilightEvening"
    CIVIL_TWILIGHT_MORNING = "CivilTwilightMorning"
    NAUTIC_TWILIGHT_EVENING = "NauticTwilightEvening"
    NAUTIC_TWILIGHT_MORNING = "NauticTwilightMorning"
    CUSTOM_TWILIGHT_EVENING = "CustomTwilightEvening"
    CUSTOM_TWILIGHT_MORNING = "CustomTwilightMorning"


#: Events read straight from the astronomy record, in timeline insertion order.
TIMED_ASTRONOMY_EVENTS: tuple[EventKind, ...] = (
    EventKind.SUN_TRANSIT,
    EventKind.SUN_RISE,
    EventKind.SUN_SET,
    EventKind.CIVIL_TWILIGHT_MORNING,
    EventKind.CIVIL_TWILIGHT_EVENING,
    EventKind.NAUTIC_TWILIGHT_MORNING,
    EventKind.NAUTIC_TWILIGHT_EVENING,
    EventKind.ASTRO_TWILIGHT_MORNING,
    EventKind.ASTRO_TWILIGHT_EVENING,
    EventKind.CUSTOM_TWILIGHT_MORNING,
    EventKind.CUSTOM_TWILIGHT_EVENING,
    EventKind.MOON_TRANSIT,
    EventKind.MOON_RISE,
    EventKind.MOON_SET,
)


class Language(StrEnum):
    """Languages the astronomy provider can label its readings in."""

    EN = "EN"
    DE = "DE"
    ES = "ES"
    FR = "FR"
    IT = "IT"
    NL = "NL"
    PL = "PL"


# =============================================================================
# Seasonal hours
# =============================================================================

_SEASONAL_HRS_RE = re.compile(r"^(\d+)(?::(\d+))?$")
_HORIZON_RE = re.compile(r"^(-?\d+(?:\.\d+)?)(?::(-?\d+(?:\.\d+)?))?$")
_EARLYSPRING_RE = re.compile(r"^(0[2-3])-(0[1-9]|[12]\d|30|31)$")
_EARLYFALL_RE = re.compile(r"^(0[8-9])-(0[1-9]|[12]\d|30|31)$")

#: The literal setting that selects the 12 day / 4 night roman clock.
ROMAN_SEASONAL_HRS = "4"
DEFAULT_SEASONAL_HRS = "12"


class SeasonalHoursSpec(BaseModel):
    """How many equal parts the day and the night are split into."""

    model_config = {"frozen": True}

    day_parts: int = Field(default=12, ge=1, le=24)
    night_parts: int = Field(default=12, ge=1, le=24)
    is_roman: bool = False

    @classmethod
    def parse(cls, value: str) -> SeasonalHoursSpec:
        """
        Parse ``"N"``, ``"N:M"`` or the roman literal ``"4"``.

        Raises:
            ValueError: On malformed input or parts outside 1..24.
        """
        match = _SEASONAL_HRS_RE.match(value.strip())
        if not match:
            raise ValueError(f"seasonal_hrs must look like N or N:M, got {value!r}")
        if value.strip() == ROMAN_SEASONAL_HRS:
            return cls(day_parts=12, night_parts=4, is_roman=True)
        day_parts = int(match.group(1))
        night_parts = int(match.group(2)) if match.group(2) else day_parts
        for parts in (day_parts, night_parts):
            if not 1 <= parts <= 24:
                raise ValueError(f"seasonal_hrs parts must be within 1..24, got {value!r}")
        return cls(day_parts=day_parts, night_parts=night_parts)


# =============================================================================
# Schedule configuration
# =============================================================================


class ScheduleConfig(BaseModel):
    """Validated observer and schedule settings."""

    model_config = {"str_strip_whitespace": True, "frozen": True}

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    altitude: float = Field(default=0.0, ge=0)
    horizon: str = Field(default="0", description="Horizon dip, 'A' or 'morning:evening'")
    seasonal_hrs: str = Field(default=DEFAULT_SEASONAL_HRS)
    earlyspring: str = Field(default=DEFAULT_EARLYSPRING)
    earlyfall: str = Field(default=DEFAULT_EARLYFALL)
    schedule: frozenset[EventKind] = Field(default_factory=lambda: frozenset(EventKind))
    timezone: str = "UTC"
    language: Language = Language.EN
    lc_time: str | None = None

    @field_validator("horizon")
    @classmethod
    def _check_horizon(cls, value: str) -> str:
        match = _HORIZON_RE.match(value)
        if not match:
            raise ValueError(f"horizon must look like A or A:B, got {value!r}")
        for angle in match.groups():
            if angle is not None and not -45.0 <= float(angle) <= 45.0:
                raise ValueError(f"horizon angles must be within -45..45, got {value!r}")
        return value

    @field_validator("seasonal_hrs")
    @classmethod
    def _check_seasonal_hrs(cls, value: str) -> str:
        SeasonalHoursSpec.parse(value)
        return value

    @field_validator("earlyspring")
    @classmethod
    def _check_earlyspring(cls, value: str) -> str:
        if not _EARLYSPRING_RE.match(value):
            raise ValueError(f"earlyspring must be MM-DD in February or March, got {value!r}")
        return value

    @field_validator("earlyfall")
    @classmethod
    def _check_earlyfall(cls, value: str) -> str:
        if not _EARLYFALL_RE.match(value):
            raise ValueError(f"earlyfall must be MM-DD in August or September, got {value!r}")
        return value

    @field_validator("schedule", mode="before")
    @classmethod
    def _split_schedule(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item for item in (part.strip() for part in value.split(",")) if item]
        return value

    @property
    def seasonal_hours(self) -> SeasonalHoursSpec:
        return SeasonalHoursSpec.parse(self.seasonal_hrs)

    @property
    def horizon_morning(self) -> float:
        return float(self.horizon.split(":")[0])

    @property
    def horizon_evening(self) -> float:
        parts = self.horizon.split(":")
        return float(parts[1] if len(parts) > 1 else parts[0])

    def tracks(self, kind: EventKind) -> bool:
        """Whether events of this kind go on the timeline."""
        return kind in self.schedule
