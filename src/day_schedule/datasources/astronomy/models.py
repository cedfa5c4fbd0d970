"""
Astronomy record keys and parsing helpers.

An astronomy record is a plain ``dict`` keyed by ``AstroKey`` values so it
can cross a process boundary as JSON unchanged. Event times are decimal
hours since local midnight; an event that does not happen on that day is
``None`` or the string ``"---"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from day_schedule.datecontext import DateContext

AstronomyRecord = dict[str, Any]

#: Marker some providers use for "does not occur"
NOT_OCCURRING = "---"


class AstronomyError(RuntimeError):
    """Raised when a provider returns a record the core cannot use."""


class AstroKey(StrEnum):
    """Keys the compute core reads from an astronomy record."""

    OBS_DATE = "ObsDate"
    OBS_LAT = "ObsLat"
    OBS_LON = "ObsLon"
    OBS_SEASON = "ObsSeason"
    OBS_SEASON_N = "ObsSeasonN"
    SUN_ALT = "SunAlt"
    SUN_AZ = "SunAz"
    SUN_RISE = "SunRise"
    SUN_SET = "SunSet"
    SUN_TRANSIT = "SunTransit"
    SUN_HRS_VISIBLE = "SunHrsVisible"
    SUN_HRS_INVISIBLE = "SunHrsInvisible"
    SUN_SIGN = "SunSign"
    MOON_ALT = "MoonAlt"
    MOON_AZ = "MoonAz"
    MOON_RISE = "MoonRise"
    MOON_SET = "MoonSet"
    MOON_TRANSIT = "MoonTransit"
    MOON_SIGN = "MoonSign"
    MOON_PHASE_S = "MoonPhaseS"
    MOON_PHASE_I = "MoonPhaseI"
    CIVIL_TWILIGHT_MORNING = "CivilTwilightMorning"
    CIVIL_TWILIGHT_EVENING = "CivilTwilightEvening"
    NAUTIC_TWILIGHT_MORNING = "NauticTwilightMorning"
    NAUTIC_TWILIGHT_EVENING = "NauticTwilightEvening"
    ASTRO_TWILIGHT_MORNING = "AstroTwilightMorning"
    ASTRO_TWILIGHT_EVENING = "AstroTwilightEvening"
    CUSTOM_TWILIGHT_MORNING = "CustomTwilightMorning"
    CUSTOM_TWILIGHT_EVENING = "CustomTwilightEvening"


#: Keys without which a day cannot be classified at all
REQUIRED_KEYS: tuple[AstroKey, ...] = (
    AstroKey.OBS_LAT,
    AstroKey.OBS_LON,
    AstroKey.SUN_ALT,
    AstroKey.SUN_AZ,
    AstroKey.MOON_ALT,
    AstroKey.MOON_AZ,
    AstroKey.SUN_HRS_VISIBLE,
    AstroKey.SUN_HRS_INVISIBLE,
)


@dataclass(frozen=True)
class AstronomyParams:
    """Observer parameters passed to a provider."""

    latitude: float
    longitude: float
    altitude: float = 0.0
    horizon_morning: float = 0.0
    horizon_evening: float = 0.0
    language: str = "EN"


class AstronomyProvider(Protocol):
    """Anything that returns the astronomy record for one day."""

    def __call__(self, context: DateContext, params: AstronomyParams) -> AstronomyRecord: ...


def event_time(record: AstronomyRecord, key: str) -> float | None:
    """
    Read an event time in decimal hours.

    Returns:
        Hours since local midnight, or ``None`` when the event does not occur.

    Raises:
        AstronomyError: If the value is neither a number nor a sentinel.
    """
    value = record.get(key)
    if value is None or value == NOT_OCCURRING:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise AstronomyError(f"{key} is not a time in hours: {value!r}") from e



def require_keys(record: AstronomyRecord) -> AstronomyRecord:
    """
    Check that a record carries every key the core needs.

    Raises:
        AstronomyError: Listing the missing keys.
    """
    missing = [key.value for key in REQUIRED_KEYS if record.get(key) is None]
    if missing:
        raise AstronomyError(f"Astronomy record is missing {', '.join(missing)}")
    return record
