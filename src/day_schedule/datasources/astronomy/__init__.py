"""Astronomy provider boundary: raw sun and moon data for one day."""

from day_schedule.datasources.astronomy.client import HttpAstronomyProvider
from day_schedule.datasources.astronomy.models import (
    AstronomyError,
    AstronomyParams,
    AstronomyProvider,
    AstronomyRecord,
    AstroKey,
    event_time,
    require_keys,
)

__all__ = [
    "AstroKey",
    "AstronomyError",
    "AstronomyParams",
    "AstronomyProvider",
    "AstronomyRecord",
    "HttpAstronomyProvider",
    "event_time",
    "require_keys",
]
