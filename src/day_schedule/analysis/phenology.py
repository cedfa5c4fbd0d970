"""
Phenological season estimate for Europe.

Early spring spreads from the south-west and early fall from the north-east
at roughly constant speeds. The stage reached at an observer's location
follows from how many days have passed since the configured start date and
how far the observer is from the front's origin:

    0 winter, 1 early spring, 2 first spring, 3 full spring,
    4 early summer, 5 midsummer, 6 late summer,
    7 early fall, 8 full fall, 9 late fall

The month ranges of the spring, summer and fall branches overlap in August.
They are evaluated in that order and the fall branch only takes over once
early fall has actually started.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from day_schedule.analysis.conversions import great_circle_km
from day_schedule.reference.geography import PHENOLOGY_REGION_BBOX
from day_schedule.reference.seasons import (
    EARLYFALL_FRONT,
    EARLYSPRING_FRONT,
    PHENO_EARLY_THRESHOLD,
    PHENOLOGICAL_SEASONS,
    SEASONS_NORTH,
    PhenoFront,
)

WINTER = 0


@dataclass(frozen=True)
class PhenoSeason:
    """Estimated phenological stage."""

    index: int
    name: str


def _parse_month_day(value: str) -> tuple[int, int]:
    month, day = value.split("-")
    return int(month), int(day)


def _start_date(year: int, month_day: str) -> date:
    month, day = _parse_month_day(month_day)
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def _advance(
    lat: float,
    lon: float,
    front: PhenoFront,
    other: PhenoFront,
    progress_days: int,
    stages: tuple[int, int, int, int],
) -> int | None:
    """Stage reached by a front, or None if it has not started yet."""
    if progress_days < 0:
        return None
    dist_obs = great_circle_km(lat, lon, front.lat, front.lon)
    dist_total = great_circle_km(front.lat, front.lon, other.lat, other.lon)
    early_rate, arrival_rate, total_rate = front.rates

    stage = stages[0]
    if dist_obs - progress_days * early_rate <= dist_obs * PHENO_EARLY_THRESHOLD:
        stage = stages[1]
        if dist_obs - progress_days * arrival_rate <= 0.0:
            stage = stages[2]
            if dist_total - progress_days * total_rate <= 0.0:
                stage = stages[3]
    return stage


def spring_progress_days(today: date, earlyspring: str) -> int:
    """
    Days since early spring began this year.

    In a leap year a start of 29 February or any day in March moves one day
    earlier.
    """
    start = _start_date(today.year, earlyspring)
    month, day = _parse_month_day(earlyspring)
    shift = 1 if calendar.isleap(today.year) and (month == 3 or day == 29) else 0
    return (today - start).days + shift


def fall_progress_days(today: date, earlyfall: str) -> int:
    """Days since early fall began this year; one day earlier in leap years."""
    start = _start_date(today.year, earlyfall)
    shift = 1 if calendar.isleap(today.year) else 0
    return (today - start).days + shift


def estimate(
    lat: float,
    lon: float,
    today: date,
    earlyspring: str,
    earlyfall: str,
) -> PhenoSeason | None:
    """
    Estimate the phenological season at a location.

    Args:
        lat: Observer latitude.
        lon: Observer longitude.
        today: Local calendar date.
        earlyspring: ``MM-DD`` start of early spring at the origin.
        earlyfall: ``MM-DD`` start of early fall at the origin.

    Returns:
        The estimated stage, or ``None`` outside the supported region.
    """
    if not PHENOLOGY_REGION_BBOX.contains(lat, lon):
        return None

    index = WINTER
    if today.month < 6:
        stage = _advance(
            lat,
            lon,
            EARLYSPRING_FRONT,
            EARLYFALL_FRONT,
            spring_progress_days(today, earlyspring),
            (1, 2, 3, 4),
        )
        if stage is not None:
            index = stage
    elif today.month < 9:
        index = 4 + (today.month >= 7) + (today.month == 8)

    if 8 <= today.month < 12:
        stage = _advance(
            lat,
            lon,
            EARLYFALL_FRONT,
            EARLYSPRING_FRONT,
            fall_progress_days(today, earlyfall),
            (7, 8, 9, WINTER),
        )
        if stage is not None:
            index = stage

    name = SEASONS_NORTH[3] if index == WINTER else PHENOLOGICAL_SEASONS[index]
    return PhenoSeason(index=index, name=name)
