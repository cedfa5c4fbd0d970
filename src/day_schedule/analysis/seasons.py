"""Meteorological season lookup."""

from __future__ import annotations

from day_schedule.reference.seasons import METEO_MONTH_RANGES, SEASONS_NORTH, SEASONS_SOUTH


def _in_range(month: int, first: int, last: int) -> bool:
    if first <= last:
        return first <= month <= last
    return month >= first or month <= last


def meteorological_season(month: int, latitude: float) -> tuple[int, str]:
    """
    Meteorological season for a calendar month.

    The number always refers to the northern month range (0 = Mar-May,
    1 = Jun-Aug, 2 = Sep-Nov, 3 = Dec-Feb); the name is shifted by half a
    year south of the equator.

    Args:
        month: Calendar month 1-12.
        latitude: Observer latitude; negative means southern hemisphere.

    Returns:
        ``(season_number, season_name)``
    """
    names = SEASONS_SOUTH if latitude < 0 else SEASONS_NORTH
    for number, (first, last) in enumerate(METEO_MONTH_RANGES):
        if _in_range(month, first, last):
            return number, names[number]
    raise ValueError(f"Invalid month: {month}")
