"""
Seasonal (temporal) hours.

The sunlit part of a day is split into ``day_parts`` equal hours starting at
sunrise, the night into ``night_parts`` equal hours starting at sunset. Hours
are numbered with a sign: ``1..day_parts`` by day, ``-night_parts..-1`` by
night (``-night_parts`` is the first hour after sunset, ``-1`` the last
before sunrise). Zero is never used.

Polar day and polar night have no sunrise or sunset; the whole day is then
split into hours of the combined length counted from midnight, all of them
day hours or all night hours as the sun's altitude says. A day that has
only one of sunrise and sunset is split the same way once the missing
event would be due.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from day_schedule.analysis.conversions import to_roman
from day_schedule.datasources.astronomy.models import AstroKey, event_time
from day_schedule.reference.dayphases import (
    DAYPHASES,
    ROMAN_DAY_PREFIX,
    ROMAN_NIGHT_PREFIX,
)

if TYPE_CHECKING:
    from day_schedule.datasources.astronomy.models import AstronomyRecord
    from day_schedule.schemas import SeasonalHoursSpec

#: The current hour is probed one second ahead so an hour that starts "now"
#: already counts as current.
PROBE_OFFSET = 1 / 3600


@dataclass(frozen=True)
class Boundary:
    """Start of one seasonal hour."""

    index: int
    start: float  # hours after today's midnight, may exceed 24
    upcoming: float | None  # next occurrence as time of day; None if unknown
    daytime: str | None  # phase that begins here

    @property
    def time(self) -> float:
        """Start as a time of day in [0, 24)."""
        return self.start - 24 if self.start >= 24 else self.start


@dataclass(frozen=True)
class SeasonalHourPartition:
    """A day split into seasonal hours, seen from one moment."""

    day_parts: int
    night_parts: int
    is_roman: bool
    day_part_length: float
    night_part_length: float
    index: int
    next_boundary: float
    boundaries: tuple[Boundary, ...]

    @property
    def is_day(self) -> bool:
        return self.index > 0

    @property
    def roman_index(self) -> str:
        """Hour number in roman numerals; night hours count from sunset."""
        return to_roman(self.night_parts + 1 + self.index if self.index < 0 else self.index)

    @property
    def day_boundaries(self) -> tuple[float, ...]:
        return tuple(b.start for b in self.boundaries if b.index > 0)

    @property
    def night_boundaries(self) -> tuple[float, ...]:
        return tuple(b.start for b in self.boundaries if b.index < 0)

    @property
    def label_digits(self) -> int:
        """Zero-pad width for boundary labels."""
        return len(str(max(self.day_parts, self.night_parts)))

    def boundary_label(self, index: int) -> str:
        """Label such as ``"03"`` or ``"-11"`` for a signed hour index."""
        sign = "-" if index < 0 else ""
        return f"{sign}{abs(index):0{self.label_digits}d}"


def _wrap(hours: float) -> float:
    return hours - 24 if hours >= 24 else hours


def _ceil_parts(elapsed: float, length: float) -> int:
    if length <= 0:
        return 1
    return math.ceil(elapsed / length)


def current_index(
    now: float,
    sunrise: float | None,
    sunset: float | None,
    sun_alt: float,
    spec: SeasonalHoursSpec,
    day_len: float,
    night_len: float,
) -> int:
    """
    Signed seasonal hour at ``now``.

    Args:
        now: Decimal hours since midnight (already probed ahead).
        sunrise: Sunrise time, ``None`` if the sun does not rise.
        sunset: Sunset time, ``None`` if the sun does not set.
        sun_alt: Current solar altitude in degrees.
        spec: Day/night part counts.
        day_len: Length of one day hour.
        night_len: Length of one night hour.

    Returns:
        An index in ``[-night_parts, -1]`` or ``[1, day_parts]``.
    """
    day_parts, night_parts = spec.day_parts, spec.night_parts

    def day(elapsed: float, length: float = day_len) -> int:
        return min(max(_ceil_parts(elapsed, length), 1), day_parts)

    def night(elapsed: float, length: float = night_len) -> int:
        return max(min(-(night_parts + 1) + _ceil_parts(elapsed, length), -1), -night_parts)

    whole = day_len + night_len

    if sunrise is None and sunset is None:
        return day(now, whole) if sun_alt > 0 else night(now, whole)
    if sunset is None and sunrise is not None and now < sunrise:
        return night(now)
    if sunrise is None and sunset is not None and now < sunset:
        return day(now)
    if sunrise is None or sunset is None:
        return day(now, whole) if sun_alt >= 0 else night(now, whole)
    if sunset < sunrise:
        # the sunlit span runs across midnight
        if now >= sunrise:
            return day(now - sunrise)
        if now < sunset:
            return day(now + 24 - sunrise)
        return night(now - sunset)
    if now < sunrise:
        return night(now + 24 - sunset)
    if now < sunset:
        return day(now - sunrise)
    return night(now - sunset)


def classify_daytime(index: int, spec: SeasonalHoursSpec) -> tuple[int | None, str | None]:
    """
    Name the phase of day for a seasonal hour.

    Twelve parts map onto the named phases; the roman clock (and four-part
    halves) use Hora/Vigilia numbering instead. Other splits have no name.

    Returns:
        ``(phase_number, phase_name)``, or ``(None, None)``.
    """
    if (index > 0 and spec.day_parts == 12 and not spec.is_roman) or (
        index < 0 and spec.night_parts == 12
    ):
        phase = (12 if index < 0 else 11) + index
        return phase, DAYPHASES[phase]
    if index > 0 and (spec.is_roman or spec.day_parts == 4):
        return 3 + index, f"{ROMAN_DAY_PREFIX} {to_roman(index)}"
    if index < 0 and spec.night_parts == 4:
        return 4 + index, f"{ROMAN_NIGHT_PREFIX} {to_roman(index + spec.night_parts + 1)}"
    return None, None


def _part_lengths(record: AstronomyRecord, spec: SeasonalHoursSpec) -> tuple[float, float]:
    visible = float(record[AstroKey.SUN_HRS_VISIBLE])
    invisible = float(record[AstroKey.SUN_HRS_INVISIBLE])
    return visible / spec.day_parts, invisible / spec.night_parts


@dataclass(frozen=True)
class _Half:
    """Where one half's hours start and how long each lasts."""

    anchor: float
    length: float


def _layout(
    now: float,
    sunrise: float | None,
    sunset: float | None,
    sun_alt: float,
    day_len: float,
    night_len: float,
) -> tuple[_Half | None, _Half | None]:
    """
    Anchor and hour length of the day and night halves, as ``current_index``
    counts them. A half that does not occur on this day is ``None``.
    """
    whole = day_len + night_len
    if sunrise is None and sunset is None:
        polar = _Half(0.0, whole)
        return (polar, None) if sun_alt > 0 else (None, polar)
    if sunset is None and sunrise is not None and now < sunrise:
        return _Half(sunrise, day_len), _Half(0.0, night_len)
    if sunrise is None and sunset is not None and now < sunset:
        return _Half(0.0, day_len), _Half(sunset, night_len)
    if sunrise is None or sunset is None:
        span = _Half(0.0, whole)
        return (span, None) if sun_alt >= 0 else (None, span)
    return _Half(sunrise, day_len), _Half(sunset, night_len)


def _record_layout(
    record: AstronomyRecord, spec: SeasonalHoursSpec, now: float
) -> tuple[_Half | None, _Half | None]:
    day_len, night_len = _part_lengths(record, spec)
    return _layout(
        now,
        event_time(record, AstroKey.SUN_RISE),
        event_time(record, AstroKey.SUN_SET),
        float(record[AstroKey.SUN_ALT]),
        day_len,
        night_len,
    )


def _boundaries(
    now: float,
    halves: tuple[_Half | None, _Half | None],
    spec: SeasonalHoursSpec,
    tomorrow: AstronomyRecord | None,
) -> tuple[Boundary, ...]:
    later = _record_layout(tomorrow, spec, now) if tomorrow is not None else (None, None)

    out = []
    # night first, then day; each half as (today, tomorrow, parts, first index)
    for half, next_half, parts, first in (
        (halves[1], later[1], spec.night_parts, -spec.night_parts),
        (halves[0], later[0], spec.day_parts, 1),
    ):
        if half is None:
            continue
        for k in range(parts):
            index = first + k
            start = half.anchor + k * half.length
            upcoming: float | None = _wrap(start)
            if now >= upcoming:
                upcoming = None
                if next_half is not None:
                    upcoming = _wrap(next_half.anchor + k * next_half.length)
            _, daytime = classify_daytime(index, spec)
            out.append(Boundary(index=index, start=start, upcoming=upcoming, daytime=daytime))

    return tuple(out)


def partition(
    record: AstronomyRecord,
    spec: SeasonalHoursSpec,
    now: float,
    tomorrow: AstronomyRecord | None = None,
) -> SeasonalHourPartition:
    """
    Split a day into seasonal hours and locate ``now`` in it.

    Args:
        record: The day's astronomy record.
        spec: Day/night part counts.
        now: Decimal hours since local midnight.
        tomorrow: Next day's astronomy record, used for boundaries that have
            already passed today. Without it those boundaries are ``None``.
    """
    day_len, night_len = _part_lengths(record, spec)
    sunrise = event_time(record, AstroKey.SUN_RISE)
    sunset = event_time(record, AstroKey.SUN_SET)
    sun_alt = float(record[AstroKey.SUN_ALT])

    probed = now + PROBE_OFFSET
    index = current_index(probed, sunrise, sunset, sun_alt, spec, day_len, night_len)
    halves = _layout(probed, sunrise, sunset, sun_alt, day_len, night_len)

    if index > 0:
        half = halves[0]
        passed = index
    else:
        half = halves[1]
        passed = spec.night_parts + 1 + index
    assert half is not None
    next_boundary = half.anchor + passed * half.length

    return SeasonalHourPartition(
        day_parts=spec.day_parts,
        night_parts=spec.night_parts,
        is_roman=spec.is_roman,
        day_part_length=day_len,
        night_part_length=night_len,
        index=index,
        next_boundary=_wrap(next_boundary),
        boundaries=_boundaries(now, halves, spec, tomorrow),
    )
