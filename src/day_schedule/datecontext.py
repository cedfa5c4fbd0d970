"""
Calendar and clock breakdown of an instant, plus its neighboring days.

A ``DateContext`` is built for the anchor instant and, inside the same call,
for every day in the offset window around it (``instant + offset * 86400``).
Nested contexts carry no neighbors of their own.

Timezone handling uses ``zoneinfo`` and never touches the process
environment. The ``LC_TIME`` locale, which drives the localized weekday and
month names, is process-wide; ``locale_override`` applies it for the
duration of one build and restores the previous value on every exit path.
"""

from __future__ import annotations

import calendar
import locale
import logging
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

#: Days before and after the anchor that are built together with it.
DAY_WINDOW = 2

SECONDS_PER_DAY = 86400

#: Serializes "apply locale, build context, compute schedule" across threads.
COMPUTE_LOCK = threading.RLock()


@dataclass(frozen=True)
class DateContext:
    """Calendar/clock breakdown of one instant in one timezone."""

    timestamp: int
    offset: int
    timezone: str
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int  # 0 = Sunday
    week_of_year: int  # ISO 8601
    day_of_year: int
    days_in_month: int
    is_leap_year: bool
    is_dst: bool
    is_dst_end_of_day: bool  # DST in effect at 23:59:59 local time
    utc_offset: float  # hours
    tz_name: str
    weekday_name: str
    weekday_abbr: str
    month_name: str
    month_abbr: str
    date_local: str
    time_local: str
    neighbors: dict[int, DateContext] = field(default_factory=dict, compare=False, repr=False)

    @property
    def time_of_day(self) -> float:
        """Fractional hours since local midnight (0 <= t < 24)."""
        return self.hour + self.minute / 60 + self.second / 3600

    @property
    def iso_date(self) -> str:
        """Local calendar date as ``YYYY-MM-DD``."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @property
    def iso_time(self) -> str:
        """Local clock time as ``HH:MM:SS``."""
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    @property
    def year_days(self) -> int:
        return 366 if self.is_leap_year else 365

    @property
    def year_remaining_days(self) -> int:
        return self.year_days - self.day_of_year

    @property
    def year_progress(self) -> float:
        """Fraction of the year elapsed, counting today as complete."""
        return self.day_of_year / self.year_days

    @property
    def month_remaining_days(self) -> int:
        return self.days_in_month - self.day

    @property
    def month_progress(self) -> float:
        """Fraction of the month elapsed, counting today as complete."""
        return self.day / self.days_in_month

    def at_offset(self, offset: int) -> DateContext | None:
        """Return the context for a day offset (``0`` is this context itself)."""
        if offset == 0:
            return self
        return self.neighbors.get(offset)


@contextmanager
def locale_override(lc_time: str | None) -> Iterator[None]:
    """
    Temporarily switch ``LC_TIME`` and restore the previous value afterwards.

    Args:
        lc_time: Locale name such as ``"de_DE.UTF-8"``; ``None`` leaves the
            current locale alone.

    Raises:
        locale.Error: If the requested locale is not installed.
    """
    if not lc_time:
        yield
        return

    previous = locale.setlocale(locale.LC_TIME)
    locale.setlocale(locale.LC_TIME, lc_time)
    logger.debug("LC_TIME switched from %s to %s", previous, lc_time)
    try:
        yield
    finally:
        locale.setlocale(locale.LC_TIME, previous)


def to_timestamp(instant: float | datetime | None, zone: ZoneInfo) -> int:
    """
    Normalize an instant to whole epoch seconds.

    Naive datetimes are read as local time in ``zone``; ``None`` means now.
    """
    if instant is None:
        return int(time.time())
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=zone)
        return int(instant.timestamp())
    return int(instant)


def _utc_offset_hours(moment: datetime) -> float:
    offset = moment.utcoffset() or timedelta(0)
    return offset.total_seconds() / 3600


def _single_context(timestamp: int, zone: ZoneInfo, offset: int) -> DateContext:
    local = datetime.fromtimestamp(timestamp, tz=zone)
    end_of_day = local.replace(hour=23, minute=59, second=59, fold=0)
    return DateContext(
        timestamp=timestamp,
        offset=offset,
        timezone=zone.key,
        year=local.year,
        month=local.month,
        day=local.day,
        hour=local.hour,
        minute=local.minute,
        second=local.second,
        weekday=int(local.strftime("%w")),
        week_of_year=local.isocalendar()[1],
        day_of_year=local.timetuple().tm_yday,
        days_in_month=calendar.monthrange(local.year, local.month)[1],
        is_leap_year=calendar.isleap(local.year),
        is_dst=bool(local.dst()),
        is_dst_end_of_day=bool(end_of_day.dst()),
        utc_offset=_utc_offset_hours(local),
        tz_name=local.tzname() or zone.key,
        weekday_name=local.strftime("%A"),
        weekday_abbr=local.strftime("%a"),
        month_name=local.strftime("%B"),
        month_abbr=local.strftime("%b"),
        date_local=local.strftime("%x"),
        time_local=local.strftime("%X"),
    )


def build_date_context(
    instant: float | datetime | None = None,
    timezone: str = "UTC",
    lc_time: str | None = None,
    window: int = DAY_WINDOW,
) -> DateContext:
    """
    Build the anchor context and its neighbor window.

    Args:
        instant: Epoch seconds or datetime; truncated to whole seconds.
        timezone: IANA zone name.
        lc_time: Optional locale for the localized names.
        window: Number of days on each side of the anchor to include.

    Returns:
        Anchor ``DateContext`` whose ``neighbors`` maps every offset in
        ``[-window, window]`` except 0 to its own context.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: For an unknown timezone name.
        locale.Error: For an unavailable locale.
    """
    zone = ZoneInfo(timezone)
    timestamp = to_timestamp(instant, zone)

    with locale_override(lc_time):
        anchor = _single_context(timestamp, zone, 0)
        neighbors = {
            offset: _single_context(timestamp + offset * SECONDS_PER_DAY, zone, offset)
            for offset in range(-window, window + 1)
            if offset != 0
        }

    return replace(anchor, neighbors=neighbors)
