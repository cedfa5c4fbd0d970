"""
Event timeline for one day.

Events are bucketed by their time of day in decimal hours. A bucket keeps
its labels in insertion order, so simultaneous events read in the order they
were added. Besides the timed buckets a timeline has four special areas:

    ALL_DAY ("*")     events that hold for the whole day (season changes)
    UNTIMED ("?")     events during the day without a known time (sign changes)
    "y<key>"          yesterday's events, carried over for "last event" lookups
    "t<key>"          tomorrow's events, carried over for "next event" lookups

Keys that are ``None``, negative, or the ``"---"`` sentinel are ignored so an
event that does not occur on a day simply leaves no trace.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

ALL_DAY = "*"
UNTIMED = "?"
TOMORROW_PREFIX = "t"
YESTERDAY_PREFIX = "y"

_NUMERIC_RE = re.compile(r"^\d+(?:\.\d+)?$")

TimelineKey = float | int | str | None


def tomorrow_key(key: float | str) -> str:
    """Key for an event carried over from tomorrow."""
    return f"{TOMORROW_PREFIX}{key}"


def yesterday_key(key: float | str) -> str:
    """Key for an event carried over from yesterday."""
    return f"{YESTERDAY_PREFIX}{key}"


def _relative_hours(suffix: str, default: float) -> float:
    return float(suffix) if _NUMERIC_RE.match(suffix) else default


@dataclass
class EventTimeline:
    """Bucketed events of one day plus the neighbors' carried-over events."""

    timed: dict[float, list[str]] = field(default_factory=dict)
    all_day: list[str] = field(default_factory=list)
    untimed: list[str] = field(default_factory=list)
    tomorrow: dict[float, list[str]] = field(default_factory=dict)
    yesterday: dict[float, list[str]] = field(default_factory=dict)

    def add(self, key: TimelineKey, label: str) -> None:
        """
        Put a label into the bucket its key selects.

        Numeric keys (or numeric strings) select a timed bucket. Tomorrow keys
        without a numeric part land at 0, yesterday keys at 24, so they sort
        to the edge nearest today.
        """
        if key is None:
            return
        if isinstance(key, (int, float)):
            if key < 0:
                logger.debug("Ignoring %r at negative time %s", label, key)
                return
            self.timed.setdefault(float(key), []).append(label)
        elif key == ALL_DAY:
            self.all_day.append(label)
        elif key == UNTIMED:
            self.untimed.append(label)
        elif key.startswith(TOMORROW_PREFIX):
            hours = _relative_hours(key[len(TOMORROW_PREFIX) :], 0.0)
            self.tomorrow.setdefault(hours, []).append(label)
        elif key.startswith(YESTERDAY_PREFIX):
            hours = _relative_hours(key[len(YESTERDAY_PREFIX) :], 24.0)
            self.yesterday.setdefault(hours, []).append(label)
        elif _NUMERIC_RE.match(key):
            self.timed.setdefault(float(key), []).append(label)

    @property
    def has_timed_events(self) -> bool:
        return bool(self.timed)

    def keys(self) -> list[float]:
        """Timed bucket keys in chronological order."""
        return sorted(self.timed)


def add_event(timeline: EventTimeline, key: TimelineKey, label: str) -> None:
    """Add ``label`` to ``timeline`` under ``key``; see ``EventTimeline.add``."""
    timeline.add(key, label)


@dataclass(frozen=True)
class TimelineSummary:
    """Nearest past and future events relative to a time of day."""

    last_time: float | None = None
    last: tuple[str, ...] = ()
    next_time: float | None = None
    next: tuple[str, ...] = ()
    recent: tuple[str, ...] = ()  # most recent first
    upcoming: tuple[str, ...] = ()  # chronological

    @property
    def is_empty(self) -> bool:
        return self.last_time is None and self.next_time is None


def summarize(timeline: EventTimeline, now: float) -> TimelineSummary:
    """
    Find the events around ``now``.

    Buckets at or before ``now`` are past, later ones are upcoming. If nothing
    happened yet today, yesterday's carried-over bucket stands in for the
    last event; if nothing is left today, tomorrow's first carried-over
    bucket stands in for the next one.

    Args:
        timeline: The day's timeline.
        now: Decimal hours since midnight.

    Returns:
        An empty summary when the day has no timed events at all.
    """
    if not timeline.has_timed_events:
        return TimelineSummary()

    last_time: float | None = None
    last: list[str] = []
    next_time: float | None = None
    upcoming_first: list[str] = []
    recent: list[str] = []
    upcoming: list[str] = []

    for key in timeline.keys():
        labels = timeline.timed[key]
        if key <= now:
            last_time, last = key, labels
            recent = list(reversed(labels)) + recent
        else:
            if next_time is None:
                next_time, upcoming_first = key, labels
            upcoming.extend(labels)

    if last_time is None and timeline.yesterday:
        last_time = max(timeline.yesterday)
        last = timeline.yesterday[last_time]
        recent = list(reversed(last))

    if next_time is None and timeline.tomorrow:
        next_time = min(timeline.tomorrow)
        upcoming_first = timeline.tomorrow[next_time]
        upcoming = list(upcoming_first)

    return TimelineSummary(
        last_time=last_time % 24 if last_time is not None else None,
        last=tuple(last),
        next_time=next_time,
        next=tuple(upcoming_first),
        recent=tuple(recent),
        upcoming=tuple(upcoming),
    )


def merge_neighbors(
    timeline: EventTimeline,
    yesterday: EventTimeline | None,
    tomorrow: EventTimeline | None,
) -> None:
    """
    Carry the neighbors' edge events into ``timeline``.

    From yesterday: the latest timed bucket, or, if yesterday had no timed
    events, its untimed and all-day events. From tomorrow: every bucket up to
    and including the first one after midnight, then its all-day and untimed
    events. Nothing is merged into a day without timed events of its own.
    """
    if not timeline.has_timed_events:
        return

    if yesterday is not None:
        if yesterday.has_timed_events:
            latest = yesterday.keys()[-1]
            timeline.yesterday.setdefault(latest, []).extend(yesterday.timed[latest])
        else:
            for label in yesterday.untimed:
                timeline.add(yesterday_key(UNTIMED), label)
            for label in yesterday.all_day:
                timeline.add(yesterday_key(ALL_DAY), label)

    if tomorrow is not None:
        for key in tomorrow.keys():
            timeline.tomorrow.setdefault(key, []).extend(tomorrow.timed[key])
            if key > 0:
                break
        for label in tomorrow.all_day:
            timeline.add(tomorrow_key(ALL_DAY), label)
        for label in tomorrow.untimed:
            timeline.add(tomorrow_key(UNTIMED), label)
