"""
Day-change markers.

For each tracked attribute a day carries a marker:

    0   no change around this day
    2   the value changes after this day (this day is the last with the old value)
    1   the value is new on this day

A transition is recorded once, either looking forward (today 2, tomorrow 1)
or backward (yesterday 2, today 1). Forward wins; a neighbor that already
carries a marker is left alone. The new value is announced on the timeline
of the day that first has it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from day_schedule.analysis.timeline import ALL_DAY, UNTIMED
from day_schedule.datasources.astronomy.models import AstroKey
from day_schedule.schemas import EventKind

if TYPE_CHECKING:
    from day_schedule.datasources.astronomy.models import AstronomyRecord
    from day_schedule.models import ScheduleRecord
    from day_schedule.schemas import ScheduleConfig


class ChangeMarker(StrEnum):
    """Attributes whose day-to-day transitions are tracked."""

    SEASON = "DayChangeSeason"
    SEASON_METEO = "DayChangeSeasonMeteo"
    SEASON_PHENO = "DayChangeSeasonPheno"
    SUN_SIGN = "DayChangeSunSign"
    MOON_SIGN = "DayChangeMoonSign"
    MOON_PHASE = "DayChangeMoonPhaseS"
    IS_DST = "DayChangeIsDST"


NO_CHANGE = 0
CHANGED = 1  # value is new on this day
CHANGES = 2  # value changes after this day


@dataclass(frozen=True)
class DayView:
    """One day's astronomy and schedule record, read together."""

    astronomy: AstronomyRecord
    schedule: ScheduleRecord


@dataclass(frozen=True)
class MarkerRule:
    """How to compare one attribute across days and announce a change."""

    marker: ChangeMarker
    kind: EventKind
    key: str  # timeline bucket for the announcement
    value: Callable[[DayView], Any]
    label: Callable[[DayView], str]


def _astro(key: AstroKey) -> Callable[[DayView], Any]:
    return lambda day: day.astronomy.get(key)


MARKER_RULES: tuple[MarkerRule, ...] = (
    MarkerRule(
        ChangeMarker.SEASON,
        EventKind.OBS_SEASON,
        ALL_DAY,
        _astro(AstroKey.OBS_SEASON_N),
        lambda day: f"ObsSeason {day.astronomy.get(AstroKey.OBS_SEASON)}",
    ),
    MarkerRule(
        ChangeMarker.SEASON_METEO,
        EventKind.SEASON_METEO,
        ALL_DAY,
        lambda day: day.schedule.season_meteo_n,
        lambda day: f"SeasonMeteo {day.schedule.season_meteo}",
    ),
    MarkerRule(
        ChangeMarker.SEASON_PHENO,
        EventKind.SEASON_PHENO,
        ALL_DAY,
        lambda day: day.schedule.season_pheno_n,
        lambda day: f"SeasonPheno {day.schedule.season_pheno}",
    ),
    MarkerRule(
        ChangeMarker.SUN_SIGN,
        EventKind.SUN_SIGN,
        UNTIMED,
        _astro(AstroKey.SUN_SIGN),
        lambda day: f"SunSign {day.astronomy.get(AstroKey.SUN_SIGN)}",
    ),
    MarkerRule(
        ChangeMarker.MOON_SIGN,
        EventKind.MOON_SIGN,
        UNTIMED,
        _astro(AstroKey.MOON_SIGN),
        lambda day: f"MoonSign {day.astronomy.get(AstroKey.MOON_SIGN)}",
    ),
    MarkerRule(
        ChangeMarker.MOON_PHASE,
        EventKind.MOON_PHASE_S,
        UNTIMED,
        _astro(AstroKey.MOON_PHASE_I),
        lambda day: f"MoonPhaseS {day.astronomy.get(AstroKey.MOON_PHASE_S)}",
    ),
    MarkerRule(
        ChangeMarker.IS_DST,
        EventKind.OBS_IS_DST,
        UNTIMED,
        lambda day: day.schedule.is_dst_end_of_day,
        lambda day: f"ObsIsDST {int(day.schedule.is_dst_end_of_day)}",
    ),
)


def initial_markers(has_pheno: bool) -> dict[ChangeMarker, int]:
    """Fresh markers for a day; the phenology marker only where it applies."""
    return {
        rule.marker: NO_CHANGE
        for rule in MARKER_RULES
        if has_pheno or rule.marker is not ChangeMarker.SEASON_PHENO
    }


def _differs(value: Any, other: Any) -> bool:
    return value is not None and other is not None and value != other


def detect_changes(
    today: DayView,
    yesterday: DayView,
    tomorrow: DayView,
    config: ScheduleConfig,
) -> list[ChangeMarker]:
    """
    Mark every attribute that changes at today's edges.

    Mutates the markers of all three days and adds announcements to the
    timeline of the day that first carries the new value.

    Returns:
        The markers that were set, in rule order.
    """
    changed = []
    for rule in MARKER_RULES:
        if rule.marker not in today.schedule.changes:
            continue
        value = rule.value(today)

        if not tomorrow.schedule.changes.get(rule.marker) and _differs(
            rule.value(tomorrow), value
        ):
            today.schedule.changes[rule.marker] = CHANGES
            tomorrow.schedule.changes[rule.marker] = CHANGED
            if config.tracks(rule.kind):
                tomorrow.schedule.timeline.add(rule.key, rule.label(tomorrow))
            changed.append(rule.marker)
        elif not yesterday.schedule.changes.get(rule.marker) and _differs(
            rule.value(yesterday), value
        ):
            yesterday.schedule.changes[rule.marker] = CHANGES
            today.schedule.changes[rule.marker] = CHANGED
            if config.tracks(rule.kind):
                today.schedule.timeline.add(rule.key, rule.label(today))
            changed.append(rule.marker)
    return changed
