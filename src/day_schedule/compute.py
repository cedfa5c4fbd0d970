"""
Schedule computer: turns a date window plus astronomy data into day records.

Computation runs in two phases over the five-day window around the anchor:

1. ``build_window`` fetches one astronomy record per day context.
2. ``run_window`` classifies each day, then links each day to its neighbors
   (change markers, carried-over timeline events, last/next event lookup).
   Days are visited in the order ``2, 1, -2, -1, 0`` so the forward-looking
   neighbors are final before the anchor day is.

All scratch state lives in a ``ScheduleWindow`` created per call; nothing is
shared between computations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING

from day_schedule.analysis.change_markers import DayView, detect_changes, initial_markers
from day_schedule.analysis.conversions import azimuth_to_compass, roman_clock, round_half_up
from day_schedule.analysis.phenology import estimate
from day_schedule.analysis.seasonal_hours import PROBE_OFFSET, classify_daytime, partition
from day_schedule.analysis.seasons import meteorological_season
from day_schedule.analysis.timeline import merge_neighbors, summarize
from day_schedule.datasources.astronomy.models import (
    AstronomyParams,
    AstroKey,
    event_time,
    require_keys,
)
from day_schedule.datecontext import COMPUTE_LOCK, DAY_WINDOW, build_date_context
from day_schedule.models import DaySchedule, ScheduleRecord
from day_schedule.reference.seasons import DEFAULT_EARLYFALL, DEFAULT_EARLYSPRING
from day_schedule.schemas import DEFAULT_SEASONAL_HRS, TIMED_ASTRONOMY_EVENTS, EventKind

if TYPE_CHECKING:
    from day_schedule.datasources.astronomy.models import AstronomyProvider, AstronomyRecord
    from day_schedule.datecontext import DateContext
    from day_schedule.schemas import ScheduleConfig

logger = logging.getLogger(__name__)

#: Tomorrow and the day after come first so forward comparisons see final
#: values; the anchor day is finished last.
DEPENDENCY_ORDER: tuple[int, ...] = (2, 1, -2, -1, 0)


@dataclass
class ScheduleWindow:
    """Scratch space of one computation: everything keyed by day offset."""

    config: ScheduleConfig
    contexts: dict[int, DateContext]
    astronomy: dict[int, AstronomyRecord]
    records: dict[int, ScheduleRecord] = field(default_factory=dict)

    def neighbors(self, offset: int) -> tuple[ScheduleRecord | None, ScheduleRecord | None]:
        """Yesterday's and tomorrow's records, if inside the window."""
        return self.records.get(offset - 1), self.records.get(offset + 1)


def astronomy_params(config: ScheduleConfig) -> AstronomyParams:
    return AstronomyParams(
        latitude=config.latitude,
        longitude=config.longitude,
        altitude=config.altitude,
        horizon_morning=config.horizon_morning,
        horizon_evening=config.horizon_evening,
        language=config.language.value,
    )


def build_window(
    context: DateContext,
    config: ScheduleConfig,
    provider: AstronomyProvider,
) -> ScheduleWindow:
    """
    Phase 1: collect the day contexts and their astronomy records.

    Raises:
        AstronomyError: If a provider record lacks required keys.
    """
    params = astronomy_params(config)
    contexts = {}
    for offset in range(-DAY_WINDOW, DAY_WINDOW + 1):
        day = context.at_offset(offset)
        if day is not None:
            contexts[offset] = day
    astronomy = {offset: require_keys(provider(day, params)) for offset, day in contexts.items()}
    return ScheduleWindow(config=config, contexts=contexts, astronomy=astronomy)


def _compass(altitude: float, azimuth: float) -> tuple[str | None, str | None, str | None]:
    if altitude < 0:
        return None, None, None
    return (
        azimuth_to_compass(azimuth, 4),
        azimuth_to_compass(azimuth, 8),
        azimuth_to_compass(azimuth, 16),
    )


def classify_day(
    offset: int,
    context: DateContext,
    astronomy: AstronomyRecord,
    config: ScheduleConfig,
    tomorrow: AstronomyRecord | None = None,
) -> ScheduleRecord:
    """
    Derive all readings of one day that do not need neighbor records.

    Args:
        offset: Day offset relative to the anchor.
        context: The day's calendar/clock breakdown.
        astronomy: The day's astronomy record.
        config: Validated configuration.
        tomorrow: Next day's astronomy record, for passed seasonal hours.
    """
    spec = config.seasonal_hours
    hours = partition(astronomy, spec, context.time_of_day, tomorrow)
    daytime_n, daytime = classify_daytime(hours.index, spec)

    lat = float(astronomy[AstroKey.OBS_LAT])
    lon = float(astronomy[AstroKey.OBS_LON])
    meteo_n, meteo = meteorological_season(context.month, lat)
    pheno = estimate(
        lat,
        lon,
        date(context.year, context.month, context.day),
        config.earlyspring,
        config.earlyfall,
    )
    if pheno is None and offset == 0:
        logger.debug("Location %s, %s is out of range for the phenological season", lat, lon)

    sun = _compass(float(astronomy[AstroKey.SUN_ALT]), float(astronomy[AstroKey.SUN_AZ]))
    moon = _compass(float(astronomy[AstroKey.MOON_ALT]), float(astronomy[AstroKey.MOON_AZ]))

    record = ScheduleRecord(
        offset=offset,
        date=context.iso_date,
        time=context.iso_time,
        roman_time=roman_clock(context.hour, context.minute, context.second),
        week_of_year=context.week_of_year,
        is_leap_year=context.is_leap_year,
        is_dst_end_of_day=context.is_dst_end_of_day,
        year_remaining_days=context.year_remaining_days,
        month_remaining_days=context.month_remaining_days,
        year_progress=round_half_up(context.year_progress * 100),
        month_progress=round_half_up(context.month_progress * 100),
        sun_compass_4=sun[0],
        sun_compass_8=sun[1],
        sun_compass_16=sun[2],
        moon_compass_4=moon[0],
        moon_compass_8=moon[1],
        moon_compass_16=moon[2],
        seasonal_hours=hours,
        daytime_n=daytime_n,
        daytime=daytime,
        season_meteo_n=meteo_n,
        season_meteo=meteo,
        season_pheno_n=pheno.index if pheno else None,
        season_pheno=pheno.name if pheno else None,
    )
    record.changes = initial_markers(pheno is not None)
    populate_timeline(record, astronomy, config)
    return record


def populate_timeline(record: ScheduleRecord, astronomy: AstronomyRecord, config: ScheduleConfig) -> None:
    """Add the day's own events, skipping kinds the config does not track."""
    timeline = record.timeline
    for kind in TIMED_ASTRONOMY_EVENTS:
        if config.tracks(kind):
            timeline.add(event_time(astronomy, kind.value), kind.value)

    if config.tracks(EventKind.OBS_DATE):
        timeline.add(0, f"ObsDate {astronomy.get(AstroKey.OBS_DATE, record.date)}")

    with_hours = config.tracks(EventKind.DAY_SEASONAL_HR)
    with_daytime = config.tracks(EventKind.DAYTIME)
    for boundary in record.seasonal_hours.boundaries:
        if with_hours:
            timeline.add(boundary.time, f"DaySeasonalHr {boundary.index}")
        if with_daytime and boundary.daytime:
            timeline.add(boundary.time, f"Daytime {boundary.daytime}")


def link_day(window: ScheduleWindow, offset: int) -> None:
    """
    Phase 2 per day: compare with neighbors, then summarize the timeline.

    Only days with both neighbors inside the window get change markers and
    carried-over events; the window edges are summarized on their own.
    """
    record = window.records[offset]
    yesterday, tomorrow = window.neighbors(offset)

    if yesterday is not None and tomorrow is not None:
        detect_changes(
            DayView(window.astronomy[offset], record),
            DayView(window.astronomy[offset - 1], yesterday),
            DayView(window.astronomy[offset + 1], tomorrow),
            window.config,
        )
        merge_neighbors(record.timeline, yesterday.timeline, tomorrow.timeline)

    record.summary = summarize(record.timeline, window.contexts[offset].time_of_day + PROBE_OFFSET)


def run_window(window: ScheduleWindow) -> dict[int, ScheduleRecord]:
    """Phase 2: classify every day, then link them in dependency order."""
    order = [offset for offset in DEPENDENCY_ORDER if offset in window.contexts]
    for offset in order:
        window.records[offset] = classify_day(
            offset,
            window.contexts[offset],
            window.astronomy[offset],
            window.config,
            tomorrow=window.astronomy.get(offset + 1),
        )
    for offset in order:
        link_day(window, offset)
    return window.records


def compute(
    context: DateContext,
    config: ScheduleConfig,
    provider: AstronomyProvider,
    offset: int = 0,
) -> tuple[AstronomyRecord, ScheduleRecord]:
    """
    Compute the window around ``context`` and return one day of it.

    Returns:
        ``(astronomy_record, schedule_record)`` for ``offset``.
    """
    window = build_window(context, config, provider)
    run_window(window)
    return window.astronomy[offset], window.records[offset]


def _log_defaults(config: ScheduleConfig) -> None:
    if config.earlyspring == DEFAULT_EARLYSPRING:
        logger.debug("Using default earlyspring %s", DEFAULT_EARLYSPRING)
    if config.earlyfall == DEFAULT_EARLYFALL:
        logger.debug("Using default earlyfall %s", DEFAULT_EARLYFALL)
    if config.seasonal_hrs == DEFAULT_SEASONAL_HRS:
        logger.debug("Using default seasonal hours %s", DEFAULT_SEASONAL_HRS)


def compute_day_schedule(
    config: ScheduleConfig,
    provider: AstronomyProvider,
    instant: float | datetime | None = None,
) -> DaySchedule:
    """
    Build the date window for ``instant`` and compute every day in it.

    Holds ``COMPUTE_LOCK`` for the whole run so the locale override and the
    computation are not interleaved with another thread's.

    Args:
        config: Validated configuration.
        provider: Astronomy source, called once per day in the window.
        instant: Epoch seconds or datetime; defaults to now.
    """
    _log_defaults(config)
    with COMPUTE_LOCK:
        context = build_date_context(instant, config.timezone, config.lc_time)
        logger.debug(
            "Computing day schedule for %s %s at %s, %s",
            context.iso_date,
            context.iso_time,
            config.latitude,
            config.longitude,
        )
        window = build_window(context, config, provider)
        run_window(window)
    return DaySchedule(context=context, astronomy=window.astronomy, records=window.records)
