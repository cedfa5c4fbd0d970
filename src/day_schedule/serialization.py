"""JSON-compatible views of computed schedules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from day_schedule.analysis.conversions import hours_to_hms

if TYPE_CHECKING:
    from day_schedule.analysis.seasonal_hours import SeasonalHourPartition
    from day_schedule.analysis.timeline import EventTimeline
    from day_schedule.models import DaySchedule, ScheduleRecord

LIST_SEPARATOR = ", "


def _joined(labels: tuple[str, ...]) -> str | None:
    return LIST_SEPARATOR.join(labels) if labels else None


def seasonal_hours_to_dict(hours: SeasonalHourPartition) -> dict[str, Any]:
    """Flat seasonal-hour readings, one key per hour start."""
    out: dict[str, Any] = {
        "DaySeasonalHr": hours.index,
        "DaySeasonalHrR": hours.roman_index,
        "DaySeasonalHrsDay": hours.day_parts,
        "DaySeasonalHrsNight": hours.night_parts,
        "DaySeasonalHrLenDay": hours_to_hms(hours.day_part_length, wrap=False),
        "DaySeasonalHrLenNight": hours_to_hms(hours.night_part_length, wrap=False),
        "DaySeasonalHrTNext": hours_to_hms(hours.next_boundary),
    }
    by_index = {boundary.index: boundary for boundary in hours.boundaries}
    for index in [*range(-hours.night_parts, 0), *range(1, hours.day_parts + 1)]:
        boundary = by_index.get(index)
        key = f"DaySeasonalHrT{hours.boundary_label(index)}"
        out[key] = hours_to_hms(boundary.upcoming) if boundary is not None else None
    return out


def timeline_to_dict(timeline: EventTimeline) -> dict[str, Any]:
    """Timeline buckets keyed by ``HH:MM:SS``; special areas under their own keys."""
    return {
        "timed": {hours_to_hms(k): list(timeline.timed[k]) for k in timeline.keys()},
        "all_day": list(timeline.all_day),
        "untimed": list(timeline.untimed),
        "yesterday": {hours_to_hms(k): list(v) for k, v in sorted(timeline.yesterday.items())},
        "tomorrow": {hours_to_hms(k): list(v) for k, v in sorted(timeline.tomorrow.items())},
    }


def schedule_record_to_dict(record: ScheduleRecord, include_timeline: bool = True) -> dict[str, Any]:
    """
    Flatten one day's readings into a key/value mapping.

    ``None`` marks readings that are not available or do not apply (object
    below the horizon, phenology outside its region, no events).
    """
    summary = record.summary
    out: dict[str, Any] = {
        "Date": record.date,
        "Time": record.time,
        "ObsTimeR": record.roman_time,
        "Weekofyear": record.week_of_year,
        "YearIsLY": int(record.is_leap_year),
        "YearRemainD": record.year_remaining_days,
        "YearProgress": record.year_progress,
        "MonthRemainD": record.month_remaining_days,
        "MonthProgress": record.month_progress,
        "SunCompassI": record.sun_compass_4,
        "SunCompassS": record.sun_compass_8,
        "SunCompass": record.sun_compass_16,
        "MoonCompassI": record.moon_compass_4,
        "MoonCompassS": record.moon_compass_8,
        "MoonCompass": record.moon_compass_16,
        "Daytime": record.daytime,
        "DaytimeN": record.daytime_n,
        "SeasonMeteo": record.season_meteo,
        "SeasonMeteoN": record.season_meteo_n,
        "SeasonPheno": record.season_pheno,
        "SeasonPhenoN": record.season_pheno_n,
        "SchedLast": _joined(summary.last),
        "SchedLastT": hours_to_hms(summary.last_time),
        "SchedNext": _joined(summary.next),
        "SchedNextT": hours_to_hms(summary.next_time),
        "SchedRecent": _joined(summary.recent),
        "SchedUpcoming": _joined(summary.upcoming),
    }
    out.update(seasonal_hours_to_dict(record.seasonal_hours))
    out.update({marker.value: value for marker, value in record.changes.items()})
    if include_timeline:
        out["Schedule"] = timeline_to_dict(record.timeline)
    return out


def day_schedule_to_dict(result: DaySchedule) -> dict[str, Any]:
    """Anchor day readings plus the astronomy record they were derived from."""
    return {
        "offset": 0,
        "timezone": result.context.timezone,
        "astronomy": dict(result.today_astronomy),
        "schedule": schedule_record_to_dict(result.today),
    }
