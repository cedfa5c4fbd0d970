"""Per-day computation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from day_schedule.analysis.timeline import EventTimeline, TimelineSummary

if TYPE_CHECKING:
    from day_schedule.analysis.change_markers import ChangeMarker
    from day_schedule.analysis.seasonal_hours import SeasonalHourPartition
    from day_schedule.datasources.astronomy.models import AstronomyRecord
    from day_schedule.datecontext import DateContext


@dataclass
class ScheduleRecord:
    """Derived readings, timeline and change markers of one day."""

    offset: int
    date: str
    time: str
    roman_time: str
    week_of_year: int
    is_leap_year: bool
    is_dst_end_of_day: bool
    year_remaining_days: int
    month_remaining_days: int
    year_progress: int  # percent
    month_progress: int  # percent
    sun_compass_4: str | None
    sun_compass_8: str | None
    sun_compass_16: str | None
    moon_compass_4: str | None
    moon_compass_8: str | None
    moon_compass_16: str | None
    seasonal_hours: SeasonalHourPartition
    daytime_n: int | None
    daytime: str | None
    season_meteo_n: int
    season_meteo: str
    season_pheno_n: int | None = None
    season_pheno: str | None = None
    timeline: EventTimeline = field(default_factory=EventTimeline)
    changes: dict[ChangeMarker, int] = field(default_factory=dict)
    summary: TimelineSummary = field(default_factory=TimelineSummary)

    @property
    def sun_below_horizon(self) -> bool:
        return self.sun_compass_16 is None

    @property
    def moon_below_horizon(self) -> bool:
        return self.moon_compass_16 is None


@dataclass
class DaySchedule:
    """Everything computed for the anchor day and its neighbor window."""

    context: DateContext
    astronomy: dict[int, AstronomyRecord]
    records: dict[int, ScheduleRecord]

    @property
    def today(self) -> ScheduleRecord:
        return self.records[0]

    @property
    def today_astronomy(self) -> AstronomyRecord:
        return self.astronomy[0]
