"""Tests for day-change detection between neighboring days."""

from __future__ import annotations

import pytest
from conftest import BERLIN_SOLSTICE_NOON, base_record

from day_schedule.analysis.change_markers import (
    CHANGED,
    CHANGES,
    NO_CHANGE,
    ChangeMarker,
    DayView,
    detect_changes,
    initial_markers,
)
from day_schedule.compute import classify_day
from day_schedule.datecontext import build_date_context
from day_schedule.schemas import ScheduleConfig


@pytest.fixture
def days(berlin_config: ScheduleConfig):
    """Yesterday, today and tomorrow around the Berlin solstice, all alike."""

    def make(**by_offset: dict[str, object]) -> tuple[DayView, DayView, DayView]:
        context = build_date_context(BERLIN_SOLSTICE_NOON, "Europe/Berlin")
        views = []
        for name, offset in (("yesterday", -1), ("today", 0), ("tomorrow", 1)):
            day = context.at_offset(offset)
            astronomy = base_record(obs_date=day.iso_date)
            astronomy.update(by_offset.get(name, {}))
            views.append(DayView(astronomy, classify_day(offset, day, astronomy, berlin_config)))
        return views[0], views[1], views[2]

    return make


class TestInitialMarkers:
    """Fresh markers of a day."""

    def test_all_zero(self) -> None:
        markers = initial_markers(has_pheno=True)
        assert set(markers) == set(ChangeMarker)
        assert set(markers.values()) == {NO_CHANGE}

    def test_without_phenology(self) -> None:
        assert ChangeMarker.SEASON_PHENO not in initial_markers(has_pheno=False)


class TestDetectChanges:
    """Marking and announcing transitions."""

    def test_nothing_changes(self, days, berlin_config: ScheduleConfig) -> None:
        yesterday, today, tomorrow = days()
        assert detect_changes(today, yesterday, tomorrow, berlin_config) == []

    def test_forward(self, days, berlin_config: ScheduleConfig) -> None:
        yesterday, today, tomorrow = days(tomorrow={"MoonSign": "Capricorn"})
        changed = detect_changes(today, yesterday, tomorrow, berlin_config)
        assert changed == [ChangeMarker.MOON_SIGN]
        assert today.schedule.changes[ChangeMarker.MOON_SIGN] == CHANGES
        assert tomorrow.schedule.changes[ChangeMarker.MOON_SIGN] == CHANGED
        assert tomorrow.schedule.timeline.untimed == ["MoonSign Capricorn"]
        assert today.schedule.timeline.untimed == []

    def test_backward(self, days, berlin_config: ScheduleConfig) -> None:
        yesterday, today, tomorrow = days(yesterday={"ObsSeasonN": 0, "ObsSeason": "Spring"})
        detect_changes(today, yesterday, tomorrow, berlin_config)
        assert yesterday.schedule.changes[ChangeMarker.SEASON] == CHANGES
        assert today.schedule.changes[ChangeMarker.SEASON] == CHANGED
        assert today.schedule.timeline.all_day == ["ObsSeason Summer"]

    def test_forward_wins(self, days, berlin_config: ScheduleConfig) -> None:
        yesterday, today, tomorrow = days(yesterday={"SunSign": "Taurus"}, tomorrow={"SunSign": "Cancer"})
        detect_changes(today, yesterday, tomorrow, berlin_config)
        assert today.schedule.changes[ChangeMarker.SUN_SIGN] == CHANGES
        assert yesterday.schedule.changes[ChangeMarker.SUN_SIGN] == NO_CHANGE

    def test_marked_neighbor_left_alone(self, days, berlin_config: ScheduleConfig) -> None:
        yesterday, today, tomorrow = days(tomorrow={"SunSign": "Cancer"})
        tomorrow.schedule.changes[ChangeMarker.SUN_SIGN] = CHANGES
        assert detect_changes(today, yesterday, tomorrow, berlin_config) == []
        assert today.schedule.changes[ChangeMarker.SUN_SIGN] == NO_CHANGE

    def test_missing_value_is_not_a_change(self, days, berlin_config: ScheduleConfig) -> None:
        yesterday, today, tomorrow = days(tomorrow={"MoonPhaseI": None})
        assert detect_changes(today, yesterday, tomorrow, berlin_config) == []

    def test_untracked_kind_not_announced(self, days) -> None:
        config = ScheduleConfig(latitude=52.52, longitude=13.405, schedule="SunRise")
        yesterday, today, tomorrow = days(tomorrow={"MoonSign": "Capricorn"})
        assert detect_changes(today, yesterday, tomorrow, config) == [ChangeMarker.MOON_SIGN]
        assert tomorrow.schedule.timeline.untimed == []
