"""Tests for the event timeline."""

from __future__ import annotations

from day_schedule.analysis.timeline import (
    ALL_DAY,
    UNTIMED,
    EventTimeline,
    add_event,
    merge_neighbors,
    summarize,
    tomorrow_key,
    yesterday_key,
)


class TestAddEvent:
    """Bucketing of single events."""

    def test_simultaneous_events_keep_insertion_order(self) -> None:
        timeline = EventTimeline()
        add_event(timeline, 6.5, "SunRise")
        add_event(timeline, 6.5, "CivilTwilightMorning")
        assert timeline.timed == {6.5: ["SunRise", "CivilTwilightMorning"]}

    def test_int_and_float_share_bucket(self) -> None:
        timeline = EventTimeline()
        add_event(timeline, 0, "ObsDate 2024-06-21")
        add_event(timeline, 0.0, "DaySeasonalHr -3")
        assert timeline.timed == {0.0: ["ObsDate 2024-06-21", "DaySeasonalHr -3"]}

    def test_special_buckets(self) -> None:
        timeline = EventTimeline()
        add_event(timeline, ALL_DAY, "SeasonMeteo Summer")
        add_event(timeline, UNTIMED, "SunSign Cancer")
        assert timeline.all_day == ["SeasonMeteo Summer"]
        assert timeline.untimed == ["SunSign Cancer"]
        assert not timeline.has_timed_events

    def test_missing_times_are_ignored(self) -> None:
        timeline = EventTimeline()
        add_event(timeline, None, "SunRise")
        add_event(timeline, "---", "SunSet")
        add_event(timeline, -1.0, "MoonRise")
        assert timeline == EventTimeline()

    def test_numeric_string_is_timed(self) -> None:
        timeline = EventTimeline()
        add_event(timeline, "7.25", "SunTransit")
        assert timeline.timed == {7.25: ["SunTransit"]}

    def test_relative_keys(self) -> None:
        timeline = EventTimeline()
        add_event(timeline, tomorrow_key(5.0), "SunRise")
        add_event(timeline, tomorrow_key(ALL_DAY), "SeasonMeteo Fall")
        add_event(timeline, yesterday_key(22.0), "SunSet")
        add_event(timeline, yesterday_key(UNTIMED), "MoonSign Leo")
        assert timeline.tomorrow == {5.0: ["SunRise"], 0.0: ["SeasonMeteo Fall"]}
        assert timeline.yesterday == {22.0: ["SunSet"], 24.0: ["MoonSign Leo"]}


class TestSummarize:
    """Nearest past and future event lookup."""

    def _timeline(self) -> EventTimeline:
        timeline = EventTimeline()
        add_event(timeline, 5.0, "SunRise")
        add_event(timeline, 5.0, "DaySeasonalHr 1")
        add_event(timeline, 13.0, "SunTransit")
        add_event(timeline, 21.0, "SunSet")
        return timeline

    def test_past_and_future(self) -> None:
        summary = summarize(self._timeline(), 14.0)
        assert summary.last_time == 13.0
        assert summary.last == ("SunTransit",)
        assert summary.next_time == 21.0
        assert summary.next == ("SunSet",)
        assert summary.recent == ("SunTransit", "DaySeasonalHr 1", "SunRise")
        assert summary.upcoming == ("SunSet",)

    def test_event_at_now_is_past(self) -> None:
        summary = summarize(self._timeline(), 13.0)
        assert summary.last_time == 13.0

    def test_falls_back_to_yesterday(self) -> None:
        timeline = self._timeline()
        timeline.yesterday[21.5] = ["SunSet"]
        summary = summarize(timeline, 1.0)
        assert summary.last_time == 21.5
        assert summary.last == ("SunSet",)
        assert summary.next_time == 5.0

    def test_falls_back_to_tomorrow(self) -> None:
        timeline = self._timeline()
        timeline.tomorrow[5.1] = ["SunRise"]
        timeline.tomorrow[0.0] = ["ObsDate 2024-06-22"]
        summary = summarize(timeline, 22.0)
        assert summary.next_time == 0.0
        assert summary.next == ("ObsDate 2024-06-22",)
        assert summary.upcoming == ("ObsDate 2024-06-22",)

    def test_empty_timeline(self) -> None:
        timeline = EventTimeline()
        timeline.all_day.append("SeasonMeteo Summer")
        summary = summarize(timeline, 12.0)
        assert summary.is_empty
        assert summary.recent == ()


class TestMergeNeighbors:
    """Carrying yesterday's and tomorrow's edge events."""

    def test_merges_edges(self) -> None:
        today = EventTimeline()
        add_event(today, 12.0, "SunTransit")

        yesterday = EventTimeline()
        add_event(yesterday, 5.0, "SunRise")
        add_event(yesterday, 21.0, "SunSet")
        add_event(yesterday, 21.0, "DaySeasonalHr -12")

        tomorrow = EventTimeline()
        add_event(tomorrow, 0.0, "ObsDate 2024-06-22")
        add_event(tomorrow, 5.0, "SunRise")
        add_event(tomorrow, 13.0, "SunTransit")
        add_event(tomorrow, ALL_DAY, "SeasonMeteo Summer")
        add_event(tomorrow, UNTIMED, "SunSign Cancer")

        merge_neighbors(today, yesterday, tomorrow)

        assert today.yesterday == {21.0: ["SunSet", "DaySeasonalHr -12"]}
        assert today.tomorrow == {
            0.0: ["ObsDate 2024-06-22", "SeasonMeteo Summer", "SunSign Cancer"],
            5.0: ["SunRise"],
        }

    def test_yesterday_without_timed_events(self) -> None:
        today = EventTimeline()
        add_event(today, 12.0, "SunTransit")
        yesterday = EventTimeline()
        add_event(yesterday, UNTIMED, "MoonSign Leo")
        add_event(yesterday, ALL_DAY, "ObsSeason Summer")

        merge_neighbors(today, yesterday, None)

        assert today.yesterday == {24.0: ["MoonSign Leo", "ObsSeason Summer"]}
        assert today.tomorrow == {}

    def test_no_merge_into_empty_day(self) -> None:
        today = EventTimeline()
        tomorrow = EventTimeline()
        add_event(tomorrow, 5.0, "SunRise")
        merge_neighbors(today, None, tomorrow)
        assert today.tomorrow == {}
