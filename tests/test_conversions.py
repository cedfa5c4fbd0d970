"""Tests for unit and notation conversions."""

from __future__ import annotations

import pytest

from day_schedule.analysis.conversions import (
    azimuth_to_compass,
    great_circle_km,
    hours_to_hms,
    roman_clock,
    round_half_up,
    to_roman,
)


class TestAzimuthToCompass:
    """Compass labels at 4, 8 and 16 points."""

    def test_cardinal_points(self) -> None:
        assert azimuth_to_compass(0.0, 4) == "N"
        assert azimuth_to_compass(90.0, 4) == "E"
        assert azimuth_to_compass(180.0, 4) == "S"
        assert azimuth_to_compass(270.0, 4) == "W"

    def test_sector_edges_round_to_nearest(self) -> None:
        # 16-point sectors are 22.5 degrees wide, centered on each label
        assert azimuth_to_compass(11.0, 16) == "N"
        assert azimuth_to_compass(11.3, 16) == "NNE"
        assert azimuth_to_compass(348.8, 16) == "N"

    def test_eight_points(self) -> None:
        assert azimuth_to_compass(135.0, 8) == "SE"
        assert azimuth_to_compass(300.0, 8) == "NW"

    def test_wraps_out_of_range(self) -> None:
        assert azimuth_to_compass(360.0, 16) == "N"
        assert azimuth_to_compass(-90.0, 4) == "W"

    def test_unsupported_resolution(self) -> None:
        with pytest.raises(ValueError, match="Unsupported"):
            azimuth_to_compass(10.0, 32)


class TestRoman:
    """Roman numerals and the roman clock."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1, "I"), (4, "IV"), (9, "IX"), (12, "XII"), (14, "XIV"), (40, "XL"), (59, "LIX")],
    )
    def test_to_roman(self, value: int, expected: str) -> None:
        assert to_roman(value) == expected

    def test_zero_is_empty(self) -> None:
        assert to_roman(0) == ""

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_roman(-1)

    def test_clock_full(self) -> None:
        assert roman_clock(14, 30, 15) == "II:XXX:XV"

    def test_clock_drops_zero_groups(self) -> None:
        assert roman_clock(9, 0, 0) == "IX"
        assert roman_clock(9, 5, 0) == "IX:V"

    def test_clock_keeps_separator_for_seconds_only(self) -> None:
        assert roman_clock(10, 0, 5) == "X::V"

    def test_clock_midnight_and_noon(self) -> None:
        assert roman_clock(0, 0, 0) == "XII"
        assert roman_clock(12, 0, 0) == "XII"


class TestGreatCircle:
    """Haversine distances."""

    def test_zero_distance(self) -> None:
        assert great_circle_km(50.0, 8.0, 50.0, 8.0) == pytest.approx(0.0)

    def test_one_degree_of_latitude(self) -> None:
        assert great_circle_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19, abs=0.1)

    def test_symmetric(self) -> None:
        a = great_circle_km(37.1, -8.8, 60.2, 24.9)
        b = great_circle_km(60.2, 24.9, 37.1, -8.8)
        assert a == pytest.approx(b)


class TestHoursToHms:
    """Decimal hours as HH:MM:SS."""

    def test_formats(self) -> None:
        assert hours_to_hms(6.5) == "06:30:00"
        assert hours_to_hms(1.4, wrap=False) == "01:24:00"

    def test_wraps_clock_times(self) -> None:
        assert hours_to_hms(24.0) == "00:00:00"
        assert hours_to_hms(25.25) == "01:15:00"

    def test_durations_do_not_wrap(self) -> None:
        assert hours_to_hms(24.0, wrap=False) == "24:00:00"

    def test_none_passes_through(self) -> None:
        assert hours_to_hms(None) is None


class TestRoundHalfUp:
    def test_halves_round_up(self) -> None:
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_regular(self) -> None:
        assert round_half_up(47.4) == 47
        assert round_half_up(-1.5) == -2
