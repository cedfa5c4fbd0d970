"""Tests for astronomy records and the HTTP provider."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests
from conftest import BERLIN_SOLSTICE_NOON, base_record

from day_schedule.datasources.astronomy import (
    AstronomyError,
    AstronomyParams,
    HttpAstronomyProvider,
    event_time,
    require_keys,
)
from day_schedule.datecontext import build_date_context


class TestEventTime:
    """Reading event times from a record."""

    def test_number(self) -> None:
        assert event_time({"SunRise": 4.7}, "SunRise") == pytest.approx(4.7)

    def test_numeric_string(self) -> None:
        assert event_time({"SunRise": "4.75"}, "SunRise") == pytest.approx(4.75)

    @pytest.mark.parametrize("value", [None, "---"])
    def test_not_occurring(self, value: object) -> None:
        assert event_time({"SunRise": value}, "SunRise") is None

    def test_missing_key(self) -> None:
        assert event_time({}, "MoonRise") is None

    def test_garbage_rejected(self) -> None:
        with pytest.raises(AstronomyError, match="MoonSet"):
            event_time({"MoonSet": "soon"}, "MoonSet")


class TestRequireKeys:
    """Completeness check of provider records."""

    def test_complete_record_passes(self) -> None:
        record = base_record()
        assert require_keys(record) is record

    def test_lists_missing_keys(self) -> None:
        record = base_record()
        del record["SunAz"]
        record["MoonAlt"] = None
        with pytest.raises(AstronomyError) as exc:
            require_keys(record)
        assert "SunAz" in str(exc.value)
        assert "MoonAlt" in str(exc.value)


class TestHttpAstronomyProvider:
    """Fetching records over HTTP."""

    @pytest.fixture
    def context(self):
        return build_date_context(BERLIN_SOLSTICE_NOON, "Europe/Berlin", window=0)

    @pytest.fixture
    def params(self) -> AstronomyParams:
        return AstronomyParams(latitude=52.52, longitude=13.405, horizon_morning=-6.0, horizon_evening=0.0)

    @patch("day_schedule.datasources.astronomy.client.session.get")
    def test_fetch(self, mock_get: Mock, context, params: AstronomyParams) -> None:
        mock_response = Mock()
        mock_response.json.return_value = base_record()
        mock_response.raise_for_status = Mock()
        mock_get.return_value = mock_response

        provider = HttpAstronomyProvider("http://astro.test/day")
        record = provider(context, params)

        assert record["SunRise"] == 4.7
        mock_get.assert_called_once()
        assert mock_get.call_args.args[0] == "http://astro.test/day"
        query = mock_get.call_args.kwargs["params"]
        assert query["date"] == "2024-06-21"
        assert query["time"] == "12:00:00"
        assert query["timezone"] == "Europe/Berlin"
        assert query["latitude"] == 52.52
        assert query["horizon"] == "-6.0:0.0"

    @patch("day_schedule.datasources.astronomy.client.session.get")
    def test_http_error_propagates(self, mock_get: Mock, context, params: AstronomyParams) -> None:
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        mock_get.return_value = mock_response

        with pytest.raises(requests.HTTPError):
            HttpAstronomyProvider("http://astro.test/day")(context, params)

    @patch("day_schedule.datasources.astronomy.client.session.get")
    def test_non_object_rejected(self, mock_get: Mock, context, params: AstronomyParams) -> None:
        mock_response = Mock()
        mock_response.json.return_value = [base_record()]
        mock_response.raise_for_status = Mock()
        mock_get.return_value = mock_response

        with pytest.raises(AstronomyError, match="JSON object"):
            HttpAstronomyProvider("http://astro.test/day")(context, params)

    @patch("day_schedule.datasources.astronomy.client.session.get")
    def test_incomplete_record_rejected(self, mock_get: Mock, context, params: AstronomyParams) -> None:
        mock_response = Mock()
        mock_response.json.return_value = {"ObsDate": "2024-06-21"}
        mock_response.raise_for_status = Mock()
        mock_get.return_value = mock_response

        with pytest.raises(AstronomyError, match="ObsLat"):
            HttpAstronomyProvider("http://astro.test/day")(context, params)
