"""
HTTP astronomy provider.

Queries a JSON endpoint that answers one request per day with a flat
record keyed like ``AstroKey``. All requests go through the shared retrying
session; HTTP errors surface as ``requests.HTTPError``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from day_schedule.datasources.astronomy.models import (
    AstronomyError,
    AstronomyParams,
    AstronomyRecord,
    require_keys,
)
from day_schedule.services.http import session

if TYPE_CHECKING:
    from day_schedule.datecontext import DateContext

logger = logging.getLogger(__name__)


class HttpAstronomyProvider:
    """Fetch astronomy records from a remote service."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url

    def build_params(self, context: DateContext, params: AstronomyParams) -> dict[str, str | float]:
        """Query parameters for one day."""
        return {
            "date": context.iso_date,
            "time": context.iso_time,
            "timezone": context.timezone,
            "latitude": params.latitude,
            "longitude": params.longitude,
            "altitude": params.altitude,
            "horizon": f"{params.horizon_morning}:{params.horizon_evening}",
            "language": params.language,
        }

    def __call__(self, context: DateContext, params: AstronomyParams) -> AstronomyRecord:
        logger.debug("Fetching astronomy for %s %s", context.iso_date, context.iso_time)
        resp = session.get(self.base_url, params=self.build_params(context, params))
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise AstronomyError(f"Expected a JSON object from {self.base_url}, got {type(data).__name__}")
        return require_keys(data)
