"""
Prefect flow computing the day schedule for the configured observer.

Each day of the window is fetched as its own task so a flaky provider only
retries the day that failed. Classification runs once all five records are in.

Run locally:
    python -m day_schedule.flows.schedule

Run with Prefect dashboard:
    prefect server start &
    python -m day_schedule.flows.schedule
"""

from __future__ import annotations

from typing import Any

from prefect import flow, task

from day_schedule.compute import ScheduleWindow, astronomy_params, run_window
from day_schedule.config import get_settings
from day_schedule.datasources.astronomy import HttpAstronomyProvider, require_keys
from day_schedule.datecontext import COMPUTE_LOCK, DateContext, build_date_context
from day_schedule.models import DaySchedule
from day_schedule.schemas import ScheduleConfig
from day_schedule.serialization import day_schedule_to_dict


@task(name="build-date-context")
def build_context(config: ScheduleConfig, instant: float | None = None) -> DateContext:
    """Calendar breakdown of the anchor instant and its neighbor days."""
    with COMPUTE_LOCK:
        return build_date_context(instant, config.timezone, config.lc_time)


@task(name="fetch-astronomy", retries=2, retry_delay_seconds=5)
def fetch_astronomy(url: str, context: DateContext, config: ScheduleConfig) -> dict[str, Any]:
    """Fetch one day's astronomy record."""
    provider = HttpAstronomyProvider(url)
    return require_keys(provider(context, astronomy_params(config)))


@task(name="compute-schedule")
def compute_schedule(
    context: DateContext,
    astronomy: dict[int, dict[str, Any]],
    config: ScheduleConfig,
) -> DaySchedule:
    """Classify and link every day of the window."""
    contexts = {offset: day for offset in astronomy if (day := context.at_offset(offset)) is not None}
    window = ScheduleWindow(config=config, contexts=contexts, astronomy=astronomy)
    records = run_window(window)
    return DaySchedule(context=context, astronomy=astronomy, records=records)


@flow(name="day-schedule", log_prints=True)
def day_schedule_flow(instant: float | None = None) -> dict[str, Any]:
    """
    Compute the anchor day's schedule.

    Reads the observer and provider settings from the environment and
    returns the anchor day as a JSON-compatible dict.
    """
    settings = get_settings()
    config = settings.schedule_config()

    context = build_context(config, instant)
    print(f"Computing schedule for {context.iso_date} {context.iso_time} ({context.timezone})")

    astronomy = {}
    for offset in sorted([0, *context.neighbors]):
        day = context.at_offset(offset)
        if day is None:
            continue
        astronomy[offset] = fetch_astronomy(settings.astronomy_url, day, config)
    print(f"Fetched astronomy for {len(astronomy)} days")

    result = compute_schedule(context, astronomy, config)
    today = result.today
    print(
        f"Seasonal hour {today.seasonal_hours.index} ({today.daytime or 'unnamed'}), "
        f"{today.season_meteo} / {today.season_pheno or 'no phenological season'}"
    )
    return day_schedule_to_dict(result)


if __name__ == "__main__":
    day_schedule_flow()
