"""
Application settings.

Values come from the environment (prefix ``DAY_SCHEDULE_``) or a ``.env``
file. Observer fields are turned into a validated ``ScheduleConfig`` by
``Settings.schedule_config()``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from day_schedule.reference.seasons import DEFAULT_EARLYFALL, DEFAULT_EARLYSPRING
from day_schedule.schemas import DEFAULT_SEASONAL_HRS, ScheduleConfig


class Settings(BaseSettings):
    """Process-wide settings for the CLI and flows."""

    model_config = SettingsConfigDict(
        env_prefix="DAY_SCHEDULE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "day-schedule"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Astronomy provider endpoint returning one keyed record per request
    astronomy_url: str = "http://localhost:8083/astro"

    latitude: float = Field(52.52, ge=-90, le=90)
    longitude: float = Field(13.405, ge=-180, le=180)
    altitude: float = Field(0.0, ge=0)
    horizon: str = "0"
    seasonal_hrs: str = DEFAULT_SEASONAL_HRS
    earlyspring: str = DEFAULT_EARLYSPRING
    earlyfall: str = DEFAULT_EARLYFALL
    schedule: str = ""  # comma separated event kinds; empty tracks every kind
    timezone: str = "Europe/Berlin"
    language: str = "EN"
    lc_time: str | None = None

    @field_validator("lc_time", mode="before")
    @classmethod
    def _empty_to_none(cls, value: object) -> object:
        if value == "":
            return None
        return value

    def schedule_config(self) -> ScheduleConfig:
        """
        Build the validated schedule configuration.

        Raises:
            pydantic.ValidationError: If any observer field is invalid.
        """
        fields = {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "altitude": self.altitude,
            "horizon": self.horizon,
            "seasonal_hrs": self.seasonal_hrs,
            "earlyspring": self.earlyspring,
            "earlyfall": self.earlyfall,
            "timezone": self.timezone,
            "language": self.language,
            "lc_time": self.lc_time,
        }
        if self.schedule:
            fields["schedule"] = self.schedule
        return ScheduleConfig(**fields)


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
