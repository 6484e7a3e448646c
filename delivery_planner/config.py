"""Centralised application settings loaded from environment / .env file."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    # Planning defaults (used when the CLI does not override them)
    default_travel_speed_kmh: float = 20.0
    default_preparation_time1_min: float = 15.0
    default_preparation_time2_min: float = 20.0

    # Convert travel hours to minutes before adding preparation time
    normalize_units: bool = False

    # Logging
    log_level: LogLevel = "WARNING"

    model_config = {
        "env_prefix": "DELIVERY_PLANNER_",
        "env_file": ".env",
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()
