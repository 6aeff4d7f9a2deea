"""Application configuration."""

import os
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from kitchen_tracker.domain.stats import (
    ELABORATE_MIN_INGREDIENTS,
    ELABORATE_MIN_PREP_TIME,
    RoundingPolicy,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Setting ``KITCHEN_CAPACITY=none`` leaves the kitchen unbounded.
    """

    kitchen_capacity: int | None = Field(default=100, ge=1)
    elaborate_min_ingredients: int = Field(default=ELABORATE_MIN_INGREDIENTS, ge=0)
    elaborate_min_prep_time: int = Field(default=ELABORATE_MIN_PREP_TIME, ge=0)
    elaborate_rounding: RoundingPolicy = RoundingPolicy.NEAREST
    log_level: LogLevel = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        env_parse_none_str="none",
        extra="ignore",
    )
