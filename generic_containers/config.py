import os
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class Settings(BaseModel):
    default_capacity: int = Field(4, gt=0)
    log_level: str = "WARNING"
    growth_alert_threshold: int = Field(0, ge=0)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings() -> Settings:
    """Build settings from the environment, validating every value."""
    return Settings(
        default_capacity=os.getenv("CONTAINERS_DEFAULT_CAPACITY", "4"),
        log_level=os.getenv("CONTAINERS_LOG_LEVEL", "WARNING"),
        growth_alert_threshold=os.getenv("ARRAY_GROWTH_ALERT_THRESHOLD", "0"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings read once per process; call ``get_settings.cache_clear()`` to re-read."""
    return load_settings()


__all__ = ["Settings", "get_settings", "load_settings"]
