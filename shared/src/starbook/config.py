"""Application configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Output
    data_dir: str = Field(default="./public/data/general", alias="STARBOOK_DATA_DIR")

    # Batch generation
    years: Annotated[list[int], NoDecode] = Field(default_factory=lambda: [2025, 2026], alias="STARBOOK_YEARS")
    max_workers: int = Field(default=4, ge=1, alias="STARBOOK_MAX_WORKERS")
    strict: bool = Field(default=True, alias="STARBOOK_STRICT")

    # Astrology
    voc_offset_hours: float = Field(default=3.0, ge=0.0, le=24.0, alias="STARBOOK_VOC_OFFSET_HOURS")
    # Applied once, when ephemeris.calculator is first imported
    ephe_path: str = Field(default="", alias="SWISSEPH_EPHE_PATH")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("years", mode="before")
    @classmethod
    def _split_years(cls, value: object) -> object:
        # Accept "2025,2026" as well as "[2025, 2026]".
        if isinstance(value, str):
            return [int(part) for part in value.strip("[] ").split(",") if part.strip()]
        if isinstance(value, int):
            return [value]
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
