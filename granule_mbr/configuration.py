"""Mini README: Centralised configuration for the bounding engine.

Structure:
    * MbrSettings - Pydantic settings model holding numeric tolerances.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Entry points call ``get_settings`` when no explicit settings object is
    supplied. Values can be overridden with ``GRANULE_MBR_*`` environment
    variables or a ``.env`` file; the object is cached so validation runs once
    per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MbrSettings(BaseSettings):
    """Runtime configuration for bounding-rectangle computation."""

    model_config = SettingsConfigDict(
        env_prefix="GRANULE_MBR_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    point_epsilon: float = Field(
        1e-8,
        description="Half-width in degrees of the box drawn around a bare point.",
        gt=0.0,
        lt=1.0,
    )
    pole_tolerance: float = Field(
        1e-6,
        description="Allowed deviation in degrees from a full 360 degree longitude traversal.",
        gt=0.0,
    )
    output_precision: int = Field(
        8,
        description="Decimal places used when reporting [west, south, east, north].",
        ge=0,
        le=15,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        """Accept any standard logging level name regardless of case."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level '{value}'")
        return normalised


@lru_cache()
def get_settings() -> MbrSettings:
    """Return cached settings, ensuring consistent tolerances across modules."""

    return MbrSettings()
