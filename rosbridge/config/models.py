"""Typed configuration models.

pydantic validates the YAML file and hands strongly-typed objects to the
clock and logging setup. Every section has defaults so a blank file is a
valid configuration.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rosbridge.core.enums import ClockSource

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ClockConfig(BaseModel):
    """How :class:`rosbridge.primitives.Clock` produces ``now()`` readings."""

    source: ClockSource = ClockSource.MONOTONIC
    exact_decomposition: bool = Field(
        True,
        description="Split nanosecond counts with integer divmod instead of the legacy float path",
    )

    model_config = ConfigDict(frozen=True)


class TelemetryConfig(BaseModel):
    """Logging switches passed to :func:`rosbridge.telemetry.configure_logging`."""

    log_level: str = Field("INFO")
    log_dir: Optional[Path] = None
    logger_name: str = Field("rosbridge", min_length=1)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class BridgeConfig(BaseModel):
    """Top-level configuration composed of clock and telemetry sections."""

    clock: ClockConfig = Field(default_factory=ClockConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)
