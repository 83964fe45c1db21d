"""Pydantic models for mathkit configuration.

This module defines the configuration schema read from
``config/defaults.yaml`` and optional override files.
"""

import logging
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from mathkit.utils.numbers import DEFAULT_DISPLAY_DIGITS

from .constants import DEFAULT_LOG_FORMAT


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class StatisticsConfig(BaseModel):
    """Statistics engine configuration."""

    sample_std_dev: Literal["scaled", "textbook"] = Field(
        default="scaled",
        description="Sample SD formula: population SD * n/(n-1), or sqrt(SS/(n-1))",
    )


class OutputConfig(BaseModel):
    """Report output configuration."""

    format: Literal["text", "json", "markdown"] = Field(default="text")
    precision: int | None = Field(
        default=None,
        ge=0,
        le=15,
        description="Decimal places for report values (None keeps full precision)",
    )


class ExpressionConfig(BaseModel):
    """Complex number, coordinate and equation display configuration."""

    equality_tolerance: float = Field(default=0.001, gt=0.0)
    display_digits: int = Field(default=DEFAULT_DISPLAY_DIGITS, ge=0, le=15)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING")
    format: str = Field(default=DEFAULT_LOG_FORMAT)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize the level name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown logging level: {v}")
        return level


class MathkitConfig(BaseModel):
    """Complete mathkit configuration.

    Maps to config/defaults.yaml merged with an optional override file.
    """

    statistics: StatisticsConfig = Field(default_factory=StatisticsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    expression: ExpressionConfig = Field(default_factory=ExpressionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
