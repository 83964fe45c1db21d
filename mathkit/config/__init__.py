"""Configuration loading system for mathkit.

This module provides Pydantic models and a ConfigLoader for parsing YAML
settings for the statistics engine, report output and logging.

Example:
    from mathkit.config import ConfigLoader

    config = ConfigLoader().load()
    config.statistics.sample_std_dev  # "scaled"

"""

from .constants import DEFAULT_LOG_FORMAT, DEFAULTS_RELATIVE_PATH
from .loader import ConfigLoader
from .models import (
    ConfigurationError,
    ExpressionConfig,
    LoggingConfig,
    MathkitConfig,
    OutputConfig,
    StatisticsConfig,
)

__all__ = [
    "DEFAULTS_RELATIVE_PATH",
    "DEFAULT_LOG_FORMAT",
    "ConfigLoader",
    "ConfigurationError",
    "ExpressionConfig",
    "LoggingConfig",
    "MathkitConfig",
    "OutputConfig",
    "StatisticsConfig",
]
