"""Shared constants for mathkit configuration.

This module is the single source of truth for default file locations.
"""

DEFAULTS_RELATIVE_PATH: str = "config/defaults.yaml"
DEFAULT_LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
