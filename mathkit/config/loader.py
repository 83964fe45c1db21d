"""Configuration loader for mathkit.

This module provides the ConfigLoader class for loading and merging YAML
configuration files with a two-level priority hierarchy:
    override file > config/defaults.yaml > built-in model defaults
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .constants import DEFAULTS_RELATIVE_PATH
from .models import ConfigurationError, MathkitConfig

logger = logging.getLogger(__name__)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values in override take precedence. Nested dicts are merged recursively.
    Lists are replaced entirely (not appended).

    Args:
        base: Base dictionary
        override: Override dictionary (values take precedence)

    Returns:
        Merged dictionary

    """
    result = base.copy()

    for key, value in override.items():
        if value is None:
            # Skip None values - don't override with None
            continue

        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


class ConfigLoader:
    """Load and merge configuration files for mathkit.

    Supports a two-level priority hierarchy:
        1. config/defaults.yaml (optional - project defaults)
        2. an explicit override file (optional - e.g. from ``--config``)

    Example:
        loader = ConfigLoader()
        config = loader.load(override_path=Path("my-settings.yaml"))

    """

    def __init__(self, base_path: str | Path | None = None) -> None:
        """Initialize the ConfigLoader.

        Args:
            base_path: Base path for configuration files. Defaults to current working directory.

        """
        if base_path is None:
            self.base_path = Path.cwd()
        else:
            self.base_path = Path(base_path)

    @property
    def defaults_path(self) -> Path:
        return self.base_path / DEFAULTS_RELATIVE_PATH

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load a YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Parsed YAML content as dict

        Raises:
            ConfigurationError: If file cannot be read or parsed

        """
        try:
            with open(path) as f:
                content = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")
        except PermissionError:
            raise ConfigurationError(f"Permission denied reading: {path}")

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(f"Expected a mapping at the top of {path}")
        return content

    def _load_yaml_optional(self, path: Path) -> dict[str, Any] | None:
        """Load a YAML file if it exists.

        Args:
            path: Path to YAML file

        Returns:
            Parsed YAML content as dict, or None if file doesn't exist

        Raises:
            ConfigurationError: If file exists but cannot be parsed

        """
        if not path.exists():
            return None
        return self._load_yaml(path)

    def load(self, override_path: str | Path | None = None) -> MathkitConfig:
        """Load the merged configuration.

        Args:
            override_path: Optional YAML file whose values take precedence
                over config/defaults.yaml. It must exist when given.

        Returns:
            Validated MathkitConfig

        Raises:
            ConfigurationError: If a file is missing, unparsable or invalid

        """
        merged: dict[str, Any] = {}

        defaults = self._load_yaml_optional(self.defaults_path)
        if defaults is not None:
            logger.debug(f"Loaded defaults from {self.defaults_path}")
            merged = _deep_merge(merged, defaults)

        if override_path is not None:
            override_file = Path(override_path)
            merged = _deep_merge(merged, self._load_yaml(override_file))
            logger.debug(f"Merged overrides from {override_file}")

        try:
            return MathkitConfig.model_validate(merged)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")
