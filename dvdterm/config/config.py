"""Configuration management for dvd-term.

Configuration is layered: model defaults, then an optional TOML file, then
options given on the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pydantic
import toml

from dvdterm.models import Config
from dvdterm.utils.exceptions import ConfigurationError
from dvdterm.utils.logging_config import get_logger

logger = get_logger(__name__)


class ConfigManager:
    """Loads and validates configuration."""

    def __init__(
        self,
        config_file: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
    ):
        """Initialize configuration manager.

        Args:
            config_file: Path to a TOML config file, or None for defaults only
            overrides: Nested dict of values that take precedence over the file

        """
        self.config_file = Path(config_file) if config_file else None
        self.overrides = overrides or {}
        self.config = self._load_config()

    def _load_config(self) -> Config:
        """Load configuration from file and overrides."""
        config_data: dict[str, Any] = {}

        if self.config_file is not None:
            config_data = self._read_toml(self.config_file)

        config_data = self._merge_config(config_data, self.overrides)

        try:
            return Config(**config_data)
        except pydantic.ValidationError as e:
            msg = f"Invalid configuration: {e.error_count()} error(s)"
            raise ConfigurationError(
                msg,
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e

    def _read_toml(self, path: Path) -> dict[str, Any]:
        """Read a TOML file into a dict."""
        try:
            with open(path, encoding="utf-8") as f:
                data = toml.load(f)
        except FileNotFoundError as e:
            msg = f"Configuration file not found: {path}"
            raise ConfigurationError(msg) from e
        except toml.TomlDecodeError as e:
            msg = f"Failed to parse configuration file {path}"
            raise ConfigurationError(msg, details={"error": str(e)}) from e

        logger.info("Loaded configuration from %s", path)
        return data

    def _merge_config(
        self,
        base: dict[str, Any],
        override: dict[str, Any],
    ) -> dict[str, Any]:
        """Merge configuration dictionaries recursively."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value

        return result

    def export(self) -> str:
        """Export current configuration as TOML."""
        data = self.config.model_dump(mode="json", exclude_none=True)
        return toml.dumps(data)


def init_config(
    config_file: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> ConfigManager:
    """Create a configuration manager."""
    return ConfigManager(config_file, overrides)
