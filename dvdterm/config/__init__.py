"""Configuration management.

This module handles configuration loading and validation.
"""

from __future__ import annotations

from dvdterm.config.config import ConfigManager, init_config
from dvdterm.models import Config

__all__ = [
    "Config",
    "ConfigManager",
    "init_config",
]
