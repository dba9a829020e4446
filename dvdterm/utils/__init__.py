"""Shared utilities and infrastructure.

This module contains common utilities used throughout the application.
"""

from __future__ import annotations

from dvdterm.utils.exceptions import (
    ArtFileNotFoundError,
    ConfigurationError,
    DVDTermError,
    FontLoadError,
    RenderConversionError,
    TerminalUnavailableError,
    ValidationError,
)
from dvdterm.utils.logging_config import get_logger, setup_logging

__all__ = [
    # Exceptions
    "ArtFileNotFoundError",
    "ConfigurationError",
    "DVDTermError",
    "FontLoadError",
    "RenderConversionError",
    "TerminalUnavailableError",
    "ValidationError",
    # Logging
    "get_logger",
    "setup_logging",
]
