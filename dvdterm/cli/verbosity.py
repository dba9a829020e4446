"""Verbosity management for the dvd-term CLI.

Maps the count of -v flags to a logging level. The screen belongs to the
animation while it runs, so the default only lets warnings through.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from dvdterm.models import LogLevel


class VerbosityLevel(IntEnum):
    """Verbosity levels for the CLI."""

    NORMAL = 0  # Default: warnings and errors
    VERBOSE = 1  # -v: lifecycle info
    DEBUG = 2  # -vv: per-frame debug messages


class VerbosityManager:
    """Manages verbosity levels and maps them to logging levels."""

    COUNT_TO_LEVEL: dict[int, VerbosityLevel] = {
        0: VerbosityLevel.NORMAL,
        1: VerbosityLevel.VERBOSE,
        2: VerbosityLevel.DEBUG,
    }

    LEVEL_TO_LOGGING: dict[VerbosityLevel, int] = {
        VerbosityLevel.NORMAL: logging.WARNING,
        VerbosityLevel.VERBOSE: logging.INFO,
        VerbosityLevel.DEBUG: logging.DEBUG,
    }

    def __init__(self, verbosity_count: int = 0):
        """Initialize verbosity manager.

        Args:
            verbosity_count: Number of -v flags (0-2)

        """
        self.verbosity_count = max(0, min(2, verbosity_count))  # Clamp to 0-2
        self.level = self.COUNT_TO_LEVEL[self.verbosity_count]
        self.logging_level = self.LEVEL_TO_LOGGING[self.level]

    @classmethod
    def from_count(cls, count: int) -> VerbosityManager:
        """Create VerbosityManager from count."""
        return cls(count)

    def should_log(self, log_level: int) -> bool:
        """Check if a log level should be displayed."""
        return log_level >= self.logging_level

    def is_verbose(self) -> bool:
        """Check if verbose mode is enabled."""
        return self.level >= VerbosityLevel.VERBOSE

    def is_debug(self) -> bool:
        """Check if debug mode is enabled."""
        return self.level >= VerbosityLevel.DEBUG

    def to_log_level(self) -> LogLevel:
        """Return the matching configuration log level."""
        return LogLevel(logging.getLevelName(self.logging_level))
