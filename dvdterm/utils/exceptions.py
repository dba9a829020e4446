"""Exception hierarchy for dvd-term.

Provides the error kinds raised while setting up and running the
screensaver, so the CLI can decide which ones are fatal.
"""

from __future__ import annotations

from typing import Any


class DVDTermError(Exception):
    """Base exception for all dvd-term errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize dvd-term error."""
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class TerminalUnavailableError(DVDTermError):
    """Raw mode, alternate screen or size query failed."""


class FontLoadError(DVDTermError):
    """A figlet font could not be loaded."""


class RenderConversionError(DVDTermError):
    """Input text could not be converted to ASCII art."""


class ArtFileNotFoundError(DVDTermError):
    """Custom ASCII art file does not exist."""

    def __init__(self, path: str, details: dict[str, Any] | None = None):
        """Initialize with the missing path."""
        super().__init__(f"File not found: {path}", details)
        self.path = path


class ValidationError(DVDTermError):
    """Data validation errors."""


class ConfigurationError(ValidationError):
    """Configuration validation errors."""
