"""Pydantic models for dvd-term.

Provides validated configuration models for the screensaver and its
logging setup.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# default color value (white)
DEFAULT_COLOR = 15
# default speed in cells per second
DEFAULT_SPEED = 8
# default text to display
DEFAULT_TEXT = "DVD"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ScreensaverConfig(BaseModel):
    """Screensaver behaviour configuration."""

    text: list[str] = Field(
        default_factory=lambda: [DEFAULT_TEXT],
        description="Texts to display, one logo per entry",
    )
    font_path: Path | None = Field(
        default=None,
        description="Path of a custom figlet font file",
    )
    color: int = Field(
        default=DEFAULT_COLOR,
        ge=0,
        le=255,
        description="Initial logo color code (0-255)",
    )
    random: bool = Field(
        default=False,
        description="Randomize logo color when it bounces",
    )
    speed: int = Field(
        default=DEFAULT_SPEED,
        ge=1,
        description="Cells moved per second (also the frame rate)",
    )
    plain: bool = Field(
        default=False,
        description="Display plain text instead of ASCII art",
    )
    art_path: Path | None = Field(
        default=None,
        description="Path of a plain text file with ASCII art to display",
    )

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: list[str]) -> list[str]:
        """Fall back to the default text when no text is given."""
        if not v:
            return [DEFAULT_TEXT]
        return v


class ObservabilityConfig(BaseModel):
    """Logging configuration."""

    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Log level",
    )
    log_file: Path | None = Field(
        default=None,
        description="Log file path",
    )


class Config(BaseModel):
    """Main configuration model."""

    screensaver: ScreensaverConfig = Field(
        default_factory=ScreensaverConfig,
        description="Screensaver configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Logging configuration",
    )
