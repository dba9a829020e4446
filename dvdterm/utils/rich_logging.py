"""Rich logging integration for dvd-term.

Provides Rich-based logging handlers and formatters. Console logs go to
stderr because stdout carries the animation frames.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console as RichConsole
from rich.logging import RichHandler
from rich.markup import escape

if TYPE_CHECKING:
    from rich.console import Console


class ScreensaverRichHandler(RichHandler):
    """RichHandler with level coloring and highlighted frame events."""

    # Colors for log levels
    LEVEL_COLORS: dict[str, str] = {
        "DEBUG": "dim",
        "INFO": "cyan",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    # Patterns for event text that should be colored bright cyan
    ACTION_PATTERNS = [
        r"Bounce:",
        r"Mode changed:",
        r"Terminal acquired",
        r"Terminal released",
    ]

    def __init__(
        self,
        *args: Any,
        console: Console | None = None,
        show_colors: bool = True,
        **kwargs: Any,
    ) -> None:
        """Initialize handler.

        Args:
            *args: Positional arguments for RichHandler
            console: Optional Rich Console instance
            show_colors: Whether to use colors for log levels
            **kwargs: Keyword arguments for RichHandler

        """
        if console is None:
            console = RichConsole(file=sys.stderr, markup=True)

        self.show_colors = show_colors

        if "markup" not in kwargs:
            kwargs["markup"] = True

        super().__init__(*args, console=console, **kwargs)

    def _colorize_action_text(self, message: str) -> str:
        """Colorize event text in the message with bright cyan."""
        for pattern in self.ACTION_PATTERNS:
            message = re.sub(
                f"({pattern})",
                r"[bright_cyan]\1[/bright_cyan]",
                message,
            )
        return message

    def render_message(self, record: logging.LogRecord, message: str) -> Any:
        """Render message with level and action coloring."""
        # Messages carry user text, which may look like markup
        message = escape(message)
        if self.show_colors:
            message = self._colorize_action_text(message)
            color = self.LEVEL_COLORS.get(record.levelname)
            if color and record.levelno >= logging.WARNING:
                message = f"[{color}]{message}[/{color}]"
        return super().render_message(record, message)


def strip_rich_markup(text: str) -> str:
    """Strip Rich markup from text for file logging.

    Args:
        text: Text with Rich markup

    Returns:
        Text without Rich markup

    """
    # Pattern matches [tag], [tag=value], [/tag]
    pattern = r"\[/?[^\]]+\]"
    return re.sub(pattern, "", text)


class FileFormatter(logging.Formatter):
    """Formatter for file output that strips Rich markup."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record, stripping Rich markup for file output."""
        formatted = super().format(record)
        return strip_rich_markup(formatted)


def create_rich_handler(
    console: Console | None = None,
    level: int | str = logging.INFO,
    show_path: bool = False,
    rich_tracebacks: bool = True,
    show_colors: bool = True,
) -> logging.Handler:
    """Create a RichHandler writing to stderr.

    Args:
        console: Optional Rich Console instance
        level: Log level
        show_path: Whether to show file paths in log output
        rich_tracebacks: Whether to use rich tracebacks
        show_colors: Whether to use colors for log levels

    Returns:
        Configured RichHandler instance

    """
    if console is None:
        console = RichConsole(
            file=sys.stderr,
            legacy_windows=False,
            markup=True,
        )

    return ScreensaverRichHandler(
        console=console,
        level=level,
        show_path=show_path,
        rich_tracebacks=rich_tracebacks,
        show_colors=show_colors,
    )
