"""Logging configuration for dvd-term.

Console output goes through Rich on stderr; an optional rotating log file
receives plain text. Stdout is reserved for the animation.
"""

from __future__ import annotations

import contextlib
import logging
import logging.config
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterator

from rich.logging import RichHandler

from dvdterm.utils.exceptions import DVDTermError
from dvdterm.utils.rich_logging import FileFormatter, create_rich_handler

if TYPE_CHECKING:  # pragma: no cover
    from dvdterm.models import ObservabilityConfig

ROOT_LOGGER = "dvdterm"


def setup_logging(config: ObservabilityConfig) -> None:
    """Set up logging configuration with Rich support."""
    level = config.log_level.value

    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "()": FileFormatter,
                "format": "%(asctime)s %(levelname)s %(name)s.%(funcName)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {},
        "loggers": {
            ROOT_LOGGER: {
                "level": level,
                "handlers": [],
                "propagate": False,
            },
        },
    }

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logging_config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "simple",
            "filename": str(log_path),
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
        }
        logging_config["loggers"][ROOT_LOGGER]["handlers"].append("file")

    logging.config.dictConfig(logging_config)

    # RichHandler is attached directly since dictConfig cannot pass a Console
    rich_handler = create_rich_handler(level=level)
    logging.getLogger(ROOT_LOGGER).addHandler(rich_handler)


@contextlib.contextmanager
def suspend_console_logging() -> Iterator[None]:
    """Detach console handlers while the animation owns the screen.

    Records still reach the log file, if one is configured. Console
    handlers are reattached on exit, including on errors.
    """
    package_logger = logging.getLogger(ROOT_LOGGER)
    detached = [h for h in package_logger.handlers if isinstance(h, RichHandler)]
    for handler in detached:
        package_logger.removeHandler(handler)
    try:
        yield
    finally:
        for handler in detached:
            package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


class LoggingContext:
    """Context manager that logs the start, end and duration of an operation."""

    def __init__(
        self,
        operation: str,
        log_level: int = logging.INFO,
        **kwargs: Any,
    ):
        """Initialize operation context manager.

        Args:
            operation: Name of the operation
            log_level: Level used for the start and completion messages
            **kwargs: Additional context to include in logs

        """
        self.operation = operation
        self.kwargs = kwargs
        self.logger = get_logger(__name__)
        self.start_time: float | None = None
        self.log_level = log_level

    def __enter__(self):
        """Enter the context manager."""
        self.start_time = time.time()
        self.logger.log(self.log_level, "Starting %s", self.operation, extra=self.kwargs)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the context manager."""
        duration = time.time() - self.start_time if self.start_time else 0

        if exc_type is None:
            self.logger.log(
                self.log_level,
                "Completed %s in %.3fs",
                self.operation,
                duration,
                extra=self.kwargs,
            )
        else:
            self.logger.error(
                "Failed %s in %.3fs: %s",
                self.operation,
                duration,
                exc_val,
                extra=self.kwargs,
                exc_info=exc_val is not None,
            )

        return False  # Don't suppress exceptions


def log_exception(logger: logging.Logger, exc: Exception, context: str = "") -> None:
    """Log an exception with context."""
    if isinstance(exc, DVDTermError):
        logger.error(
            "%s: %s",
            context,
            exc.message,
            extra={"details": exc.details},
            exc_info=logger.isEnabledFor(logging.DEBUG),
        )
    else:
        logger.exception("%s: %s", context, exc)

