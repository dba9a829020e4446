"""Pytest configuration and shared fixtures for dvd-term tests."""

from __future__ import annotations

import contextlib
import logging
from collections import deque
from typing import Iterator

import pytest

from dvdterm.screensaver.geometry import Vec2
from dvdterm.screensaver.keys import KeyEvent


def pytest_configure(config):
    """Register all project markers to avoid warnings when ini isn't loaded."""
    markers = [
        ("unit", "marks tests as unit tests"),
        ("integration", "marks tests as integration tests"),
        ("cli", "marks tests as CLI tests"),
        ("config", "marks tests as configuration tests"),
        ("screensaver", "marks tests as screensaver core tests"),
    ]
    for name, desc in markers:
        config.addinivalue_line("markers", f"{name}: {desc}")


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Clean up logging handlers after each test to prevent closed file errors."""
    yield
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        logger = logging.getLogger(logger_name)
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    # setup_logging detaches the package logger from the root logger
    package_logger = logging.getLogger("dvdterm")
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


class FakeTerminal:
    """In-memory stand-in for Terminal that records every operation."""

    def __init__(
        self,
        sizes: list[Vec2] | None = None,
        keys: list[KeyEvent | list[KeyEvent] | None] | None = None,
    ):
        self.sizes = deque(sizes or [Vec2(80, 24)])
        self.keys = deque(keys or [])
        self.ops: list[tuple] = []
        self.polls: list[int] = []
        self.active = False
        self.entered = 0
        self.left = 0
        self.batches = 0

    def enter(self) -> None:
        self.entered += 1
        self.active = True

    def leave(self) -> None:
        self.left += 1
        self.active = False

    def size(self) -> Vec2:
        # The last size sticks once the queue is drained
        if len(self.sizes) > 1:
            return self.sizes.popleft().copy()
        return self.sizes[0].copy()

    def poll_keys(self, timeout_ms: int) -> list[KeyEvent]:
        # Each queued entry is one read: None, a single key or a list of keys
        self.polls.append(timeout_ms)
        if not self.keys:
            return []
        entry = self.keys.popleft()
        if entry is None:
            return []
        if isinstance(entry, KeyEvent):
            return [entry]
        return list(entry)

    @contextlib.contextmanager
    def batch(self) -> Iterator[None]:
        self.batches += 1
        yield

    def clear(self) -> None:
        self.ops.append(("clear",))

    def move_to(self, x: int, y: int) -> None:
        self.ops.append(("move", x, y))

    def print(self, text: str, color: int) -> None:
        self.ops.append(("print", text, color))


@pytest.fixture
def fake_terminal():
    """Terminal double with an 80x24 canvas."""
    return FakeTerminal()


@pytest.fixture
def terminal_factory():
    """Build terminal doubles with custom sizes and key sequences."""
    return FakeTerminal
