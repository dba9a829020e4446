"""Terminal primitives for the screensaver.

Output goes through a Rich ``Console``: control codes for the alternate
screen, cursor and clearing, and styled text for the logos. Input uses the
POSIX ``termios``/``tty``/``select`` modules to read single key presses in
raw mode.
"""

from __future__ import annotations

import contextlib
import os
import select
import sys
from typing import IO, Iterator

from rich.color import Color
from rich.console import Console
from rich.control import Control
from rich.style import Style

from dvdterm.screensaver.geometry import Vec2
from dvdterm.screensaver.keys import KeyEvent, decode_keys
from dvdterm.utils.exceptions import TerminalUnavailableError
from dvdterm.utils.logging_config import get_logger

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - non-POSIX platforms
    termios = None  # type: ignore[assignment]
    tty = None  # type: ignore[assignment]

logger = get_logger(__name__)

# bytes read per key event, enough for any escape sequence
READ_SIZE = 32


def create_console(file: IO[str] | None = None) -> Console:
    """Create the Rich Console used for frames."""
    return Console(
        file=file or sys.stdout,
        highlight=False,
        markup=False,
        emoji=False,
        legacy_windows=False,
    )


class Terminal:
    """Exclusive handle on the user's terminal.

    ``enter`` switches to raw input, the alternate screen and a hidden
    cursor; ``leave`` undoes all three. Used as a context manager the
    terminal is restored on every exit path.
    """

    def __init__(
        self,
        console: Console | None = None,
        stdin: IO[str] | None = None,
    ) -> None:
        self.console = console or create_console()
        self._stdin = stdin or sys.stdin
        self._saved_attrs: list | None = None
        self.active = False

    def __enter__(self) -> Terminal:
        self.enter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.leave()
        return False

    def _input_fd(self) -> int:
        try:
            fd = self._stdin.fileno()
        except (AttributeError, OSError, ValueError) as e:
            msg = "Standard input has no file descriptor"
            raise TerminalUnavailableError(msg) from e
        if not os.isatty(fd):
            msg = "Standard input is not a terminal"
            raise TerminalUnavailableError(msg, details={"fd": fd})
        return fd

    def enter(self) -> None:
        """Enable raw mode, switch to the alternate screen and hide the cursor.

        Raises:
            TerminalUnavailableError: If raw mode cannot be enabled

        """
        if self.active:
            msg = "Terminal is already in use"
            raise TerminalUnavailableError(msg)
        if termios is None or tty is None:
            msg = "Raw terminal mode is not supported on this platform"
            raise TerminalUnavailableError(msg, details={"platform": sys.platform})

        fd = self._input_fd()
        try:
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            msg = "Failed to enable raw mode"
            raise TerminalUnavailableError(msg, details={"error": str(e)}) from e

        self.active = True
        try:
            self.console.control(Control.alt_screen(True), Control.show_cursor(False))
        except OSError as e:
            self.leave()
            msg = "Failed to enter the alternate screen"
            raise TerminalUnavailableError(msg, details={"error": str(e)}) from e
        logger.info("Terminal acquired (fd %d)", fd)

    def leave(self) -> None:
        """Show the cursor, leave the alternate screen and restore input mode."""
        if not self.active:
            return
        self.active = False
        try:
            self.console.control(Control.show_cursor(True), Control.alt_screen(False))
        finally:
            if self._saved_attrs is not None and termios is not None:
                termios.tcsetattr(self._input_fd(), termios.TCSADRAIN, self._saved_attrs)
                self._saved_attrs = None
        logger.info("Terminal released")

    def _output_fd(self) -> int:
        for stream in (self.console.file, sys.__stdout__):
            try:
                fd = stream.fileno()
            except (AttributeError, OSError, ValueError):
                continue
            if isinstance(fd, int):
                return fd
        msg = "No file descriptor to query the terminal size from"
        raise OSError(msg)

    def size(self) -> Vec2:
        """Current terminal size in cells, queried from the OS on every call.

        ``console.size`` is only the fallback for output that is not a
        terminal: it stays fixed while ``COLUMNS``/``LINES`` are exported.
        """
        try:
            width, height = os.get_terminal_size(self._output_fd())
        except OSError:
            width, height = self.console.size
        if width <= 0 or height <= 0:
            msg = "Terminal reported an empty size"
            raise TerminalUnavailableError(msg, details={"size": (width, height)})
        return Vec2(width, height)

    def poll_keys(self, timeout_ms: int) -> list[KeyEvent]:
        """Wait up to ``timeout_ms`` for key presses.

        Returns:
            Every key decoded from one read, empty if the timeout expired

        """
        fd = self._input_fd()
        ready, _, _ = select.select([fd], [], [], timeout_ms / 1000)
        if not ready:
            return []
        return decode_keys(os.read(fd, READ_SIZE))

    @contextlib.contextmanager
    def batch(self) -> Iterator[None]:
        """Queue all output inside the block and write it in one flush."""
        with self.console:
            yield

    def clear(self) -> None:
        self.console.control(Control.clear())

    def move_to(self, x: int, y: int) -> None:
        self.console.control(Control.move_to(x, y))

    def print(self, text: str, color: int) -> None:
        """Print text at the cursor in a 256-color foreground."""
        self.console.out(text, style=Style(color=Color.from_ansi(color)), end="", highlight=False)
