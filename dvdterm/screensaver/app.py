"""Top-level screensaver loop.

States run ``INITIALIZING -> RUNNING -> TERMINATING -> STOPPED``. The key
poll timeout is the frame clock: each iteration waits up to one frame for a
key, then updates and draws.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING

from dvdterm.screensaver.figlet import load_font
from dvdterm.screensaver.keys import is_quit_key
from dvdterm.screensaver.logo import build_logos, load_art
from dvdterm.screensaver.renderer import Renderer
from dvdterm.screensaver.scene import Scene
from dvdterm.screensaver.terminal import Terminal
from dvdterm.utils.logging_config import get_logger, suspend_console_logging

if TYPE_CHECKING:
    from dvdterm.models import ScreensaverConfig

logger = get_logger(__name__)


class AppState(str, Enum):
    """Lifecycle states of the screensaver."""

    INITIALIZING = "initializing"
    RUNNING = "running"
    TERMINATING = "terminating"
    STOPPED = "stopped"


class App:
    """Owns the scene and the terminal for the lifetime of a run."""

    def __init__(self, scene: Scene, terminal: Terminal, speed: int) -> None:
        """Initialize the app.

        Args:
            scene: Logos to animate
            terminal: Terminal to draw on and read keys from
            speed: Cells moved per second, also the frame rate

        """
        self.scene = scene
        self.terminal = terminal
        self.speed = speed
        self.renderer = Renderer(terminal)
        self.state = AppState.STOPPED
        self.frames = 0

    @classmethod
    def from_config(
        cls,
        config: ScreensaverConfig,
        terminal: Terminal | None = None,
        rng: random.Random | None = None,
    ) -> App:
        """Build logos from configuration without touching terminal modes.

        Raises:
            ArtFileNotFoundError: If the configured art file does not exist
            RenderConversionError: If a text cannot be rendered with the font

        """
        terminal = terminal or Terminal()
        rng = rng or random.Random()

        art = load_art(config.art_path) if config.art_path else None
        font = load_font(config.font_path)
        canvas = terminal.size()

        logos = build_logos(
            config.text,
            font,
            canvas,
            art=art,
            color=config.color,
            randomize=config.random,
            plain=config.plain,
            rng=rng,
        )
        scene = Scene(
            logos=logos,
            canvas_size=canvas,
            force_plain=config.plain,
            randomize=config.random,
            rng=rng,
        )
        logger.info("Created %d logo(s) on a %dx%d canvas", len(logos), canvas.x, canvas.y)
        return cls(scene, terminal, config.speed)

    @property
    def frame_time_ms(self) -> int:
        return 1000 // self.speed

    def handle_input(self) -> None:
        """Wait up to one frame for keys and stop if any is a quit key."""
        for event in self.terminal.poll_keys(self.frame_time_ms):
            if is_quit_key(event):
                logger.debug("Quit key %s", event)
                self.scene.running = False
                break

    def update(self) -> list[int]:
        """Advance the scene using the current terminal size."""
        return self.scene.update(self.terminal.size())

    def draw(self) -> None:
        self.renderer.draw(self.scene)

    def run(self) -> None:
        """Run until a quit key is pressed.

        The terminal is restored on every exit path, including errors.
        Console logging is suspended meanwhile so records never land on the
        animation; a log file keeps receiving them.
        """
        with suspend_console_logging():
            self._run()
        logger.info("Stopped after %d frame(s)", self.frames)

    def _run(self) -> None:
        self.state = AppState.INITIALIZING
        try:
            self.terminal.enter()
        except Exception:
            self.state = AppState.STOPPED
            raise

        self.state = AppState.RUNNING
        try:
            while self.scene.running:
                self.handle_input()
                self.update()
                self.draw()
                self.frames += 1
        except KeyboardInterrupt:
            self.scene.running = False
        finally:
            self.state = AppState.TERMINATING
            self.terminal.leave()
            self.state = AppState.STOPPED
