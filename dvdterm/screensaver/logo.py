"""Logos and the sprite set built from the configured inputs."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from dvdterm.models import DEFAULT_COLOR
from dvdterm.screensaver.colors import random_color
from dvdterm.screensaver.figlet import fig_size, figlet
from dvdterm.screensaver.geometry import Vec2
from dvdterm.screensaver.scene import RenderMode, render_mode
from dvdterm.utils.exceptions import ArtFileNotFoundError
from dvdterm.utils.logging_config import get_logger

if TYPE_CHECKING:
    from pyfiglet import FigletFont

logger = get_logger(__name__)


@dataclass
class Logo:
    """One bouncing sprite.

    ``art`` and ``size`` are fixed at creation. ``position`` and ``velocity``
    change every frame, ``color`` only when a bounce triggers a re-roll.
    """

    text: str
    art: str
    size: Vec2
    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=lambda: Vec2(1, 1))
    color: int = DEFAULT_COLOR

    @property
    def lines(self) -> list[str]:
        return self.art.splitlines()

    def effective_size(self, plain: bool) -> Vec2:
        """Size used for bounce math in the given mode."""
        if plain:
            return Vec2(len(self.text), 1)
        return self.size


def load_art(art_path: str | Path) -> str:
    """Read a custom ASCII art file.

    Raises:
        ArtFileNotFoundError: If the path does not exist

    """
    path = Path(art_path)
    if not path.exists():
        raise ArtFileNotFoundError(str(art_path))
    return path.read_text(encoding="utf-8")


def art_plain_text(art: str) -> str:
    """Single-line stand-in for an art file in plain mode."""
    for line in art.splitlines():
        if line.strip():
            return line.rstrip()
    return ""


def build_logos(
    texts: list[str],
    font: FigletFont,
    canvas_size: Vec2,
    *,
    art: str | None = None,
    color: int = DEFAULT_COLOR,
    randomize: bool = False,
    plain: bool = False,
    rng: random.Random | None = None,
) -> list[Logo]:
    """Create one logo per text plus one for the optional art content.

    Args:
        texts: Texts to render with the font
        font: Figlet font used for every text
        canvas_size: Terminal size used for spawn placement
        art: Content of a custom art file, displayed as-is
        color: Color for every logo when not randomizing
        randomize: Give each logo its own random color
        plain: Whether plain mode is forced
        rng: Random source

    Returns:
        Logos in input order, the art logo last

    """
    rng = rng or random.Random()
    logos: list[Logo] = []

    for text in texts:
        block = figlet(text, font)
        logos.append(Logo(text=text, art=block, size=fig_size(block)))

    if art is not None:
        logos.append(Logo(text=art_plain_text(art), art=art, size=fig_size(art)))

    spawn_plain = (
        render_mode([logo.size for logo in logos], canvas_size, plain) is RenderMode.PLAIN
    )
    for logo in logos:
        logo.color = random_color(rng) if randomize else color
        size = logo.effective_size(spawn_plain)
        logo.position = Vec2.rand(canvas_size.x, canvas_size.y, size.x, size.y, rng=rng)
        logo.velocity = Vec2.rand_dir(rng=rng)
        logger.debug(
            "Spawned logo %r size=%s position=%s velocity=%s color=%d",
            logo.text,
            logo.size,
            logo.position,
            logo.velocity,
            logo.color,
        )

    return logos
