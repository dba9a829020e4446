"""Scene state and the per-frame simulation step.

Every frame the scene receives a fresh canvas size, picks the render mode
for that size, reflects logos that would leave the canvas and moves every
logo one cell along its velocity.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from dvdterm.screensaver.colors import reroll_color
from dvdterm.screensaver.geometry import Vec2
from dvdterm.utils.logging_config import get_logger

if TYPE_CHECKING:
    from dvdterm.screensaver.logo import Logo

logger = get_logger(__name__)


class RenderMode(str, Enum):
    """How logos are drawn for a frame."""

    ART = "art"
    PLAIN = "plain"


def render_mode(
    logo_sizes: list[Vec2],
    canvas_size: Vec2,
    force_plain: bool = False,
) -> RenderMode:
    """Pick the render mode for the current canvas.

    Plain mode is used when forced, or when the largest logo takes at least
    half of the margin left around it on either axis.
    """
    if force_plain:
        return RenderMode.PLAIN
    if not logo_sizes:
        return RenderMode.ART

    largest = max(logo_sizes, key=lambda s: (s.x, s.y))
    if largest.x >= canvas_size.x - largest.x // 2:
        return RenderMode.PLAIN
    if largest.y >= canvas_size.y - largest.y // 2:
        return RenderMode.PLAIN
    return RenderMode.ART


def bounce_axis(
    position: int,
    velocity: int,
    extent: int,
    bound: int,
    far_margin: int,
) -> tuple[int, int, bool]:
    """Reflect one axis against ``[0, bound)``.

    Returns:
        (position, velocity, bounced) after clamping, before advancing

    """
    if position + velocity < 0:
        return 0, -velocity, True
    if position + velocity + extent >= bound:
        return bound - extent - far_margin, -velocity, True
    return position, velocity, False


@dataclass
class Scene:
    """Logos sharing one canvas snapshot and one running flag."""

    logos: list[Logo]
    canvas_size: Vec2 = field(default_factory=lambda: Vec2(80, 24))
    force_plain: bool = False
    randomize: bool = False
    running: bool = True
    rng: random.Random = field(default_factory=random.Random)
    _last_mode: RenderMode | None = field(default=None, repr=False)

    def mode(self) -> RenderMode:
        """Render mode for the current canvas size."""
        return render_mode(
            [logo.size for logo in self.logos],
            self.canvas_size,
            self.force_plain,
        )

    def update(self, canvas_size: Vec2) -> list[int]:
        """Advance the simulation by one frame.

        Args:
            canvas_size: Terminal size sampled for this frame

        Returns:
            Indices of the logos that bounced

        """
        self.canvas_size = canvas_size
        mode = self.mode()
        if mode is not self._last_mode:
            logger.debug("Mode changed: %s (canvas %s)", mode.value, canvas_size)
            self._last_mode = mode
        plain = mode is RenderMode.PLAIN

        bounced: list[int] = []
        for i, logo in enumerate(self.logos):
            size = logo.effective_size(plain)
            pos, vel = logo.position, logo.velocity

            pos.x, vel.x, hit_x = bounce_axis(pos.x, vel.x, size.x, canvas_size.x, 1)
            # The far vertical edge clamps one cell lower than the horizontal one
            pos.y, vel.y, hit_y = bounce_axis(pos.y, vel.y, size.y, canvas_size.y, 0)

            pos += vel

            if hit_x or hit_y:
                bounced.append(i)
                logger.debug("Bounce: logo %d at %s velocity %s", i, pos, vel)
                if self.randomize:
                    logo.color = reroll_color(logo.color, self.rng)

        return bounced
