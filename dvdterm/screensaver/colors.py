"""256-color palette helpers for logo colors."""

from __future__ import annotations

import random

# renders as black on most terminal themes, never picked at random
BACKGROUND_COLOR = 16
# random colors are drawn from 1..=231 (the 6x6x6 cube, no grayscale ramp)
MIN_RANDOM_COLOR = 1
MAX_RANDOM_COLOR = 231
MAX_COLOR_ATTEMPTS = 64


def random_color(rng: random.Random) -> int:
    """Draw a color that is not the background color."""
    for _ in range(MAX_COLOR_ATTEMPTS):
        color = rng.randint(MIN_RANDOM_COLOR, MAX_RANDOM_COLOR)
        if color != BACKGROUND_COLOR:
            return color
    return BACKGROUND_COLOR + 1


def reroll_color(previous: int, rng: random.Random) -> int:
    """Draw a color different from ``previous`` and from the background."""
    for _ in range(MAX_COLOR_ATTEMPTS):
        color = rng.randint(MIN_RANDOM_COLOR, MAX_RANDOM_COLOR)
        if color != previous and color != BACKGROUND_COLOR:
            return color

    # Step through the palette until both constraints hold
    color = previous
    while color == previous or color == BACKGROUND_COLOR:
        color = color % MAX_RANDOM_COLOR + MIN_RANDOM_COLOR
    return color
