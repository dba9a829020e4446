"""Integer 2D vectors for positions, directions and sizes."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass
class Vec2:
    """Integer pair used for position, velocity and size."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Vec2) -> Vec2:
        self.x += other.x
        self.y += other.y
        return self

    def copy(self) -> Vec2:
        return Vec2(self.x, self.y)

    @classmethod
    def rand(
        cls,
        width: int,
        height: int,
        xoff: int = 0,
        yoff: int = 0,
        rng: random.Random | None = None,
    ) -> Vec2:
        """Random point in ``[0, width - xoff) x [0, height - yoff)``.

        An empty range on an axis (the offset fills the whole bound) yields 0
        on that axis.
        """
        rng = rng or random.Random()
        return cls(
            _rand_below(rng, width - xoff),
            _rand_below(rng, height - yoff),
        )

    @classmethod
    def rand_dir(cls, rng: random.Random | None = None) -> Vec2:
        """Random direction, each axis independently +1 or -1."""
        rng = rng or random.Random()
        x = 1 if rng.random() < 0.5 else -1
        y = 1 if rng.random() < 0.5 else -1
        return cls(x, y)


def _rand_below(rng: random.Random, bound: int) -> int:
    if bound <= 0:
        return 0
    return rng.randrange(bound)
