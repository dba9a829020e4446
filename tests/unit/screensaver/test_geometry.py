"""Unit tests for Vec2."""

from __future__ import annotations

import random

import pytest

from dvdterm.screensaver.geometry import Vec2

pytestmark = [pytest.mark.unit, pytest.mark.screensaver]


class TestVec2:
    """Test Vec2 arithmetic."""

    def test_add_returns_new_vector(self):
        a = Vec2(1, 2)
        b = Vec2(3, -4)
        assert a + b == Vec2(4, -2)
        assert a == Vec2(1, 2)

    def test_iadd_mutates_in_place(self):
        a = Vec2(1, 2)
        ref = a
        a += Vec2(1, 1)
        assert ref is a
        assert ref == Vec2(2, 3)

    def test_copy_is_independent(self):
        a = Vec2(5, 6)
        b = a.copy()
        b.x = 0
        assert a.x == 5


class TestVec2Random:
    """Test random construction helpers."""

    def test_rand_stays_within_offset_bounds(self):
        rng = random.Random(7)
        for _ in range(500):
            v = Vec2.rand(80, 24, 40, 6, rng=rng)
            assert 0 <= v.x < 40
            assert 0 <= v.y < 18

    def test_rand_empty_range_yields_zero(self):
        """A logo wider than the canvas spawns at the origin instead of failing."""
        v = Vec2.rand(10, 5, 20, 5, rng=random.Random(1))
        assert v == Vec2(0, 0)

    def test_rand_dir_components_are_unit(self):
        rng = random.Random(3)
        seen = set()
        for _ in range(200):
            d = Vec2.rand_dir(rng=rng)
            assert d.x in (-1, 1)
            assert d.y in (-1, 1)
            seen.add((d.x, d.y))
        assert seen == {(1, 1), (1, -1), (-1, 1), (-1, -1)}
