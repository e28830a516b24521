from __future__ import annotations

import numpy as np
import pytest

from hopfviewer.core.colors import hue_color, to_rgb255
from hopfviewer.core.fibers import (
    CustomFiberStore, generate_grid, latitude_values, longitude_hue, longitude_values,
)


def test_grid_shape_and_latitudes():
    grid = generate_grid(3, 4, 8)
    assert len(grid) == 12
    assert all(f.points.shape == (8, 4) for f in grid)
    assert all(f.segments == 8 for f in grid)
    assert latitude_values(3) == pytest.approx([-0.85, 0.0, 0.85])
    assert [f.basepoint[2] for f in grid] == pytest.approx([-0.85] * 4 + [0.0] * 4 + [0.85] * 4)


def test_grid_order_is_ring_then_longitude():
    grid = generate_grid(2, 3, 4)
    deltas = longitude_values(3)
    for k, fiber in enumerate(grid):
        nx, ny, _ = fiber.basepoint
        assert np.arctan2(ny, nx) % (2 * np.pi) == pytest.approx(deltas[k % 3])


def test_grid_basepoints_are_unit():
    for fiber in generate_grid(5, 6, 4):
        assert np.linalg.norm(fiber.basepoint) == pytest.approx(1.0)


def test_grid_colors_encode_ring():
    grid = generate_grid(3, 2, 4)
    assert grid[0].color == pytest.approx(hue_color(0.0))
    assert grid[2].color == pytest.approx(hue_color(0.33))
    assert grid[4].color == pytest.approx(hue_color(0.66))
    assert grid[0].color == grid[1].color


def test_single_ring_sits_at_lower_band():
    grid = generate_grid(1, 1, 4)
    assert len(grid) == 1
    assert grid[0].basepoint[2] == pytest.approx(-0.85)
    assert grid[0].color == pytest.approx(hue_color(0.0))


def test_hue_color_primaries():
    r, g, b = hue_color(0.0)
    assert r > g and r > b
    assert hue_color(1.0 / 3.0)[1] == pytest.approx(max(hue_color(1.0 / 3.0)))
    assert hue_color(0.0) == pytest.approx(hue_color(1.0))
    assert to_rgb255((1.0, 0.5, 0.0)) == (255, 127, 0)


def test_longitude_hue_wraps_into_unit_interval():
    assert longitude_hue((1.0, 0.0, 0.0)) == pytest.approx(0.0)
    assert longitude_hue((0.0, 1.0, 0.0)) == pytest.approx(0.25)
    assert longitude_hue((0.0, -1.0, 0.0)) == pytest.approx(0.75)


def test_custom_store_add_remove_clear():
    store = CustomFiberStore()
    assert store.remove_last() is None
    assert len(store) == 0

    a = store.add((1.0, 0.0, 0.0), 16)
    b = store.add((0.0, 0.0, -1.0), 32)
    assert len(store) == 2
    assert list(store) == [a, b]
    assert store[1] is b
    assert b.segments == 32
    assert a.color == pytest.approx(hue_color(0.0))
    assert store.basepoints() == [(1.0, 0.0, 0.0), (0.0, 0.0, -1.0)]

    assert store.remove_last() is b
    assert list(store) == [a]

    store.clear()
    assert len(store) == 0
    assert store.remove_last() is None
