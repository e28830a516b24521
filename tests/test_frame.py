from __future__ import annotations

import numpy as np
import pytest

from hopfviewer.config import ProjectionMode, ViewerSettings
from hopfviewer.core.camera import Camera
from hopfviewer.core.fibers import CustomFiberStore, generate_grid
from hopfviewer.core.frame import TETRA_OPACITY, Polyline, build_frame

W, H = 640, 480


@pytest.fixture
def grid():
    return generate_grid(2, 3, 10)


@pytest.fixture
def custom():
    store = CustomFiberStore()
    store.add((0.0, 1.0, 0.0), 10)
    return store


def test_stereo_frame_has_no_tetrahedron(grid, custom):
    strokes = build_frame(ViewerSettings(), Camera(), grid, custom, W, H)
    assert len(strokes) == len(grid) + len(custom)
    assert all(s.opacity == 1.0 for s in strokes)


def test_softmax_frame_starts_with_tetra_edges(grid, custom):
    settings = ViewerSettings(projection=ProjectionMode.SOFTMAX)
    strokes = build_frame(settings, Camera(), grid, custom, W, H)
    assert len(strokes) == 6 + len(grid) + len(custom)
    for edge in strokes[:6]:
        assert edge.opacity == TETRA_OPACITY
        assert edge.width == 1.0
        assert edge.points.shape == (2, 2)
    assert all(s.opacity == 1.0 for s in strokes[6:])


def test_show_tetra_toggle(grid):
    settings = ViewerSettings(projection=ProjectionMode.SOFTMAX, show_tetra=False)
    strokes = build_frame(settings, Camera(), grid, [], W, H)
    assert len(strokes) == len(grid)


def test_visibility_toggles_and_order(grid, custom):
    cam = Camera()
    only_custom = build_frame(ViewerSettings(show_grid=False), cam, grid, custom, W, H)
    assert [s.color for s in only_custom] == [f.color for f in custom]

    only_grid = build_frame(ViewerSettings(show_custom=False), cam, grid, custom, W, H)
    assert len(only_grid) == len(grid)

    both = build_frame(ViewerSettings(), cam, grid, custom, W, H)
    assert both[-1].color == custom[0].color
    assert [s.color for s in both[:len(grid)]] == [f.color for f in grid]

    assert build_frame(ViewerSettings(show_grid=False, show_custom=False), cam, grid, custom, W, H) == []


def test_line_width_is_read_per_frame(grid):
    strokes = build_frame(ViewerSettings(line_width=3), Camera(), grid, [], W, H)
    assert {s.width for s in strokes} == {3}


def test_projection_is_read_per_frame(grid):
    cam = Camera()
    stereo = build_frame(ViewerSettings(), cam, grid, [], W, H)
    softmax = build_frame(ViewerSettings(projection=ProjectionMode.SOFTMAX, show_tetra=False), cam, grid, [], W, H)
    assert not np.allclose(stereo[0].points, softmax[0].points)


def test_fiber_polyline_matches_segments(grid):
    strokes = build_frame(ViewerSettings(), Camera(), grid, [], W, H)
    assert all(s.points.shape == (10, 2) for s in strokes)


def test_drawable_points_skip_non_finite_samples():
    pts = np.array([[0.0, 0.0], [np.nan, 1.0], [2.0, np.inf], [3.0, 3.0]])
    line = Polyline(points=pts, color=(1.0, 1.0, 1.0))
    np.testing.assert_array_equal(line.drawable_points(), [[0.0, 0.0], [3.0, 3.0]])


def test_softmax_overflow_frame_has_no_drawable_points(grid):
    settings = ViewerSettings(projection=ProjectionMode.SOFTMAX, alpha=1000.0, show_tetra=False)
    strokes = build_frame(settings, Camera(), grid, [], W, H)
    assert len(strokes) == len(grid)
    assert any(len(s.drawable_points()) < len(s.points) for s in strokes)
