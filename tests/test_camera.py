from __future__ import annotations

import numpy as np
import pytest

from hopfviewer import config
from hopfviewer.core.camera import Camera, rot_x, rot_y

W, H = 800, 600


def test_defaults_and_exact_reset():
    cam = Camera()
    assert (cam.yaw, cam.pitch, cam.dist, cam.fov) == (0.5, 0.2, 8.0, 800.0)
    cam.rotate(123, -45)
    cam.zoom_wheel(1)
    cam.fov = 10.0
    cam.reset()
    assert (cam.yaw, cam.pitch, cam.dist, cam.fov) == (0.5, 0.2, 8.0, 800.0)


def test_rotate_uses_pixel_sensitivity():
    cam = Camera(yaw=0.0, pitch=0.0)
    cam.rotate(100, -20)
    assert cam.yaw == pytest.approx(100 * config.ROTATE_SENSITIVITY)
    assert cam.pitch == pytest.approx(-20 * config.ROTATE_SENSITIVITY)


def test_wheel_zoom_steps_and_clamps():
    cam = Camera()
    cam.zoom_wheel(120)
    assert cam.dist == pytest.approx(8.8)
    cam.zoom_wheel(-3)
    assert cam.dist == pytest.approx(8.8 * 0.9)
    for _ in range(100):
        cam.zoom_wheel(-1)
    assert cam.dist == config.DIST_MIN
    for _ in range(100):
        cam.zoom_wheel(1)
    assert cam.dist == config.DIST_MAX


def test_wheel_zero_delta_is_noop():
    cam = Camera()
    cam.zoom_wheel(0)
    assert cam.dist == 8.0


def test_pinch_divides_and_clamps():
    cam = Camera()
    cam.zoom_pinch(2.0)
    assert cam.dist == pytest.approx(4.0)
    cam.zoom_pinch(None)
    assert cam.dist == pytest.approx(4.0)
    cam.zoom_pinch(0.0)
    assert cam.dist == pytest.approx(4.0)
    cam.zoom_pinch(100.0)
    assert cam.dist == config.DIST_MIN
    cam.zoom_pinch(0.001)
    assert cam.dist == config.DIST_MAX


def test_origin_projects_to_viewport_center():
    cam = Camera()
    sx, sy, z = cam.project_point((0.0, 0.0, 0.0), W, H)
    assert (sx, sy) == pytest.approx((W / 2, H / 2))
    assert z == pytest.approx(cam.dist)


def test_screen_y_is_flipped():
    cam = Camera(yaw=0.0, pitch=0.0, dist=10.0, fov=100.0)
    sx, sy, _ = cam.project_point((1.0, 2.0, 0.0), W, H)
    assert sx == pytest.approx(W / 2 + 10.0)
    assert sy == pytest.approx(H / 2 - 20.0)


def test_points_behind_camera_still_divide():
    cam = Camera(yaw=0.0, pitch=0.0, dist=2.0, fov=100.0)
    # view depth -3 + 2 = -1: mirrored, not culled or clamped
    sx, sy, z = cam.project_point((1.0, 1.0, -3.0), W, H)
    assert z == pytest.approx(-1.0)
    assert sx == pytest.approx(W / 2 - 100.0)
    assert sy == pytest.approx(H / 2 + 100.0)


def test_zero_depth_uses_epsilon():
    cam = Camera(yaw=0.0, pitch=0.0, dist=2.0, fov=1.0)
    sx, _, _ = cam.project_point((1e-6, 0.0, -2.0), W, H)
    assert np.isfinite(sx)
    assert sx == pytest.approx(W / 2 + 1.0)


def test_project_is_vectorized_like_project_point():
    cam = Camera()
    pts = np.array([[0.1, 0.2, 0.3], [-1.0, 0.5, 2.0], [3.0, -2.0, -1.0]])
    out = cam.project(pts, W, H)
    assert out.shape == (3, 3)
    for row, p in zip(out, pts):
        assert tuple(row) == pytest.approx(cam.project_point(tuple(p), W, H))


def test_rotations_match_formulas():
    p = np.array([[1.0, 2.0, 3.0]])
    a = 0.3
    ca, sa = np.cos(a), np.sin(a)
    np.testing.assert_allclose(rot_y(p, a), [[ca + 3 * sa, 2.0, -sa + 3 * ca]])
    np.testing.assert_allclose(rot_x(p, a), [[1.0, 2 * ca - 3 * sa, 2 * sa + 3 * ca]])
