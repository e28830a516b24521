"""
Perspective Camera
==================
A tiny 3D pipeline: orbit rotation (yaw, then pitch), translation along the
view axis and a perspective divide onto a viewport of known pixel size.

The camera also implements the pan/zoom/reset capability that the input
adapters drive (see `hopfviewer.app.interaction`).
"""
from __future__ import annotations

from dataclasses import dataclass
from math import copysign
from typing import TYPE_CHECKING

import numpy as np

from hopfviewer import config

if TYPE_CHECKING:
    from numpy import typing as npt

DEPTH_EPS: float = 1e-6


def rot_y(points3: npt.NDArray[np.float64], angle: float) -> npt.NDArray[np.float64]:
    """Rotate (N, 3) points about the vertical axis."""
    ca, sa = np.cos(angle), np.sin(angle)
    x, y, z = points3[:, 0], points3[:, 1], points3[:, 2]
    return np.column_stack((ca * x + sa * z, y, -sa * x + ca * z))


def rot_x(points3: npt.NDArray[np.float64], angle: float) -> npt.NDArray[np.float64]:
    """Rotate (N, 3) points about the horizontal axis."""
    ca, sa = np.cos(angle), np.sin(angle)
    x, y, z = points3[:, 0], points3[:, 1], points3[:, 2]
    return np.column_stack((x, ca * y - sa * z, sa * y + ca * z))


def _clamp_dist(dist: float) -> float:
    return max(config.DIST_MIN, min(config.DIST_MAX, dist))


@dataclass
class Camera:
    yaw: float = config.CAMERA_DEFAULT_YAW
    pitch: float = config.CAMERA_DEFAULT_PITCH
    dist: float = config.CAMERA_DEFAULT_DIST
    fov: float = config.CAMERA_DEFAULT_FOV

    # ---- projection ----

    def project(
        self,
        points3: npt.NDArray[np.float64],
        viewport_width: float,
        viewport_height: float,
    ) -> npt.NDArray[np.float64]:
        """
        Project 3D points to screen coordinates.

        Points behind the camera are not culled: they still go through the
        perspective divide and land mirrored on screen. Only a depth of exactly
        (or nearly) zero is replaced by 1e-6.

        Args:
            points3: (N, 3) array of points in world space.
            viewport_width: Width of the target surface in pixels.
            viewport_height: Height of the target surface in pixels.

        Returns:
            (N, 3) array of (screen_x, screen_y, view_depth).
        """
        p = np.asarray(points3, dtype=np.float64).reshape(-1, 3)
        p = rot_y(p, self.yaw)
        p = rot_x(p, self.pitch)
        z = p[:, 2] + self.dist

        with np.errstate(invalid="ignore"):
            z_safe = np.where(np.abs(z) < DEPTH_EPS, DEPTH_EPS, z)
            scale = self.fov / z_safe
            sx = viewport_width / 2.0 + p[:, 0] * scale
            sy = viewport_height / 2.0 - p[:, 1] * scale
        return np.column_stack((sx, sy, z))

    def project_point(
        self,
        point3: tuple[float, float, float],
        viewport_width: float,
        viewport_height: float,
    ) -> tuple[float, float, float]:
        sx, sy, z = self.project(np.asarray([point3], dtype=np.float64), viewport_width, viewport_height)[0]
        return float(sx), float(sy), float(z)

    # ---- pan / zoom / reset ----

    def rotate(self, dx_px: float, dy_px: float) -> None:
        """Orbit by a pointer drag delta in pixels."""
        self.yaw += dx_px * config.ROTATE_SENSITIVITY
        self.pitch += dy_px * config.ROTATE_SENSITIVITY

    def zoom_wheel(self, delta_y: float) -> None:
        """One wheel notch: positive delta moves away, negative moves closer."""
        if delta_y == 0:
            return
        self.dist *= 1.0 + copysign(1.0, delta_y) * config.ZOOM_STEP
        self.dist = _clamp_dist(self.dist)

    def zoom_pinch(self, scale: float | None) -> None:
        """Pinch gesture: spreading fingers (scale > 1) moves closer."""
        self.dist /= (scale or 1.0)
        self.dist = _clamp_dist(self.dist)

    def reset(self) -> None:
        self.yaw = config.CAMERA_DEFAULT_YAW
        self.pitch = config.CAMERA_DEFAULT_PITCH
        self.dist = config.CAMERA_DEFAULT_DIST
        self.fov = config.CAMERA_DEFAULT_FOV
