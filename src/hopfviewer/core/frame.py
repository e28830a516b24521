"""
Frame Builder
=============
The body of the render loop: turns the stored 4-space fibers into screen-space
polylines for the current settings and camera.

Why is this file needed?
------------------------
Projection mode and alpha can change between any two frames, so nothing is
cached. Keeping this step free of Qt lets the same code drive the canvas and
the tests.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, TYPE_CHECKING

import numpy as np

from hopfviewer import config
from hopfviewer.config import ProjectionMode, ViewerSettings
from hopfviewer.core.camera import Camera
from hopfviewer.core.colors import RGB
from hopfviewer.core.fibers import Fiber
from hopfviewer.core.projections import TETRA_EDGES, TETRA_VERTICES, project_points

if TYPE_CHECKING:
    from numpy import typing as npt

TETRA_OPACITY: float = 0.25


def _hex_to_rgb(color: str) -> RGB:
    color = color.lstrip("#")
    return tuple(int(color[i:i + 2], 16) / 255.0 for i in (0, 2, 4))  # type: ignore[return-value]


@dataclass
class Polyline:
    """A stroke on the 2D surface: screen points plus pen attributes."""
    points: npt.NDArray[np.float64]  # (N, 2)
    color: RGB
    width: float = 1.0
    opacity: float = 1.0

    def drawable_points(self) -> npt.NDArray[np.float64]:
        """
        Points a 2D canvas would actually connect.

        Non-finite samples (softmax overflow) are skipped and the stroke
        continues from the previous finite point to the next one.
        """
        finite = np.isfinite(self.points).all(axis=1)
        return self.points[finite]


def fiber_polyline(
    fiber: Fiber,
    settings: ViewerSettings,
    camera: Camera,
    width: float,
    height: float,
) -> Polyline:
    pts3 = project_points(fiber.points, settings.projection, settings.alpha)
    screen = camera.project(pts3, width, height)[:, :2]
    return Polyline(points=screen, color=fiber.color, width=settings.line_width)


def tetra_polylines(camera: Camera, width: float, height: float) -> list[Polyline]:
    """The six edges of the reference tetrahedron, faint and thin."""
    screen = camera.project(TETRA_VERTICES, width, height)[:, :2]
    color = _hex_to_rgb(config.COLOR_TETRA)
    return [
        Polyline(points=screen[[a, b]], color=color, width=1.0, opacity=TETRA_OPACITY)
        for a, b in TETRA_EDGES
    ]


def build_frame(
    settings: ViewerSettings,
    camera: Camera,
    grid: Iterable[Fiber],
    custom: Iterable[Fiber],
    width: float,
    height: float,
) -> list[Polyline]:
    """
    Produce every stroke of one frame, in drawing order.

    Order: tetrahedron (softmax mode with `show_tetra`), grid fibers (if
    `show_grid`), custom fibers (if `show_custom`).
    """
    strokes: list[Polyline] = []

    if settings.projection == ProjectionMode.SOFTMAX and settings.show_tetra:
        strokes.extend(tetra_polylines(camera, width, height))

    if settings.show_grid:
        strokes.extend(fiber_polyline(f, settings, camera, width, height) for f in grid)

    if settings.show_custom:
        strokes.extend(fiber_polyline(f, settings, camera, width, height) for f in custom)

    return strokes
