from __future__ import annotations

from math import acos, atan2, sqrt
from typing import TYPE_CHECKING

import numpy as np

from hopfviewer.config import Hemisphere

if TYPE_CHECKING:
    from numpy import typing as npt

Basepoint = tuple[float, float, float]


def hopf_angles(basepoint: Basepoint) -> tuple[float, float]:
    """
    Hopf coordinates (eta, delta) of a point on the 2-sphere.

    Args:
        basepoint: Unit vector (nx, ny, nz).

    Returns:
        eta in [0, pi/2] and delta in [-pi, pi].
    """
    nx, ny, nz = basepoint
    eta = 0.5 * acos(max(-1.0, min(1.0, nz)))
    delta = atan2(ny, nx)
    return eta, delta


def fiber_from_basepoint(basepoint: Basepoint, segment_count: int) -> npt.NDArray[np.float64]:
    """
    Discretize the Hopf fiber over a basepoint into points on the 3-sphere.

    The parameter runs over [0, 2*pi] inclusive, so the last sample repeats the
    first one and the drawn polyline closes on itself.

    Args:
        basepoint: Unit vector (nx, ny, nz) on the 2-sphere.
        segment_count: Number of samples, at least 2.

    Returns:
        An array of shape (segment_count, 4) with rows (x1, x2, x3, x4).

    Raises:
        ZeroDivisionError: If segment_count is 1.
    """
    eta, delta = hopf_angles(basepoint)
    xi1, xi2 = delta, 0.0

    step = 2.0 * np.pi / (segment_count - 1)
    t = np.arange(segment_count, dtype=np.float64) * step

    c, s = np.cos(eta), np.sin(eta)
    return np.column_stack((
        c * np.cos(xi1 + t),
        c * np.sin(xi1 + t),
        s * np.cos(xi2 + t),
        s * np.sin(xi2 + t),
    ))


def basepoint_from_disk(
    x: float,
    y: float,
    center: tuple[float, float],
    radius: float,
    hemisphere: Hemisphere = Hemisphere.NORTH,
) -> Basepoint | None:
    """
    Lift a point of the basepoint disk back onto the 2-sphere.

    This inverts an orthographic view of the unit sphere drawn as a disk of
    `radius` pixels around `center`. Screen y grows downward.

    Args:
        x, y: Pointer position in the disk widget's coordinates.
        center: (cx, cy) of the disk in the same coordinates.
        radius: Disk radius in the same units.
        hemisphere: Which half of the sphere the disk shows.

    Returns:
        (dx, dy, nz) on the unit sphere, or None if the point lies outside the disk.
    """
    cx, cy = center
    dx = (x - cx) / radius
    dy = (cy - y) / radius
    r2 = dx * dx + dy * dy
    if r2 > 1.0:
        return None

    nz = sqrt(max(0.0, 1.0 - r2))
    if hemisphere == Hemisphere.SOUTH:
        nz = -nz
    return dx, dy, nz


def disk_from_basepoint(
    basepoint: Basepoint,
    center: tuple[float, float],
    radius: float,
) -> tuple[float, float]:
    """Orthographic position of a basepoint on the disk (z is dropped)."""
    cx, cy = center
    nx, ny, _ = basepoint
    return cx + nx * radius, cy - ny * radius
