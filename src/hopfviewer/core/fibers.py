"""
Fiber Collections
=================
Builds Hopf fibers from basepoints and keeps them in the two collections the
viewer draws.

Classes:
    Fiber: One discretized fiber with its display colour.
    CustomFiberStore: User-added fibers in insertion order.

Functions:
    generate_grid: Regular latitude/longitude grid of fibers.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, pi, sin, sqrt
import logging
from typing import Iterator, TYPE_CHECKING

import numpy as np

from hopfviewer.core.colors import RGB, hue_color
from hopfviewer.core.hopf import Basepoint, fiber_from_basepoint

if TYPE_CHECKING:
    from numpy import typing as npt

logger = logging.getLogger(__name__)

LATITUDE_BAND: float = 0.85  # grid latitudes span [-0.85, 0.85] in z
GRID_HUE_SPAN: float = 0.66  # blue (south) .. red (north)


@dataclass(frozen=True, eq=False)
class Fiber:
    """
    Points of a fiber on the 3-sphere.

    `points` has shape (segments, 4). Fibers are never mutated; a new grid
    replaces the old list wholesale.
    """
    points: npt.NDArray[np.float64]
    color: RGB
    basepoint: Basepoint

    @property
    def segments(self) -> int:
        return int(self.points.shape[0])


# ------------------------------------------------------------------------------
# Grid
# ------------------------------------------------------------------------------

def latitude_values(lat_rings: int) -> list[float]:
    """Evenly spaced z-values of the grid rings, strictly inside the poles."""
    return [-LATITUDE_BAND + 2.0 * LATITUDE_BAND * i / max(1, lat_rings - 1) for i in range(lat_rings)]


def longitude_values(longs: int) -> list[float]:
    """Evenly spaced azimuths in [0, 2*pi)."""
    return [2.0 * pi * j / longs for j in range(longs)]


def generate_grid(lat_rings: int, longs: int, segments: int) -> list[Fiber]:
    """
    Sample basepoints on a latitude/longitude grid and build their fibers.

    Args:
        lat_rings: Number of latitude rings (>= 1).
        longs: Number of longitudes per ring (>= 1).
        segments: Samples per fiber (>= 2).

    Returns:
        lat_rings * longs fibers, ordered ring by ring (south to north) and
        by longitude within each ring. Colours encode the ring index.
    """
    fibers: list[Fiber] = []
    deltas = longitude_values(longs)

    for ring, nz in enumerate(latitude_values(lat_rings)):
        r = sqrt(max(0.0, 1.0 - nz * nz))
        color = hue_color(ring / max(1, lat_rings - 1) * GRID_HUE_SPAN)
        for delta in deltas:
            basepoint = (r * cos(delta), r * sin(delta), nz)
            fibers.append(Fiber(
                points=fiber_from_basepoint(basepoint, segments),
                color=color,
                basepoint=basepoint,
            ))

    logger.info(f"Generated {len(fibers)} grid fibers ({lat_rings} rings x {longs} longitudes, {segments} segments).")
    return fibers


# ------------------------------------------------------------------------------
# Custom fibers
# ------------------------------------------------------------------------------

def longitude_hue(basepoint: Basepoint) -> float:
    """Azimuth of a basepoint mapped to a hue in [0, 1)."""
    nx, ny, _ = basepoint
    return (atan2(ny, nx) / (2.0 * pi) + 1.0) % 1.0


class CustomFiberStore:
    """Ordered, append-only collection with pop-last and clear."""

    def __init__(self) -> None:
        self._fibers: list[Fiber] = []

    def __len__(self) -> int:
        return len(self._fibers)

    def __iter__(self) -> Iterator[Fiber]:
        return iter(self._fibers)

    def __getitem__(self, index: int) -> Fiber:
        return self._fibers[index]

    def add(self, basepoint: Basepoint, segments: int) -> Fiber:
        fiber = Fiber(
            points=fiber_from_basepoint(basepoint, segments),
            color=hue_color(longitude_hue(basepoint)),
            basepoint=basepoint,
        )
        self._fibers.append(fiber)
        logger.debug(f"Custom fiber added at basepoint ({basepoint[0]:.3f}, {basepoint[1]:.3f}, {basepoint[2]:.3f}).")
        return fiber

    def remove_last(self) -> Fiber | None:
        if not self._fibers:
            return None
        return self._fibers.pop()

    def clear(self) -> None:
        self._fibers = []

    def basepoints(self) -> list[Basepoint]:
        return [f.basepoint for f in self._fibers]
