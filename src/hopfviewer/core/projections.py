"""
Projections from the 3-sphere into 3D space.

Two mappings are available:
  (1) Stereographic: (x1, x2, x3, x4) -> (x1, x2, x3) / (1 - x4)
  (2) Softmax (alpha): v in R^4 -> softmax(alpha * v) in the 3-simplex, then
      embedded in R^3 through the barycentric coordinates of a tetrahedron.

Each projection is registered under its `ProjectionMode` so the render loop can
dispatch on the mode read from the current settings.
"""
from __future__ import annotations

from typing import Callable, TYPE_CHECKING

import numpy as np

from hopfviewer.config import ProjectionMode

if TYPE_CHECKING:
    from numpy import typing as npt

ProjectionFn = Callable[["npt.NDArray[np.float64]", float], "npt.NDArray[np.float64]"]

POLE_EPS: float = 1e-6

# Reference tetrahedron for the 3-simplex embedding
TETRA_VERTICES: npt.NDArray[np.float64] = np.array([
    [1.0, 1.0, 1.0],
    [1.0, -1.0, -1.0],
    [-1.0, 1.0, -1.0],
    [-1.0, -1.0, 1.0],
])
TETRA_EDGES: tuple[tuple[int, int], ...] = ((0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3))

_REGISTRY: dict[ProjectionMode, ProjectionFn] = {}


def register_projection(mode: ProjectionMode) -> Callable[[ProjectionFn], ProjectionFn]:
    """Decorator to register a projection function under `mode`."""
    def decorator(fn: ProjectionFn) -> ProjectionFn:
        _REGISTRY[mode] = fn
        return fn
    return decorator


def get_projection(mode: ProjectionMode) -> ProjectionFn:
    fn = _REGISTRY.get(mode)
    if fn is None:
        raise KeyError(f"No projection registered for mode '{mode}'")
    return fn


def list_modes() -> list[ProjectionMode]:
    return list(_REGISTRY.keys())


def project_points(
    points4: npt.NDArray[np.float64],
    mode: ProjectionMode,
    alpha: float = 1.0,
) -> npt.NDArray[np.float64]:
    """Project (N, 4) points with the projection registered for `mode`."""
    return get_projection(mode)(points4, alpha)


# ------------------------------------------------------------------------------
# Stereographic
# ------------------------------------------------------------------------------

def stereographic_project(points4: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """
    Stereographic projection from the pole x4 = 1.

    The divisor 1 - x4 is clamped to +-1e-6 (sign preserved, zero counts as
    positive) so points at the pole map far away instead of to infinity.

    Args:
        points4: (N, 4) array of points on the unit 3-sphere.

    Returns:
        (N, 3) array of points in R^3.
    """
    pts = np.asarray(points4, dtype=np.float64).reshape(-1, 4)
    d = 1.0 - pts[:, 3]
    near_pole = np.abs(d) < POLE_EPS
    d = np.where(near_pole, np.where(d >= 0.0, POLE_EPS, -POLE_EPS), d)
    return pts[:, :3] / d[:, None]


@register_projection(ProjectionMode.STEREOGRAPHIC)
def _stereographic(points4: npt.NDArray[np.float64], alpha: float) -> npt.NDArray[np.float64]:
    # alpha has no meaning here
    return stereographic_project(points4)


# ------------------------------------------------------------------------------
# Softmax / tetrahedron
# ------------------------------------------------------------------------------

def softmax_weights(points4: npt.NDArray[np.float64], alpha: float) -> npt.NDArray[np.float64]:
    """
    Row-wise softmax of alpha * x without max subtraction.

    Large |alpha| overflows to inf and yields NaN weights; those values are
    returned as-is.

    Args:
        points4: (N, 4) array treated as logits.
        alpha: Temperature (inverse) of the softmax.

    Returns:
        (N, 4) barycentric weights, each row summing to 1 when finite.
    """
    pts = np.asarray(points4, dtype=np.float64).reshape(-1, 4)
    with np.errstate(over="ignore", invalid="ignore"):
        exps = np.exp(alpha * pts)
        return exps / exps.sum(axis=1, keepdims=True)


def barycentric_to_r3(weights: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Map (N, 4) barycentric weights onto the reference tetrahedron."""
    with np.errstate(invalid="ignore"):
        return np.asarray(weights, dtype=np.float64).reshape(-1, 4) @ TETRA_VERTICES


@register_projection(ProjectionMode.SOFTMAX)
def softmax_project(points4: npt.NDArray[np.float64], alpha: float) -> npt.NDArray[np.float64]:
    """
    Softmax projection: points -> 3-simplex -> tetrahedron in R^3.

    Args:
        points4: (N, 4) array of points on the unit 3-sphere.
        alpha: Softmax temperature.

    Returns:
        (N, 3) array inside the reference tetrahedron (NaN rows on overflow).
    """
    return barycentric_to_r3(softmax_weights(points4, alpha))
