"""
Configuration & Global Constants
================================
This module serves as the central registry for viewer options and the fixed
numbers the geometry, camera and widgets share.

Why is this file needed?
------------------------
1. Validation: `ViewerSettings` is the single boundary where malformed options
   (e.g. a fiber with one segment) are rejected. The geometry kernel itself
   never re-checks them.
2. Persistence: `QSettings` stores everything as strings in INI format. The
   mapping helpers coerce those values back into typed settings.

Note: This module should be pure Python and should NOT import PySide6.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields, replace
from enum import StrEnum
from math import isfinite
from typing import Any, Mapping


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class ProjectionMode(StrEnum):
    """How points on the 3-sphere are mapped into 3D space."""
    STEREOGRAPHIC = "stereo"
    SOFTMAX = "softmax"


class Hemisphere(StrEnum):
    """Sign of the z-component of a picked basepoint."""
    NORTH = "north"
    SOUTH = "south"


# ------------------------------------------------------------------------------
# Camera
# ------------------------------------------------------------------------------
CAMERA_DEFAULT_YAW: float = 0.5
CAMERA_DEFAULT_PITCH: float = 0.2
CAMERA_DEFAULT_DIST: float = 8.0
CAMERA_DEFAULT_FOV: float = 800.0

DIST_MIN: float = 2.0
DIST_MAX: float = 40.0

ROTATE_SENSITIVITY: float = 0.005  # radians per pixel of drag
ZOOM_STEP: float = 0.1  # relative distance change per wheel notch
DOUBLE_TAP_SECONDS: float = 0.3

# ------------------------------------------------------------------------------
# Widgets & render loop
# ------------------------------------------------------------------------------
FRAME_INTERVAL_MS: int = 16

DISK_WIDGET_SIZE: int = 288
DISK_RADIUS: float = 136.0
DISK_CENTER: tuple[float, float] = (144.0, 144.0)
DISK_LATITUDES: tuple[float, ...] = (0.0, 0.5, -0.5, 0.8, -0.8)

COLOR_BACKGROUND: str = "#0b1220"
COLOR_TETRA: str = "#dbe2ef"
COLOR_DISK_OUTLINE: str = "#334155"
COLOR_DISK_NORTH: str = "#6ea8fe"
COLOR_DISK_SOUTH: str = "#a78bfa"
COLOR_DISK_CROSSHAIR: str = "#203047"
COLOR_DISK_CAPTION: str = "#98a2b3"

# Accepted option ranges (also the spin box limits of the view panel)
MAX_LAT_RINGS: int = 40
MAX_LONGITUDES: int = 64
MAX_SEGMENTS: int = 2000
MAX_LINE_WIDTH: int = 8
ALPHA_RANGE: tuple[float, float] = (0.0, 50.0)


# ------------------------------------------------------------------------------
# Viewer settings
# ------------------------------------------------------------------------------
_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean.")


def _check_range(name: str, value: int, lo: int, hi: int) -> None:
    if not lo <= value <= hi:
        raise ValueError(f"{name} must be within [{lo}, {hi}], got {value}")


def _to_int(value: Any) -> int:
    # "7.0" is what some QSettings backends hand back for an int
    if isinstance(value, str):
        value = value.strip()
        return int(float(value)) if "." in value else int(value)
    return int(value)


@dataclass(frozen=True)
class ViewerSettings:
    """
    User-facing options of the viewer.

    Grid size and segment count are consumed on regeneration; projection,
    alpha, line width and the visibility toggles are read on every frame.
    """
    projection: ProjectionMode = ProjectionMode.STEREOGRAPHIC
    alpha: float = 4.0
    lat_rings: int = 7
    longitudes: int = 12
    segments: int = 200
    line_width: int = 1
    show_tetra: bool = True
    show_grid: bool = True
    show_custom: bool = True
    hemisphere: Hemisphere = Hemisphere.NORTH

    def validate(self) -> ViewerSettings:
        """
        Check the option contract.

        Returns:
            self, so the call can be chained.

        Raises:
            ValueError: If any option is out of its allowed range.
        """
        if not isinstance(self.projection, ProjectionMode):
            raise ValueError(f"projection must be a ProjectionMode, got {self.projection!r}")
        if not isinstance(self.hemisphere, Hemisphere):
            raise ValueError(f"hemisphere must be a Hemisphere, got {self.hemisphere!r}")
        lo, hi = ALPHA_RANGE
        if not isfinite(self.alpha) or not lo <= self.alpha <= hi:
            raise ValueError(f"alpha must be within [{lo}, {hi}], got {self.alpha}")
        _check_range("lat_rings", self.lat_rings, 1, MAX_LAT_RINGS)
        _check_range("longitudes", self.longitudes, 1, MAX_LONGITUDES)
        _check_range("segments", self.segments, 2, MAX_SEGMENTS)
        _check_range("line_width", self.line_width, 1, MAX_LINE_WIDTH)
        return self

    def replace(self, **changes: Any) -> ViewerSettings:
        """Return a validated copy with `changes` applied."""
        return replace(self, **changes).validate()

    def to_mapping(self) -> dict[str, Any]:
        """Flatten to plain values (enums become their string value)."""
        data = asdict(self)
        data["projection"] = str(self.projection)
        data["hemisphere"] = str(self.hemisphere)
        return data

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ViewerSettings:
        """
        Build settings from a (possibly stringly-typed) mapping.

        Unknown keys are ignored and missing keys take their defaults.

        Raises:
            ValueError: If a value cannot be coerced or fails validation.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, raw in mapping.items():
            if key not in known or raw is None:
                continue
            match key:
                case "projection":
                    values[key] = ProjectionMode(str(raw))
                case "hemisphere":
                    values[key] = Hemisphere(str(raw))
                case "alpha":
                    values[key] = float(raw)
                case "lat_rings" | "longitudes" | "segments" | "line_width":
                    values[key] = _to_int(raw)
                case _:
                    values[key] = _to_bool(raw)
        return cls(**values).validate()
