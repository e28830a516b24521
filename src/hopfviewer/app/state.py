from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QObject, Signal

from hopfviewer.config import ViewerSettings
from hopfviewer.core.camera import Camera
from hopfviewer.core.fibers import CustomFiberStore, Fiber, generate_grid
from hopfviewer.core.hopf import basepoint_from_disk

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central application state with signals for panel/widget sync.

    Every widget receives the same Store instance; there is no module-level
    state. All mutations happen on the Qt main thread, so the paint callback
    always sees a complete camera and complete fiber collections.
    """
    settings_changed = Signal(object)
    grid_changed = Signal(int)
    custom_changed = Signal(int)
    camera_reset = Signal()

    def __init__(self, settings: ViewerSettings | None = None) -> None:
        super().__init__()
        self.settings = (settings or ViewerSettings()).validate()
        self.camera = Camera()
        self.grid: list[Fiber] = []
        self.custom = CustomFiberStore()

    # ---- settings ----

    def update_settings(self, **changes: Any) -> None:
        """
        Apply option changes.

        Raises:
            ValueError: If the new settings are invalid. The old ones stay in place.
        """
        new = self.settings.replace(**changes)
        if new == self.settings:
            return
        self.settings = new
        self.settings_changed.emit(self.settings)

    # ---- grid ----

    def regenerate_grid(self) -> None:
        """Replace the grid with a fresh one built from the current settings."""
        s = self.settings
        self.grid = generate_grid(s.lat_rings, s.longitudes, s.segments)
        self.grid_changed.emit(len(self.grid))

    # ---- custom fibers ----

    def add_custom_at(
        self,
        x: float,
        y: float,
        center: tuple[float, float],
        radius: float,
    ) -> Fiber | None:
        """Pick a basepoint on the disk widget and add its fiber, if inside the disk."""
        basepoint = basepoint_from_disk(x, y, center, radius, self.settings.hemisphere)
        if basepoint is None:
            logger.debug(f"Pick at ({x:.1f}, {y:.1f}) is outside the disk; ignored.")
            return None
        fiber = self.custom.add(basepoint, self.settings.segments)
        self.custom_changed.emit(len(self.custom))
        return fiber

    def remove_last_custom(self) -> None:
        if self.custom.remove_last() is not None:
            logger.debug("Removed last custom fiber.")
        self.custom_changed.emit(len(self.custom))

    def clear_custom(self) -> None:
        self.custom.clear()
        logger.debug("Cleared custom fibers.")
        self.custom_changed.emit(0)

    # ---- camera (also the ViewControl the input adapters drive) ----

    def rotate(self, dx_px: float, dy_px: float) -> None:
        self.camera.rotate(dx_px, dy_px)

    def zoom_wheel(self, delta_y: float) -> None:
        self.camera.zoom_wheel(delta_y)

    def zoom_pinch(self, scale: float | None) -> None:
        self.camera.zoom_pinch(scale)

    def reset_camera(self) -> None:
        self.camera.reset()
        logger.debug("Camera reset.")
        self.camera_reset.emit()

    reset = reset_camera

