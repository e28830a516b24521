from __future__ import annotations

from math import sqrt

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QWidget

from hopfviewer import config
from hopfviewer.app.state import Store
from hopfviewer.config import Hemisphere
from hopfviewer.core.colors import to_rgb255
from hopfviewer.core.hopf import disk_from_basepoint

DOT_RADIUS: float = 3.0
LATITUDE_OPACITY: float = 0.3

CAPTIONS = {
    Hemisphere.NORTH: "North hemisphere (z≥0)",
    Hemisphere.SOUTH: "South hemisphere (z≤0)",
}


class BasepointDisk(QWidget):
    """
    Orthographic view of one hemisphere of the 2-sphere.

    Clicking inside the disk adds a custom fiber at the picked basepoint;
    clicks outside the unit circle are ignored by the store.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.setFixedSize(config.DISK_WIDGET_SIZE, config.DISK_WIDGET_SIZE)
        self.setCursor(Qt.CursorShape.CrossCursor)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.fillRect(self.rect(), QColor(config.COLOR_BACKGROUND))
            self._draw_reference(painter)
            self._draw_dots(painter)
        finally:
            painter.end()

    def _draw_reference(self, painter: QPainter) -> None:
        cx, cy = config.DISK_CENTER
        r = config.DISK_RADIUS
        center = QPointF(cx, cy)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        painter.setPen(QPen(QColor(config.COLOR_DISK_OUTLINE), 2))
        painter.drawEllipse(center, r, r)

        # the equator coincides with the outline in orthographic view
        painter.setOpacity(LATITUDE_OPACITY)
        for z in config.DISK_LATITUDES:
            if z * z >= 1.0:
                continue
            rr = sqrt(1.0 - z * z) * r
            color = config.COLOR_DISK_NORTH if z >= 0 else config.COLOR_DISK_SOUTH
            painter.setPen(QPen(QColor(color), 1))
            painter.drawEllipse(center, rr, rr)
        painter.setOpacity(1.0)

        painter.setPen(QPen(QColor(config.COLOR_DISK_CROSSHAIR), 1))
        painter.drawLine(QPointF(cx - r, cy), QPointF(cx + r, cy))
        painter.drawLine(QPointF(cx, cy - r), QPointF(cx, cy + r))

        painter.setPen(QColor(config.COLOR_DISK_CAPTION))
        painter.drawText(QPointF(10, 18), self.tr(CAPTIONS[self.store.settings.hemisphere]))

    def _draw_dots(self, painter: QPainter) -> None:
        painter.setPen(Qt.PenStyle.NoPen)
        for fiber in self.store.custom:
            x, y = disk_from_basepoint(fiber.basepoint, config.DISK_CENTER, config.DISK_RADIUS)
            painter.setBrush(QColor(*to_rgb255(fiber.color)))
            painter.drawEllipse(QPointF(x, y), DOT_RADIUS, DOT_RADIUS)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self.store.add_custom_at(pos.x(), pos.y(), config.DISK_CENTER, config.DISK_RADIUS)
        event.accept()
