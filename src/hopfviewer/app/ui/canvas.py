from __future__ import annotations

from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import (
    QColor, QEventPoint, QMouseEvent, QPainter, QPaintEvent, QPen, QPolygonF, QTouchEvent, QWheelEvent,
)
from PySide6.QtWidgets import QSizePolicy, QWidget

from hopfviewer import config
from hopfviewer.app.interaction.registry import create_adapter
from hopfviewer.app.state import Store
from hopfviewer.core.colors import to_rgb255
from hopfviewer.core.frame import Polyline, build_frame

_MOUSE_POINTER_ID = 0


class FiberCanvas(QWidget):
    """
    The main 3D view: strokes every visible fiber each frame with QPainter.

    Mouse and touch events are forwarded to the registered input adapters,
    which drive the store's camera. The widget never caches projected
    coordinates; `paintEvent` rebuilds the whole frame.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 240)

        self._mouse = create_adapter("mouse", store)
        self._touch = create_adapter("touch", store)

    # ---- painting ----

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.fillRect(self.rect(), QColor(config.COLOR_BACKGROUND))

            s = self.store
            strokes = build_frame(s.settings, s.camera, s.grid, s.custom, self.width(), self.height())
            for stroke in strokes:
                self._draw_polyline(painter, stroke)
        finally:
            painter.end()

    @staticmethod
    def _draw_polyline(painter: QPainter, stroke: Polyline) -> None:
        pts = stroke.drawable_points()
        if len(pts) < 2:
            return
        poly = QPolygonF([QPointF(x, y) for x, y in pts.tolist()])

        pen = QPen(QColor(*to_rgb255(stroke.color)))
        pen.setWidthF(stroke.width)
        painter.setOpacity(stroke.opacity)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPolyline(poly)

    # ---- mouse ----

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._mouse.pointer_down(_MOUSE_POINTER_ID, pos.x(), pos.y(), event.timestamp() / 1000.0)
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self._mouse.pointer_move(_MOUSE_POINTER_ID, pos.x(), pos.y())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._mouse.pointer_up(_MOUSE_POINTER_ID)

    def wheelEvent(self, event: QWheelEvent) -> None:
        # Qt reports scrolling away from the user as positive; zooming out is positive here
        self._mouse.wheel(-event.angleDelta().y())
        event.accept()

    # ---- touch ----

    def event(self, event: QEvent) -> bool:
        if event.type() in (
            QEvent.Type.TouchBegin,
            QEvent.Type.TouchUpdate,
            QEvent.Type.TouchEnd,
            QEvent.Type.TouchCancel,
        ):
            self._handle_touch(event)  # type: ignore[arg-type]
            event.accept()
            return True
        return super().event(event)

    def _handle_touch(self, event: QTouchEvent) -> None:
        timestamp = event.timestamp() / 1000.0
        cancelled = event.type() == QEvent.Type.TouchCancel
        for point in event.points():
            pid = point.id()
            pos = point.position()
            state = point.state()
            if cancelled or state == QEventPoint.State.Released:
                self._touch.pointer_up(pid)
            elif state == QEventPoint.State.Pressed:
                self._touch.pointer_down(pid, pos.x(), pos.y(), timestamp)
            elif state == QEventPoint.State.Updated:
                self._touch.pointer_move(pid, pos.x(), pos.y())
