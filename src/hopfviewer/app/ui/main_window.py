from __future__ import annotations

import logging

from PySide6.QtCore import QTimer, Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStatusBar

from hopfviewer import config
from hopfviewer.app.application import VISIBLE_APP_NAME, save_settings
from hopfviewer.app.state import Store
from hopfviewer.app.ui.workarea import WorkArea

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Top-level window: control column and canvas, plus the render timer.

    The timer repaints the canvas and the basepoint disk every
    FRAME_INTERVAL_MS regardless of whether anything changed.
    """
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1280, 820)

        self.store = store

        self.work_area = WorkArea(store, self)
        self.setCentralWidget(self.work_area)

        self.status = QStatusBar(self)
        self.setStatusBar(self.status)

        self.store.grid_changed.connect(self._on_grid_changed)
        self.store.custom_changed.connect(self._on_custom_changed)
        self.store.camera_reset.connect(self._on_camera_reset)
        self.store.regenerate_grid()

        # ---- render loop ----
        self.timer = QTimer(self)
        self.timer.setInterval(config.FRAME_INTERVAL_MS)
        self.timer.timeout.connect(self._on_frame)
        self.timer.start()

    @Slot()
    def _on_frame(self) -> None:
        self.work_area.canvas.update()
        self.work_area.disk.update()

    @Slot(int)
    def _on_grid_changed(self, count: int) -> None:
        self.status.showMessage(f"Grid: {count} fibers", 3000)

    @Slot(int)
    def _on_custom_changed(self, count: int) -> None:
        self.status.showMessage(f"Custom fibers: {count}", 3000)

    @Slot()
    def _on_camera_reset(self) -> None:
        self.status.showMessage("View reset", 2000)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.timer.stop()
        save_settings(self.store.settings)
        logger.info("Viewer settings saved; closing.")
        super().closeEvent(event)
