from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QScrollArea, QSplitter, QVBoxLayout, QWidget

from hopfviewer.app.state import Store
from hopfviewer.app.ui.basepoint_disk import BasepointDisk
from hopfviewer.app.ui.canvas import FiberCanvas
from hopfviewer.app.ui.panels.basepoint_panel import BasepointPanel
from hopfviewer.app.ui.panels.view_panel import ViewPanel


class WorkArea(QWidget):
    """The main work area with a splitter between the control column and the 3D canvas."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        v = QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0)
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        # control column
        column = QWidget()
        col = QVBoxLayout(column)
        self.view_panel = ViewPanel(store, column)
        self.basepoint_panel = BasepointPanel(store, column)
        col.addWidget(self.view_panel)
        col.addWidget(self.basepoint_panel)
        col.addStretch()

        scroll = QScrollArea(split)
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setWidget(column)

        self.canvas = FiberCanvas(store, split)

        split.addWidget(scroll)
        split.addWidget(self.canvas)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)

    @property
    def disk(self) -> BasepointDisk:
        return self.basepoint_panel.disk
