from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from hopfviewer.app.state import Store
from hopfviewer.app.ui.basepoint_disk import BasepointDisk
from hopfviewer.app.ui.panels.base import BasePanel
from hopfviewer.config import Hemisphere

HEMISPHERE_LABELS = {
    Hemisphere.NORTH: "North (z ≥ 0)",
    Hemisphere.SOUTH: "South (z ≤ 0)",
}


class BasepointPanel(BasePanel):
    """
    Custom fibers: click the disk to add one at the picked basepoint.

    The hemisphere selector decides the sign of z for new picks.
    """
    TITLE = "Basepoints"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        s = store.settings

        row = self._next_row()
        self._add_label("hemisphere", "Hemisphere:", row)
        self.combo_hemisphere = QComboBox(self.box)
        for hemi in Hemisphere:
            self.combo_hemisphere.addItem(self.tr(HEMISPHERE_LABELS[hemi]), userData=str(hemi))
        self.combo_hemisphere.setCurrentIndex(self.combo_hemisphere.findData(str(s.hemisphere)))
        self.grid.addWidget(self.combo_hemisphere, row, 1)

        self.check_grid = self._add_check("Show grid fibers", s.show_grid)
        self.check_custom = self._add_check("Show custom fibers", s.show_custom)

        self.disk = BasepointDisk(store, self.box)
        self.grid.addWidget(self.disk, self._next_row(), 0, 1, 2, Qt.AlignmentFlag.AlignHCenter)

        buttons = QHBoxLayout()
        self.btn_remove_last = QPushButton(self.tr("Remove last"), self.box)
        self.btn_clear = QPushButton(self.tr("Clear"), self.box)
        buttons.addWidget(self.btn_remove_last)
        buttons.addWidget(self.btn_clear)
        self.grid.addLayout(buttons, self._next_row(), 0, 1, 2)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.addWidget(self.box)

        # wiring
        self.combo_hemisphere.currentIndexChanged.connect(self._on_hemisphere_changed)
        self.check_grid.toggled.connect(lambda checked: self.store.update_settings(show_grid=bool(checked)))
        self.check_custom.toggled.connect(lambda checked: self.store.update_settings(show_custom=bool(checked)))
        self.btn_remove_last.clicked.connect(self.store.remove_last_custom)
        self.btn_clear.clicked.connect(self.store.clear_custom)
        self.store.custom_changed.connect(self._on_custom_changed)

        self._on_custom_changed(len(store.custom))

    @Slot()
    def _on_hemisphere_changed(self) -> None:
        self.store.update_settings(hemisphere=Hemisphere(self.combo_hemisphere.currentData()))

    @Slot(int)
    def _on_custom_changed(self, count: int) -> None:
        self.btn_remove_last.setEnabled(count > 0)
        self.btn_clear.setEnabled(count > 0)
