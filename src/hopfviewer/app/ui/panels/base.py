from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox, QDoubleSpinBox, QGridLayout, QGroupBox, QLabel, QSizePolicy, QSpinBox, QWidget,
)

from hopfviewer.app.state import Store


class BasePanel(QWidget):
    """
    Base class for left-side panels. Holds a reference to the global store.

    Subclasses lay their inputs out in `self.grid` (inside a titled group box)
    using the `_add_*` helpers, one labelled row at a time.
    """
    TITLE: str = "Options"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.box = QGroupBox(self.tr(self.TITLE), self)
        self.grid = QGridLayout(self.box)
        self.grid.setVerticalSpacing(8)
        self._labels: dict[str, QLabel] = {}
        self._row = 0

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_label(self, key: str, label: str, row: int) -> QLabel:
        lab = QLabel(self.tr(label), self.box)
        self.grid.addWidget(lab, row, 0)
        self._labels[key] = lab
        return lab

    def _add_spin(
        self,
        key: str,
        label: str,
        *,
        min_value: int = 1,
        max_value: int = 1000,
        default: int = 1,
    ) -> QSpinBox:
        row = self._next_row()
        self._add_label(key, label, row)
        w = QSpinBox(self.box)
        w.setRange(min_value, max_value)
        w.setValue(default)
        w.setKeyboardTracking(False)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.grid.addWidget(w, row, 1)
        return w

    def _add_double_spin(
        self,
        key: str,
        label: str,
        *,
        min_value: float = -1e9,
        max_value: float = 1e9,
        step: float = 0.1,
        default: float = 0.0,
        decimals: int = 2,
    ) -> QDoubleSpinBox:
        row = self._next_row()
        self._add_label(key, label, row)
        w = QDoubleSpinBox(self.box)
        w.setRange(min_value, max_value)
        w.setSingleStep(step)
        w.setDecimals(decimals)
        w.setValue(default)
        w.setKeyboardTracking(False)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.grid.addWidget(w, row, 1)
        return w

    def _add_check(self, label: str, checked: bool) -> QCheckBox:
        w = QCheckBox(self.tr(label), self.box)
        w.setChecked(checked)
        self.grid.addWidget(w, self._next_row(), 0, 1, 2)
        return w
