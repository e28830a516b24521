from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from hopfviewer import config
from hopfviewer.app.state import Store
from hopfviewer.app.ui.panels.base import BasePanel
from hopfviewer.config import ProjectionMode, ViewerSettings

logger = logging.getLogger(__name__)

PROJECTION_LABELS = {
    ProjectionMode.STEREOGRAPHIC: "Stereographic",
    ProjectionMode.SOFTMAX: "Softmax (tetrahedron)",
}


class ViewPanel(BasePanel):
    """
    Projection, grid and camera controls.

    Projection, alpha, line width and the tetrahedron toggle apply on the next
    frame. Grid size and segment count are stored immediately but only rebuild
    the grid on "Regenerate".
    """
    TITLE = "View"

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        s = store.settings

        # projection row
        row = self._next_row()
        self._add_label("projection", "Projection:", row)
        self.combo_projection = QComboBox(self.box)
        for mode in ProjectionMode:
            self.combo_projection.addItem(self.tr(PROJECTION_LABELS[mode]), userData=str(mode))
        self.combo_projection.setCurrentIndex(self.combo_projection.findData(str(s.projection)))
        self.grid.addWidget(self.combo_projection, row, 1)

        self.spin_alpha = self._add_double_spin(
            "alpha", "Softmax α:",
            min_value=config.ALPHA_RANGE[0], max_value=config.ALPHA_RANGE[1],
            step=0.5, default=s.alpha,
        )
        self.spin_rings = self._add_spin(
            "lat_rings", "Latitude rings:", max_value=config.MAX_LAT_RINGS, default=s.lat_rings,
        )
        self.spin_longs = self._add_spin(
            "longitudes", "Fibers per ring:", max_value=config.MAX_LONGITUDES, default=s.longitudes,
        )
        self.spin_segments = self._add_spin(
            "segments", "Segments per fiber:", min_value=2, max_value=config.MAX_SEGMENTS, default=s.segments,
        )
        self.spin_width = self._add_spin(
            "line_width", "Line width:", max_value=config.MAX_LINE_WIDTH, default=s.line_width,
        )
        self.check_tetra = self._add_check("Show tetrahedron", s.show_tetra)

        # buttons
        buttons = QHBoxLayout()
        self.btn_regenerate = QPushButton(self.tr("Regenerate"), self.box)
        self.btn_reset = QPushButton(self.tr("Reset view"), self.box)
        buttons.addWidget(self.btn_regenerate)
        buttons.addWidget(self.btn_reset)
        self.grid.addLayout(buttons, self._next_row(), 0, 1, 2)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.addWidget(self.box)

        # wiring
        self.combo_projection.currentIndexChanged.connect(self._on_projection_changed)
        self.spin_alpha.valueChanged.connect(lambda v: self._update(alpha=float(v)))
        self.spin_rings.valueChanged.connect(lambda v: self._update(lat_rings=int(v)))
        self.spin_longs.valueChanged.connect(lambda v: self._update(longitudes=int(v)))
        self.spin_segments.valueChanged.connect(lambda v: self._update(segments=int(v)))
        self.spin_width.valueChanged.connect(lambda v: self._update(line_width=int(v)))
        self.check_tetra.toggled.connect(lambda checked: self._update(show_tetra=bool(checked)))
        self.btn_regenerate.clicked.connect(self.store.regenerate_grid)
        self.btn_reset.clicked.connect(self.store.reset_camera)
        self.store.settings_changed.connect(self._sync_softmax_row)

        self._sync_softmax_row(s)

    def _update(self, **changes) -> None:
        try:
            self.store.update_settings(**changes)
        except ValueError as e:
            # the spin ranges keep values valid; this only trips on a bug
            logger.error(f"Rejected view option {changes}: {e}")

    @Slot()
    def _on_projection_changed(self) -> None:
        self._update(projection=ProjectionMode(self.combo_projection.currentData()))

    @Slot(object)
    def _sync_softmax_row(self, settings: ViewerSettings) -> None:
        softmax = settings.projection == ProjectionMode.SOFTMAX
        self._labels["alpha"].setVisible(softmax)
        self.spin_alpha.setVisible(softmax)
        self.check_tetra.setVisible(softmax)
