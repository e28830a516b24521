from __future__ import annotations

import logging

from PySide6.QtCore import QSettings

from hopfviewer.app.application import SETTINGS_GROUP, load_settings, save_settings
from hopfviewer.config import Hemisphere, ProjectionMode, ViewerSettings


def _ini(tmp_path) -> QSettings:
    return QSettings(str(tmp_path / "viewer.ini"), QSettings.Format.IniFormat)


def test_empty_store_gives_defaults(qt_app, tmp_path):
    assert load_settings(_ini(tmp_path)) == ViewerSettings()


def test_settings_survive_a_restart(qt_app, tmp_path):
    saved = ViewerSettings(
        projection=ProjectionMode.SOFTMAX, alpha=7.5, lat_rings=4, segments=90,
        show_custom=False, hemisphere=Hemisphere.SOUTH,
    )
    save_settings(saved, _ini(tmp_path))
    assert load_settings(_ini(tmp_path)) == saved


def test_invalid_stored_values_fall_back_to_defaults(qt_app, tmp_path, caplog):
    qs = _ini(tmp_path)
    qs.setValue(f"{SETTINGS_GROUP}/segments", "1")
    qs.setValue(f"{SETTINGS_GROUP}/projection", "softmax")
    qs.sync()

    with caplog.at_level(logging.WARNING, logger="hopfviewer"):
        assert load_settings(_ini(tmp_path)) == ViewerSettings()
    assert "Ignoring stored viewer settings" in caplog.text


def test_out_of_range_stored_values_fall_back_to_defaults(qt_app, tmp_path):
    qs = _ini(tmp_path)
    qs.setValue(f"{SETTINGS_GROUP}/alpha", "1000")
    qs.setValue(f"{SETTINGS_GROUP}/lat_rings", "500")
    qs.sync()

    loaded = load_settings(_ini(tmp_path))
    assert loaded.alpha == 4.0
    assert loaded.lat_rings == 7
