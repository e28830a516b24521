from __future__ import annotations

import logging
import os
import sys

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from hopfviewer.config import ViewerSettings

logger = logging.getLogger(__name__)

ORG_ID = "hopfviewer"
APP_ID = "hopf-viewer"
ORG_DOMAIN = "hopfviewer.local"

VISIBLE_APP_NAME = "Hopf Fibration Viewer"

SETTINGS_GROUP = "viewer"


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def load_settings(qsettings: QSettings | None = None) -> ViewerSettings:
    """
    Read the viewer options remembered from the last session.

    Args:
        qsettings: Settings store to read from. Defaults to the application's.

    Returns:
        The stored settings, or the defaults if nothing usable was stored.
    """
    qs = qsettings if qsettings is not None else QSettings()
    qs.beginGroup(SETTINGS_GROUP)
    try:
        mapping = {key: qs.value(key) for key in qs.childKeys()}
    finally:
        qs.endGroup()

    try:
        settings = ViewerSettings.from_mapping(mapping)
    except (ValueError, TypeError) as e:
        logger.warning(f"Ignoring stored viewer settings ({e}); using defaults.")
        return ViewerSettings()
    logger.info(f"Loaded viewer settings: {settings}")
    return settings


def save_settings(settings: ViewerSettings, qsettings: QSettings | None = None) -> None:
    """Persist the viewer options (never the custom fibers)."""
    qs = qsettings if qsettings is not None else QSettings()
    qs.beginGroup(SETTINGS_GROUP)
    try:
        for key, value in settings.to_mapping().items():
            qs.setValue(key, value)
    finally:
        qs.endGroup()
    qs.sync()
    logger.debug(f"Saved viewer settings to {qs.fileName()}")
