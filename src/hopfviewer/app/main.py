"""
Application Initialization
==========================
Builds the store and the main window and starts the Qt event loop.

Why is this file needed?
------------------------
It is the single place where the pieces meet:
1. Logging is configured before anything else logs.
2. The stored viewer settings seed the Store.
3. The Store is passed into the window, so widgets never create their own.

Run with: python -m hopfviewer
"""
from __future__ import annotations

import logging
import sys

from hopfviewer.app.application import create_app, load_settings
from hopfviewer.app.state import Store
from hopfviewer.app.ui.main_window import MainWindow
from hopfviewer import __version__
from hopfviewer.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    # HOPFVIEWER_LOG_LEVEL=DEBUG shows pointer picks and settings writes
    setup_logging(level=logging.INFO)
    logger.info(f"Starting Hopf viewer {__version__}")

    app = create_app()
    store = Store(load_settings())
    win = MainWindow(store)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
