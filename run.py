"""
Entry Point Script (Bootstrap)
==============================
Starts the viewer straight from a source checkout.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' so 'from hopfviewer...' resolves without installing
   the package first.

Usage:
    $ python run.py
"""
import os
import sys

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

appid = 'hopfviewer.HopfFibrationViewer'  # Taskbar grouping id on Windows
try:
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(appid)
except (AttributeError, ImportError):
    # Not on Windows
    pass

from hopfviewer.app.main import main

if __name__ == "__main__":
    sys.exit(main())
