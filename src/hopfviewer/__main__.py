"""Command-line entry point: python -m hopfviewer"""
import sys

from hopfviewer.app.main import main

if __name__ == "__main__":
    sys.exit(main())
