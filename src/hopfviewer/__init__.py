"""Interactive viewer for the Hopf fibration."""
__version__ = "0.1.0"
