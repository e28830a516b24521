from __future__ import annotations

from typing import Protocol


class ViewControl(Protocol):
    """The pan/zoom/reset capability the adapters drive (implemented by Camera and Store)."""

    def rotate(self, dx_px: float, dy_px: float) -> None: ...

    def zoom_wheel(self, delta_y: float) -> None: ...

    def zoom_pinch(self, scale: float | None) -> None: ...

    def reset(self) -> None: ...


class InputAdapterBase:
    """
    Base class for pointer-input adapters.

    Adapters receive plain coordinates (widget pixels) and timestamps (seconds)
    from the canvas and translate them into view-control calls. They hold only
    gesture bookkeeping; the camera state lives in the view.
    """
    KEY: str = "base"  # Override in subclass

    def __init__(self, view: ViewControl) -> None:
        self.view = view

    # ---- abstract API for subclasses ----

    def pointer_down(self, pointer_id: int, x: float, y: float, timestamp: float) -> None:
        raise NotImplementedError("`pointer_down` must be implemented in subclass.")

    def pointer_move(self, pointer_id: int, x: float, y: float) -> None:
        raise NotImplementedError("`pointer_move` must be implemented in subclass.")

    def pointer_up(self, pointer_id: int) -> None:
        raise NotImplementedError("`pointer_up` must be implemented in subclass.")

    # ---- shared ----

    def wheel(self, delta_y: float) -> None:
        """Browser convention: positive delta (scroll down) zooms out."""
        self.view.zoom_wheel(delta_y)
