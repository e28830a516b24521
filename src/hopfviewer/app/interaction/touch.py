from __future__ import annotations

from math import hypot

from hopfviewer import config
from hopfviewer.app.interaction.base import InputAdapterBase, ViewControl
from hopfviewer.app.interaction.registry import register_adapter


@register_adapter
class TouchAdapter(InputAdapterBase):
    """
    Multi-touch gestures.

    - one finger drags to orbit,
    - two fingers pinch to zoom,
    - two taps within DOUBLE_TAP_SECONDS reset the view.
    """
    KEY = "touch"

    def __init__(self, view: ViewControl) -> None:
        super().__init__(view)
        self.pointers: dict[int, tuple[float, float]] = {}
        self.last_pinch_dist: float | None = None
        self.last_tap_time: float | None = None

    def pointer_down(self, pointer_id: int, x: float, y: float, timestamp: float) -> None:
        self.pointers[pointer_id] = (x, y)
        if self.last_tap_time is not None and timestamp - self.last_tap_time < config.DOUBLE_TAP_SECONDS:
            self.view.reset()
        self.last_tap_time = timestamp

    def pointer_move(self, pointer_id: int, x: float, y: float) -> None:
        prev = self.pointers.get(pointer_id)
        if prev is None:
            return
        self.pointers[pointer_id] = (x, y)

        if len(self.pointers) == 1:
            self.view.rotate(x - prev[0], y - prev[1])
        elif len(self.pointers) == 2:
            (ax, ay), (bx, by) = self.pointers.values()
            d = hypot(ax - bx, ay - by)
            if self.last_pinch_dist is not None:
                scale = d / (self.last_pinch_dist or d) if d else 0.0
                self.view.zoom_pinch(scale)
            self.last_pinch_dist = d

    def pointer_up(self, pointer_id: int) -> None:
        self.pointers.pop(pointer_id, None)
        if len(self.pointers) < 2:
            self.last_pinch_dist = None
