from __future__ import annotations

from hopfviewer.app.interaction.base import InputAdapterBase, ViewControl
from hopfviewer.app.interaction.registry import register_adapter


@register_adapter
class MouseAdapter(InputAdapterBase):
    """Desktop mouse: drag to orbit, wheel to zoom."""
    KEY = "mouse"

    def __init__(self, view: ViewControl) -> None:
        super().__init__(view)
        self.down = False
        self.last_x = 0.0
        self.last_y = 0.0

    def pointer_down(self, pointer_id: int, x: float, y: float, timestamp: float) -> None:
        self.down = True
        self.last_x, self.last_y = x, y

    def pointer_move(self, pointer_id: int, x: float, y: float) -> None:
        if not self.down:
            return
        dx = x - self.last_x
        dy = y - self.last_y
        self.last_x, self.last_y = x, y
        self.view.rotate(dx, dy)

    def pointer_up(self, pointer_id: int) -> None:
        self.down = False
