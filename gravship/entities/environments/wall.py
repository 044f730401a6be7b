"""
wall.py
-------
Paired top/bottom barrier scrolled across the main layer.

Walls are pooled: the ship's RecyclingPool spawns them at the right edge and
recycles them once they have scrolled fully past the left edge.
"""

from gravship.entities.base_entity import PooledEntity


class Wall(PooledEntity):
    """
    One obstacle made of a top piece and a bottom piece sharing an x position.

    Geometry is fixed: the top piece hangs from y=0 and the bottom piece is
    anchored at the layer height. The x/y passed to spawn() are not used for
    placement; every wall enters from the right edge.
    """

    def __init__(self, top_image, bottom_image):
        """
        Args:
            top_image: Surface for the upper piece
            bottom_image: Surface for the lower piece
        """
        width = max(top_image.get_width(), bottom_image.get_width())
        height = max(top_image.get_height(), bottom_image.get_height())
        super().__init__(0, 0, width, height)

        self.top_image = top_image
        self.bottom_image = bottom_image
        self.top_y = 0.0
        self.bottom_y = 0.0

    # ===========================================================
    # Pool Lifecycle
    # ===========================================================

    def spawn(self, x, y, speed):
        """Place both pieces at the right edge of the layer and mark alive."""
        super().spawn(self.canvas_width, 0, speed)
        self.top_y = 0.0
        self.bottom_y = float(self.canvas_height)

    def clear(self):
        """Erase both pieces and return to the dead state."""
        self._erase()
        super().clear()
        self.top_y = 0.0
        self.bottom_y = 0.0

    # ===========================================================
    # Frame Step
    # ===========================================================

    def draw(self):
        """
        Scroll left by speed and redraw both pieces.

        Returns:
            bool: True once the wall is a full width past the left edge
        """
        self._erase()
        self.x -= self.speed
        self.layer.draw_image(self.top_image, self.x, self.top_y)
        self.layer.draw_image(self.bottom_image, self.x, self.bottom_y)
        return self.x <= -self.width

    def _erase(self):
        self.layer.clear_rect(self.x, self.top_y, self.top_image.get_width(), self.top_image.get_height())
        self.layer.clear_rect(self.x, self.bottom_y, self.bottom_image.get_width(), self.bottom_image.get_height())
