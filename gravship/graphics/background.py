"""
background.py
-------------
Horizontally panning background drawn on the opaque background layer.
"""

from gravship.entities.base_entity import Entity


class Background(Entity):
    """
    Pans one image to the left, tiled twice so the seam is never visible.

    The image is expected to be at least as wide as the layer.
    """

    def __init__(self, image, x=0, y=0, speed=1):
        super().__init__(x, y, image.get_width(), image.get_height(), speed)
        self.image = image

    def draw(self):
        """Pan by speed, draw both copies, and wrap once a full layer width has scrolled."""
        self.x -= self.speed
        self.layer.draw_image(self.image, self.x, self.y)
        self.layer.draw_image(self.image, self.x + self.canvas_width, self.y)

        if self.x <= -self.canvas_width:
            self.x = 0.0
