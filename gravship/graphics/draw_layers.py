"""
draw_layers.py
--------------
Independent drawing surfaces composited back to front each frame.

Responsibilities:
- Own one pygame.Surface per logical layer (background, ship, main)
- Provide the blit / dirty-rectangle erase primitives entities draw with
- Composite all layers onto the window surface in a fixed order
"""

import pygame

from gravship.core.debug.debug_logger import DebugLogger


TRANSPARENT = (0, 0, 0, 0)


class DrawLayer:
    """
    A single drawing surface.

    Entities never repaint a whole layer; they erase and redraw only the
    rectangle they occupied (dirty rectangles), so layers persist between frames.
    """

    __slots__ = ("name", "surface", "width", "height", "transparent")

    def __init__(self, name, width, height, transparent=True):
        """
        Args:
            name: Layer identifier (see Layers in game_settings)
            width, height: Surface size in pixels
            transparent: Per-pixel alpha so lower layers show through
        """
        self.name = name
        self.width = width
        self.height = height
        self.transparent = transparent

        if transparent:
            self.surface = pygame.Surface((width, height), pygame.SRCALPHA)
            self.surface.fill(TRANSPARENT)
        else:
            self.surface = pygame.Surface((width, height))

    # ===========================================================
    # Drawing Primitives
    # ===========================================================

    def draw_image(self, image, x, y):
        """Blit image with its top-left corner at (x, y)."""
        self.surface.blit(image, (int(x), int(y)))

    def clear_rect(self, x, y, w, h):
        """Erase a rectangle back to transparent (or black on opaque layers)."""
        rect = pygame.Rect(int(x), int(y), int(w), int(h))
        self.surface.fill(TRANSPARENT if self.transparent else (0, 0, 0), rect)

    def clear(self):
        """Erase the whole layer."""
        self.surface.fill(TRANSPARENT if self.transparent else (0, 0, 0))

    @property
    def size(self):
        return self.width, self.height


class LayerStack:
    """Ordered set of DrawLayers sharing one size."""

    def __init__(self, width, height, order):
        """
        Args:
            width, height: Size applied to every layer
            order: Layer names back to front; the first is opaque
        """
        self.width = width
        self.height = height
        self.layers = {}
        self._order = tuple(order)

        for index, name in enumerate(self._order):
            self.layers[name] = DrawLayer(name, width, height, transparent=index > 0)

        DebugLogger.init_entry("LayerStack")
        DebugLogger.init_sub(f"Layers: {list(self._order)} @ {width}x{height}")

    def __getitem__(self, name):
        return self.layers[name]

    def __iter__(self):
        for name in self._order:
            yield self.layers[name]

    def composite(self, target):
        """Blit every layer onto target, back to front."""
        for name in self._order:
            target.blit(self.layers[name].surface, (0, 0))
