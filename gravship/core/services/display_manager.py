"""
display_manager.py
------------------
Window creation and per-frame presentation.

Responsibilities:
- Open the game window, preferring a vsync-backed refresh
- Report whether a native refresh signal is available
- Composite the layer stack onto the window and flip
"""

import pygame

from gravship.core.debug.debug_logger import DebugLogger
from gravship.core.runtime.game_settings import Display


class DisplayManager:
    """
    Owns the pygame window.

    Raises pygame.error from the constructor when no window can be opened;
    GameSession treats that as an unsupported drawing surface.
    """

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT, vsync=Display.VSYNC):
        """
        Args:
            width, height: Window size in pixels
            vsync: Try to sync flips to the display refresh
        """
        DebugLogger.init_entry("DisplayManager")

        self.width = width
        self.height = height
        self.vsync = False

        pygame.display.init()
        pygame.display.set_caption(Display.CAPTION)
        self.window = self._create_window(vsync)

        mode = "vsync" if self.vsync else "timer-paced"
        DebugLogger.init_sub(f"Window {width}x{height} ({mode})", level=1)

    def _create_window(self, vsync):
        if vsync:
            try:
                window = pygame.display.set_mode((self.width, self.height), pygame.SCALED, vsync=1)
                self.vsync = True
                return window
            except pygame.error as e:
                DebugLogger.warn(f"vsync unavailable: {e}", category="display")

        return pygame.display.set_mode((self.width, self.height))

    # ===========================================================
    # Presentation
    # ===========================================================

    def present(self, layers):
        """Composite layers onto the window and flip."""
        layers.composite(self.window)
        pygame.display.flip()

    @property
    def size(self):
        return self.width, self.height
