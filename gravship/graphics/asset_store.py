"""
asset_store.py
--------------
Decoded images shared by every entity, loaded once per process.

Responsibilities:
- Load the background, ship and wall-piece images
- Substitute a flat placeholder when a file is missing or undecodable
- Notify listeners exactly once when every required image is available
"""

import pygame

from gravship.core.debug.debug_logger import DebugLogger


REQUIRED_ASSETS = ("background", "ship", "wall_top", "wall_bottom")


class AssetStore:
    """
    Holds decoded images by key.

    Usage:
        assets = AssetStore(config["assets"])
        assets.on_all_loaded(session.boot)
        assets.load_all()
    """

    def __init__(self, asset_config, required=REQUIRED_ASSETS):
        """
        Args:
            asset_config: {key: {"path", "fallback_size", "fallback_color"}}
            required: Keys that must be present before readiness fires
        """
        self.asset_config = asset_config
        self.required = tuple(required)
        self.images = {}

        self._listeners = []
        self._ready = False

    # ===========================================================
    # Readiness
    # ===========================================================

    @property
    def ready(self):
        return self._ready

    def on_all_loaded(self, callback):
        """
        Register a readiness callback.

        Each callback runs exactly once: immediately if the store is already
        ready, otherwise when the last required image is registered.
        """
        if self._ready:
            callback()
            return
        self._listeners.append(callback)

    def _notify_if_complete(self):
        if self._ready:
            return
        if any(key not in self.images for key in self.required):
            return

        self._ready = True
        DebugLogger.system(f"All {len(self.required)} images loaded", category="loading")

        listeners, self._listeners = self._listeners, []
        for callback in listeners:
            callback()

    # ===========================================================
    # Loading
    # ===========================================================

    def register(self, key, image):
        """Store an already decoded image and fire readiness if it completes the set."""
        self.images[key] = image
        self._notify_if_complete()

    def load_all(self):
        """Decode every configured image, in config order."""
        DebugLogger.init_entry("AssetStore", "LOADING")
        for key in self.required:
            self.register(key, self._load_image(key))
        for key in self.asset_config:
            if key not in self.images:
                self.register(key, self._load_image(key))

    def _load_image(self, key):
        cfg = self.asset_config.get(key, {})
        path = cfg.get("path")

        if path:
            try:
                image = pygame.image.load(path)
                DebugLogger.init_sub(f"{key}: {path} {image.get_size()}")
                return image
            except (FileNotFoundError, pygame.error) as e:
                DebugLogger.warn(f"Missing image '{key}' at {path}: {e}, using fallback", category="loading")
        else:
            DebugLogger.warn(f"No path configured for '{key}', using fallback", category="loading")

        return self._generate_fallback(cfg)

    @staticmethod
    def _generate_fallback(cfg):
        size = tuple(cfg.get("fallback_size", (32, 32)))
        color = tuple(cfg.get("fallback_color", (255, 0, 255)))
        image = pygame.Surface(size)
        image.fill(color)
        return image

    def optimize(self):
        """
        Convert images to the display's pixel format for faster blits.

        Needs an open display; does nothing before the window exists.
        """
        if pygame.display.get_surface() is None:
            return
        for key, image in self.images.items():
            self.images[key] = image.convert_alpha()
        DebugLogger.init_sub(f"Converted {len(self.images)} images to display format")

    # ===========================================================
    # Access
    # ===========================================================

    def get(self, key):
        """Return the image for key (KeyError if it was never loaded)."""
        return self.images[key]

    def __getitem__(self, key):
        return self.images[key]
