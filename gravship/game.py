"""
game.py
-------
Startup sequence: load config and images, then boot the session once every
image is ready.
"""

import pygame

from gravship.core.debug.debug_logger import DebugLogger
from gravship.core.runtime.game_session import DEFAULT_CONFIG, GameSession, SessionState
from gravship.core.services.config_manager import load_config
from gravship.graphics.asset_store import AssetStore


def main():
    pygame.init()
    DebugLogger.section("Gravship")

    config = load_config("game.yaml", DEFAULT_CONFIG)

    assets = AssetStore(config["assets"])
    session = GameSession(assets, config)
    assets.on_all_loaded(session.boot)
    assets.load_all()

    if session.state != SessionState.RUNNING:
        pygame.quit()
        return 1

    session.run()

    pygame.quit()
    DebugLogger.system("Pygame terminated")
    return 0
