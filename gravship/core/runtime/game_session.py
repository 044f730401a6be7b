"""
game_session.py
---------------
Builds one game session and drives its frame loop.

Responsibilities
----------------
- Open the display and create the background, ship and main layers
- Bind each entity type to its layer and construct Background and Ship
- Schedule the per-frame animate() callback and run the loop until quit

Lifecycle
---------
UNINITIALIZED --initialize()--> READY --start()--> RUNNING

initialize() returns False when the display cannot be opened; start() must
not be called in that case. RUNNING lasts until the window is closed.
"""

from enum import IntEnum

import pygame

from gravship.core.debug.debug_logger import DebugLogger
from gravship.core.runtime.frame_scheduler import FrameScheduler
from gravship.core.runtime.game_settings import Display, Layers, Physics, Pools
from gravship.core.services.config_manager import _merge_dicts
from gravship.core.services.display_manager import DisplayManager
from gravship.core.services.input_state import InputState
from gravship.entities.environments.wall import Wall
from gravship.entities.player.ship import Ship
from gravship.graphics.background import Background
from gravship.graphics.draw_layers import LayerStack


DEFAULT_CONFIG = {
    "assets": {},
    "background": {"speed": 1},
    "ship": {
        "speed": 3,
        "gravity": Physics.GRAVITY,
        "initial_velocity": Physics.INITIAL_VELOCITY,
        "impulse": Physics.IMPULSE,
        "delta": Physics.DELTA,
    },
    "walls": {
        "enabled": True,
        "pool_size": Pools.WALLS,
        "speed": 1,
        "spawn_interval": 180,
    },
}

# Pixels the ship spawns right of and below the layer centre, minus its size
SHIP_SPAWN_OFFSET = 30


class SessionState(IntEnum):
    UNINITIALIZED = 0
    READY = 1
    RUNNING = 2


class GameSession:
    """Owns the layers, entities and input state of one play session."""

    def __init__(self, assets, config=None, input_state=None):
        """
        Args:
            assets: AssetStore with background, ship, wall_top and wall_bottom
            config: Game config; missing keys fall back to DEFAULT_CONFIG
            input_state: InputState to read; a fresh one if None
        """
        self.assets = assets
        self.config = _merge_dicts(DEFAULT_CONFIG, config or {})
        self.input_state = input_state or InputState()
        self.state = SessionState.UNINITIALIZED

        self.display = None
        self.layers = None
        self.scheduler = None
        self.background = None
        self.ship = None

        walls_cfg = self.config["walls"]
        self.walls_enabled = walls_cfg["enabled"]
        self.wall_speed = walls_cfg["speed"]
        self.wall_spawn_interval = walls_cfg["spawn_interval"]
        self._frames_since_wall = 0

    # ===========================================================
    # Initialization
    # ===========================================================

    def initialize(self):
        """
        Open the display, create layers and construct the session entities.

        Returns:
            bool: False if the display surface is not supported
        """
        DebugLogger.section("Initializing GameSession")

        try:
            self.display = DisplayManager(Display.WIDTH, Display.HEIGHT)
        except pygame.error as e:
            DebugLogger.fail(f"Display surface unsupported: {e}", category="display")
            return False

        self.assets.optimize()

        width, height = self.display.size
        self.layers = LayerStack(width, height, Layers.ORDER)
        self.scheduler = FrameScheduler(vsync=self.display.vsync)

        self._bind_layers()
        self._create_entities()

        self.state = SessionState.READY
        DebugLogger.state("Session READY")
        return True

    def _bind_layers(self):
        Background.bind_layer(self.layers[Layers.BACKGROUND])
        Ship.bind_layer(self.layers[Layers.SHIP])
        Wall.bind_layer(self.layers[Layers.MAIN])

    def _create_entities(self):
        self.background = Background(
            self.assets["background"],
            x=0, y=0,
            speed=self.config["background"]["speed"],
        )

        ship_image = self.assets["ship"]
        layer = self.layers[Layers.SHIP]
        start_x = layer.width / 2 - ship_image.get_width() + SHIP_SPAWN_OFFSET
        start_y = layer.height / 2 - ship_image.get_height() + SHIP_SPAWN_OFFSET

        ship_cfg = self.config["ship"]
        self.ship = Ship.with_walls(
            start_x, start_y, ship_image,
            self.assets["wall_top"], self.assets["wall_bottom"],
            wall_pool_size=self.config["walls"]["pool_size"],
            speed=ship_cfg["speed"],
            gravity=ship_cfg["gravity"],
            initial_velocity=ship_cfg["initial_velocity"],
            impulse=ship_cfg["impulse"],
            delta=ship_cfg["delta"],
        )

    # ===========================================================
    # Loop Control
    # ===========================================================

    def start(self):
        """Draw the ship once and begin animating."""
        if self.state != SessionState.READY:
            raise RuntimeError(f"Cannot start session in state {self.state.name}")

        self.ship.draw()
        self.state = SessionState.RUNNING
        DebugLogger.state("Session RUNNING")
        self.animate()

    def boot(self):
        """Readiness callback for AssetStore: initialize, then start if supported."""
        if self.initialize():
            self.start()

    def animate(self):
        """
        One frame: reschedule, pan the background, step the ship, then the walls.
        """
        self.scheduler.request_frame(self.animate)
        self.background.draw()
        self.ship.move(self.input_state)

        if self.walls_enabled:
            self._step_walls()

    def _step_walls(self):
        self._frames_since_wall += 1
        if self._frames_since_wall >= self.wall_spawn_interval:
            self._frames_since_wall = 0
            self.ship.wall_pool.acquire(self.layers.width, 0, self.wall_speed)
        self.ship.wall_pool.step_all()

    def run(self):
        """Pump frames until the window is closed."""
        if self.state != SessionState.RUNNING:
            DebugLogger.warn("run() called before start(); nothing to do")
            return
        self.scheduler.run(self.handle_events, self.present)

    # ===========================================================
    # Event Handling / Presentation
    # ===========================================================

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                DebugLogger.action("Quit signal received")
                self.scheduler.stop()
                return
            self.input_state.handle_event(event)

    def present(self):
        self.display.present(self.layers)
