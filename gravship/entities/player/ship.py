"""
ship.py
-------
The player-controlled ship.

The ship falls under gravity and is pushed upward while the primary action
is held. It draws on its own layer using dirty rectangles: each frame only
the rectangle it occupied is erased before redrawing.

The ship also owns the wall pool, since walls are spawned relative to the
ship's run through the level.
"""

from gravship.core.debug.debug_logger import DebugLogger
from gravship.core.runtime.game_settings import Physics, Pools
from gravship.entities.base_entity import Entity
from gravship.entities.environments.wall import Wall
from gravship.systems.recycling_pool import RecyclingPool
from .ship_movement import update_movement


class Ship(Entity):
    """Represents the controllable player entity."""

    def __init__(self, x, y, image, wall_factory=None, wall_pool_size=Pools.WALLS,
                 speed=3, gravity=Physics.GRAVITY, initial_velocity=Physics.INITIAL_VELOCITY,
                 impulse=Physics.IMPULSE, delta=Physics.DELTA):
        """
        Args:
            x, y: Spawn position (top-left) on the ship layer
            image: Ship sprite; also defines width/height
            wall_factory: Zero-argument Wall constructor used to fill the pool
            wall_pool_size: Capacity of the wall pool
            speed: Horizontal speed (unused by vertical flight)
            gravity: Downward acceleration per unit step
            initial_velocity: Vertical velocity at spawn (positive is down)
            impulse: Velocity set while the primary action is held
            delta: Nominal integration step
        """
        super().__init__(x, y, image.get_width(), image.get_height(), speed)
        self.image = image

        self.gravity = gravity
        self.velocity = initial_velocity
        self.impulse = impulse
        self.delta = delta
        self.frame_count = 0

        self.wall_pool = None
        if wall_factory is not None:
            self.wall_pool = RecyclingPool(wall_pool_size, wall_factory)

        DebugLogger.init_entry("Ship")
        DebugLogger.init_sub(f"Spawn ({x:.0f}, {y:.0f}) size {self.width}x{self.height}")

    @classmethod
    def with_walls(cls, x, y, image, top_image, bottom_image, **kwargs):
        """Build a ship whose pool is filled with walls made from the two piece images."""
        return cls(x, y, image, wall_factory=lambda: Wall(top_image, bottom_image), **kwargs)

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self):
        self.layer.draw_image(self.image, self.x, self.y)

    def erase(self):
        """Clear the rectangle the ship currently occupies."""
        self.layer.clear_rect(self.x, self.y, self.width, self.height)

    # ===========================================================
    # Frame Step
    # ===========================================================

    def move(self, input_state):
        """
        Step one frame: redraw, apply input and gravity, redraw at the new position.

        Args:
            input_state (InputState): Current action states.
        """
        self.frame_count += 1
        self.draw()
        update_movement(self, input_state)
        self.draw()
