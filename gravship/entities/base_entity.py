"""
base_entity.py
--------------
Foundational classes for everything drawn on a layer.

Coordinate System
-----------------
Entities use top-left coordinates local to their layer:
- (x, y) is where the entity's image is blitted
- width/height come from the source image and never change after spawn

Shared Layer
------------
Every instance of an entity type draws on the same DrawLayer. The layer and
its size are bound once per type with ``bind_layer`` before any instance is
constructed, e.g. ``Background.bind_layer(layers["background"])``.
"""


class Entity:
    """
    Base class for drawable game entities.

    Subclassed by Background, Ship and Wall.
    """

    # Shared per entity type, see bind_layer()
    layer = None
    canvas_width = 0
    canvas_height = 0

    def __init__(self, x=0.0, y=0.0, width=0, height=0, speed=0):
        """
        Args:
            x, y: Top-left position on the layer
            width, height: Size of the drawn image
            speed: Panning/scroll rate in pixels per frame
        """
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.speed = speed

    @classmethod
    def bind_layer(cls, layer):
        """Attach the drawing layer shared by every instance of this type."""
        cls.layer = layer
        cls.canvas_width = layer.width
        cls.canvas_height = layer.height

    def draw(self):
        """Render this entity. Override in subclasses."""
        pass

    def move(self, *args):
        """Advance this entity one frame. Override in subclasses."""
        pass


class PooledEntity(Entity):
    """
    Entity living in a RecyclingPool.

    Pooled entities are never destroyed: the pool flips ``alive`` through
    spawn() and clear() and reuses the same instance.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.alive = False

    def spawn(self, x, y, speed):
        """Bring a dead entity to life at (x, y) moving at speed."""
        self.x = float(x)
        self.y = float(y)
        self.speed = speed
        self.alive = True

    def draw(self):
        """
        Render one frame.

        Returns:
            bool: True once the entity has left the visible layer
        """
        return False

    def clear(self):
        """Erase from the layer and reset to the dead state."""
        self.x = 0.0
        self.y = 0.0
        self.speed = 0
        self.alive = False
