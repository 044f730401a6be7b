"""
recycling_pool.py
-----------------
Fixed-capacity object pool for obstacle entities.

Responsibilities
----------------
- Pre-allocate every pooled entity once, at construction.
- Hand out dead entities on acquire and silently drop requests when full.
- Step live entities each frame and recycle the ones that leave the layer.

Ordering
--------
Live entities always form a contiguous run at the head of the sequence and
dead ones fill the tail. acquire() takes from the tail and moves the entity
to the head; step_all() moves finished entities to the tail. Because of this
ordering both operations only ever look at the ends of the list, and the
per-frame scan stops at the first dead entity.
"""

from gravship.core.debug.debug_logger import DebugLogger


class RecyclingPool:
    """Holds a fixed number of PooledEntity instances and recycles them in place."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, capacity, factory):
        """
        Args:
            capacity (int): Number of entities to pre-allocate (>= 1).
            factory (callable): Zero-argument constructor for one entity.
        """
        if capacity < 1:
            raise ValueError(f"RecyclingPool capacity must be at least 1, got {capacity}")

        self.capacity = capacity
        self._pool = []

        for _ in range(capacity):
            entity = factory()
            entity.alive = False
            self._pool.append(entity)

        DebugLogger.state(
            f"Prewarmed {capacity} x {type(self._pool[0]).__name__} pool",
            category="pool"
        )

    # ===========================================================
    # Acquire
    # ===========================================================
    def acquire(self, x, y, speed):
        """
        Spawn the tail entity at (x, y) and move it to the head.

        Does nothing when the tail entity is alive (pool full).

        Returns:
            bool: True if an entity was spawned.
        """
        tail = self._pool[-1]
        if tail.alive:
            DebugLogger.trace("Pool full, acquire dropped", category="pool")
            return False

        tail.spawn(x, y, speed)
        self._pool.insert(0, self._pool.pop())
        DebugLogger.trace(f"Spawned {type(tail).__name__} at ({x}, {y})", category="entity_spawn")
        return True

    def acquire_two(self, x1, y1, speed1, x2, y2, speed2):
        """
        Spawn two entities together, or none at all.

        Proceeds only if the last two slots are both dead, so a paired request
        never produces a single entity.

        Returns:
            bool: True if both entities were spawned.
        """
        if self.capacity < 2:
            return False
        if self._pool[-1].alive or self._pool[-2].alive:
            return False

        self.acquire(x1, y1, speed1)
        self.acquire(x2, y2, speed2)
        return True

    # ===========================================================
    # Update Cycle
    # ===========================================================
    def step_all(self):
        """
        Draw every live entity once and recycle those that left the layer.

        Returns:
            int: Number of entities recycled this call.
        """
        recycled = 0
        i = 0
        # Every pass either advances i or sends one entity behind the live run,
        # so capacity passes are enough and keep i in range on a full pool.
        remaining = self.capacity

        while remaining and self._pool[i].alive:
            remaining -= 1
            entity = self._pool[i]
            if entity.draw():
                entity.clear()
                self._pool.append(self._pool.pop(i))
                recycled += 1
            else:
                i += 1

        if recycled:
            DebugLogger.trace(f"Recycled {recycled} entities", category="entity_cleanup")
        return recycled

    # ===========================================================
    # Introspection
    # ===========================================================
    def live_count(self):
        """Number of live entities (length of the live run at the head)."""
        count = 0
        for entity in self._pool:
            if not entity.alive:
                break
            count += 1
        return count

    def __len__(self):
        return self.capacity

    def __iter__(self):
        return iter(self._pool)

    def __getitem__(self, index):
        return self._pool[index]
