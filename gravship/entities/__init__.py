"""
gravship/entities/__init__.py
-----------------------------
Entity base classes shared by the background, ship and walls.
"""

from gravship.entities.base_entity import Entity, PooledEntity

__all__ = [
    'Entity',
    'PooledEntity',
]
