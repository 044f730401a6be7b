"""
Runtime configuration exports.

Provides engine-wide constants. All exports are lightweight class constants
with no initialization overhead.
"""

from gravship.core.runtime.game_settings import (
    Display,
    Scheduler,
    Physics,
    Pools,
    Layers,
    Debug,
)

__all__ = [
    'Display',
    'Scheduler',
    'Physics',
    'Pools',
    'Layers',
    'Debug',
]
