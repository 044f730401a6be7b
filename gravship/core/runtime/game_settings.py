"""
game_settings.py
----------------
Centralized constants for all game systems.

Tunable gameplay values (physics coefficients, pool size, asset paths) live in
config/game.yaml; this module only holds values the engine itself depends on.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 480
    FPS: int = 60
    CAPTION: str = "Gravship"
    VSYNC: bool = True


# ===========================================================
# Frame Scheduling
# ===========================================================

class Scheduler:
    """Frame pacing when no vsync-backed refresh signal is available."""
    FALLBACK_RATE: int = 180


# ===========================================================
# Pools
# ===========================================================

class Pools:
    """Default entity pool capacities."""
    WALLS: int = 30


# ===========================================================
# Physics
# ===========================================================

class Physics:
    """Fixed-step integration defaults for the player ship."""
    GRAVITY: float = 2.0
    DELTA: float = 0.1
    INITIAL_VELOCITY: float = 1.0
    IMPULSE: float = -6.0


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Compositing order, back to front."""
    BACKGROUND: str = "background"
    SHIP: str = "ship"
    MAIN: str = "main"

    ORDER = (BACKGROUND, SHIP, MAIN)


# ===========================================================
# Debug
# ===========================================================

class Debug:
    """Diagnostics toggles."""
    FRAME_TIME_WARNING: float = 16.67
