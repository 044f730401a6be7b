"""
input_state.py
--------------
Keyboard state for the fixed set of game actions.

Provides:
- Key-to-action bindings (space + arrow keys)
- Held state per action, toggled by KEYDOWN / KEYUP
- Event consumption so bound keys are not handled elsewhere

Threading
---------
pygame delivers events on the main thread, the same thread that runs the
frame callback, so reads and writes never overlap and no lock is taken.
Feeding events from another thread would need a lock around _held.
"""

import pygame

from gravship.core.debug.debug_logger import DebugLogger


# ===========================================================
# Actions & Default Key Bindings
# ===========================================================

PRIMARY = "primary"
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"

ACTIONS = (UP, DOWN, LEFT, RIGHT, PRIMARY)

DEFAULT_KEY_BINDINGS = {
    pygame.K_SPACE: PRIMARY,
    pygame.K_LEFT: LEFT,
    pygame.K_UP: UP,
    pygame.K_RIGHT: RIGHT,
    pygame.K_DOWN: DOWN,
}


class InputState:
    """
    Held/released state for each action.

    Usage:
        if input_state.held("primary"):
            ship.velocity = impulse
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {pygame key: action name}; DEFAULT_KEY_BINDINGS if None
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._held = {action: False for action in ACTIONS}

        unknown = set(self.key_bindings.values()) - set(ACTIONS)
        if unknown:
            raise ValueError(f"Unknown actions in key bindings: {sorted(unknown)}")

        DebugLogger.init_entry("InputState")

    # ===========================================================
    # Event Hooks
    # ===========================================================

    def on_action_down(self, action: str):
        """Mark action as held."""
        if action not in self._held:
            DebugLogger.warn(f"Ignoring unknown action '{action}'", category="input")
            return
        self._held[action] = True
        DebugLogger.trace(f"{action} down", category="input")

    def on_action_up(self, action: str):
        """Mark action as released."""
        if action not in self._held:
            DebugLogger.warn(f"Ignoring unknown action '{action}'", category="input")
            return
        self._held[action] = False
        DebugLogger.trace(f"{action} up", category="input")

    def handle_event(self, event) -> bool:
        """
        Route a pygame key event to the matching hook.

        Returns:
            bool: True if the event was a bound key and has been consumed
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        action = self.key_bindings.get(event.key)
        if action is None:
            return False

        if event.type == pygame.KEYDOWN:
            self.on_action_down(action)
        else:
            self.on_action_up(action)
        return True

    # ===========================================================
    # Queries
    # ===========================================================

    def held(self, action: str) -> bool:
        """True while any key bound to action is down."""
        return self._held.get(action, False)

    def snapshot(self) -> dict:
        """Copy of the current action states."""
        return dict(self._held)
