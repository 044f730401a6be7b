"""
ship_movement.py
----------------
Vertical flight integration for the player ship.

Responsibilities
----------------
- Apply the upward impulse while the primary action is held.
- Integrate position and velocity with explicit Euler steps.

The step size is the ship's ``delta`` attribute, a fixed nominal value rather
than measured frame time, so game speed follows the frame rate. Passing a
measured delta to integrate() is the only change needed to decouple them.
"""

from gravship.core.services.input_state import PRIMARY


def apply_impulse(ship):
    """Replace the current velocity with the upward impulse."""
    ship.erase()
    ship.velocity = ship.impulse


def integrate(ship, delta):
    """One Euler step: position from velocity, then velocity from gravity."""
    ship.erase()
    ship.y += ship.velocity
    ship.velocity += ship.gravity * delta


def update_movement(ship, input_state):
    """
    Advance the ship one frame.

    Args:
        ship (Ship): The ship being stepped.
        input_state (InputState): Current action states.
    """
    if input_state.held(PRIMARY):
        apply_impulse(ship)

    integrate(ship, ship.delta)
