"""
test_ship.py
------------
Regression tests for the Ship entity and its flight integration.

Covers:
- Euler integration of velocity and position without input
- Impulse override while the primary action is held
- Dirty-rectangle erase/redraw calls per frame
- Wall pool ownership
- Configurable timestep
"""

from unittest.mock import MagicMock

import pytest

from gravship.core.runtime.game_settings import Pools
from gravship.core.services.input_state import PRIMARY
from gravship.entities.player.ship import Ship
from gravship.entities.player.ship_movement import integrate


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def ship_image(make_surface):
    return make_surface(38, 28, (230, 200, 60))


@pytest.fixture
def ship(mock_layer, ship_image):
    Ship.bind_layer(mock_layer)
    return Ship(100, 200, ship_image, gravity=2, initial_velocity=1, impulse=-6, delta=0.1)


@pytest.fixture
def thrust_held():
    """InputState mock with only the primary action held."""
    input_state = MagicMock()
    input_state.held.side_effect = lambda action: action == PRIMARY
    return input_state


# ===========================================================
# Physics
# ===========================================================

class TestFreeFall:

    @pytest.mark.parametrize("steps", [1, 5, 25])
    def test_velocity_grows_linearly(self, ship, mock_input_state, steps):
        for _ in range(steps):
            ship.move(mock_input_state)

        assert ship.velocity == pytest.approx(1 + 0.2 * steps)

    def test_position_is_cumulative_sum_of_velocities(self, ship, mock_input_state):
        expected_y = 200.0
        for k in range(20):
            expected_y += 1 + 0.2 * k
            ship.move(mock_input_state)
            assert ship.y == pytest.approx(expected_y)

    def test_x_is_unchanged(self, ship, mock_input_state):
        for _ in range(10):
            ship.move(mock_input_state)
        assert ship.x == 100

    def test_custom_delta(self, mock_layer, ship_image, mock_input_state):
        Ship.bind_layer(mock_layer)
        ship = Ship(0, 0, ship_image, gravity=2, initial_velocity=1, delta=0.05)

        for _ in range(10):
            ship.move(mock_input_state)

        assert ship.velocity == pytest.approx(2.0)

    def test_integrate_accepts_explicit_delta(self, ship):
        integrate(ship, 0.5)

        assert ship.y == pytest.approx(201)
        assert ship.velocity == pytest.approx(2)


class TestImpulse:

    @pytest.mark.parametrize("prior_velocity", [-20.0, 0.0, 1.0, 57.3])
    def test_impulse_replaces_velocity_before_gravity(self, ship, thrust_held, prior_velocity):
        ship.velocity = prior_velocity

        ship.move(thrust_held)

        assert ship.y == pytest.approx(200 - 6)
        assert ship.velocity == pytest.approx(-6 + 0.2)

    def test_holding_reapplies_every_frame(self, ship, thrust_held):
        for _ in range(3):
            ship.move(thrust_held)

        assert ship.y == pytest.approx(200 - 18)
        assert ship.velocity == pytest.approx(-5.8)

    def test_release_resumes_falling(self, ship, thrust_held, mock_input_state):
        ship.move(thrust_held)
        ship.move(mock_input_state)

        assert ship.y == pytest.approx(200 - 6 - 5.8)
        assert ship.velocity == pytest.approx(-5.6)


# ===========================================================
# Rendering
# ===========================================================

class TestRendering:

    def test_move_draws_before_and_after_step(self, ship, mock_layer, mock_input_state, ship_image):
        ship.move(mock_input_state)

        calls = mock_layer.draw_image.call_args_list
        assert len(calls) == 2
        assert calls[0].args == (ship_image, 100, 200)
        assert calls[1].args == (ship_image, 100, pytest.approx(201))

    def test_erases_previous_rectangle(self, ship, mock_layer, mock_input_state):
        ship.move(mock_input_state)

        mock_layer.clear_rect.assert_called_once_with(100, 200, 38, 28)

    def test_impulse_erases_twice(self, ship, mock_layer, thrust_held):
        ship.move(thrust_held)

        assert mock_layer.clear_rect.call_count == 2

    def test_frame_counter(self, ship, mock_input_state):
        for _ in range(4):
            ship.move(mock_input_state)
        assert ship.frame_count == 4

    def test_size_from_image(self, ship):
        assert (ship.width, ship.height) == (38, 28)


# ===========================================================
# Wall pool ownership
# ===========================================================

class TestWallPool:

    def test_with_walls_builds_dead_pool(self, mock_layer, ship_image, make_surface):
        Ship.bind_layer(mock_layer)
        ship = Ship.with_walls(
            0, 0, ship_image,
            make_surface(48, 160), make_surface(48, 160),
            wall_pool_size=30,
        )

        assert len(ship.wall_pool) == 30
        assert ship.wall_pool.live_count() == 0

    def test_default_pool_size_from_settings(self, mock_layer, ship_image, make_surface):
        Ship.bind_layer(mock_layer)
        ship = Ship.with_walls(0, 0, ship_image, make_surface(48, 160), make_surface(48, 160))

        assert len(ship.wall_pool) == Pools.WALLS

    def test_no_factory_no_pool(self, ship):
        assert ship.wall_pool is None
