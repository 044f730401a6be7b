"""
test_game_session.py
--------------------
Tests for GameSession wiring, lifecycle and the per-frame animate step.

The window is replaced with a mock DisplayManager; layers, entities, pool
and scheduler are real.
"""

from unittest.mock import MagicMock, patch

import pygame
import pytest

from gravship.core.runtime.game_session import DEFAULT_CONFIG, GameSession, SessionState
from gravship.core.runtime.game_settings import Layers, Pools
from gravship.core.services.config_manager import _merge_dicts
from gravship.core.services.input_state import PRIMARY, InputState
from gravship.entities.environments.wall import Wall
from gravship.entities.player.ship import Ship
from gravship.graphics.asset_store import AssetStore
from gravship.graphics.background import Background


MODULE = "gravship.core.runtime.game_session"


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def assets(make_surface, monkeypatch):
    monkeypatch.setattr(pygame.display, "get_surface", lambda: None)
    store = AssetStore({})
    store.register("background", make_surface(200, 100, (10, 10, 40)))
    store.register("ship", make_surface(20, 10, (230, 200, 60)))
    store.register("wall_top", make_surface(16, 40))
    store.register("wall_bottom", make_surface(16, 40))
    return store


@pytest.fixture
def mock_display():
    display = MagicMock()
    display.size = (200, 100)
    display.vsync = False
    return display


@pytest.fixture
def display_cls(mock_display):
    with patch(f"{MODULE}.DisplayManager", return_value=mock_display) as cls:
        yield cls


def make_config(**walls):
    return _merge_dicts(DEFAULT_CONFIG, {"walls": walls})


@pytest.fixture
def session(assets, display_cls):
    return GameSession(assets, make_config(spawn_interval=2))


# ===========================================================
# initialize()
# ===========================================================

class TestInitialize:

    def test_starts_uninitialized(self, session):
        assert session.state == SessionState.UNINITIALIZED

    def test_success_builds_entities(self, session):
        assert session.initialize() is True

        assert session.state == SessionState.READY
        assert isinstance(session.background, Background)
        assert isinstance(session.ship, Ship)
        assert len(session.ship.wall_pool) == 30

    def test_binds_each_type_to_its_layer(self, session):
        session.initialize()

        assert Background.layer is session.layers[Layers.BACKGROUND]
        assert Ship.layer is session.layers[Layers.SHIP]
        assert Wall.layer is session.layers[Layers.MAIN]
        assert (Ship.canvas_width, Ship.canvas_height) == (200, 100)

    def test_ship_spawn_position(self, session):
        session.initialize()

        assert session.ship.x == 200 / 2 - 20 + 30
        assert session.ship.y == 100 / 2 - 10 + 30

    def test_ship_uses_configured_physics(self, assets, display_cls):
        config = _merge_dicts(DEFAULT_CONFIG, {"ship": {"gravity": 4.0, "delta": 0.5}})
        session = GameSession(assets, config)
        session.initialize()

        assert session.ship.gravity == 4.0
        assert session.ship.delta == 0.5

    def test_partial_config_falls_back_to_defaults(self, assets, display_cls):
        session = GameSession(assets, {"walls": {"spawn_interval": 5}})

        assert session.initialize() is True
        assert session.wall_spawn_interval == 5
        assert session.walls_enabled is True
        assert session.background.speed == DEFAULT_CONFIG["background"]["speed"]
        assert len(session.ship.wall_pool) == Pools.WALLS

    def test_unsupported_display_returns_false(self, assets):
        with patch(f"{MODULE}.DisplayManager", side_effect=pygame.error("no video device")):
            session = GameSession(assets)
            assert session.initialize() is False

        assert session.state == SessionState.UNINITIALIZED
        assert session.ship is None


# ===========================================================
# start() / animate()
# ===========================================================

class TestStart:

    def test_start_requires_ready(self, session):
        with pytest.raises(RuntimeError):
            session.start()

    def test_start_runs_first_frame_and_schedules_next(self, session):
        session.initialize()

        session.start()

        assert session.state == SessionState.RUNNING
        assert session.background.x == -1
        assert session.ship.frame_count == 1
        assert session.scheduler.has_pending()

    def test_each_frame_pans_and_steps(self, session):
        session.initialize()
        session.start()
        start_y = session.ship.y

        for _ in range(3):
            session.scheduler.run_frame()

        assert session.background.x == -4
        assert session.ship.frame_count == 4
        assert session.ship.y > start_y

    def test_primary_action_lifts_ship(self, session):
        session.initialize()
        session.start()
        session.input_state.on_action_down(PRIMARY)
        before = session.ship.y

        session.scheduler.run_frame()

        assert session.ship.y == pytest.approx(before - 6)

    def test_boot_initializes_and_starts(self, session):
        session.boot()
        assert session.state == SessionState.RUNNING

    def test_boot_does_not_start_without_display(self, assets):
        with patch(f"{MODULE}.DisplayManager", side_effect=pygame.error("no video device")):
            session = GameSession(assets)
            session.boot()

        assert session.state == SessionState.UNINITIALIZED


# ===========================================================
# Walls
# ===========================================================

class TestWalls:

    def test_spawns_on_interval(self, session):
        session.initialize()
        session.start()                 # frame 1
        assert session.ship.wall_pool.live_count() == 0

        session.scheduler.run_frame()   # frame 2
        assert session.ship.wall_pool.live_count() == 1
        assert session.ship.wall_pool[0].x == 200 - 1

        session.scheduler.run_frame()
        session.scheduler.run_frame()   # frame 4
        assert session.ship.wall_pool.live_count() == 2

    def test_walls_recycle_after_crossing(self, assets, display_cls):
        session = GameSession(assets, make_config(spawn_interval=1000, speed=50))
        session.initialize()
        session._frames_since_wall = 999
        session.start()                 # spawn at x=200, drawn at 150

        # 150 -> 100 -> 50 -> 0 -> -50 (<= -16): recycled on the 4th extra frame
        for _ in range(4):
            session.scheduler.run_frame()

        assert session.ship.wall_pool.live_count() == 0

    def test_disabled_walls_stay_inert(self, assets, display_cls):
        session = GameSession(assets, make_config(enabled=False, spawn_interval=1))
        session.initialize()
        session.start()
        for _ in range(5):
            session.scheduler.run_frame()

        assert session.ship.wall_pool.live_count() == 0


# ===========================================================
# Events / loop
# ===========================================================

class TestEvents:

    def test_quit_stops_scheduler(self, session):
        session.initialize()
        session.start()

        with patch(f"{MODULE}.pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
            session.handle_events()

        assert session.scheduler.running is False
        assert not session.scheduler.has_pending()

    def test_key_events_reach_input_state(self, assets, display_cls):
        input_state = InputState()
        session = GameSession(assets, input_state=input_state)
        session.initialize()

        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
        with patch(f"{MODULE}.pygame.event.get", return_value=[event]):
            session.handle_events()

        assert input_state.held(PRIMARY)

    def test_present_delegates_to_display(self, session, mock_display):
        session.initialize()
        session.present()

        mock_display.present.assert_called_once_with(session.layers)

    def test_run_before_start_does_nothing(self, session):
        session.initialize()
        session.run()
        assert session.state == SessionState.READY

    @pytest.mark.integration
    def test_run_until_quit(self, session):
        session.initialize()
        session.start()
        session.scheduler.clock = MagicMock()

        frames = iter([[], [], [pygame.event.Event(pygame.QUIT)]])
        with patch(f"{MODULE}.pygame.event.get", side_effect=lambda: next(frames)):
            session.run()

        assert session.ship.frame_count == 3
        assert session.background.x == -3
