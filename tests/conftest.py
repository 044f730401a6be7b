"""
conftest.py
-----------
Shared pytest configuration and fixtures for Gravship tests.

Contains:
- Headless SDL setup so pygame surfaces and events work without a screen
- Mock drawing layers and input state
- Surface helpers
"""

import os
import sys

# Must be set before pygame initializes any SDL subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import MagicMock

import pygame
import pytest

from gravship.entities.environments.wall import Wall
from gravship.entities.player.ship import Ship
from gravship.graphics.background import Background


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    """Initialize pygame once against the dummy drivers."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def unbind_entity_layers():
    """Drop per-type layer bindings so tests cannot leak layers into each other."""
    yield
    for cls in (Background, Ship, Wall):
        for attr in ("layer", "canvas_width", "canvas_height"):
            if attr in cls.__dict__:
                delattr(cls, attr)


# ===========================================================
# Common mock fixtures
# ===========================================================

@pytest.fixture
def mock_layer():
    """Mock DrawLayer with an 800x480 surface."""
    return create_mock_layer(800, 480)


@pytest.fixture
def make_surface():
    return create_surface


@pytest.fixture
def make_layer():
    return create_mock_layer


@pytest.fixture
def mock_input_state():
    """Mock InputState with every action released."""
    input_state = MagicMock()
    input_state.held.return_value = False
    return input_state


# ===========================================================
# Test utilities
# ===========================================================

def create_mock_layer(width, height):
    layer = MagicMock()
    layer.width = width
    layer.height = height
    return layer


def create_surface(width=32, height=32, color=(255, 255, 255)):
    """Create a real, filled pygame.Surface."""
    surface = pygame.Surface((width, height))
    surface.fill(color)
    return surface


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests that run several systems together")
