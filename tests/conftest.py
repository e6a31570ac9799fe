"""
Pytest configuration and fixtures for gridsnake tests.

This module sets up pygame mocking to allow testing the renderer
without requiring a display or actual pygame initialization.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import numpy as np
import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def create_mock_pygame():
    """Create a mock of the parts of pygame the renderer touches."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 700
    mock_surface.get_height.return_value = 770
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_font = MagicMock()
    rendered_text = MagicMock()
    rendered_text.get_width.return_value = 100
    mock_font.render.return_value = rendered_text
    mock_pygame.font.Font.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None
    mock_pygame.draw.circle.return_value = None

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any renderer imports.

    Renderer modules must be imported inside tests, after this runs.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


class ScriptedRng:
    """Stand-in random generator that returns a fixed sequence of samples."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def integers(self, low, high=None):
        self.calls.append((low, high))
        value = self.values[(len(self.calls) - 1) % len(self.values)]
        return np.int64(value)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng


@pytest.fixture
def config_5x5():
    """5x5 grid with the snake starting in the centre."""
    from gridsnake.game.config import GameConfig

    return GameConfig(start_index=12, num_rows=5, num_cols=5, seed=1234)


@pytest.fixture
def running_engine(config_5x5):
    """Engine on a 5x5 grid, already resumed."""
    from gridsnake.game.engine import GameEngine

    engine = GameEngine(config_5x5)
    engine.resume()
    return engine
