"""
Snake game engine for gridsnake.

Rendering lives in gridsnake.game.renderer (pygame) and
gridsnake.game.terminal_renderer (rich) and is imported separately, so the
engine has no display dependency.
"""

from .config import ConfigError, GameConfig
from .driver import TickDriver
from .engine import (
    Event,
    GameEngine,
    Pause,
    Reset,
    Resume,
    SetDirection,
    Tick,
    apply_event,
    tick_session,
)
from .food import BoardFullOrUnlucky, FoodPlacer, place_food, scan_food
from .grid_math import AXIS, OPPOSITE, Axis, Direction, is_legal_turn, step, to_index, to_xy
from .input import Command, InputMapper, to_command
from .snake_state import (
    Cell,
    GameSession,
    SessionState,
    advance_head,
    new_session,
    session_from_segments,
)

__all__ = [
    'AXIS',
    'OPPOSITE',
    'Axis',
    'BoardFullOrUnlucky',
    'Cell',
    'Command',
    'ConfigError',
    'Direction',
    'Event',
    'FoodPlacer',
    'GameConfig',
    'GameEngine',
    'GameSession',
    'InputMapper',
    'Pause',
    'Reset',
    'Resume',
    'SessionState',
    'SetDirection',
    'Tick',
    'TickDriver',
    'advance_head',
    'apply_event',
    'is_legal_turn',
    'new_session',
    'place_food',
    'scan_food',
    'session_from_segments',
    'step',
    'tick_session',
    'to_command',
    'to_index',
    'to_xy',
]
