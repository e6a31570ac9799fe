"""
Input Mapper - Translates raw key input and focus changes into engine calls.

Accepts browser-style key codes (0x25-0x28), key names as reported by
pygame.key.name() or the DOM ("up", "ArrowUp", "w", ...), or Direction
members directly.
"""
import logging
from enum import Enum
from typing import Dict, Optional, Union

from .engine import GameEngine
from .grid_math import Direction

logger = logging.getLogger(__name__)


class Command(Enum):
    """Player commands."""
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"


COMMAND_DIRECTIONS: Dict[Command, Direction] = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}

KEY_CODES: Dict[int, Command] = {
    0x25: Command.MOVE_LEFT,
    0x26: Command.MOVE_UP,
    0x27: Command.MOVE_RIGHT,
    0x28: Command.MOVE_DOWN,
}

KEY_NAMES: Dict[str, Command] = {
    "up": Command.MOVE_UP,
    "arrowup": Command.MOVE_UP,
    "w": Command.MOVE_UP,
    "down": Command.MOVE_DOWN,
    "arrowdown": Command.MOVE_DOWN,
    "s": Command.MOVE_DOWN,
    "left": Command.MOVE_LEFT,
    "arrowleft": Command.MOVE_LEFT,
    "a": Command.MOVE_LEFT,
    "right": Command.MOVE_RIGHT,
    "arrowright": Command.MOVE_RIGHT,
    "d": Command.MOVE_RIGHT,
    "p": Command.TOGGLE_PAUSE,
    "space": Command.TOGGLE_PAUSE,
    "r": Command.RESTART,
}

Key = Union[int, str, Direction, Command]


def to_command(key: Key) -> Optional[Command]:
    """
    Resolve a raw key to a command.

    Args:
        key: Key code, key name, Direction or Command

    Returns:
        The bound command, or None for unbound keys
    """
    if isinstance(key, Command):
        return key
    if isinstance(key, Direction):
        for command, direction in COMMAND_DIRECTIONS.items():
            if direction == key:
                return command
    if isinstance(key, str):
        return KEY_NAMES.get(key.lower())
    if isinstance(key, int):
        return KEY_CODES.get(key)
    return None


class InputMapper:
    """Routes player input to a GameEngine."""

    def __init__(self, engine: GameEngine):
        self.engine = engine

    def handle_key(self, key: Key) -> bool:
        """
        Handle one key press.

        Unbound keys are ignored.

        Returns:
            True if the key changed the session
        """
        command = to_command(key)
        if command is None:
            return False
        return self.execute(command)

    def execute(self, command: Command) -> bool:
        """Run a command against the engine."""
        if command in COMMAND_DIRECTIONS:
            return self.engine.set_direction(COMMAND_DIRECTIONS[command])

        if command == Command.TOGGLE_PAUSE:
            if self.engine.session.paused:
                return self.engine.resume()
            return self.engine.pause()

        if command == Command.RESTART:
            logger.info("Restart requested")
            self.engine.reset()
            self.engine.resume()
            return True

        return False

    def focus_lost(self) -> bool:
        return self.engine.pause()

    def focus_gained(self) -> bool:
        return self.engine.resume()
