"""
Game Engine - The snake state machine.

Transitions are expressed as a pure reducer, apply_event(), that takes an
immutable GameSession and an event and returns the next session, or None
when the event changes nothing. GameEngine owns the single live session,
runs the reducer one event at a time and notifies observers.
"""
import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Union

from .config import GameConfig
from .food import FoodPlacer
from .grid_math import Direction, is_legal_turn, step
from .snake_state import (
    Cell,
    GameSession,
    SessionState,
    advance_head,
    new_session,
    with_direction,
    with_food,
    with_game_over,
    with_paused,
)

logger = logging.getLogger(__name__)

SessionListener = Callable[[GameSession], None]


@dataclass(frozen=True)
class Tick:
    """Advance the snake by one cell."""


@dataclass(frozen=True)
class SetDirection:
    """Request a new movement direction."""
    direction: Direction


@dataclass(frozen=True)
class Pause:
    """Stop reacting to ticks."""


@dataclass(frozen=True)
class Resume:
    """Start reacting to ticks."""


@dataclass(frozen=True)
class Reset:
    """Replace the session with a fresh one."""


Event = Union[Tick, SetDirection, Pause, Resume, Reset]


def tick_session(session: GameSession, food_placer: FoodPlacer) -> Optional[GameSession]:
    """
    Run one simulation step.

    Args:
        session: Current session
        food_placer: Placer used when food is absent after the move

    Returns:
        Next session, or None if the session is not running

    Raises:
        BoardFullOrUnlucky: If food could not be placed
    """
    if session.state != SessionState.RUNNING:
        return None

    new_head = step(session.head, session.direction, session.rows, session.cols)
    target = session.cell(new_head)

    if target == Cell.BODY:
        return with_game_over(session)

    nxt = advance_head(session, new_head, ate_food=target == Cell.FOOD)

    if nxt.food is None:
        index = food_placer.place(nxt.board, nxt.rows, nxt.cols)
        nxt = with_food(nxt, index)

    return nxt


def apply_event(
    session: GameSession,
    event: Event,
    config: GameConfig,
    food_placer: FoodPlacer
) -> Optional[GameSession]:
    """
    Compute the session that follows an event.

    Args:
        session: Current session (not modified)
        event: Event to apply
        config: Game configuration, used by Reset
        food_placer: Food placer, used by Tick

    Returns:
        The next session, or None if the event is a no-op in this state
    """
    if isinstance(event, Reset):
        return new_session(config.num_rows, config.num_cols, config.start_index)

    if session.game_over:
        return None

    if isinstance(event, Tick):
        return tick_session(session, food_placer)

    if isinstance(event, SetDirection):
        if not is_legal_turn(session.direction, event.direction):
            return None
        return with_direction(session, event.direction)

    if isinstance(event, Pause):
        return None if session.paused else with_paused(session, True)

    if isinstance(event, Resume):
        return with_paused(session, False) if session.paused else None

    raise TypeError(f"Unknown event: {event!r}")


class GameEngine:
    """
    Owns the live game session and applies control operations to it.

    Every operation runs to completion under a lock, so a timer thread and
    an input thread never interleave. Observers receive the new session
    after each change; sessions are immutable, so they can keep it.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        food_placer: Optional[FoodPlacer] = None,
        on_focus_request: Optional[Callable[[], None]] = None
    ):
        """
        Initialize the engine.

        Args:
            config: Game configuration (defaults to GameConfig()). The
                engine keeps its own copy; later changes to the passed
                object do not reach it.
            food_placer: Food placer (defaults to one built from config)
            on_focus_request: Called on resume() so the presentation layer
                can grab input focus

        Raises:
            ConfigError: If the configuration is invalid
        """
        self.config = replace(config or GameConfig()).validate()
        self.food_placer = food_placer or FoodPlacer(
            rng=self.config.seed,
            max_attempts=self.config.max_food_attempts,
            strategy=self.config.food_strategy,
        )
        self.on_focus_request = on_focus_request

        self._lock = threading.RLock()
        self._listeners: List[SessionListener] = []
        self._session = self._fresh_session()

    def _fresh_session(self) -> GameSession:
        return new_session(self.config.num_rows, self.config.num_cols, self.config.start_index)

    @property
    def session(self) -> GameSession:
        """The current (immutable) session."""
        return self._session

    @property
    def state(self) -> SessionState:
        return self._session.state

    def snapshot(self) -> Dict[str, Any]:
        """Get the current session as a plain dictionary."""
        return self._session.to_dict()

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener for session changes.

        Args:
            listener: Called with the new session after every change

        Returns:
            Callable that removes the listener
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event) -> bool:
        """
        Apply an event to the live session.

        Args:
            event: Event to apply

        Returns:
            True if the session changed

        Raises:
            BoardFullOrUnlucky: If a tick could not place food; the live
                session is left as it was before the tick
        """
        with self._lock:
            previous = self._session
            nxt = apply_event(previous, event, self.config, self.food_placer)
            if nxt is None:
                return False

            self._session = nxt
            self._log_transition(previous, nxt, event)
            self._notify(nxt)
            return True

    def _log_transition(self, previous: GameSession, nxt: GameSession, event: Event):
        if nxt.game_over and not previous.game_over:
            logger.info("Game over: snake hit itself at length %d", nxt.length)
        elif isinstance(event, Reset):
            logger.info("Game reset")
        elif previous.state != nxt.state:
            logger.debug("Session %s -> %s", previous.state.value, nxt.state.value)
        elif nxt.length > previous.length:
            logger.debug("Snake grew to length %d", nxt.length)

    def _notify(self, session: GameSession):
        for listener in list(self._listeners):
            try:
                listener(session)
            except Exception:
                logger.exception("Session listener %r failed", listener)
                raise

    def tick(self) -> bool:
        """Advance the simulation by one step (only while running)."""
        return self.dispatch(Tick())

    def set_direction(self, direction: Direction) -> bool:
        """Change direction; illegal turns are silently ignored."""
        return self.dispatch(SetDirection(Direction(direction)))

    def pause(self) -> bool:
        return self.dispatch(Pause())

    def resume(self) -> bool:
        """Resume a paused game and request input focus."""
        changed = self.dispatch(Resume())
        if self.on_focus_request is not None:
            self.on_focus_request()
        return changed

    def reset(self) -> bool:
        """Start a fresh, paused session."""
        return self.dispatch(Reset())
