"""
Tests for the tick driver and input mapping.
"""

import threading
import time
from unittest.mock import MagicMock

import pytest

from gridsnake.game.driver import TickDriver
from gridsnake.game.engine import GameEngine
from gridsnake.game.food import BoardFullOrUnlucky
from gridsnake.game.grid_math import Direction
from gridsnake.game.input import Command, InputMapper, to_command
from gridsnake.game.snake_state import SessionState


def wait_for(condition, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.005)
    return False


class TestTickDriver:
    """Tests for the threaded tick driver."""

    def test_defaults_to_configured_interval(self, config_5x5):
        engine = GameEngine(config_5x5)

        assert TickDriver(engine).interval_ms == config_5x5.tick_interval_ms

    def test_rejects_non_positive_interval(self, config_5x5):
        with pytest.raises(ValueError):
            TickDriver(GameEngine(config_5x5), interval_ms=0)

    def test_context_manager_ticks_and_stops(self, running_engine):
        """The driver ticks while inside the block and is stopped on exit."""
        with TickDriver(running_engine, interval_ms=5) as driver:
            assert driver.running
            assert wait_for(lambda: driver.ticks >= 3)

        assert not driver.running
        ticks_after_stop = driver.ticks
        time.sleep(0.03)
        assert driver.ticks == ticks_after_stop
        assert driver.error is None

    def test_start_is_idempotent(self, running_engine):
        driver = TickDriver(running_engine, interval_ms=5)
        try:
            driver.start()
            thread = driver.thread
            driver.start()
            assert driver.thread is thread
        finally:
            driver.stop()

    def test_restart_after_stop_timeout_keeps_one_thread(self, running_engine):
        """A tick that outlives stop()'s timeout is joined before restarting."""
        in_slow_tick = threading.Event()

        def slow_listener(session):
            if not in_slow_tick.is_set():
                in_slow_tick.set()
                time.sleep(0.3)

        running_engine.subscribe(slow_listener)
        driver = TickDriver(running_engine, interval_ms=5).start()
        try:
            assert in_slow_tick.wait(timeout=2.0)

            driver.stop(timeout=0.01)
            assert driver.running

            driver.start()
            alive = [t for t in threading.enumerate() if t.name == "tick-driver" and t.is_alive()]
            assert alive == [driver.thread]
        finally:
            driver.stop()

        assert not driver.running
        assert driver.error is None

    def test_stops_on_tick_error(self):
        """A failing tick stops the driver; join() re-raises the error."""
        engine = MagicMock()
        engine.config.tick_interval_ms = 5
        engine.tick.side_effect = BoardFullOrUnlucky(500, 1, 1)

        driver = TickDriver(engine).start()

        with pytest.raises(BoardFullOrUnlucky):
            driver.join(timeout=2.0)

        assert isinstance(driver.error, BoardFullOrUnlucky)
        assert engine.tick.call_count == 1
        driver.stop()


class TestToCommand:
    """Tests for raw key resolution."""

    @pytest.mark.parametrize("key,command", [
        (0x25, Command.MOVE_LEFT),
        (0x26, Command.MOVE_UP),
        (0x27, Command.MOVE_RIGHT),
        (0x28, Command.MOVE_DOWN),
        ("ArrowUp", Command.MOVE_UP),
        ("left", Command.MOVE_LEFT),
        ("S", Command.MOVE_DOWN),
        ("d", Command.MOVE_RIGHT),
        ("p", Command.TOGGLE_PAUSE),
        ("r", Command.RESTART),
        (Direction.UP, Command.MOVE_UP),
        (Command.RESTART, Command.RESTART),
    ])
    def test_bound_keys(self, key, command):
        assert to_command(key) == command

    @pytest.mark.parametrize("key", [0x41, "q", "", 3.5])
    def test_unbound_keys(self, key):
        assert to_command(key) is None


class TestInputMapper:
    """Tests for routing input to the engine."""

    def test_arrow_codes_steer(self, running_engine):
        controls = InputMapper(running_engine)

        assert controls.handle_key(0x25) is False  # reversal rejected
        assert controls.handle_key(0x26) is True
        assert running_engine.session.direction == Direction.UP

    def test_unbound_key_ignored(self, running_engine):
        controls = InputMapper(running_engine)
        before = running_engine.session

        assert controls.handle_key("x") is False
        assert running_engine.session is before

    def test_toggle_pause(self, running_engine):
        controls = InputMapper(running_engine)

        controls.handle_key("p")
        assert running_engine.state == SessionState.PAUSED

        controls.handle_key("space")
        assert running_engine.state == SessionState.RUNNING

    def test_focus_changes(self, running_engine):
        controls = InputMapper(running_engine)

        assert controls.focus_lost() is True
        assert running_engine.state == SessionState.PAUSED
        assert controls.focus_gained() is True
        assert running_engine.state == SessionState.RUNNING

    def test_restart_resets_and_resumes(self, running_engine):
        controls = InputMapper(running_engine)
        running_engine.set_direction(Direction.UP)
        running_engine.tick()

        assert controls.handle_key("r") is True

        assert running_engine.session.snake == (12,)
        assert running_engine.session.food is None
        assert running_engine.session.direction == Direction.RIGHT
        assert running_engine.state == SessionState.RUNNING
