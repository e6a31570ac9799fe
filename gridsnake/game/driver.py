"""
Tick Driver - Calls GameEngine.tick() at a fixed interval.

Runs in a background thread. Use it as a context manager so the thread is
always stopped on teardown:

    with TickDriver(engine, interval_ms=100):
        ...
"""
import logging
import threading
from typing import Optional

from .engine import GameEngine

logger = logging.getLogger(__name__)


class TickDriver:
    """
    Fixed-interval tick source for a GameEngine.

    A tick that raises (e.g. BoardFullOrUnlucky) stops the driver. The
    error is kept in `error` and re-raised by join(); it is never retried.
    """

    def __init__(self, engine: GameEngine, interval_ms: Optional[int] = None):
        """
        Initialize the driver.

        Args:
            engine: Engine to tick
            interval_ms: Milliseconds between ticks (defaults to the
                engine's configured tick interval)
        """
        self.engine = engine
        self.interval_ms = interval_ms if interval_ms is not None else engine.config.tick_interval_ms
        if self.interval_ms <= 0:
            raise ValueError("interval_ms must be positive")

        self.thread: Optional[threading.Thread] = None
        self.error: Optional[BaseException] = None
        self.ticks = 0
        self._stop_event = threading.Event()

    @property
    def running(self) -> bool:
        return self.thread is not None and self.thread.is_alive()

    def start(self) -> "TickDriver":
        """
        Start the tick thread (no-op if already running).

        If a previous thread outlived stop()'s timeout, it is joined first so
        only one thread ever ticks the engine.
        """
        if self.running and not self._stop_event.is_set():
            return self
        if self.thread is not None and self.thread is not threading.current_thread():
            self.thread.join()

        self.error = None
        self._stop_event = threading.Event()
        self.thread = threading.Thread(
            target=self._tick_loop, args=(self._stop_event,), name="tick-driver", daemon=True
        )
        self.thread.start()
        logger.debug("Tick driver started at %d ms", self.interval_ms)
        return self

    def stop(self, timeout: float = 2.0):
        """
        Stop the tick thread and wait for it to exit.

        If the thread is still busy in a tick after `timeout` seconds it is
        left to finish; `running` stays True until it does.
        """
        self._stop_event.set()
        if self.thread is not None and self.thread is not threading.current_thread():
            self.thread.join(timeout=timeout)
        if self.running:
            logger.warning("Tick driver still finishing a tick after %.2fs", timeout)
        else:
            self.thread = None
        logger.debug("Tick driver stopped after %d ticks", self.ticks)

    def join(self, timeout: Optional[float] = None):
        """
        Wait for the driver to stop on its own.

        Raises:
            The error that stopped the driver, if any
        """
        if self.thread is not None:
            self.thread.join(timeout=timeout)
        if self.error is not None:
            raise self.error

    def _tick_loop(self, stop_event: threading.Event):
        """Main tick loop (runs in background thread)."""
        interval = self.interval_ms / 1000.0
        while not stop_event.wait(interval):
            try:
                self.engine.tick()
            except Exception as e:
                logger.error("Tick failed, stopping driver: %s", e)
                self.error = e
                stop_event.set()
                return
            self.ticks += 1

    def __enter__(self) -> "TickDriver":
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
