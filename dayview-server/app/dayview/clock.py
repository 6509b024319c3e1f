from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

import arrow

from .models import ClockState

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1.0

Listener = Callable[[ClockState], None]


class ClockSubscription:
    """Handle returned by ``LiveClock.start``; cancelling it stops the ticker."""

    def __init__(self, clock: "LiveClock"):
        self._clock = clock

    @property
    def active(self) -> bool:
        return self._clock.running

    def cancel(self):
        self._clock.stop()

    def __enter__(self) -> "ClockSubscription":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cancel()


class LiveClock:
    """
    Produces the current time at a fixed interval.

    The state is not ready until the first tick, which happens as soon as the
    clock is started. The worker thread is the only writer of the state; after
    ``stop()`` returns no listener is called again.
    """

    def __init__(self, interval: float = DEFAULT_INTERVAL, now: Callable[[], arrow.Arrow] = arrow.now):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self.interval = float(interval)
        self._now = now
        self._state = ClockState()
        self._listeners: List[Listener] = []
        self._lock = threading.RLock()
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def running(self) -> bool:
        return self._thread is not None and not self._stopped.is_set()

    def subscribe(self, listener: Listener):
        with self._lock:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def start(self) -> ClockSubscription:
        if self.running:
            return ClockSubscription(self)
        # each run gets its own stop flag so a worker left over from an
        # earlier run never sees it cleared
        self._stopped = threading.Event()
        self.tick()
        self._thread = threading.Thread(target=self._run, args=(self._stopped,), name="dayview-clock", daemon=True)
        self._thread.start()
        logger.debug("clock started, interval %.2fs", self.interval)
        return ClockSubscription(self)

    def stop(self):
        with self._lock:
            self._stopped.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None
        logger.debug("clock stopped")

    def tick(self, stopped: Optional[threading.Event] = None) -> ClockState:
        # the lock is held while notifying so stop() cannot return mid-tick
        with self._lock:
            if stopped is not None and stopped.is_set():
                return self._state
            self._state = ClockState(ready=True, time=self._now())
            state = self._state
            for listener in list(self._listeners):
                try:
                    listener(state)
                except Exception:
                    logger.exception("clock listener failed")
        return state

    def _run(self, stopped: threading.Event):
        while not stopped.wait(self.interval):
            self.tick(stopped)

    def __enter__(self) -> "LiveClock":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
