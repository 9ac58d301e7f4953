from __future__ import annotations
import logging
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 20   # ~50 ticks per second


class FixedStepScheduler:
    """
    Calls `callback` once per `interval_ms` of accumulated frame time while running.

    The host feeds wall time in with advance(dt_ms) from its render loop. The
    callback may stop the scheduler; any backlog is dropped at that point.
    """

    def __init__(self, callback: Callable[[], None], interval_ms: int = DEFAULT_INTERVAL_MS, max_steps: int = 5):
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.callback = callback
        self.interval_ms = interval_ms
        self.max_steps = max_steps
        self._running = False
        self._in_tick = False
        self._acc_ms = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._acc_ms = 0.0
        logger.debug("scheduler started (interval=%sms)", self.interval_ms)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._acc_ms = 0.0
        logger.debug("scheduler stopped")

    def advance(self, dt_ms: float) -> int:
        """Run the due ticks and return how many ran."""
        if not self._running or self._in_tick:
            return 0

        self._acc_ms += dt_ms
        steps = 0
        while self._running and self._acc_ms >= self.interval_ms and steps < self.max_steps:
            self._acc_ms -= self.interval_ms
            self._in_tick = True
            try:
                self.callback()
            finally:
                self._in_tick = False
            steps += 1

        # Stalled frame: forget the rest rather than replaying it later
        if steps >= self.max_steps:
            self._acc_ms = 0.0
        if not self._running:
            self._acc_ms = 0.0
        return steps
