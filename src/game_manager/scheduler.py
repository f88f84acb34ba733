"""Timer abstraction used for presentation pacing.

The controller never sleeps. It hands callbacks to a scheduler, so a real
game can use wall-clock delays while tests drive a virtual clock.
"""

import heapq
import itertools
import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, List, Tuple

logger = logging.getLogger(__name__)


class ScheduledCall:
    """Handle for a pending callback."""

    def __init__(self, callback: Callable[[], None], deadline: float):
        self.callback = callback
        self.deadline = deadline
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if self.cancelled or self.fired:
            return
        self.fired = True
        self.callback()


class Scheduler(ABC):
    """Runs callbacks after a delay."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Arrange for *callback* to run after *delay* seconds."""


class ImmediateScheduler(Scheduler):
    """Runs every callback synchronously, ignoring the delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(callback, deadline=0.0)
        call.fire()
        return call


class ThreadingScheduler(Scheduler):
    """Wall-clock delays backed by :class:`threading.Timer`."""

    def __init__(self):
        self._timers: List[threading.Timer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(callback, deadline=delay)
        timer = threading.Timer(delay, call.fire)
        timer.daemon = True
        self._timers = [t for t in self._timers if t.is_alive()]
        self._timers.append(timer)
        timer.start()
        return call

    def shutdown(self):
        """Cancel every timer that has not fired yet."""
        for timer in self._timers:
            timer.cancel()
        self._timers.clear()


class ManualScheduler(Scheduler):
    """Virtual clock: callbacks fire only when time is advanced."""

    def __init__(self):
        self.now = 0.0
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(callback, deadline=self.now + delay)
        heapq.heappush(self._queue, (call.deadline, next(self._seq), call))
        return call

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to fire."""
        return sum(1 for _, _, call in self._queue if not call.cancelled)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due callbacks in deadline order.

        Callbacks scheduled by a firing callback are honoured if they fall
        inside the advanced window.

        Returns:
            Number of callbacks fired.
        """
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, call = heapq.heappop(self._queue)
            self.now = deadline
            if call.cancelled:
                continue
            call.fire()
            fired += 1
        self.now = target
        return fired

    def run_all(self) -> int:
        """Fire everything queued, including callbacks queued along the way."""
        fired = 0
        while self._queue:
            deadline, _, call = heapq.heappop(self._queue)
            self.now = max(self.now, deadline)
            if call.cancelled:
                continue
            call.fire()
            fired += 1
        logger.debug("Drained manual scheduler: %d callbacks fired", fired)
        return fired
