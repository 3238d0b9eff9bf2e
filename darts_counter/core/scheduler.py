"""
Delayed-call schedulers for staggered computer turns.

The engine only needs "run this callback after N seconds". Two backends:
- ThreadingScheduler: real time, one threading.Timer per call
- ManualScheduler: virtual clock, advanced explicitly (tests, frame loops)
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List
import heapq
import itertools
import threading
import logging

logger = logging.getLogger(__name__)


class ScheduledCall:
    """Handle for a pending delayed call."""

    def __init__(self, delay: float, callback: Callable[[], None]):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        """Prevent the callback from running (no-op once fired)."""
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class Scheduler(ABC):
    """Abstract delayed-call scheduler."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """
        Schedule callback to run once after delay seconds.

        Args:
            delay: Delay in seconds (>= 0)
            callback: Zero-argument callable

        Returns:
            Handle that can cancel the call
        """
        pass

    @abstractmethod
    def cancel_all(self) -> None:
        """Cancel every pending call."""
        pass


class ThreadingScheduler(Scheduler):
    """
    Real-time scheduler backed by threading.Timer.

    Callbacks run on timer threads but never overlap each other: they are
    serialized through a single lock.

    Usage:
        scheduler = ThreadingScheduler()
        engine = MatchEngine(scheduler=scheduler)
        ...
        scheduler.cancel_all()  # on shutdown
    """

    def __init__(self):
        """Initialize scheduler."""
        self._lock = threading.Lock()
        self._timers: List[threading.Timer] = []
        self._calls: List[ScheduledCall] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Schedule callback on a daemon timer thread."""
        call = ScheduledCall(delay, callback)
        timer = threading.Timer(max(0.0, delay), self._fire, args=(call,))
        timer.daemon = True

        self._prune()
        self._timers.append(timer)
        self._calls.append(call)
        timer.start()

        return call

    def _fire(self, call: ScheduledCall) -> None:
        """Run a call under the serialization lock."""
        with self._lock:
            if not call.pending:
                return
            call.fired = True
            try:
                call.callback()
            except Exception as e:
                # Timer threads have no caller to propagate to
                logger.error(f"Scheduled callback failed: {e}", exc_info=True)

    def _prune(self) -> None:
        """Forget finished timers."""
        self._timers = [t for t in self._timers if t.is_alive()]
        self._calls = [c for c in self._calls if c.pending]

    def cancel_all(self) -> None:
        """Cancel all pending timers."""
        for call in self._calls:
            call.cancel()
        for timer in self._timers:
            timer.cancel()
        self._timers.clear()
        self._calls.clear()
        logger.debug("All scheduled calls cancelled")


@dataclass(order=True)
class _QueuedCall:
    due: float
    seq: int
    call: ScheduledCall = field(compare=False)


class ManualScheduler(Scheduler):
    """
    Deterministic scheduler driven by a virtual clock.

    Nothing runs until advance() or run_all() is called. Calls due at the
    same time run in scheduling order. Callbacks may schedule further calls;
    those run within the same advance() if they fall due.

    Usage:
        scheduler = ManualScheduler()
        engine = MatchEngine(scheduler=scheduler)
        scheduler.advance(1.0)  # Fire everything due in the next second
    """

    def __init__(self):
        """Initialize virtual clock at 0."""
        self.now = 0.0
        self._queue: List[_QueuedCall] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Queue callback at now + delay."""
        call = ScheduledCall(delay, callback)
        heapq.heappush(self._queue, _QueuedCall(self.now + max(0.0, delay), next(self._counter), call))
        return call

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and fire due calls.

        Args:
            seconds: Time to advance

        Returns:
            Number of callbacks that ran
        """
        target = self.now + seconds
        fired = 0

        while self._queue and self._queue[0].due <= target:
            queued = heapq.heappop(self._queue)
            self.now = queued.due
            if queued.call.pending:
                queued.call.fired = True
                queued.call.callback()
                fired += 1

        self.now = target
        return fired

    def run_all(self, max_calls: int = 1000) -> int:
        """
        Fire calls until the queue is empty.

        Args:
            max_calls: Safety bound against self-rescheduling callbacks

        Returns:
            Number of callbacks that ran
        """
        fired = 0
        while self._queue and fired < max_calls:
            fired += self.advance(self._queue[0].due - self.now)
        return fired

    @property
    def pending_count(self) -> int:
        """Number of calls still waiting to fire."""
        return sum(1 for queued in self._queue if queued.call.pending)

    def cancel_all(self) -> None:
        """Drop every queued call."""
        for queued in self._queue:
            queued.call.cancel()
        self._queue.clear()
