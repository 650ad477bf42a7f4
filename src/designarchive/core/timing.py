"""
Timer primitives for the input adapter boundary.

Both primitives are driven by the owner's event loop through an injectable
monotonic clock; neither starts threads, so callbacks always run on the
thread that polls them.

Debouncer delays a call until input has been quiet for ``delay`` seconds,
replacing the pending call each time it is rescheduled. BurstGate lets an
action through at most once per burst of events, where a burst ends after
``quiet_period`` seconds without events.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

Clock = Callable[[], float]


class Debouncer:
    """Cancel-on-reschedule delayed call, fired from ``poll()``."""

    def __init__(
        self,
        delay: float,
        callback: Callable[..., Any],
        clock: Clock = time.monotonic,
    ):
        """Initialize debouncer.

        Args:
            delay: Quiet time in seconds before the callback fires
            callback: Function invoked with the most recent arguments
            clock: Monotonic time source
        """
        self.delay = delay
        self.callback = callback
        self._clock = clock
        self._deadline: float | None = None
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self._args = args
        self._kwargs = kwargs
        self._deadline = self._clock() + self.delay

    def poll(self) -> bool:
        """Fire the pending call if its quiet period has elapsed.

        Returns:
            True if the callback ran
        """
        if self._deadline is None or self._clock() < self._deadline:
            return False
        return self.flush()

    def flush(self) -> bool:
        """Fire the pending call now, regardless of the deadline."""
        if self._deadline is None:
            return False
        args, kwargs = self._args, self._kwargs
        self.cancel()
        self.callback(*args, **kwargs)
        return True

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        self._deadline = None
        self._args = ()
        self._kwargs = {}


class BurstGate:
    """Allow an action once per burst of closely spaced events."""

    def __init__(self, quiet_period: float, clock: Clock = time.monotonic):
        self.quiet_period = quiet_period
        self._clock = clock
        self._last_event: float | None = None
        self._fired = False

    def event(self) -> None:
        """Record an event, starting a new burst after a quiet period."""
        now = self._clock()
        if self._last_event is None or now - self._last_event > self.quiet_period:
            self._fired = False
        self._last_event = now

    def try_acquire(self) -> bool:
        """Return True if the action may run in the current burst."""
        if self._fired:
            return False
        self._fired = True
        return True
