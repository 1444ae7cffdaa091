"""Input cadence and request ordering helpers."""

import time
from collections.abc import Callable


class SearchThrottle:
    """Drops searches that arrive too soon after the last accepted one.

    Dropped requests are not queued; the caller simply ignores them.
    """

    def __init__(self, min_interval: float = 1.0, clock: Callable[[], float] = time.monotonic):
        self.min_interval = min_interval
        self._clock = clock
        self._last: float | None = None

    def allow(self) -> bool:
        """Return True and record the attempt if enough time has passed."""
        now = self._clock()
        if self._last is not None and now - self._last < self.min_interval:
            return False
        self._last = now
        return True


class RequestTracker:
    """Hands out increasing tokens so only the newest fetch gets rendered."""

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest
