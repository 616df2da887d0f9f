"""Per-key rate limiting of outgoing requests."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


class RateLimiter:
    """Allow at most one operation per key within each delay window (seconds)."""

    def __init__(
        self,
        delay: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.delay = delay
        self._clock = clock
        self._sleep = sleep
        self._ops: dict[str, float] = {}
        self._lock = threading.Lock()

    def block(self, key: str) -> None:
        """Wait until an operation for key may proceed."""
        now = self._clock()
        with self._lock:
            last = self._ops.get(key)
            if last is None or now > last + self.delay:
                self._ops[key] = now
                return
            deadline = last + self.delay
            remaining = deadline - now
            self._ops[key] = deadline
            self._sleep(remaining)