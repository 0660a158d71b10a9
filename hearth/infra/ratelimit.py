"""Fixed-window request counter keyed by caller identity.

Each key gets a window of ``window_ms`` starting at its first request; up
to ``max_requests`` calls are admitted inside it and the count resets when
a request arrives after the window ends. Because windows are fixed, a
caller can land up to 2x max_requests in a short burst straddling a
boundary. Entries are never evicted.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class RateLimitEntry:
    count: int
    window_end: int


class FixedWindowRateLimiter:
    def __init__(self, max_requests: int, window_ms: int, clock: Callable[[], int] = _now_ms):
        self.max_requests = max_requests
        self.window_ms = window_ms
        self._clock = clock
        self._entries: Dict[str, RateLimitEntry] = {}
        # One critical section covers lookup, expiry check and increment
        self._lock = threading.Lock()

    def allow(self, key: str) -> bool:
        with self._lock:
            now = self._clock()
            entry = self._entries.get(key)

            if entry is None or now > entry.window_end:
                self._entries[key] = RateLimitEntry(count=1, window_end=now + self.window_ms)
                return True

            if entry.count >= self.max_requests:
                return False

            entry.count += 1
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
