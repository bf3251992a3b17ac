"""Per-user token bucket rate limiting for mutating endpoints.

Each (operation, user) pair owns a bucket that starts full at ``capacity`` and
refills continuously at ``rate`` tokens per ``period`` seconds. A call takes one
token; an empty bucket refuses the call and reports how long until the next
token arrives.
"""
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Tuple

from taskboard.errors import RateLimited

logger = logging.getLogger(__name__)

MINUTE = 60.0
HOUR = 60 * MINUTE


@dataclass(frozen=True)
class TokenBucket:
    rate: int
    period: float
    capacity: int

    @property
    def tokens_per_second(self) -> float:
        return self.rate / self.period


@dataclass(frozen=True)
class RateLimitStatus:
    ok: bool
    retry_after: float = 0.0


RATE_LIMITS: Dict[str, TokenBucket] = {
    # tasks
    "create_task": TokenBucket(rate=30, period=MINUTE, capacity=5),
    "update_task": TokenBucket(rate=60, period=MINUTE, capacity=10),
    "delete_task": TokenBucket(rate=30, period=MINUTE, capacity=5),
    # labels
    "create_label": TokenBucket(rate=20, period=MINUTE, capacity=3),
    "update_label": TokenBucket(rate=30, period=MINUTE, capacity=5),
    "delete_label": TokenBucket(rate=20, period=MINUTE, capacity=3),
    "add_label_to_task": TokenBucket(rate=50, period=MINUTE, capacity=10),
    "remove_label_from_task": TokenBucket(rate=50, period=MINUTE, capacity=10),
    # comments
    "create_comment": TokenBucket(rate=30, period=MINUTE, capacity=5),
    "delete_comment": TokenBucket(rate=30, period=MINUTE, capacity=5),
    # preferences
    "update_preferences": TokenBucket(rate=20, period=MINUTE, capacity=5),
    # AI chat
    "create_thread": TokenBucket(rate=10, period=HOUR, capacity=2),
    "send_message": TokenBucket(rate=30, period=HOUR, capacity=5),
    "delete_thread": TokenBucket(rate=20, period=MINUTE, capacity=3),
}


class RateLimiter:
    def __init__(self, limits: Dict[str, TokenBucket], clock: Callable[[], float] = time.monotonic):
        self.limits = limits
        self._clock = clock
        self._lock = threading.Lock()
        # (operation, key) -> (tokens, last refill timestamp)
        self._buckets: Dict[Tuple[str, Hashable], Tuple[float, float]] = {}

    def limit(self, name: str, key: Hashable) -> RateLimitStatus:
        """Try to take one token from the bucket for (name, key)."""
        config = self.limits[name]
        with self._lock:
            now = self._clock()
            tokens, last = self._buckets.get((name, key), (float(config.capacity), now))
            tokens = min(float(config.capacity), tokens + (now - last) * config.tokens_per_second)
            if tokens >= 1:
                self._buckets[(name, key)] = (tokens - 1, now)
                return RateLimitStatus(ok=True)
            self._buckets[(name, key)] = (tokens, now)
            return RateLimitStatus(ok=False, retry_after=(1 - tokens) / config.tokens_per_second)

    def check(self, name: str, key: Hashable) -> None:
        """Raise RateLimited when the bucket for (name, key) is empty."""
        result = self.limit(name, key)
        if not result.ok:
            logger.warning("rate limit hit: op=%s key=%s retry_after=%.2fs", name, key, result.retry_after)
            raise RateLimited(result.retry_after)

    def reset(self) -> None:
        with self._lock:
            self._buckets.clear()


rate_limiter = RateLimiter(RATE_LIMITS)
