"""
Token Bucket Rate Limiter

Mirrors Shopify's leaky-bucket admission policy on the client side:
a burst of up to `bucket_size` calls, then `calls` calls per `interval`.
"""

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


class TokenBucket:
    """
    Blocking token bucket.

    Usage:
        bucket = TokenBucket(interval=1.5, bucket_size=40, calls=1)
        bucket.acquire()  # Sleeps if the bucket is empty
        # ... make request ...

    Attributes:
        interval: Seconds for `calls` tokens to refill
        bucket_size: Maximum number of stored tokens
        calls: Tokens refilled per interval
    """

    def __init__(
        self,
        interval: float = 1.5,
        bucket_size: int = 40,
        calls: int = 1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the bucket full.

        Args:
            interval: Seconds for `calls` tokens to refill
            bucket_size: Maximum number of stored tokens
            calls: Tokens refilled per interval
            clock: Monotonic time source (injectable for tests)
            sleep: Sleep function (injectable for tests)
        """
        if interval <= 0 or bucket_size <= 0 or calls <= 0:
            raise ValueError("interval, bucket_size and calls must be positive")

        self.interval = interval
        self.bucket_size = bucket_size
        self.calls = calls
        self._clock = clock
        self._sleep = sleep

        self.tokens = float(bucket_size)
        self._last_refill = clock()

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._last_refill
        if elapsed > 0:
            self.tokens = min(self.bucket_size, self.tokens + elapsed * self.calls / self.interval)
        self._last_refill = now

    def acquire(self, cost: int = 1) -> float:
        """
        Take `cost` tokens, sleeping until they are available.

        Args:
            cost: Tokens consumed by the call

        Returns:
            Seconds spent waiting
        """
        if cost > self.bucket_size:
            raise ValueError(f"Cost {cost} exceeds bucket size {self.bucket_size}")

        waited = 0.0
        self._refill()

        while self.tokens < cost:
            wait = (cost - self.tokens) * self.interval / self.calls
            logger.debug("Rate limit bucket empty, waiting %.2fs", wait)
            self._sleep(wait)
            waited += wait
            self._refill()

        self.tokens -= cost
        return waited
