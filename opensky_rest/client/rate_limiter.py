"""
Client-side request throttling.

Each request category remembers when it was last attempted. A new attempt
is admitted only if enough time has passed since the previous attempt,
and every attempt (admitted or not) becomes the new reference point, so
a burst of refused calls keeps pushing the window forward.
"""

import logging
import threading
import time
from enum import Enum
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


class RequestCategory(str, Enum):
    """Throttled call kinds."""
    STATES = 'states'
    MY_STATES = 'my_states'
    # Flight history is never throttled; kept so every endpoint has a category
    FLIGHTS = 'flights'


class RateLimiter:
    """
    Per-category attempt gate.

    The check-and-update for one category runs under that category's lock,
    so concurrent callers cannot both see an expired window.
    """

    def __init__(self, authenticated: bool, clock: Callable[[], float] = time.monotonic):
        self.authenticated = authenticated
        self._clock = clock
        # Fixed table: one slot and one lock per category
        self._last_attempt: Dict[RequestCategory, Optional[float]] = {
            category: None for category in RequestCategory
        }
        self._locks: Dict[RequestCategory, threading.Lock] = {
            category: threading.Lock() for category in RequestCategory
        }

    def check(
        self,
        category: RequestCategory,
        authenticated_interval: float,
        anonymous_interval: float,
    ) -> bool:
        """
        Record an attempt for category and decide whether it may proceed.

        Intervals are in seconds; the elapsed time must strictly exceed the
        interval for the current mode.
        """
        with self._locks[category]:
            last = self._last_attempt[category]
            now = self._clock()
            self._last_attempt[category] = now

        if last is None:
            return True

        elapsed = now - last
        interval = authenticated_interval if self.authenticated else anonymous_interval
        admitted = elapsed > interval
        if not admitted:
            logger.debug(
                f'Rate limiting {category.value}: {elapsed:.3f}s since last attempt, '
                f'need more than {interval:.3f}s'
            )
        return admitted

    def last_attempt(self, category: RequestCategory) -> Optional[float]:
        """Clock reading of the last attempt in category, or None."""
        with self._locks[category]:
            return self._last_attempt[category]
