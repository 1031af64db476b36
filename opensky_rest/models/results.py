"""
Results of throttled calls.

A state query either went out (Admitted, carrying the decoded data) or was
refused by the client-side throttle before any request was made
(RATE_LIMITED). An admitted call with zero aircraft is still Admitted.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar('T')


@dataclass(frozen=True)
class Admitted(Generic[T]):
    """The call was made; data holds the decoded response."""
    data: T

    @property
    def rate_limited(self) -> bool:
        return False


@dataclass(frozen=True)
class RateLimited:
    """The call was throttled; no request was sent."""

    @property
    def rate_limited(self) -> bool:
        return True


RATE_LIMITED = RateLimited()

ThrottledResult = Union[Admitted[T], RateLimited]
