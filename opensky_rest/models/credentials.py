"""OpenSky account credentials."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Credentials:
    """
    OpenSky username/password pair, sent as HTTP basic auth.

    A client holding credentials runs in authenticated mode for its
    whole lifetime.
    """
    username: str
    password: str = field(repr=False)

    @property
    def is_complete(self) -> bool:
        return bool(self.username and self.password)

    def as_auth(self) -> Tuple[str, str]:
        return (self.username, self.password)
