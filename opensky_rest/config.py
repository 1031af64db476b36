"""
Configuration management for opensky-rest.

Loads settings from environment variables (and a .env file, if present)
with sensible defaults. Only load_config() touches the environment; the
client itself receives plain values.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from opensky_rest.models.credentials import Credentials

load_dotenv()

DEFAULT_BASE_URL = 'https://opensky-network.org/api'
DEFAULT_TIMEOUT_SECONDS = 5.0


def _parse_float(value: Optional[str], default: float) -> float:
    """Parse a float setting, falling back to default if empty/invalid."""
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class RateLimitConfig:
    """
    Minimum seconds between call attempts, per request category.

    OpenSky resolves anonymous state queries at 10 s and authenticated
    ones at 5 s; the windows sit just under that.
    """
    states_authenticated: float = 4.9
    states_anonymous: float = 9.9
    my_states_authenticated: float = 0.9
    # Never used: own states require credentials.
    my_states_anonymous: float = 0.0


@dataclass(frozen=True)
class OpenSkyConfig:
    """OpenSky API configuration."""
    username: Optional[str] = None
    password: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    rate_limits: RateLimitConfig = field(default_factory=RateLimitConfig)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.username and self.password)

    @property
    def credentials(self) -> Optional[Credentials]:
        if not self.is_authenticated:
            return None
        return Credentials(self.username, self.password)


def load_config() -> OpenSkyConfig:
    """Load configuration from the environment."""
    return OpenSkyConfig(
        username=os.getenv('OPENSKY_USERNAME') or None,
        password=os.getenv('OPENSKY_PASSWORD') or None,
        base_url=(os.getenv('OPENSKY_BASE_URL') or DEFAULT_BASE_URL).rstrip('/'),
        timeout_seconds=_parse_float(os.getenv('OPENSKY_TIMEOUT_SECONDS'), DEFAULT_TIMEOUT_SECONDS),
    )


# Singleton instance
config = load_config()
