"""
Exceptions raised by the OpenSky client.

Throttled calls are not errors: they return the RATE_LIMITED result
(see opensky_rest.models.results).
"""

from typing import Optional


class OpenSkyApiException(Exception):
    """Base class for all errors raised by this package."""
    pass


class AuthorizationError(OpenSkyApiException):
    """An operation requiring credentials was called on an anonymous client."""
    pass


class TransportError(OpenSkyApiException):
    """
    The HTTP call failed.

    Covers connection errors, timeouts, statuses the endpoint does not
    accept and undecodable response bodies. The underlying requests
    exception, if any, is available as __cause__.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
