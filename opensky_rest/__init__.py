"""
opensky-rest - typed client for the OpenSky Network REST API.

Live aircraft state vectors and historical flight records, with per-category
request throttling built into the client.

Modules:
    client/      OpenSkyClient, request throttling, query parameters, HTTP transport
    models/      Typed records (StateVector, Flight, BoundingBox, Credentials, results)
    config.py    Configuration from environment variables
    errors.py    Exception types raised by the client
"""

__version__ = '1.0.0'

from opensky_rest.client import OpenSkyClient, RateLimiter, RequestCategory
from opensky_rest.errors import AuthorizationError, OpenSkyApiException, TransportError
from opensky_rest.models import (
    RATE_LIMITED,
    Admitted,
    BoundingBox,
    Credentials,
    Flight,
    OpenSkyStates,
    RateLimited,
    StateVector,
)

__all__ = [
    'OpenSkyClient',
    'RateLimiter',
    'RequestCategory',
    'AuthorizationError',
    'OpenSkyApiException',
    'TransportError',
    'RATE_LIMITED',
    'Admitted',
    'BoundingBox',
    'Credentials',
    'Flight',
    'OpenSkyStates',
    'RateLimited',
    'StateVector',
]
