"""
OpenSky client package.

Builds query parameters, throttles state queries per category, and issues
requests through the HTTP transport.
"""

from opensky_rest.client.opensky_client import OpenSkyClient
from opensky_rest.client.rate_limiter import RateLimiter, RequestCategory

__all__ = ['OpenSkyClient', 'RateLimiter', 'RequestCategory']
