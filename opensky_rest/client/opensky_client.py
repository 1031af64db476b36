"""
OpenSky Network API client.

Handles communication with the OpenSky REST API, including:
- Authentication (optional, unlocks own states and shorter throttle windows)
- State vector queries filtered by time, aircraft and bounding box
- Flight history queries by interval, aircraft and airport
- Client-side rate limiting of state vector queries

State queries that the throttle refuses return RATE_LIMITED without making
a request. Flight queries are never throttled and treat 404 as "no flights".
"""

import logging
import time
from typing import Callable, Iterable, List, Optional

from opensky_rest.client.params import (
    Timestamp,
    QueryParams,
    aircraft_flights_params,
    airport_flights_params,
    flights_params,
    my_states_params,
    states_params,
)
from opensky_rest.client.rate_limiter import RateLimiter, RequestCategory
from opensky_rest.client.transport import Transport, TransportConfig, is_success_or_not_found
from opensky_rest.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, OpenSkyConfig, RateLimitConfig
from opensky_rest.config import config as default_config
from opensky_rest.errors import AuthorizationError
from opensky_rest.models.bounding_box import BoundingBox
from opensky_rest.models.credentials import Credentials
from opensky_rest.models.flight import Flight, parse_flights
from opensky_rest.models.results import RATE_LIMITED, Admitted, ThrottledResult
from opensky_rest.models.state_vector import OpenSkyStates

logger = logging.getLogger(__name__)


class OpenSkyClient:
    """
    Client for OpenSky Network API.

    Handles:
    - GET requests to the /states and /flights endpoints
    - Optional authentication
    - Per-category throttling of state queries (RateLimiter)

    Not intended to be shared across threads for anything but the throttle:
    the limiter is thread-safe, the requests session is not guaranteed to be.
    """

    STATES_PATH = '/states/all'
    MY_STATES_PATH = '/states/own'
    FLIGHTS_PATH = '/flights/all'
    FLIGHTS_BY_AIRCRAFT_PATH = '/flights/aircraft'
    FLIGHTS_BY_ARRIVAL_PATH = '/flights/arrival'
    FLIGHTS_BY_DEPARTURE_PATH = '/flights/departure'

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        rate_limits: Optional[RateLimitConfig] = None,
        transport: Optional[Transport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.base_url = base_url.rstrip('/')
        self._authenticated = credentials is not None and credentials.is_complete
        if self._authenticated:
            logger.info('OpenSky client initialized with authentication')
        else:
            credentials = None
            logger.warning('OpenSky client running without authentication (lower rate limits)')

        self.rate_limits = rate_limits or RateLimitConfig()
        self.transport = transport or Transport(TransportConfig(timeout=timeout, credentials=credentials))
        # Mode comes only from the credentials
        self.rate_limiter = RateLimiter(self._authenticated, clock=clock)

    @classmethod
    def from_config(cls, config: Optional[OpenSkyConfig] = None) -> 'OpenSkyClient':
        """Create client from application configuration."""
        config = config or default_config
        return cls(
            credentials=config.credentials,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            rate_limits=config.rate_limits,
        )

    @property
    def authenticated(self) -> bool:
        return self._authenticated

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> 'OpenSkyClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Flights

    def get_flights(self, begin: Timestamp, end: Timestamp) -> List[Flight]:
        """Flights of all aircraft within [begin, end]."""
        return self._get_flights(self.FLIGHTS_PATH, flights_params(begin, end))

    def get_flights_by_arrival_airport(self, airport: str, begin: Timestamp, end: Timestamp) -> List[Flight]:
        """Flights that arrived at airport (ICAO code) within [begin, end]."""
        return self._get_flights(self.FLIGHTS_BY_ARRIVAL_PATH, airport_flights_params(airport, begin, end))

    def get_flights_by_departure_airport(self, airport: str, begin: Timestamp, end: Timestamp) -> List[Flight]:
        """Flights that departed from airport (ICAO code) within [begin, end]."""
        return self._get_flights(self.FLIGHTS_BY_DEPARTURE_PATH, airport_flights_params(airport, begin, end))

    def get_flights_by_aircraft(self, icao24: str, begin: Timestamp, end: Timestamp) -> List[Flight]:
        """Flights of one aircraft within [begin, end]."""
        return self._get_flights(self.FLIGHTS_BY_AIRCRAFT_PATH, aircraft_flights_params(icao24, begin, end))

    # States

    def get_states(
        self,
        time: Optional[Timestamp] = None,
        icao24: Optional[Iterable[str]] = None,
        bbox: Optional[BoundingBox] = None,
    ) -> ThrottledResult[OpenSkyStates]:
        """
        Fetch state vectors from /states/all.

        Args:
            time: Snapshot time; None or 0 for the most recent one
            icao24: Optional ICAO24 addresses to restrict the query to
            bbox: Optional bounding box to filter by geography

        Returns:
            Admitted(OpenSkyStates), or RATE_LIMITED if the throttle refused
            the call (no request made)

        Raises:
            TransportError on network/API errors
        """
        params = states_params(time, icao24, bbox)
        admitted = self.rate_limiter.check(
            RequestCategory.STATES,
            self.rate_limits.states_authenticated,
            self.rate_limits.states_anonymous,
        )
        if not admitted:
            logger.info('Skipping state query: rate limited')
            return RATE_LIMITED
        return Admitted(self._get_states(self.STATES_PATH, params))

    def get_my_states(
        self,
        time: Optional[Timestamp] = None,
        icao24: Optional[Iterable[str]] = None,
        serials: Optional[Iterable[int]] = None,
    ) -> ThrottledResult[OpenSkyStates]:
        """
        Fetch state vectors received by the caller's own sensors.

        Raises:
            AuthorizationError if the client has no credentials
            TransportError on network/API errors
        """
        if not self._authenticated:
            raise AuthorizationError("Anonymous access of 'my states' not allowed")

        params = my_states_params(time, icao24, serials)
        admitted = self.rate_limiter.check(
            RequestCategory.MY_STATES,
            self.rate_limits.my_states_authenticated,
            self.rate_limits.my_states_anonymous,
        )
        if not admitted:
            logger.info('Skipping own state query: rate limited')
            return RATE_LIMITED
        return Admitted(self._get_states(self.MY_STATES_PATH, params))

    def get_states_by_location(
        self,
        center_lat: float,
        center_lon: float,
        radius_km: float,
        time: Optional[Timestamp] = None,
    ) -> ThrottledResult[OpenSkyStates]:
        """
        Fetch states within radius of a center point.

        Convenience method that constructs bounding box from center + radius.
        """
        bbox = BoundingBox.from_center_radius(center_lat, center_lon, radius_km)
        return self.get_states(time=time, bbox=bbox)

    def _url(self, path: str) -> str:
        return f'{self.base_url}{path}'

    def _get_states(self, path: str, params: QueryParams) -> OpenSkyStates:
        status, data = self.transport.get(self._url(path), params.items(), accept_status=is_success_or_not_found)
        if status == 404:
            logger.info(f'No state vectors found ({path})')
            return OpenSkyStates(time=None, states=[])

        states = OpenSkyStates.from_json(data)
        logger.info(f'Received {len(states.states)} state vectors from OpenSky')
        return states

    def _get_flights(self, path: str, params: QueryParams) -> List[Flight]:
        status, data = self.transport.get(self._url(path), params.items(), accept_status=is_success_or_not_found)
        if status == 404:
            logger.info(f'No flights found ({path})')
            return []

        flights = parse_flights(data)
        logger.info(f'Received {len(flights)} flights from OpenSky ({path})')
        return flights
