"""Shared fixtures: fake clock and a recording transport."""

from typing import Any, List, Optional, Tuple

import pytest

from opensky_rest.client.opensky_client import OpenSkyClient
from opensky_rest.client.transport import is_success
from opensky_rest.errors import TransportError
from opensky_rest.models.credentials import Credentials


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTransport:
    """Records GET calls and replays canned (status, body) responses."""

    def __init__(self, status: int = 200, body: Any = None):
        self.status = status
        self.body = body
        self.error: Optional[Exception] = None
        self.calls: List[Tuple[str, List[Tuple[str, str]]]] = []
        self.closed = False

    def get(self, url, params, accept_status=is_success):
        self.calls.append((url, params))
        if self.error is not None:
            raise self.error
        if not accept_status(self.status):
            raise TransportError(f'status {self.status}', status_code=self.status, url=url)
        return self.status, self.body

    def close(self):
        self.closed = True


SAMPLE_STATE = [
    '3c6444', 'DLH9LF  ', 'Germany', 1458564120, 1458564120,
    6.1546, 50.1964, 9639.3, False, 232.88, 98.26, 4.55,
    None, 9547.86, '1000', False, 0,
]

SAMPLE_FLIGHT = {
    'icao24': '3c675a',
    'firstSeen': 1517227191,
    'estDepartureAirport': 'EDDF',
    'lastSeen': 1517230211,
    'estArrivalAirport': 'EDDT',
    'callsign': 'DLH1CN  ',
    'estDepartureAirportHorizDistance': 1405,
    'estDepartureAirportVertDistance': 45,
    'estArrivalAirportHorizDistance': 2012,
    'estArrivalAirportVertDistance': 110,
    'departureAirportCandidatesCount': 1,
    'arrivalAirportCandidatesCount': 2,
}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport(body={'time': 1458564121, 'states': [list(SAMPLE_STATE)]})


@pytest.fixture
def credentials() -> Credentials:
    return Credentials('pilot', 's3cret')


@pytest.fixture
def anonymous_client(transport, clock) -> OpenSkyClient:
    return OpenSkyClient(
        transport=transport,
        clock=clock,
    )


@pytest.fixture
def authenticated_client(transport, clock, credentials) -> OpenSkyClient:
    return OpenSkyClient(
        credentials=credentials,
        transport=transport,
        clock=clock,
    )
