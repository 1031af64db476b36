"""Historical flight records returned by the /flights endpoints."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Any, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Flight:
    """
    One flight as estimated by OpenSky.

    Airports are ICAO codes and may be None when OpenSky could not
    estimate them. Times are Unix timestamps.
    """
    icao24: str
    first_seen: int
    last_seen: int
    callsign: Optional[str] = None
    est_departure_airport: Optional[str] = None
    est_arrival_airport: Optional[str] = None
    est_departure_airport_horiz_distance: Optional[int] = None
    est_departure_airport_vert_distance: Optional[int] = None
    est_arrival_airport_horiz_distance: Optional[int] = None
    est_arrival_airport_vert_distance: Optional[int] = None
    departure_airport_candidates_count: Optional[int] = None
    arrival_airport_candidates_count: Optional[int] = None

    # JSON key -> dataclass field, for the optional fields
    OPTIONAL_COLUMNS = {
        'callsign': 'callsign',
        'estDepartureAirport': 'est_departure_airport',
        'estArrivalAirport': 'est_arrival_airport',
        'estDepartureAirportHorizDistance': 'est_departure_airport_horiz_distance',
        'estDepartureAirportVertDistance': 'est_departure_airport_vert_distance',
        'estArrivalAirportHorizDistance': 'est_arrival_airport_horiz_distance',
        'estArrivalAirportVertDistance': 'est_arrival_airport_vert_distance',
        'departureAirportCandidatesCount': 'departure_airport_candidates_count',
        'arrivalAirportCandidatesCount': 'arrival_airport_candidates_count',
    }

    @classmethod
    def from_dict(cls, data: Any) -> Optional['Flight']:
        """
        Parse one flight object.

        Returns None if required fields (icao24, firstSeen, lastSeen) are
        missing or of the wrong type.
        """
        if not isinstance(data, dict):
            return None

        icao24 = data.get('icao24')
        first_seen = data.get('firstSeen')
        last_seen = data.get('lastSeen')
        if not icao24 or not isinstance(icao24, str):
            return None
        if not isinstance(first_seen, int) or not isinstance(last_seen, int):
            return None

        optional = {
            name: data.get(key)
            for key, name in cls.OPTIONAL_COLUMNS.items()
        }
        return cls(icao24=icao24, first_seen=first_seen, last_seen=last_seen, **optional)

    @property
    def first_seen_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.first_seen, tz=timezone.utc)

    @property
    def last_seen_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.last_seen, tz=timezone.utc)


def parse_flights(data: Any) -> List[Flight]:
    """
    Map a /flights response body to Flight records.

    A body that is not an array yields no flights; malformed records
    are dropped.
    """
    if not isinstance(data, list):
        return []

    flights = []
    for item in data:
        flight = Flight.from_dict(item)
        if flight is None:
            logger.debug(f'Dropping malformed flight record: {item!r}')
            continue
        flights.append(flight)
    return flights
