"""
Query parameter construction for OpenSky requests.

Parameters are kept as an ordered list of (key, value) pairs so repeated
filters (icao24, serials) are sent as repeated keys, which requests
encodes as-is.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Tuple, Union

from opensky_rest.models.bounding_box import BoundingBox

Timestamp = Union[int, datetime]


def format_number(value: Union[int, float]) -> str:
    """
    Stringify a number without loss of precision.

    Integral floats drop the trailing '.0' (1.0 -> '1'); other floats use
    repr, the shortest string that round-trips.
    """
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def to_epoch(value: Timestamp) -> int:
    """
    Convert a Unix timestamp or datetime to whole epoch seconds.

    Datetimes must be timezone-aware; naive ones are rejected rather than
    read as local time.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError(f'Naive datetime {value!r}: pass a timezone-aware datetime')
        return int(value.timestamp())
    return int(value)


class QueryParams:
    """Ordered, multi-valued query parameter set."""

    def __init__(self):
        self._items: List[Tuple[str, str]] = []

    def add(self, key: str, value: Union[str, int, float]) -> 'QueryParams':
        if isinstance(value, str):
            self._items.append((key, value))
        else:
            self._items.append((key, format_number(value)))
        return self

    def add_optional(self, key: str, value: Optional[Union[str, int, float]]) -> 'QueryParams':
        if value is not None:
            self.add(key, value)
        return self

    def add_all(self, key: str, values: Optional[Iterable[Union[str, int]]]) -> 'QueryParams':
        """One entry per value, same key, in input order."""
        for value in values or ():
            self.add(key, value)
        return self

    def add_time(self, time: Optional[Timestamp]) -> 'QueryParams':
        if time is None:
            return self
        epoch = to_epoch(time)
        # 0 means "most recent" upstream, so it is not sent
        if epoch:
            self.add('time', epoch)
        return self

    def add_interval(self, begin: Timestamp, end: Timestamp) -> 'QueryParams':
        self.add('begin', to_epoch(begin))
        self.add('end', to_epoch(end))
        return self

    def add_bbox(self, bbox: Optional[BoundingBox]) -> 'QueryParams':
        if bbox is not None:
            self.add('lamin', bbox.min_latitude)
            self.add('lamax', bbox.max_latitude)
            self.add('lomin', bbox.min_longitude)
            self.add('lomax', bbox.max_longitude)
        return self

    def items(self) -> List[Tuple[str, str]]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f'QueryParams({self._items!r})'


def flights_params(begin: Timestamp, end: Timestamp) -> QueryParams:
    return QueryParams().add_interval(begin, end)


def airport_flights_params(airport: str, begin: Timestamp, end: Timestamp) -> QueryParams:
    return QueryParams().add('airport', airport).add_interval(begin, end)


def aircraft_flights_params(icao24: str, begin: Timestamp, end: Timestamp) -> QueryParams:
    return QueryParams().add('icao24', icao24).add_interval(begin, end)


def states_params(
    time: Optional[Timestamp] = None,
    icao24: Optional[Iterable[str]] = None,
    bbox: Optional[BoundingBox] = None,
) -> QueryParams:
    return QueryParams().add_time(time).add_all('icao24', icao24).add_bbox(bbox)


def my_states_params(
    time: Optional[Timestamp] = None,
    icao24: Optional[Iterable[str]] = None,
    serials: Optional[Iterable[int]] = None,
) -> QueryParams:
    return QueryParams().add_time(time).add_all('icao24', icao24).add_all('serials', serials)
