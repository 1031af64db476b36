"""
State vector records returned by /states/all and /states/own.

OpenSky state vector format (array indices):
0: icao24          - ICAO24 hex address
1: callsign        - Callsign (8 chars max)
2: origin_country  - Country of registration
3: time_position   - Unix timestamp of last position update
4: last_contact    - Unix timestamp of last message
5: longitude       - WGS84 longitude
6: latitude        - WGS84 latitude
7: baro_altitude   - Barometric altitude (meters)
8: on_ground       - Boolean
9: velocity        - Ground speed (m/s)
10: true_track     - Track angle (degrees, 0=north)
11: vertical_rate  - Vertical rate (m/s)
12: sensors        - Sensor IDs (array)
13: geo_altitude   - Geometric altitude (meters)
14: squawk         - Transponder code
15: spi            - Special position indicator
16: position_source - 0=ADS-B, 1=ASTERIX, 2=MLAT, 3=FLARM
17: category       - Aircraft category (only with extended=1)
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, List, Any, Tuple

logger = logging.getLogger(__name__)

STATE_VECTOR_FIELDS = 17


class PositionSource(IntEnum):
    """Origin of a state vector's position."""
    ADSB = 0
    ASTERIX = 1
    MLAT = 2
    FLARM = 3


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _optional(value: Any, check) -> bool:
    return value is None or check(value)


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_sensor_list(value: Any) -> bool:
    return isinstance(value, list) and all(_is_number(s) for s in value)


# Expected type of each optional array slot, in wire order
_FIELD_CHECKS = (
    (1, _is_str),
    (2, _is_str),
    (3, _is_number),
    (4, _is_number),
    (5, _is_number),
    (6, _is_number),
    (7, _is_number),
    (9, _is_number),
    (10, _is_number),
    (11, _is_number),
    (12, _is_sensor_list),
    (13, _is_number),
    (14, _is_str),
    (16, _is_number),
)


@dataclass(frozen=True)
class StateVector:
    """
    One aircraft's position/velocity/identity snapshot.

    Values are kept as received; all but icao24, on_ground and spi may be
    None if not reported by the aircraft.
    """
    icao24: str
    callsign: Optional[str]
    origin_country: Optional[str]
    time_position: Optional[int]
    last_contact: Optional[int]
    longitude: Optional[float]
    latitude: Optional[float]
    baro_altitude: Optional[float]
    on_ground: bool
    velocity: Optional[float]
    true_track: Optional[float]
    vertical_rate: Optional[float]
    sensors: Optional[Tuple[int, ...]]
    geo_altitude: Optional[float]
    squawk: Optional[str]
    spi: bool
    position_source: Optional[int]
    category: Optional[int] = None

    @classmethod
    def from_array(cls, arr: Any) -> Optional['StateVector']:
        """
        Parse OpenSky state vector array into StateVector object.

        Returns None if the array is malformed or missing required fields.
        """
        if not isinstance(arr, list) or len(arr) < STATE_VECTOR_FIELDS:
            return None

        icao24 = arr[0]
        if not icao24 or not isinstance(icao24, str):
            return None

        for index, check in _FIELD_CHECKS:
            if not _optional(arr[index], check):
                logger.debug(f'Dropping state vector {icao24}: bad value at index {index}: {arr[index]!r}')
                return None

        # on_ground and spi are always reported
        for index in (8, 15):
            if not isinstance(arr[index], bool):
                logger.debug(f'Dropping state vector {icao24}: bad flag at index {index}: {arr[index]!r}')
                return None

        category = arr[17] if len(arr) > STATE_VECTOR_FIELDS else None
        if not _optional(category, _is_number):
            return None

        return cls(
            icao24=icao24,
            callsign=arr[1],
            origin_country=arr[2],
            time_position=arr[3],
            last_contact=arr[4],
            longitude=arr[5],
            latitude=arr[6],
            baro_altitude=arr[7],
            on_ground=arr[8],
            velocity=arr[9],
            true_track=arr[10],
            vertical_rate=arr[11],
            sensors=tuple(arr[12]) if arr[12] is not None else None,
            geo_altitude=arr[13],
            squawk=arr[14],
            spi=arr[15],
            position_source=arr[16],
            category=category,
        )

    def to_array(self) -> List[Any]:
        """Serialize back to the OpenSky array layout."""
        arr = [
            self.icao24,
            self.callsign,
            self.origin_country,
            self.time_position,
            self.last_contact,
            self.longitude,
            self.latitude,
            self.baro_altitude,
            self.on_ground,
            self.velocity,
            self.true_track,
            self.vertical_rate,
            list(self.sensors) if self.sensors is not None else None,
            self.geo_altitude,
            self.squawk,
            self.spi,
            self.position_source,
        ]
        if self.category is not None:
            arr.append(self.category)
        return arr

    def has_position(self) -> bool:
        """Check if this state has valid position data."""
        return self.latitude is not None and self.longitude is not None

    @property
    def position_source_type(self) -> Optional[PositionSource]:
        try:
            return PositionSource(self.position_source)
        except ValueError:
            return None


@dataclass(frozen=True)
class OpenSkyStates:
    """
    Decoded /states response.

    Entries that could not be decoded are None, keeping positions aligned
    with the raw states array.
    """
    time: Optional[int]
    states: List[Optional[StateVector]] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> 'OpenSkyStates':
        if not isinstance(data, dict):
            return cls(time=None, states=[])

        states_raw = data.get('states') or []
        if not isinstance(states_raw, list):
            states_raw = []

        api_time = data.get('time')
        if not _is_number(api_time):
            api_time = None

        return cls(
            time=api_time,
            states=[StateVector.from_array(arr) for arr in states_raw],
        )

    def valid_states(self) -> List[StateVector]:
        """States that decoded successfully."""
        return [sv for sv in self.states if sv is not None]
