"""
Typed records for OpenSky data.

Mappers (StateVector.from_array, OpenSkyStates.from_json, Flight.from_dict,
parse_flights) are pure functions from raw JSON to these types.
"""

from opensky_rest.models.bounding_box import BoundingBox
from opensky_rest.models.credentials import Credentials
from opensky_rest.models.flight import Flight, parse_flights
from opensky_rest.models.results import RATE_LIMITED, Admitted, RateLimited, ThrottledResult
from opensky_rest.models.state_vector import OpenSkyStates, PositionSource, StateVector

__all__ = [
    'BoundingBox',
    'Credentials',
    'Flight',
    'parse_flights',
    'RATE_LIMITED',
    'Admitted',
    'RateLimited',
    'ThrottledResult',
    'OpenSkyStates',
    'PositionSource',
    'StateVector',
]
