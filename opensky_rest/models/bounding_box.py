"""Geographic bounding box used to filter state vector queries."""

import math
from dataclasses import dataclass

# Approximate km per degree of latitude
KM_PER_DEGREE = 111.0


def _check_lat(lat: float) -> None:
    if not -90 <= lat <= 90:
        raise ValueError('Invalid latitude {:f}! Must be in [-90, 90]'.format(lat))


def _check_lon(lon: float) -> None:
    if not -180 <= lon <= 180:
        raise ValueError('Invalid longitude {:f}! Must be in [-180, 180]'.format(lon))


@dataclass(frozen=True)
class BoundingBox:
    """
    Rectangular WGS84 region.

    Sent to OpenSky as lamin, lamax, lomin, lomax (in that order).
    """
    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    def __post_init__(self):
        _check_lat(self.min_latitude)
        _check_lat(self.max_latitude)
        _check_lon(self.min_longitude)
        _check_lon(self.max_longitude)
        if self.min_latitude > self.max_latitude:
            raise ValueError(
                f'min_latitude {self.min_latitude} is greater than max_latitude {self.max_latitude}'
            )
        if self.min_longitude > self.max_longitude:
            raise ValueError(
                f'min_longitude {self.min_longitude} is greater than max_longitude {self.max_longitude}'
            )

    @classmethod
    def from_center_radius(
        cls,
        center_lat: float,
        center_lon: float,
        radius_km: float
    ) -> 'BoundingBox':
        """
        Create bounding box from center point and radius.

        Uses approximate conversion: 1 degree ~ 111 km at equator, with the
        longitude span widened for latitude. Bounds are clamped to the valid
        coordinate ranges.
        """
        if radius_km <= 0:
            raise ValueError(f'radius_km must be positive, got {radius_km}')
        _check_lat(center_lat)
        _check_lon(center_lon)

        lat_delta = radius_km / KM_PER_DEGREE
        cos_lat = abs(math.cos(math.radians(center_lat)))
        # Near the poles every longitude is within reach
        lon_delta = radius_km / (KM_PER_DEGREE * cos_lat) if cos_lat > 1e-9 else 180.0

        return cls(
            min_latitude=max(-90.0, center_lat - lat_delta),
            max_latitude=min(90.0, center_lat + lat_delta),
            min_longitude=max(-180.0, center_lon - lon_delta),
            max_longitude=min(180.0, center_lon + lon_delta),
        )
