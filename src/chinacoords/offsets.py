"""China geofence and the empirical GCJ02 offset polynomials."""

import math

from chinacoords.constants import PI
from chinacoords.models import Coordinate

# N 3.86 ~ 53.55, E 73.66 ~ 135.05
_MIN_LNG, _MAX_LNG = 73.66, 135.05
_MIN_LAT, _MAX_LAT = 3.86, 53.55


def is_approximately_in_china(coord: Coordinate) -> bool:
    """Return True if *coord* lies strictly inside the China bounding box."""
    return (
        _MIN_LNG < coord.lng < _MAX_LNG
        and _MIN_LAT < coord.lat < _MAX_LAT
    )


def transform_lat(lng: float, lat: float) -> float:
    """
    Raw latitude offset for a point already shifted by (-105, -35).

    The coefficients are the published ones; do not tidy them up.
    """
    ret = (
        -100.0 + 2.0 * lng + 3.0 * lat + 0.2 * lat * lat
        + 0.1 * lng * lat + 0.2 * math.sqrt(abs(lng))
    )
    ret += (20.0 * math.sin(6.0 * lng * PI)
            + 20.0 * math.sin(2.0 * lng * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(lat * PI)
            + 40.0 * math.sin(lat / 3.0 * PI)) * 2.0 / 3.0
    ret += (160.0 * math.sin(lat / 12.0 * PI)
            + 320 * math.sin(lat * PI / 30.0)) * 2.0 / 3.0
    return ret


def transform_lng(lng: float, lat: float) -> float:
    """Raw longitude offset for a point already shifted by (-105, -35)."""
    ret = (
        300.0 + lng + 2.0 * lat + 0.1 * lng * lng
        + 0.1 * lng * lat + 0.1 * math.sqrt(abs(lng))
    )
    ret += (20.0 * math.sin(6.0 * lng * PI)
            + 20.0 * math.sin(2.0 * lng * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(lng * PI)
            + 40.0 * math.sin(lng / 3.0 * PI)) * 2.0 / 3.0
    ret += (150.0 * math.sin(lng / 12.0 * PI)
            + 300.0 * math.sin(lng / 30.0 * PI)) * 2.0 / 3.0
    return ret
