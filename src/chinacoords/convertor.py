"""
Conversions between WGS84, GCJ02 and BD09.

Every function takes either a plain Coordinate or the typed variant of its
source system and returns the typed variant of its destination system.
WGS84 <-> BD09 is only ever a composition through GCJ02.
"""

from __future__ import annotations

import math

from chinacoords.constants import A, EE, PI, X_PI
from chinacoords.exceptions import CoordinateSystemMismatch
from chinacoords.models import (
    BD09Coordinate,
    Coordinate,
    CoordinateSystem,
    GCJ02Coordinate,
    TypedCoordinate,
    WGS84Coordinate,
)
from chinacoords.offsets import (
    is_approximately_in_china,
    transform_lat,
    transform_lng,
)

__all__ = [
    "wgs84_to_gcj02",
    "wgs84_to_bd09",
    "gcj02_to_wgs84",
    "gcj02_to_bd09",
    "bd09_to_gcj02",
    "bd09_to_wgs84",
]


def _check_system(coord: Coordinate, expected: CoordinateSystem) -> None:
    if isinstance(coord, TypedCoordinate) and coord.system is not expected:
        raise CoordinateSystemMismatch(expected.value, coord.system.value)


def _gcj02_shift(lng: float, lat: float) -> tuple[float, float]:
    """Return the forward-offset point (lng + dlng, lat + dlat)."""
    dlat = transform_lat(lng - 105.0, lat - 35.0)
    dlng = transform_lng(lng - 105.0, lat - 35.0)
    radlat = lat / 180.0 * PI
    magic = math.sin(radlat)
    magic = 1 - EE * magic * magic
    sqrtmagic = math.sqrt(magic)
    dlat = (dlat * 180.0) / ((A * (1 - EE)) / (magic * sqrtmagic) * PI)
    dlng = (dlng * 180.0) / (A / sqrtmagic * math.cos(radlat) * PI)
    return lng + dlng, lat + dlat


def wgs84_to_gcj02(wgs84: Coordinate) -> GCJ02Coordinate:
    """Apply the GCJ02 obfuscation; points outside China pass through."""
    _check_system(wgs84, CoordinateSystem.WGS84)
    if not is_approximately_in_china(wgs84):
        return GCJ02Coordinate(lng=wgs84.lng, lat=wgs84.lat)
    mglng, mglat = _gcj02_shift(wgs84.lng, wgs84.lat)
    return GCJ02Coordinate(lng=mglng, lat=mglat)


def gcj02_to_wgs84(gcj02: Coordinate) -> WGS84Coordinate:
    """
    Approximate inverse of wgs84_to_gcj02.

    The offset is computed at the GCJ02 point itself and reflected, so the
    round trip is only accurate to a few metres.
    """
    _check_system(gcj02, CoordinateSystem.GCJ02)
    lng, lat = gcj02.lng, gcj02.lat
    if not is_approximately_in_china(gcj02):
        return WGS84Coordinate(lng=lng, lat=lat)
    mglng, mglat = _gcj02_shift(lng, lat)
    return WGS84Coordinate(lng=lng * 2 - mglng, lat=lat * 2 - mglat)


def gcj02_to_bd09(gcj02: Coordinate) -> BD09Coordinate:
    _check_system(gcj02, CoordinateSystem.GCJ02)
    lng, lat = gcj02.lng, gcj02.lat
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * math.sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * math.cos(lng * X_PI)
    return BD09Coordinate(
        lng=z * math.cos(theta) + 0.0065,
        lat=z * math.sin(theta) + 0.006,
    )


def bd09_to_gcj02(bd09: Coordinate) -> GCJ02Coordinate:
    _check_system(bd09, CoordinateSystem.BD09)
    x = bd09.lng - 0.0065
    y = bd09.lat - 0.006
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * X_PI)
    return GCJ02Coordinate(lng=z * math.cos(theta), lat=z * math.sin(theta))


def wgs84_to_bd09(wgs84: Coordinate) -> BD09Coordinate:
    return gcj02_to_bd09(wgs84_to_gcj02(wgs84))


def bd09_to_wgs84(bd09: Coordinate) -> WGS84Coordinate:
    return gcj02_to_wgs84(bd09_to_gcj02(bd09))
