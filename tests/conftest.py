"""Shared test fixtures — well-known points inside and outside China."""

import pytest

from chinacoords.models import Coordinate, GCJ02Coordinate, WGS84Coordinate


@pytest.fixture()
def beijing_wgs84() -> WGS84Coordinate:
    """Tiananmen Square as reported by a GPS receiver."""
    return WGS84Coordinate(lng=116.397428, lat=39.90923)


@pytest.fixture()
def shanghai_gcj02() -> GCJ02Coordinate:
    """Lujiazui as read off an Amap tile."""
    return GCJ02Coordinate(lng=121.499718, lat=31.239703)


@pytest.fixture()
def london() -> Coordinate:
    """Well outside the China geofence."""
    return Coordinate(lng=-0.1276, lat=51.5034)
