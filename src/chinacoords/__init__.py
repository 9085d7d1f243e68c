"""chinacoords — Convert, parse and format WGS84 / GCJ02 / BD09 coordinates."""

import logging

from chinacoords import convertor
from chinacoords.exceptions import (
    ChinaCoordsError,
    CoordinateSystemMismatch,
    InvalidFormat,
)
from chinacoords.formatting import format_coordinate as format
from chinacoords.models import (
    BD09Coordinate,
    Coordinate,
    CoordinateSystem,
    GCJ02Coordinate,
    TypedCoordinate,
    WGS84Coordinate,
)
from chinacoords.offsets import is_approximately_in_china
from chinacoords.parser import CoordinateFormat, detect_format
from chinacoords.parser import parse_coordinate as parse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "convertor",
    "parse",
    "format",
    "detect_format",
    "is_approximately_in_china",
    "Coordinate",
    "TypedCoordinate",
    "WGS84Coordinate",
    "GCJ02Coordinate",
    "BD09Coordinate",
    "CoordinateSystem",
    "CoordinateFormat",
    "ChinaCoordsError",
    "InvalidFormat",
    "CoordinateSystemMismatch",
]
