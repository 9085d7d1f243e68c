"""
Parsing of human-written coordinate strings.

Supported formats, tried in this order (the first match wins):

    GeoCaching   N 31° 12.922 E 121° 32.473
    DMS          31°12'55.3"N 121°32'28.4"E
    DDM          31 12.922, 121 32.473
    DD           31.215367,121.541217
    DDDL         39.9042° N 116.4074° E
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from chinacoords.exceptions import InvalidFormat
from chinacoords.models import Coordinate

logger = logging.getLogger(__name__)


class CoordinateFormat(Enum):
    """Textual notations understood by parse_coordinate."""

    GEOCACHING = "GeoCaching"
    DMS = "DMS"    # degree, minute, second
    DDM = "DDM"    # degree and decimal minute
    DD = "DD"      # decimal degree
    DDDL = "DDDL"  # decimal degrees with directional letters


# Insertion order is match priority. Digits are ASCII only; whitespace is not.
_PATTERNS: dict[CoordinateFormat, re.Pattern] = {
    CoordinateFormat.GEOCACHING: re.compile(
        r"([NS])\s*([0-9]+)[°\s]+\s*([0-9.]+)[′']?\s*"
        r"([EW])\s*([0-9]+)[°\s]+\s*([0-9.]+)[′']?"
    ),
    CoordinateFormat.DMS: re.compile(
        r"([0-9]+)[°\s]+([0-9]+)[′']([0-9.]+)[\"”]([NS])\s+"
        r"([0-9]+)[°\s]+([0-9]+)[′']([0-9.]+)[\"”]([EW])"
    ),
    CoordinateFormat.DDM: re.compile(
        r"([0-9]+)[\s°]+([0-9.]+)[′']?,\s*([0-9]+)[\s°]+([0-9.]+)[′']?"
    ),
    CoordinateFormat.DD: re.compile(
        r"([0-9.-]+),\s*([0-9.-]+)"
    ),
    CoordinateFormat.DDDL: re.compile(
        r"([0-9.-]+)[°\s]+([NS])\s+([0-9.-]+)[°\s]+([EW])"
    ),
}

# Longest leading decimal, the way a lenient float reader takes it.
_LEADING_NUMBER = re.compile(r"-?[0-9]*\.?[0-9]*")

_HEMISPHERES = frozenset("NSEW")


def _signed(value: float, hemisphere: str, negative: str) -> float:
    return -value if hemisphere == negative else value


def _leading_float(group: str) -> float:
    """Read the numeric prefix of *group*, so '121.5.' gives 121.5."""
    prefix = _LEADING_NUMBER.match(group).group()
    if not any(ch.isdigit() for ch in prefix):
        raise ValueError(f"no number in {group!r}")
    return float(prefix)


def _extract(fmt: CoordinateFormat, groups: tuple[str, ...], text: str) -> Coordinate:
    """Turn the regex groups of *fmt* into a coordinate."""
    try:
        values = [g if g in _HEMISPHERES else _leading_float(g) for g in groups]
    except ValueError:
        raise InvalidFormat(text, f"malformed number in {fmt.value} notation")

    if fmt is CoordinateFormat.GEOCACHING:
        lat_hemi, lat_deg, lat_min, lng_hemi, lng_deg, lng_min = values
        lat = _signed(lat_deg + lat_min / 60, lat_hemi, "S")
        lng = _signed(lng_deg + lng_min / 60, lng_hemi, "W")
    elif fmt is CoordinateFormat.DMS:
        (lat_deg, lat_min, lat_sec, lat_hemi,
         lng_deg, lng_min, lng_sec, lng_hemi) = values
        lat = _signed(lat_deg + lat_min / 60 + lat_sec / 3600, lat_hemi, "S")
        lng = _signed(lng_deg + lng_min / 60 + lng_sec / 3600, lng_hemi, "W")
    elif fmt is CoordinateFormat.DDM:
        lat_deg, lat_min, lng_deg, lng_min = values
        lat = lat_deg + lat_min / 60
        lng = lng_deg + lng_min / 60
    elif fmt is CoordinateFormat.DD:
        lat, lng = values
    elif fmt is CoordinateFormat.DDDL:
        lat, lat_hemi, lng, lng_hemi = values
        lat = _signed(lat, lat_hemi, "S")
        lng = _signed(lng, lng_hemi, "W")
    else:
        raise InvalidFormat(text, f"unsupported format: {fmt}")

    return Coordinate(lng=lng, lat=lat)


def _search(text: str) -> tuple[CoordinateFormat, re.Match] | None:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    for fmt, pattern in _PATTERNS.items():
        match = pattern.search(text)
        if match:
            return fmt, match
    return None


def detect_format(text: str) -> CoordinateFormat | None:
    """Return the notation parse_coordinate would use for *text*, if any."""
    found = _search(text)
    return found[0] if found else None


def parse_coordinate(text: str) -> Coordinate:
    """
    Parse *text* into a Coordinate in signed decimal degrees.

    The first two directional values are always latitude, the remaining
    two longitude. S and W hemispheres are negated.

    Raises InvalidFormat if no supported notation matches.
    """
    found = _search(text)
    if found is None:
        raise InvalidFormat(text)
    fmt, match = found
    logger.debug("Parsing %r as %s", text, fmt.value)
    return _extract(fmt, match.groups(), text)
