"""Typed coordinate models for chinacoords."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class CoordinateSystem(str, Enum):
    """The three reference systems a coordinate can be expressed in."""

    WGS84 = "WGS84"  # GPS, global
    GCJ02 = "GCJ02"  # Amap, Tencent, Google China
    BD09 = "BD09"    # Baidu


@dataclass(frozen=True)
class Coordinate:
    """A longitude/latitude pair in decimal degrees, system unknown."""

    lng: float
    lat: float

    def tag(self, system: CoordinateSystem | str) -> TypedCoordinate:
        """Return the same values as the typed variant for *system*."""
        variant = _VARIANTS[CoordinateSystem(system)]
        return variant(lng=self.lng, lat=self.lat)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {"lng": self.lng, "lat": self.lat}


@dataclass(frozen=True)
class TypedCoordinate(Coordinate):
    """A coordinate whose reference system is fixed by its class."""

    system: ClassVar[CoordinateSystem]

    def __post_init__(self):
        if type(self) is TypedCoordinate:
            raise TypeError(
                "TypedCoordinate is abstract; use WGS84Coordinate, "
                "GCJ02Coordinate or BD09Coordinate"
            )

    def to_dict(self) -> dict:
        return {"type": self.system.value, **super().to_dict()}


@dataclass(frozen=True)
class WGS84Coordinate(TypedCoordinate):
    system: ClassVar[CoordinateSystem] = CoordinateSystem.WGS84


@dataclass(frozen=True)
class GCJ02Coordinate(TypedCoordinate):
    system: ClassVar[CoordinateSystem] = CoordinateSystem.GCJ02


# https://lbsyun.baidu.com/jsdemo/demo/yLngLatLocation.htm
@dataclass(frozen=True)
class BD09Coordinate(TypedCoordinate):
    system: ClassVar[CoordinateSystem] = CoordinateSystem.BD09


_VARIANTS: dict[CoordinateSystem, type[TypedCoordinate]] = {
    CoordinateSystem.WGS84: WGS84Coordinate,
    CoordinateSystem.GCJ02: GCJ02Coordinate,
    CoordinateSystem.BD09: BD09Coordinate,
}
