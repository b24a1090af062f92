"""
Point shapes — the three externally defined point records.

These are "found" data: each producer defines its own layout and none of them
knows about the others or about `LatLon`. They are frozen so the adapters can
read them without any risk of mutating the source.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class KmlPoint:
    """Altitude-bearing point (KML style)."""
    latitude: float
    longitude: float
    altitude: float = 0.0


@dataclass(frozen=True)
class GeoPoint:
    """Plain point; already shaped like `LatLon`."""
    latitude: float
    longitude: float


@dataclass(frozen=True)
class GeoJsonPoint:
    """
    Annotated point carrying a positional coordinate pair plus free-form properties.

    coordinates[0] is read as latitude and coordinates[1] as longitude unless the
    caller asks the adapter for another order. `properties` may be None.
    """
    coordinates: Tuple[float, float]
    properties: Optional[Mapping[str, str]] = None


PointShape = Union[KmlPoint, GeoPoint, GeoJsonPoint]
