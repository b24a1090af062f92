"""
LatLon capability

Anything exposing readable `latitude` and `longitude` floats satisfies `LatLon`.
Nothing has to inherit from it: `GeoPoint` qualifies by shape alone, and the
other shapes get there through `centroid_engine.adapters`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class LatLon(Protocol):
    """Read-only latitude/longitude pair, in decimal degrees."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


@dataclass(frozen=True)
class LatLonPoint:
    """Concrete `LatLon` value produced by the adapters and by `centroid`."""
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}
