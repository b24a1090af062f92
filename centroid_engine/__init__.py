# centroid_engine/__init__.py
# ======================================================================================
# Centroid Engine — mean latitude/longitude over heterogeneous point shapes
#
#   shapes     → KmlPoint, GeoPoint, GeoJsonPoint (externally defined records)
#   latlon     → LatLon capability (structural Protocol) + LatLonPoint value
#   adapters   → one explicit conversion per shape, single-dispatch `adapt`
#   aggregate  → centroid / CentroidAccumulator
#   records    → JSON/YAML/GeoJSON decoding for the CLI
#   cli        → Typer CLI
# ======================================================================================

from __future__ import annotations

import os

from .adapters import CoordinateOrder, adapt, adapt_all, registered_shapes
from .aggregate import CentroidAccumulator, NoPointsError, centroid, centroid_of
from .latlon import LatLon, LatLonPoint
from .shapes import GeoJsonPoint, GeoPoint, KmlPoint, PointShape

__all__ = [
    "KmlPoint",
    "GeoPoint",
    "GeoJsonPoint",
    "PointShape",
    "LatLon",
    "LatLonPoint",
    "CoordinateOrder",
    "adapt",
    "adapt_all",
    "registered_shapes",
    "centroid",
    "centroid_of",
    "CentroidAccumulator",
    "NoPointsError",
    "get_version",
]


def get_version() -> str:
    """
    Package version; CENTROID_ENGINE_VERSION in the environment takes precedence.
    """
    return os.environ.get("CENTROID_ENGINE_VERSION", "0.1.0")


__version__ = get_version()
