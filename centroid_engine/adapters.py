# FILE: centroid_engine/adapters.py
# -------------------------------------------------------------------------------------------------
# Adapters — one explicit conversion per point shape, producing a `LatLon` value.
#
# - from_kml_point      copies latitude/longitude, drops altitude
# - from_geo_point      identity (GeoPoint is already a LatLon)
# - from_geojson_point  unpacks the coordinate pair, drops properties (None is fine)
#
# `adapt` is a single-dispatch function: every supported shape is registered
# below at import time. Extending the engine with a new shape means adding a
# conversion here and registering it; there is no runtime discovery.
#
# Conversions are pure and total over their shape: they never mutate the source
# and never fail for a well-formed value.
# -------------------------------------------------------------------------------------------------
from __future__ import annotations

from enum import Enum
from functools import singledispatch
from typing import Any, Iterable, List, Tuple

from .latlon import LatLon, LatLonPoint
from .shapes import GeoJsonPoint, GeoPoint, KmlPoint
from .utils.logging_utils import get_logger

log = get_logger("centroid.adapters")


class CoordinateOrder(str, Enum):
    """How a GeoJsonPoint coordinate pair maps onto latitude/longitude."""
    LAT_LON = "lat_lon"  # element 0 -> latitude (engine default)
    LON_LAT = "lon_lat"  # element 0 -> longitude (RFC 7946)


# =================================================================================================
# Per-shape conversions
# =================================================================================================


def from_kml_point(point: KmlPoint) -> LatLonPoint:
    return LatLonPoint(latitude=float(point.latitude), longitude=float(point.longitude))


def from_geo_point(point: GeoPoint) -> GeoPoint:
    return point


def from_geojson_point(point: GeoJsonPoint, order: CoordinateOrder = CoordinateOrder.LAT_LON) -> LatLonPoint:
    """
    Unpack `point.coordinates` into a LatLonPoint.

    The default keeps the engine's convention (first element is latitude). Pass
    `CoordinateOrder.LON_LAT` for data that follows RFC 7946 (longitude first).
    """
    first, second = point.coordinates[0], point.coordinates[1]
    if CoordinateOrder(order) is CoordinateOrder.LON_LAT:
        return LatLonPoint(latitude=float(second), longitude=float(first))
    return LatLonPoint(latitude=float(first), longitude=float(second))


# =================================================================================================
# Dispatch
# =================================================================================================


@singledispatch
def adapt(value: Any) -> LatLon:
    """Convert a supported point shape into a LatLon value."""
    raise TypeError(
        f"No LatLon adapter registered for {type(value).__qualname__}; "
        f"supported shapes: {', '.join(t.__name__ for t in registered_shapes())}"
    )


adapt.register(KmlPoint, from_kml_point)
adapt.register(GeoPoint, from_geo_point)
adapt.register(GeoJsonPoint, from_geojson_point)
adapt.register(LatLonPoint, lambda point: point)


def registered_shapes() -> Tuple[type, ...]:
    """Point shapes that `adapt` converts (the `object` fallback and LatLonPoint pass-through excluded)."""
    return tuple(t for t in adapt.registry if t not in (object, LatLonPoint))


def adapt_all(values: Iterable[Any], geojson_order: CoordinateOrder = CoordinateOrder.LAT_LON) -> List[LatLon]:
    """
    Adapt a mixed iterable of shapes, preserving order.

    Raises TypeError on the first value with no registered adapter, so nothing
    unrecognised ever reaches the aggregator.
    """
    order = CoordinateOrder(geojson_order)
    out: List[LatLon] = []
    for value in values:
        if isinstance(value, GeoJsonPoint):
            out.append(from_geojson_point(value, order=order))
        else:
            out.append(adapt(value))
    log.debug("Adapted %d point(s) (geojson_order=%s)", len(out), order.value)
    return out
