from __future__ import annotations

import pytest

from centroid_engine.adapters import (
    CoordinateOrder,
    adapt,
    adapt_all,
    from_geojson_point,
    registered_shapes,
)
from centroid_engine.latlon import LatLon, LatLonPoint
from centroid_engine.shapes import GeoJsonPoint, GeoPoint, KmlPoint


def test_kml_point_drops_altitude():
    src = KmlPoint(1.0, 2.0, 4.0)
    out = adapt(src)
    assert isinstance(out, LatLonPoint)
    assert (out.latitude, out.longitude) == (1.0, 2.0)
    assert not hasattr(out, "altitude")
    assert src == KmlPoint(1.0, 2.0, 4.0)


def test_geo_point_is_identity():
    src = GeoPoint(3.0, 2.0)
    assert adapt(src) is src


def test_latlon_point_passes_through():
    p = LatLonPoint(1.0, 1.0)
    assert adapt(p) is p


@pytest.mark.parametrize("props", [None, {}, {"name": "well", "depth": "12"}])
def test_geojson_point_maps_positions(props):
    src = GeoJsonPoint((2.4, 5.0), props)
    out = adapt(src)
    assert (out.latitude, out.longitude) == (2.4, 5.0)
    assert not hasattr(out, "properties")


def test_geojson_point_does_not_touch_properties():
    props = {"name": "well"}
    adapt(GeoJsonPoint((0.0, 1.0), props))
    assert props == {"name": "well"}


def test_geojson_lon_lat_order_is_opt_in():
    src = GeoJsonPoint((-60.1, -8.5))
    out = from_geojson_point(src, order=CoordinateOrder.LON_LAT)
    assert (out.latitude, out.longitude) == (-8.5, -60.1)
    assert from_geojson_point(src, order="lon_lat") == out


def test_unregistered_type_is_rejected():
    with pytest.raises(TypeError, match="No LatLon adapter registered for tuple"):
        adapt((1.0, 2.0))


def test_registered_shapes():
    shapes = registered_shapes()
    assert {KmlPoint, GeoPoint, GeoJsonPoint} <= set(shapes)
    assert object not in shapes
    assert LatLonPoint not in shapes


def test_adapt_all_preserves_order(demo_shapes):
    out = adapt_all(demo_shapes)
    assert [(p.latitude, p.longitude) for p in out] == [(1.0, 2.0), (3.0, 2.0), (2.4, 5.0)]
    assert all(isinstance(p, LatLon) for p in out)


def test_adapt_all_geojson_order(demo_shapes):
    out = adapt_all(demo_shapes, geojson_order=CoordinateOrder.LON_LAT)
    assert (out[2].latitude, out[2].longitude) == (5.0, 2.4)
    # non-GeoJSON shapes are unaffected
    assert (out[0].latitude, out[0].longitude) == (1.0, 2.0)


def test_adapt_all_rejects_unknown_values():
    with pytest.raises(TypeError):
        adapt_all([GeoPoint(1.0, 1.0), "not a point"])
