from __future__ import annotations

import itertools
from collections import namedtuple

import pytest

from centroid_engine.adapters import CoordinateOrder, adapt_all
from centroid_engine.aggregate import CentroidAccumulator, NoPointsError, centroid, centroid_of
from centroid_engine.latlon import LatLonPoint
from centroid_engine.shapes import GeoJsonPoint, GeoPoint, KmlPoint


def test_end_to_end_mixed_shapes(demo_shapes):
    result = centroid(adapt_all(demo_shapes))
    assert result.latitude == pytest.approx((1.0 + 3.0 + 2.4) / 3)
    assert result.longitude == pytest.approx(3.0)


def test_single_point_is_exact():
    result = centroid([GeoPoint(5.0, 6.0)])
    assert (result.latitude, result.longitude) == (5.0, 6.0)


def test_result_is_a_new_value():
    src = LatLonPoint(5.0, 6.0)
    result = centroid([src])
    assert result == src
    assert result is not src


def test_permutation_invariance():
    points = [LatLonPoint(10.5, -3.25), GeoPoint(-7.0, 120.0), LatLonPoint(0.1, 0.2), GeoPoint(45.0, 45.0)]
    expected = centroid(points)
    for perm in itertools.permutations(points):
        r = centroid(perm)
        assert r.latitude == pytest.approx(expected.latitude, rel=1e-9)
        assert r.longitude == pytest.approx(expected.longitude, rel=1e-9)


def test_empty_input_fails_fast():
    with pytest.raises(NoPointsError, match="no points supplied"):
        centroid([])
    assert issubclass(NoPointsError, ValueError)


def test_accepts_generators():
    gen = (LatLonPoint(float(i), float(-i)) for i in range(1, 5))
    result = centroid(gen)
    assert (result.latitude, result.longitude) == (2.5, -2.5)


def test_any_value_with_the_capability_works():
    Fix = namedtuple("Fix", "latitude longitude accuracy")
    result = centroid([Fix(1.0, 1.0, 5), GeoPoint(3.0, 3.0)])
    assert (result.latitude, result.longitude) == (2.0, 2.0)


def test_out_of_range_values_are_averaged():
    result = centroid([LatLonPoint(100.0, 200.0), LatLonPoint(-300.0, 400.0)])
    assert (result.latitude, result.longitude) == (-100.0, 300.0)


def test_centroid_of_raw_shapes(demo_shapes):
    result = centroid_of(demo_shapes)
    assert result.latitude == pytest.approx(6.4 / 3)
    assert result.longitude == pytest.approx(3.0)


def test_centroid_of_honours_geojson_order():
    result = centroid_of([GeoJsonPoint((2.0, 4.0), {})], geojson_order=CoordinateOrder.LON_LAT)
    assert (result.latitude, result.longitude) == (4.0, 2.0)


def test_centroid_of_empty_and_unknown():
    with pytest.raises(NoPointsError):
        centroid_of([])
    with pytest.raises(TypeError):
        centroid_of([KmlPoint(0.0, 0.0, 0.0), object()])


def test_accumulator_merge_matches_single_pass():
    points = [LatLonPoint(float(i), float(i * 2)) for i in range(10)]
    left = CentroidAccumulator().extend(points[:4])
    right = CentroidAccumulator().extend(points[4:])
    merged = left.merge(right)
    assert merged.count == 10
    assert merged.result() == centroid(points)


def test_empty_accumulator_raises():
    with pytest.raises(NoPointsError):
        CentroidAccumulator().result()
