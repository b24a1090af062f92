"""
Aggregator — centroid (arithmetic mean latitude/longitude) of LatLon values.

`centroid` only ever reads `.latitude` and `.longitude`; it never looks at the
concrete type of an element. Inputs are not mutated and the result is a fresh
LatLonPoint. No range validation is done: out-of-range degrees are averaged
like any other number.

For a caller-side parallel reduce, build one `CentroidAccumulator` per chunk and
`merge` them; sums are associative up to floating-point rounding.
"""
from __future__ import annotations

from typing import Any, Iterable

from .adapters import CoordinateOrder, adapt_all
from .latlon import LatLon, LatLonPoint
from .utils.logging_utils import get_logger

log = get_logger("centroid.aggregate")


class NoPointsError(ValueError):
    """Raised when a centroid is requested over zero points."""

    def __init__(self, message: str = "no points supplied") -> None:
        super().__init__(message)


class CentroidAccumulator:
    """Running latitude/longitude sums plus a point count."""

    __slots__ = ("lat_sum", "lon_sum", "count")

    def __init__(self) -> None:
        self.lat_sum = 0.0
        self.lon_sum = 0.0
        self.count = 0

    def add(self, point: LatLon) -> "CentroidAccumulator":
        self.lat_sum += point.latitude
        self.lon_sum += point.longitude
        self.count += 1
        return self

    def extend(self, points: Iterable[LatLon]) -> "CentroidAccumulator":
        for p in points:
            self.add(p)
        return self

    def merge(self, other: "CentroidAccumulator") -> "CentroidAccumulator":
        """Fold another accumulator's partial sums into this one."""
        self.lat_sum += other.lat_sum
        self.lon_sum += other.lon_sum
        self.count += other.count
        return self

    def result(self) -> LatLonPoint:
        if self.count == 0:
            raise NoPointsError()
        n = float(self.count)
        return LatLonPoint(latitude=self.lat_sum / n, longitude=self.lon_sum / n)

    def __repr__(self) -> str:
        return f"CentroidAccumulator(lat_sum={self.lat_sum!r}, lon_sum={self.lon_sum!r}, count={self.count})"


def centroid(points: Iterable[LatLon]) -> LatLonPoint:
    """
    Mean latitude and mean longitude of `points`, in a single pass.

    Parameters
    ----------
    points : Iterable[LatLon]
        Any iterable (generators included) of values exposing latitude/longitude.

    Raises
    ------
    NoPointsError
        If `points` is empty.
    """
    acc = CentroidAccumulator().extend(points)
    result = acc.result()
    log.debug("Centroid of %d point(s) -> %s", acc.count, result)
    return result


def centroid_of(shapes: Iterable[Any], geojson_order: CoordinateOrder = CoordinateOrder.LAT_LON) -> LatLonPoint:
    """Adapt raw point shapes, then aggregate them."""
    return centroid(adapt_all(shapes, geojson_order=geojson_order))
