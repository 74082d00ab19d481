"""Coordinate parsing and bounding-box containment."""

from __future__ import annotations

import math

from shapely.geometry import Point, box
from shapely.geometry.base import BaseGeometry


def bbox_polygon(bbox: tuple[float, float, float, float]) -> BaseGeometry:
    """Polygon for a `(min_lon, min_lat, max_lon, max_lat)` box."""
    min_lon, min_lat, max_lon, max_lat = bbox
    if min_lon >= max_lon or min_lat >= max_lat:
        raise ValueError(f"degenerate bounding box: {bbox}")
    return box(min_lon, min_lat, max_lon, max_lat)


def parse_coordinate(value: str) -> float:
    """Parse a decimal coordinate; raises ValueError on non-finite or malformed input."""
    x = float(value)
    if not math.isfinite(x):
        raise ValueError(f"non-finite coordinate {value!r}")
    return x


def strictly_within(area: BaseGeometry, lon: float, lat: float) -> bool:
    """True when the point lies in the interior of `area` (boundary excluded)."""
    return area.contains(Point(lon, lat))
