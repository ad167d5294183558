"""
Core geometry operations for simple polygons.

Contains utility functions for:
- Point coercion and validation
- Convex boundary ordering (line-split sort)
- Polygon area calculation (shoelace)
- Axis-aligned bounding boxes
- Shapely/numpy conversions
"""

import logging
from typing import Iterable, NamedTuple, Sequence, Tuple, Union

import numpy as np
from shapely.geometry import MultiPolygon

from .errors import DuplicatePointError, TooFewPointsError

logger = logging.getLogger(__name__)


# Numerical tolerance for floating point comparisons
EPS = 1e-10


class Point(NamedTuple):
    """A 2D Cartesian point. Compared exactly, sorted by x then y."""

    x: float
    y: float


PointsLike = Union[np.ndarray, Iterable[Sequence[float]]]
BoundingBox = Tuple[Point, Point, Point, Point]


def as_points(points: PointsLike) -> Tuple[Point, ...]:
    """
    Coerce input coordinates to a tuple of Points.

    Parameters
    ----------
    points : array-like
        Sequence of (x, y) pairs or an array of shape (N, 2).

    Returns
    -------
    tuple of Point
        The same points, in the same order, as float pairs.
    """
    if not isinstance(points, np.ndarray):
        points = list(points)
    arr = np.asarray(points, dtype=np.float64)

    if arr.size == 0:
        return ()

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected points of shape (N, 2), got {arr.shape}")

    if not np.all(np.isfinite(arr)):
        raise ValueError("Point coordinates must be finite")

    return tuple(Point(float(x), float(y)) for x, y in arr)


def validate_points(points: Sequence[Point]) -> None:
    """
    Check that a point set can form a polygon.

    Parameters
    ----------
    points : sequence of Point
        Candidate vertices, in any order.

    Raises
    ------
    TooFewPointsError
        If fewer than 3 points are given.
    DuplicatePointError
        If any two points are componentwise equal.
    """
    if len(points) < 3:
        raise TooFewPointsError(len(points))

    seen = set()
    for pt in points:
        if pt in seen:
            raise DuplicatePointError(pt)
        seen.add(pt)


def order_convex(points: Sequence[Point]) -> Tuple[Point, ...]:
    """
    Order the vertices of a convex point set along its boundary.

    Splits the points by the line through the leftmost and rightmost
    points, then walks the upper chain left to right and the lower chain
    right to left. Every input point is kept; points are assumed to lie
    on the hull.

    Parameters
    ----------
    points : sequence of Point
        Distinct vertices in any order (at least 2).

    Returns
    -------
    tuple of Point
        Vertices in boundary-traversal order, starting at the leftmost.
    """
    ordered = sorted(points)
    x_min_point = ordered[0]
    x_max_point = ordered[-1]

    above = [x_min_point]
    below = [x_max_point]
    interior = ordered[1:-1]

    if x_max_point.x == x_min_point.x:
        # Vertical split line: all points share x, none lies above it
        logger.debug("All %d points share x=%s, skipping line split",
                     len(ordered), x_min_point.x)
        below.extend(interior)
    else:
        m = (x_max_point.y - x_min_point.y) / (x_max_point.x - x_min_point.x)
        b = x_min_point.y - m * x_min_point.x

        for pt in interior:
            if pt.y > m * pt.x + b:
                above.append(pt)
            else:
                below.append(pt)

    above.sort()
    below.sort()

    return tuple(above) + tuple(reversed(below))


def signed_area(points: PointsLike) -> float:
    """
    Signed shoelace area of a closed vertex sequence.

    Positive for counter-clockwise order, negative for clockwise.

    Parameters
    ----------
    points : array-like
        Polygon vertices of shape (M, 2), in traversal order.

    Returns
    -------
    float
        Signed area. 0.0 for fewer than 3 vertices.
    """
    poly = np.asarray(points, dtype=np.float64)
    if len(poly) < 3:
        return 0.0

    x = poly[:, 0]
    y = poly[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def polygon_area(points: PointsLike) -> float:
    """
    Compute the area of a polygon using the shoelace formula.

    Parameters
    ----------
    points : array-like
        Polygon vertices of shape (M, 2), in traversal order.

    Returns
    -------
    float
        Area of the polygon, independent of traversal direction.
    """
    return abs(signed_area(points))


def bounding_box(points: PointsLike) -> BoundingBox:
    """
    Axis-aligned bounding box of a point set.

    Parameters
    ----------
    points : array-like
        Points of shape (M, 2), any order, M >= 1.

    Returns
    -------
    tuple of 4 Point
        Corners clockwise from the top-left:
        (Xmin, Ymax), (Xmax, Ymax), (Xmax, Ymin), (Xmin, Ymin).
    """
    poly = np.asarray(points, dtype=np.float64)
    if poly.ndim != 2 or poly.shape[1] != 2 or len(poly) == 0:
        raise ValueError(f"Expected points of shape (N, 2), got {poly.shape}")

    x_min, y_min = (float(v) for v in poly.min(axis=0))
    x_max, y_max = (float(v) for v in poly.max(axis=0))

    return (
        Point(x_min, y_max),
        Point(x_max, y_max),
        Point(x_max, y_min),
        Point(x_min, y_min),
    )


def shapely_to_numpy(geom) -> np.ndarray:
    """
    Convert a Shapely polygon to numpy array of vertices.

    Parameters
    ----------
    geom : Polygon or MultiPolygon
        Shapely geometry object.

    Returns
    -------
    np.ndarray
        Exterior vertices of shape (M, 2), without the closing vertex.
    """
    if isinstance(geom, MultiPolygon):
        # Take the largest polygon if we got multiple
        geom = max(geom.geoms, key=lambda g: g.area)

    coords = np.array(geom.exterior.coords)[:, :2]
    # Remove the closing duplicate vertex that Shapely adds
    if len(coords) > 1 and np.array_equal(coords[0], coords[-1]):
        coords = coords[:-1]
    return coords
