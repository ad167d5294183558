"""
Core geometry operations.
"""

from .errors import (
    ErrorKind,
    PolygonError,
    TooFewPointsError,
    DuplicatePointError,
)
from .geometry import (
    EPS,
    Point,
    BoundingBox,
    as_points,
    validate_points,
    order_convex,
    signed_area,
    polygon_area,
    bounding_box,
    shapely_to_numpy,
)

__all__ = [
    'EPS',
    'Point',
    'BoundingBox',
    'as_points',
    'validate_points',
    'order_convex',
    'signed_area',
    'polygon_area',
    'bounding_box',
    'shapely_to_numpy',
    'ErrorKind',
    'PolygonError',
    'TooFewPointsError',
    'DuplicatePointError',
]
