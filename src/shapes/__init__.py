"""
Shapes - Area, bounding box and point queries for simple 2D polygons.

This package builds immutable polygons from a list of points and derives:
- The boundary order of convex point sets (line-split sort)
- The shoelace area
- The axis-aligned bounding box
- A classification of query points against that box

Main Functions
--------------
construct : Build a Polygon from points and a PolygonKind
Polygon.classify : Locate a query point relative to the bounding box
polygon_area : Shoelace area of an ordered vertex sequence
bounding_box : Axis-aligned box, clockwise from the top-left corner

Example
-------
>>> from shapes import construct, PolygonKind

>>> poly = construct([(0, 0), (4, 0), (0, 3)], PolygonKind.CONVEX)
>>> poly.area
6.0
>>> poly.classify(4, 3)
<QueryPointPosition.BOUNDARY: 'Boundary'>
"""

from .core.errors import ErrorKind, PolygonError, TooFewPointsError, DuplicatePointError
from .core.geometry import (
    EPS,
    Point,
    validate_points,
    order_convex,
    signed_area,
    polygon_area,
    bounding_box,
)
from .polygons.polygon import (
    PolygonKind,
    QueryPointPosition,
    Polygon,
    construct,
    from_shapely,
    polygon_stats,
)
from .visualization.plotting import plot_polygon

__all__ = [
    # Core geometry
    'EPS',
    'Point',
    'validate_points',
    'order_convex',
    'signed_area',
    'polygon_area',
    'bounding_box',
    # Errors
    'ErrorKind',
    'PolygonError',
    'TooFewPointsError',
    'DuplicatePointError',
    # Polygon
    'PolygonKind',
    'QueryPointPosition',
    'Polygon',
    'construct',
    'from_shapely',
    'polygon_stats',
    # Visualization
    'plot_polygon',
]
