"""
Polygon Module

Builds an immutable polygon from a caller-supplied point set and derives,
once at construction:
- The boundary-traversal vertex order (convex point sets are reordered)
- The axis-aligned bounding box
- The shoelace area

Query points are classified against the bounding box extremes.
"""

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Tuple, Union

import numpy as np
from shapely.geometry import Polygon as ShapelyPolygon

from ..core.geometry import (
    BoundingBox,
    Point,
    PointsLike,
    as_points,
    bounding_box,
    order_convex,
    polygon_area,
    shapely_to_numpy,
    signed_area,
    validate_points,
)

logger = logging.getLogger(__name__)


class PolygonKind(Enum):
    """
    Caller's assertion about the input point order.

    CONVEX points are reordered along the boundary; CONCAVE points must
    already be in clockwise or counter-clockwise traversal order.
    """

    CONVEX = "convex"
    CONCAVE = "concave"

    @classmethod
    def coerce(cls, value: Union["PolygonKind", str]) -> "PolygonKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"kind must be one of {[k.value for k in cls]}, got {value!r}"
            ) from None


class QueryPointPosition(Enum):
    """Location of a query point relative to the bounding box."""

    INCLUDED = "Included"
    EXCLUDED = "Excluded"
    BOUNDARY = "Boundary"


@dataclass(frozen=True)
class Polygon:
    """
    Immutable simple polygon with precomputed bounding box and area.

    Use construct() or Polygon.from_points() rather than calling the
    dataclass constructor directly.

    Attributes
    ----------
    vertices : tuple of Point
        Distinct vertices (at least 3) in boundary-traversal order.
    kind : PolygonKind
        Declared shape kind.
    bounding_box : tuple of 4 Point
        Corners clockwise from the top-left.
    area : float
        Non-negative shoelace area.
    """
    vertices: Tuple[Point, ...]
    kind: PolygonKind
    bounding_box: BoundingBox
    area: float

    @classmethod
    def from_points(
        cls,
        points: PointsLike,
        kind: Union[PolygonKind, str] = PolygonKind.CONVEX
    ) -> "Polygon":
        """
        Validate points and derive ordering, bounding box and area.

        Parameters
        ----------
        points : array-like
            Sequence of (x, y) pairs or array of shape (N, 2).
        kind : PolygonKind or str
            CONVEX reorders the points; CONCAVE keeps the given order.

        Returns
        -------
        Polygon

        Raises
        ------
        TooFewPointsError
            If fewer than 3 points are given.
        DuplicatePointError
            If two points are equal.
        ValueError
            If the input is not an (N, 2) set of finite coordinates or
            kind is unknown.
        """
        kind = PolygonKind.coerce(kind)
        pts = as_points(points)
        validate_points(pts)

        if kind is PolygonKind.CONVEX:
            pts = order_convex(pts)

        bbox = bounding_box(pts)
        area = polygon_area(pts)

        logger.debug("Built %s polygon: %d vertices, area=%s",
                     kind.value, len(pts), area)

        return cls(vertices=pts, kind=kind, bounding_box=bbox, area=area)

    @property
    def x_min(self) -> float:
        return self.bounding_box[0].x

    @property
    def x_max(self) -> float:
        return self.bounding_box[1].x

    @property
    def y_min(self) -> float:
        return self.bounding_box[2].y

    @property
    def y_max(self) -> float:
        return self.bounding_box[0].y

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def signed_area(self) -> float:
        """Shoelace area over the stored order; negative when clockwise."""
        return signed_area(self.vertices)

    def classify(self, x: float, y: float) -> QueryPointPosition:
        """
        Locate a query point relative to the bounding box.

        Only the right (Xmax) and top (Ymax) edges count as boundary;
        points on the left and bottom edges are INCLUDED.

        Parameters
        ----------
        x, y : float
            Query point coordinates.

        Returns
        -------
        QueryPointPosition
        """
        if self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max:
            if x == self.x_max or y == self.y_max:
                return QueryPointPosition.BOUNDARY
            return QueryPointPosition.INCLUDED

        return QueryPointPosition.EXCLUDED

    def as_array(self) -> np.ndarray:
        """Vertices as a float array of shape (N, 2)."""
        return np.array(self.vertices, dtype=np.float64)

    def to_shapely(self) -> ShapelyPolygon:
        """Shapely polygon over the stored vertex order."""
        return ShapelyPolygon(self.vertices)


def construct(
    points: PointsLike,
    kind: Union[PolygonKind, str] = PolygonKind.CONVEX
) -> Polygon:
    """
    Build a Polygon from points. See Polygon.from_points().
    """
    return Polygon.from_points(points, kind)


def from_shapely(
    geom,
    kind: Union[PolygonKind, str] = PolygonKind.CONCAVE
) -> Polygon:
    """
    Build a Polygon from a Shapely polygon's exterior ring.

    Parameters
    ----------
    geom : shapely Polygon or MultiPolygon
        Source geometry. The largest part of a MultiPolygon is used.
    kind : PolygonKind or str
        Defaults to CONCAVE, since the ring is already in traversal order.

    Returns
    -------
    Polygon
    """
    return Polygon.from_points(shapely_to_numpy(geom), kind)


def polygon_stats(polygon: Polygon) -> dict:
    """
    Compute diagnostic statistics for a polygon.

    Parameters
    ----------
    polygon : Polygon
        A constructed polygon.

    Returns
    -------
    dict
        Statistics including:
        - area: Absolute area
        - signed_area: Area signed by traversal direction
        - num_vertices: Number of vertices
        - kind: Declared kind name
        - bounding_box: Corner list, clockwise from top-left
        - width, height: Bounding box extents
        - centroid: Mean of the vertices
        - fill_ratio: Area divided by bounding box area
    """
    box_area = polygon.width * polygon.height
    fill_ratio = polygon.area / box_area if box_area > 0 else 0.0

    return {
        'area': float(polygon.area),
        'signed_area': float(polygon.signed_area),
        'num_vertices': len(polygon.vertices),
        'kind': polygon.kind.value,
        'bounding_box': [tuple(p) for p in polygon.bounding_box],
        'width': float(polygon.width),
        'height': float(polygon.height),
        'centroid': np.mean(polygon.as_array(), axis=0),
        'fill_ratio': float(fill_ratio),
    }
