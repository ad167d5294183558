"""
Polygon construction and queries.
"""

from .polygon import (
    PolygonKind,
    QueryPointPosition,
    Polygon,
    construct,
    from_shapely,
    polygon_stats,
)

__all__ = [
    'PolygonKind',
    'QueryPointPosition',
    'Polygon',
    'construct',
    'from_shapely',
    'polygon_stats',
]
