"""
Unit tests for core geometry module.
"""

import numpy as np
import pytest
from scipy.spatial import ConvexHull
from shapely.geometry import Polygon as ShapelyPolygon, MultiPolygon

from shapes.core.geometry import (
    EPS,
    Point,
    as_points,
    validate_points,
    order_convex,
    signed_area,
    polygon_area,
    bounding_box,
    shapely_to_numpy,
)
from shapes.core.errors import (
    ErrorKind,
    PolygonError,
    TooFewPointsError,
    DuplicatePointError,
)


class TestAsPoints:
    """Tests for as_points() function."""

    def test_pairs_to_points(self):
        """Integer pairs become float Points in the same order."""
        result = as_points([(1, 2), (3, 4)])
        assert result == (Point(1.0, 2.0), Point(3.0, 4.0))
        assert all(isinstance(p.x, float) for p in result)

    def test_numpy_input(self):
        """An (N, 2) array is accepted."""
        arr = np.array([[0, 0], [4, 0], [0, 3]], dtype=float)
        assert as_points(arr) == ((0, 0), (4, 0), (0, 3))

    def test_empty_input(self):
        """Empty input gives an empty tuple."""
        assert as_points([]) == ()

    def test_wrong_shape(self):
        """Three coordinates per point is rejected."""
        with pytest.raises(ValueError, match="shape"):
            as_points([(0, 0, 0), (1, 1, 1), (2, 2, 2)])

    def test_non_finite(self):
        """NaN and inf coordinates are rejected."""
        with pytest.raises(ValueError, match="finite"):
            as_points([(0, 0), (1, np.nan), (2, 2)])
        with pytest.raises(ValueError, match="finite"):
            as_points([(0, 0), (np.inf, 1), (2, 2)])


class TestValidatePoints:
    """Tests for validate_points() function."""

    def test_triangle_is_valid(self):
        """Three distinct points pass."""
        validate_points(as_points([(0, 0), (1, 0), (0, 1)]))

    def test_two_points(self):
        """Two points are too few."""
        with pytest.raises(TooFewPointsError) as exc_info:
            validate_points(as_points([(0, 0), (1, 1)]))
        assert exc_info.value.kind is ErrorKind.TOO_FEW_POINTS
        assert exc_info.value.count == 2

    def test_count_checked_before_duplicates(self):
        """Two equal points report too few points, not a duplicate."""
        with pytest.raises(TooFewPointsError):
            validate_points(as_points([(0, 0), (0, 0)]))

    def test_duplicate_point(self):
        """A repeated point among four is reported with the point."""
        with pytest.raises(DuplicatePointError) as exc_info:
            validate_points(as_points([(0, 0), (1, 0), (0, 0), (1, 1)]))
        assert exc_info.value.kind is ErrorKind.DUPLICATE_POINT
        assert exc_info.value.point == (0, 0)

    def test_near_duplicates_allowed(self):
        """Equality is exact, so nearly equal points are distinct."""
        validate_points(as_points([(0, 0), (1e-12, 0), (1, 1)]))

    def test_errors_are_value_errors(self):
        """Construction errors can be caught as ValueError."""
        assert issubclass(PolygonError, ValueError)
        assert issubclass(TooFewPointsError, PolygonError)
        assert issubclass(DuplicatePointError, PolygonError)

    def test_error_messages(self):
        """Each kind has a human-readable message."""
        assert ErrorKind.TOO_FEW_POINTS.message == "Shape is not valid."
        assert ErrorKind.DUPLICATE_POINT.message == "There is a duplicate point."
        assert DuplicatePointError(Point(1, 2)).message == "There is a duplicate point."


class TestOrderConvex:
    """Tests for order_convex() function."""

    def test_demo_pentagon(self):
        """Upper chain left to right, then lower chain right to left."""
        points = as_points([(-4, 2), (-2, -2), (2, 1), (0, 4), (-3, 4)])
        result = order_convex(points)
        assert result == ((-4, 2), (-3, 4), (0, 4), (2, 1), (-2, -2))

    def test_shuffled_square(self):
        """Unordered square corners come back in boundary order."""
        points = as_points([(1, 1), (0, 0), (1, 0), (0, 1)])
        result = order_convex(points)
        assert result == ((0, 0), (0, 1), (1, 1), (1, 0))
        assert abs(polygon_area(result) - 1.0) < EPS

    def test_order_is_clockwise(self):
        """Upper-then-lower traversal gives a negative signed area."""
        points = as_points([(1, 1), (0, 0), (1, 0), (0, 1)])
        assert signed_area(order_convex(points)) < 0

    def test_keeps_every_point(self):
        """All input points survive, including interior ones."""
        points = as_points([(0, 0), (4, 0), (2, 1), (2, 4), (0, 4)])
        result = order_convex(points)
        assert sorted(result) == sorted(points)

    def test_input_order_irrelevant(self):
        """Any permutation of the input gives the same order."""
        points = as_points([(-4, 2), (-2, -2), (2, 1), (0, 4), (-3, 4)])
        assert order_convex(points) == order_convex(points[::-1])

    def test_matches_convex_hull_area(self):
        """Shuffled points on a circle reproduce the hull area."""
        angles = np.linspace(0, 2 * np.pi, 12, endpoint=False) + 0.1
        circle = np.column_stack([3 * np.cos(angles), 2 * np.sin(angles)])
        rng = np.random.default_rng(0)
        shuffled = circle[rng.permutation(len(circle))]

        result = order_convex(as_points(shuffled))
        hull = ConvexHull(circle)
        assert abs(polygon_area(result) - hull.volume) < 1e-9

    def test_vertical_line(self):
        """Points sharing one x are ordered without dividing by zero."""
        points = as_points([(0, 2), (0, 0), (0, 1)])
        result = order_convex(points)
        assert result == ((0, 0), (0, 2), (0, 1))
        assert polygon_area(result) == 0.0

    def test_collinear_points(self):
        """Points on the split line join the lower chain."""
        points = as_points([(0, 0), (1, 1), (2, 2)])
        result = order_convex(points)
        assert result == ((0, 0), (2, 2), (1, 1))
        assert polygon_area(result) == 0.0


class TestPolygonArea:
    """Tests for polygon_area() and signed_area()."""

    def test_right_triangle(self):
        """Legs 3 and 4 give area 6."""
        triangle = np.array([[0, 0], [4, 0], [0, 3]], dtype=float)
        assert abs(polygon_area(triangle) - 6.0) < EPS

    def test_unit_square(self):
        """Unit square should have area 1."""
        square = [(0, 0), (1, 0), (1, 1), (0, 1)]
        assert abs(polygon_area(square) - 1.0) < EPS

    def test_degenerate_polygon(self):
        """Polygon with < 3 vertices should have area 0."""
        assert polygon_area([(0, 0), (1, 1)]) == 0.0
        assert signed_area([(0, 0)]) == 0.0

    def test_signed_area_direction(self):
        """CCW is positive, CW is negative."""
        ccw = [(0, 0), (1, 0), (1, 1), (0, 1)]
        assert abs(signed_area(ccw) - 1.0) < EPS
        assert abs(signed_area(ccw[::-1]) + 1.0) < EPS

    def test_reversal_invariant(self):
        """Reversing traversal direction keeps the area."""
        l_shape = [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]
        assert abs(polygon_area(l_shape) - polygon_area(l_shape[::-1])) < EPS

    def test_rotation_invariant(self):
        """Starting from any vertex keeps the area."""
        l_shape = [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]
        expected = polygon_area(l_shape)
        for k in range(1, len(l_shape)):
            rotated = l_shape[k:] + l_shape[:k]
            assert abs(polygon_area(rotated) - expected) < EPS

    def test_input_not_mutated(self):
        """Closing the loop does not append to the caller's list."""
        square = [(0, 0), (1, 0), (1, 1), (0, 1)]
        polygon_area(square)
        assert len(square) == 4

    def test_matches_shapely(self):
        """Concave area agrees with Shapely."""
        notched = [(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)]
        assert abs(polygon_area(notched) - ShapelyPolygon(notched).area) < EPS


class TestBoundingBox:
    """Tests for bounding_box() function."""

    def test_demo_pentagon(self):
        """Corners clockwise from the top-left."""
        points = [(-4, 2), (-2, -2), (2, 1), (0, 4), (-3, 4)]
        assert bounding_box(points) == ((-4, 4), (2, 4), (2, -2), (-4, -2))

    def test_order_independent(self):
        """Box does not depend on vertex order."""
        points = [(-4, 2), (-2, -2), (2, 1), (0, 4), (-3, 4)]
        assert bounding_box(points) == bounding_box(points[::-1])

    def test_encloses_vertices(self):
        """Every vertex lies within the box extremes."""
        rng = np.random.default_rng(42)
        points = rng.normal(size=(50, 2)) * 10
        top_left, top_right, bottom_right, bottom_left = bounding_box(points)

        assert top_left.x <= top_right.x
        assert bottom_left.y <= top_left.y
        assert np.all(points[:, 0] >= top_left.x)
        assert np.all(points[:, 0] <= top_right.x)
        assert np.all(points[:, 1] >= bottom_right.y)
        assert np.all(points[:, 1] <= top_right.y)

    def test_returns_points(self):
        """Corners are Point instances."""
        box = bounding_box([(0, 0), (1, 0), (0, 1)])
        assert len(box) == 4
        assert all(isinstance(p, Point) for p in box)

    def test_empty_rejected(self):
        """An empty point set has no box."""
        with pytest.raises(ValueError):
            bounding_box(np.zeros((0, 2)))


class TestShapelyToNumpy:
    """Tests for shapely_to_numpy() function."""

    def test_removes_closing_vertex(self):
        """Should remove the duplicate closing vertex."""
        shapely_poly = ShapelyPolygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        result = shapely_to_numpy(shapely_poly)

        assert result.shape == (4, 2)

    def test_multipolygon_takes_largest(self):
        """The largest part of a MultiPolygon is used."""
        small = ShapelyPolygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        large = ShapelyPolygon([(5, 5), (7, 5), (7, 7), (5, 7)])
        result = shapely_to_numpy(MultiPolygon([small, large]))

        assert abs(polygon_area(result) - 4.0) < EPS


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
