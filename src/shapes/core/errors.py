"""
Construction errors for polygon geometry.

Every failure carries an ErrorKind tag so callers can branch on the
reason without parsing messages.
"""

from enum import Enum
from typing import Optional, Tuple


class ErrorKind(Enum):
    """Reasons a point set cannot form a polygon."""

    TOO_FEW_POINTS = "too_few_points"
    DUPLICATE_POINT = "duplicate_point"

    @property
    def message(self) -> str:
        """Human-readable text for terminal output."""
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.TOO_FEW_POINTS: "Shape is not valid.",
    ErrorKind.DUPLICATE_POINT: "There is a duplicate point.",
}


class PolygonError(ValueError):
    """
    Base class for polygon construction failures.

    Attributes
    ----------
    kind : ErrorKind
        Tag identifying the failure.
    """

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None):
        self.kind = kind
        super().__init__(detail or kind.message)

    @property
    def message(self) -> str:
        return self.kind.message


class TooFewPointsError(PolygonError):
    """Raised when fewer than 3 points are supplied."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            ErrorKind.TOO_FEW_POINTS,
            f"Need at least 3 points, got {count}"
        )


class DuplicatePointError(PolygonError):
    """Raised when two points are componentwise equal."""

    def __init__(self, point: Tuple[float, float]):
        self.point = point
        super().__init__(
            ErrorKind.DUPLICATE_POINT,
            f"Duplicate point ({point[0]}, {point[1]})"
        )
