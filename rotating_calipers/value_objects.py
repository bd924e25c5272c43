"""
Immutable value objects for the rotating_calipers package.

Classes:
    Point: 2D coordinate (x, y), also used as a 2D vector
    OrientedRect: Rectangle of arbitrary rotation (width, height, center,
        angle)
"""

import numbers
from dataclasses import dataclass
from math import cos, degrees, isfinite, sin, sqrt
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D coordinate point.

    Hull vertices and the direction vectors of a caliper box are both
    Points, so the class carries the handful of vector operations the
    calipers need.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        """Validate and normalize to float."""
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(
                    f"{name} must be numeric, got {type(value).__name__}"
                )
            value = float(value)
            if not isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
            # Store as float (frozen dataclass workaround)
            object.__setattr__(self, name, value)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Point":
        """Return this vector multiplied by ``factor``."""
        return Point(self.x * factor, self.y * factor)

    def dot(self, other: "Point") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """Z component of the cross product with another vector."""
        return self.x * other.y - self.y * other.x

    def perp(self) -> "Point":
        """Return this vector rotated by +90 degrees."""
        return Point(-self.y, self.x)

    def length_sq(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return sqrt(self.length_sq())

    def normalized(self) -> "Point":
        """
        Return the unit vector with the same direction.

        Raises:
            ValueError: If the vector has zero length.
        """
        length = self.length()
        if length == 0.0:
            raise ValueError("Cannot normalize a zero-length vector")
        return Point(self.x / length, self.y / length)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dict for use with dict-based geometry helpers."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Point":
        """
        Create from dictionary.

        Args:
            d: Dict with 'x' and 'y' keys

        Returns:
            Point instance
        """
        return cls(x=d["x"], y=d["y"])


@dataclass(frozen=True)
class OrientedRect:
    """
    Immutable rectangle of arbitrary rotation.

    Attributes:
        width: Extent along the primary axis
        height: Extent along the axis perpendicular to the primary one
        center: Centroid of the rectangle
        angle: Orientation of the primary axis relative to the x-axis, in
            radians, within (-pi, pi]
    """

    width: float
    height: float
    center: Point
    angle: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def angle_degrees(self) -> float:
        return degrees(self.angle)

    def axes(self) -> Tuple[Point, Point]:
        """Return the unit vectors along the width and height directions."""
        primary = Point(cos(self.angle), sin(self.angle))
        return primary, primary.perp()

    def corners(self) -> List[Point]:
        """
        Compute the four corner coordinates of the rectangle.

        Corners are returned counter-clockwise, starting with the corner at
        the minimum of both rectangle axes.
        """
        primary, secondary = self.axes()
        half_w = primary.scale(self.width / 2.0)
        half_h = secondary.scale(self.height / 2.0)
        c = self.center
        return [
            c - half_w - half_h,
            c + half_w - half_h,
            c + half_w + half_h,
            c - half_w + half_h,
        ]

    def contains(self, point: Point, tolerance: float = 1e-9) -> bool:
        """Determines if a point lies inside the rectangle.

        Args:
            point (Point): The point to test.
            tolerance (float): Slack allowed beyond each side.

        Returns:
            bool: True if the point is inside (or on) the rectangle.
        """
        primary, secondary = self.axes()
        offset = point - self.center
        return (
            abs(offset.dot(primary)) <= self.width / 2.0 + tolerance
            and abs(offset.dot(secondary)) <= self.height / 2.0 + tolerance
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "center": self.center.to_dict(),
            "angle": self.angle,
        }

    def as_tuple(
        self,
    ) -> Tuple[Tuple[float, float], Tuple[float, float], float]:
        """
        Return ``((cx, cy), (width, height), angle_degrees)``.
        """
        return (
            self.center.to_tuple(),
            (self.width, self.height),
            self.angle_degrees,
        )
