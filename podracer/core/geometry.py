"""
Geometry primitives for PodRacer.

This module implements the integer coordinate model used by the referee:
points with vector arithmetic, a polar view over a point, and checkpoints.
All coordinates are integers; scaling truncates toward zero.
"""

import math
from dataclasses import dataclass, field
from typing import ClassVar, Tuple

from podracer.config import get_settings


@dataclass(frozen=True)
class Point:
    """Integer 2D point, also used as a displacement."""
    x: int = 0
    y: int = 0

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Point':
        return Point(-self.x, -self.y)

    def __mul__(self, factor: float) -> 'Point':
        # int() truncates toward zero, the referee never rounds
        return Point(int(factor * self.x), int(factor * self.y))

    def distance(self, other: 'Point') -> float:
        """Calculate the Euclidean distance to another point."""
        return (other - self).magnitude()

    def magnitude(self) -> float:
        """Calculate the distance from the origin."""
        return math.sqrt(self.x ** 2 + self.y ** 2)

    def to_tuple(self) -> Tuple[int, int]:
        """Convert to tuple (x, y)."""
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"{self.x} {self.y}"


def to_polar(point: Point) -> Tuple[float, float]:
    """
    Convert a point to polar form.

    Args:
        point: Cartesian point

    Returns:
        (magnitude, angle) with the angle in degrees, as returned by atan2
    """
    magnitude = math.sqrt(point.x ** 2 + point.y ** 2)
    angle = math.degrees(math.atan2(point.y, point.x))
    return magnitude, angle


def from_polar(magnitude: float, angle: float) -> Point:
    """
    Convert polar coordinates to a point.

    Args:
        magnitude: Length of the vector
        angle: Direction in degrees

    Returns:
        Point with both coordinates truncated toward zero
    """
    radians = math.radians(angle)
    return Point(
        int(math.cos(radians) * magnitude),
        int(math.sin(radians) * magnitude)
    )


@dataclass(frozen=True)
class Vector:
    """Polar view of a displacement (magnitude and heading in degrees)."""
    point: Point = field(default_factory=Point)

    @classmethod
    def from_polar(cls, magnitude: float = 0.0, angle: float = 0.0) -> 'Vector':
        """Create a vector from a magnitude and an angle in degrees."""
        return cls(from_polar(magnitude, angle))

    @property
    def magnitude(self) -> float:
        return to_polar(self.point)[0]

    @property
    def angle(self) -> float:
        return to_polar(self.point)[1]

    def x_component(self) -> int:
        return self.point.x

    def y_component(self) -> int:
        return self.point.y

    def to_point(self) -> Point:
        return self.point

    def __str__(self) -> str:
        return f"{int(self.magnitude)} {int(self.angle)}°"


@dataclass(frozen=True)
class Checkpoint:
    """
    A point the pod must drive through.

    Behaves as its point in all arithmetic; results are plain Points.
    """
    point: Point = field(default_factory=Point)

    RADIUS: ClassVar[int] = get_settings().checkpoint.RADIUS

    @property
    def x(self) -> int:
        return self.point.x

    @property
    def y(self) -> int:
        return self.point.y

    def __add__(self, other: Point) -> Point:
        return self.point + other

    def __sub__(self, other: Point) -> Point:
        return self.point - other

    def __neg__(self) -> Point:
        return -self.point

    def __mul__(self, factor: float) -> Point:
        return self.point * factor

    def contains(self, position: Point) -> bool:
        """Check whether a position lies inside the capture radius."""
        return self.point.distance(position) <= self.RADIUS

    def __str__(self) -> str:
        return str(self.point)
