"""Two-dimensional vector helpers shared by the camera and the rig."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Protocol


class SupportsXY(Protocol):
    """Anything exposing ``x`` and ``y`` attributes."""

    x: float
    y: float


@dataclass(frozen=True)
class Point:
    """Immutable 2D vector used for positions, deltas and anchors."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def of(cls, value: Any) -> "Point":
        """Coerce ``value`` (a point, an ``(x, y)`` pair or a mapping) into a :class:`Point`."""

        if isinstance(value, Point):
            return value
        if isinstance(value, dict):
            return cls(float(value.get("x", 0.0)), float(value.get("y", 0.0)))
        if isinstance(value, (tuple, list)):
            if len(value) < 2:
                raise ValueError(f"Expected an (x, y) pair, got {value!r}")
            return cls(float(value[0]), float(value[1]))
        return cls(float(value.x), float(value.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: SupportsXY) -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: SupportsXY) -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Point":
        return Point(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def dot(self, other: SupportsXY) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: SupportsXY) -> float:
        return self.x * other.y - self.y * other.x

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: SupportsXY) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def rotate(self, angle: float) -> "Point":
        """Return the vector rotated counter-clockwise by ``angle`` radians."""

        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Point(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def unit(self) -> "Point":
        length = self.magnitude()
        if length == 0.0:
            return Point(0.0, 0.0)
        return self / length

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def is_close(self, other: SupportsXY, tolerance: float = 1e-9) -> bool:
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance


ORIGIN = Point(0.0, 0.0)


def rotate_point(point: SupportsXY, angle: float) -> Point:
    """Rotate ``point`` counter-clockwise around the origin by ``angle`` radians."""

    return Point.of(point).rotate(angle)


def project_onto(vector: SupportsXY, direction: SupportsXY) -> Point:
    """Return the component of ``vector`` along the unit ``direction``."""

    axis = Point.of(direction)
    return axis * axis.dot(vector)


__all__ = ["ORIGIN", "Point", "SupportsXY", "project_onto", "rotate_point"]
