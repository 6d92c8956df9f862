"""Translation boundaries for the camera centre and the viewport rectangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ...geometry import Point, SupportsXY


@dataclass(frozen=True)
class AxisLimits:
    """One side of a :class:`Boundaries` box; either axis may be ``None``."""

    x: Optional[float] = None
    y: Optional[float] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "AxisLimits | None":
        if values is None:
            return None
        x = values.get("x")
        y = values.get("y")
        return cls(None if x is None else float(x), None if y is None else float(y))


@dataclass(frozen=True)
class Boundaries:
    """Rectangular world-space region the camera position must stay in.

    Every axis of every side is optional. An undefined side leaves the camera
    free to travel without limit in that direction.
    """

    min: Optional[AxisLimits] = None
    max: Optional[AxisLimits] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "Boundaries | None":
        """Build boundaries from ``{"min": {"x": .., "y": ..}, "max": {...}}``."""

        if values is None:
            return None
        return cls(
            AxisLimits.from_mapping(values.get("min")),
            AxisLimits.from_mapping(values.get("max")),
        )

    @classmethod
    def from_extents(
        cls,
        min_x: Optional[float] = None,
        min_y: Optional[float] = None,
        max_x: Optional[float] = None,
        max_y: Optional[float] = None,
    ) -> "Boundaries":
        return cls(AxisLimits(min_x, min_y), AxisLimits(max_x, max_y))

    @property
    def min_x(self) -> Optional[float]:
        return None if self.min is None else self.min.x

    @property
    def min_y(self) -> Optional[float]:
        return None if self.min is None else self.min.y

    @property
    def max_x(self) -> Optional[float]:
        return None if self.max is None else self.max.x

    @property
    def max_y(self) -> Optional[float]:
        return None if self.max is None else self.max.y

    def with_horizontal(self, low: Optional[float], high: Optional[float]) -> "Boundaries":
        if low is not None and high is not None and low > high:
            low, high = high, low
        return Boundaries.from_extents(low, self.min_y, high, self.max_y)

    def with_vertical(self, low: Optional[float], high: Optional[float]) -> "Boundaries":
        if low is not None and high is not None and low > high:
            low, high = high, low
        return Boundaries.from_extents(self.min_x, low, self.max_x, high)

    def to_mapping(self) -> dict[str, Any]:
        return {
            "min": {"x": self.min_x, "y": self.min_y},
            "max": {"x": self.max_x, "y": self.max_y},
        }


def within_boundaries(point: SupportsXY, boundaries: Boundaries | None) -> bool:
    """Return ``True`` when ``point`` lies inside ``boundaries`` (inclusive)."""

    if boundaries is None:
        return True
    if boundaries.max_x is not None and point.x > boundaries.max_x:
        return False
    if boundaries.min_x is not None and point.x < boundaries.min_x:
        return False
    if boundaries.max_y is not None and point.y > boundaries.max_y:
        return False
    if boundaries.min_y is not None and point.y < boundaries.min_y:
        return False
    return True


def is_valid_boundaries(boundaries: Boundaries | None) -> bool:
    """Return ``False`` when an axis defines both sides with ``min >= max``."""

    if boundaries is None:
        return True
    if boundaries.min_x is not None and boundaries.max_x is not None:
        if boundaries.min_x >= boundaries.max_x:
            return False
    if boundaries.min_y is not None and boundaries.max_y is not None:
        if boundaries.min_y >= boundaries.max_y:
            return False
    return True


def boundaries_fully_defined(boundaries: Boundaries | None) -> bool:
    if boundaries is None:
        return False
    return None not in (boundaries.min_x, boundaries.min_y, boundaries.max_x, boundaries.max_y)


def clamp_point(point: SupportsXY, boundaries: Boundaries | None) -> Point:
    """Clamp each axis of ``point`` independently into ``boundaries``."""

    point = Point.of(point)
    if boundaries is None or within_boundaries(point, boundaries):
        return point
    x, y = point.x, point.y
    if boundaries.min_x is not None:
        x = max(x, boundaries.min_x)
    if boundaries.min_y is not None:
        y = max(y, boundaries.min_y)
    if boundaries.max_x is not None:
        x = min(x, boundaries.max_x)
    if boundaries.max_y is not None:
        y = min(y, boundaries.max_y)
    return Point(x, y)


def translation_width_of(boundaries: Boundaries | None) -> Optional[float]:
    if boundaries is None or boundaries.min_x is None or boundaries.max_x is None:
        return None
    return boundaries.max_x - boundaries.min_x


def half_translation_width_of(boundaries: Boundaries | None) -> Optional[float]:
    width = translation_width_of(boundaries)
    return None if width is None else width / 2


def translation_height_of(boundaries: Boundaries | None) -> Optional[float]:
    if boundaries is None or boundaries.min_y is None or boundaries.max_y is None:
        return None
    return boundaries.max_y - boundaries.min_y


def half_translation_height_of(boundaries: Boundaries | None) -> Optional[float]:
    height = translation_height_of(boundaries)
    return None if height is None else height / 2


def viewport_corner_offsets(
    viewport_width: float, viewport_height: float, zoom_level: float, rotation: float
) -> tuple[Point, Point, Point, Point]:
    """Return the world-space offsets from the camera centre to each viewport corner.

    The order is top-left, top-right, bottom-left, bottom-right with y pointing
    up in viewport space.
    """

    half_w = viewport_width / 2 / zoom_level
    half_h = viewport_height / 2 / zoom_level
    return (
        Point(-half_w, half_h).rotate(rotation),
        Point(half_w, half_h).rotate(rotation),
        Point(-half_w, -half_h).rotate(rotation),
        Point(half_w, -half_h).rotate(rotation),
    )


def worst_corner_correction(corners: tuple[Point, ...] | list[Point], boundaries: Boundaries | None) -> Point:
    """Return the per-axis largest correction that pulls every corner inside ``boundaries``.

    For each corner the correction is ``clamp_point(corner) - corner``; the x and
    y components are chosen independently as the ones with the greatest
    magnitude. The result is the zero vector when no corner is out of bounds.
    """

    if boundaries is None:
        return Point(0.0, 0.0)
    dx = 0.0
    dy = 0.0
    for corner in corners:
        diff = clamp_point(corner, boundaries) - corner
        if abs(diff.x) > abs(dx):
            dx = diff.x
        if abs(diff.y) > abs(dy):
            dy = diff.y
    return Point(dx, dy)


def clamp_point_entire_viewport(
    point: SupportsXY,
    viewport_width: float,
    viewport_height: float,
    boundaries: Boundaries | None,
    zoom_level: float,
    rotation: float,
) -> Point:
    """Move ``point`` so the viewport centred on it fits inside ``boundaries``.

    The viewport is evaluated at ``zoom_level`` and ``rotation``. When the
    boundaries are narrower than the viewport on an axis, the corner with the
    larger overshoot wins on that axis.
    """

    point = Point.of(point)
    if boundaries is None:
        return point
    corners = [
        point + offset
        for offset in viewport_corner_offsets(viewport_width, viewport_height, zoom_level, rotation)
    ]
    return point + worst_corner_correction(corners, boundaries)


__all__ = [
    "AxisLimits",
    "Boundaries",
    "boundaries_fully_defined",
    "clamp_point",
    "clamp_point_entire_viewport",
    "half_translation_height_of",
    "half_translation_width_of",
    "is_valid_boundaries",
    "translation_height_of",
    "translation_width_of",
    "viewport_corner_offsets",
    "within_boundaries",
    "worst_corner_correction",
]
