"""Guarded camera state and the rendering transform derived from it."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional

from ..config import (
    DEFAULT_BOUNDARY_MAX,
    DEFAULT_BOUNDARY_MIN,
    DEFAULT_DEVICE_PIXEL_RATIO,
    DEFAULT_MAX_ZOOM_LEVEL,
    DEFAULT_MIN_ZOOM_LEVEL,
    DEFAULT_POSITION,
    DEFAULT_ROTATION,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_VIEWPORT_WIDTH,
    DEFAULT_ZOOM_LEVEL,
    POSITION_DEADBAND,
)
from ..errors import CameraConfigError
from ..geometry import Point, SupportsXY
from .utils.coordinate_conversion import (
    convert_to_viewport_space_anchor_at_center,
    convert_to_world_space_anchor_at_center,
    invert_from_world_space,
)
from .utils.matrix import (
    TRSDecomposition,
    TransformationMatrix,
    decompose_camera_matrix,
    decompose_trs,
)
from .utils.position import Boundaries, within_boundaries
from .utils.rotation import (
    RotationLimits,
    clamp_rotation,
    normalize_angle_zero_to_two_pi,
    rotation_within_limits,
)
from .utils.zoom import ZoomLevelLimits, clamp_zoom_level, zoom_level_within_limits

logger = logging.getLogger(__name__)

DEFAULT_BOUNDARIES = Boundaries.from_extents(
    DEFAULT_BOUNDARY_MIN[0], DEFAULT_BOUNDARY_MIN[1], DEFAULT_BOUNDARY_MAX[0], DEFAULT_BOUNDARY_MAX[1]
)
DEFAULT_ZOOM_LIMITS = ZoomLevelLimits(DEFAULT_MIN_ZOOM_LEVEL, DEFAULT_MAX_ZOOM_LEVEL)


@dataclass(frozen=True)
class CameraState:
    """Snapshot of the mutable camera parameters."""

    position: Point
    rotation: float
    zoom_level: float


@dataclass(frozen=True)
class ViewportCorners:
    top_left: Point
    top_right: Point
    bottom_left: Point
    bottom_right: Point

    def __iter__(self) -> Iterator[Point]:
        yield self.top_left
        yield self.top_right
        yield self.bottom_left
        yield self.bottom_right


@dataclass(frozen=True)
class AABB:
    min: Point
    max: Point

    @classmethod
    def of_points(cls, points) -> "AABB":
        points = list(points)
        return cls(
            Point(min(p.x for p in points), min(p.y for p in points)),
            Point(max(p.x for p in points), max(p.y for p in points)),
        )

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y


@dataclass(frozen=True)
class _TransformCacheEntry:
    key: tuple[float, bool, float, float, float, float, float, float]
    matrix: TransformationMatrix


def _check_positive(name: str, value: float) -> float:
    value = float(value)
    if not value > 0:
        raise CameraConfigError(f"{name} must be positive, got {value!r}")
    return value


class BaseCamera:
    """Camera state guarded by translation, zoom and rotation limits.

    Every ``set_*`` mutator returns ``True`` when it committed the change and
    ``False`` when a limit rejected it; rejections leave the state untouched.
    """

    def __init__(
        self,
        viewport_width: float = DEFAULT_VIEWPORT_WIDTH,
        viewport_height: float = DEFAULT_VIEWPORT_HEIGHT,
        position: SupportsXY | tuple[float, float] = DEFAULT_POSITION,
        rotation: float = DEFAULT_ROTATION,
        zoom_level: float = DEFAULT_ZOOM_LEVEL,
        boundaries: Optional[Boundaries] = DEFAULT_BOUNDARIES,
        zoom_level_boundaries: Optional[ZoomLevelLimits] = DEFAULT_ZOOM_LIMITS,
        rotation_boundaries: Optional[RotationLimits] = None,
    ) -> None:
        self._viewport_width = _check_positive("viewport_width", viewport_width)
        self._viewport_height = _check_positive("viewport_height", viewport_height)
        self._position = Point.of(position)
        self._rotation = normalize_angle_zero_to_two_pi(float(rotation))
        self._zoom_level = _check_positive("zoom_level", zoom_level)
        self._boundaries = boundaries
        self._zoom_boundaries = None if zoom_level_boundaries is None else zoom_level_boundaries.normalised()
        # Arcs may legitimately wrap through zero, so start > end is kept here.
        self._rotation_boundaries = rotation_boundaries
        self._cached_transform: Optional[_TransformCacheEntry] = None

    # ------------------------------------------------------------------
    # Viewport and limits
    # ------------------------------------------------------------------
    @property
    def viewport_width(self) -> float:
        return self._viewport_width

    @viewport_width.setter
    def viewport_width(self, width: float) -> None:
        self._viewport_width = _check_positive("viewport_width", width)

    @property
    def viewport_height(self) -> float:
        return self._viewport_height

    @viewport_height.setter
    def viewport_height(self, height: float) -> None:
        self._viewport_height = _check_positive("viewport_height", height)

    @property
    def boundaries(self) -> Optional[Boundaries]:
        return self._boundaries

    @boundaries.setter
    def boundaries(self, boundaries: Optional[Boundaries]) -> None:
        self._boundaries = boundaries

    def set_horizontal_boundaries(self, low: float, high: float) -> None:
        """Replace the x extent of the boundaries, swapping ``low`` and ``high`` if inverted."""

        self._boundaries = (self._boundaries or Boundaries()).with_horizontal(low, high)

    def set_vertical_boundaries(self, low: float, high: float) -> None:
        """Replace the y extent of the boundaries, swapping ``low`` and ``high`` if inverted."""

        self._boundaries = (self._boundaries or Boundaries()).with_vertical(low, high)

    @property
    def zoom_boundaries(self) -> Optional[ZoomLevelLimits]:
        return self._zoom_boundaries

    @zoom_boundaries.setter
    def zoom_boundaries(self, limits: Optional[ZoomLevelLimits]) -> None:
        self._zoom_boundaries = None if limits is None else limits.normalised()

    @property
    def rotation_boundaries(self) -> Optional[RotationLimits]:
        return self._rotation_boundaries

    @rotation_boundaries.setter
    def rotation_boundaries(self, limits: Optional[RotationLimits]) -> None:
        self._rotation_boundaries = None if limits is None else limits.normalised()

    def set_max_zoom_level(self, max_zoom_level: float) -> bool:
        """Lower or raise the zoom ceiling.

        Rejected when the ceiling would fall under the configured minimum or
        under the current zoom level; the current zoom is never pulled down.
        """

        limits = self._zoom_boundaries or ZoomLevelLimits()
        if limits.min is not None and limits.min > max_zoom_level:
            return False
        if self._zoom_level > max_zoom_level:
            return False
        self._zoom_boundaries = limits.with_max(max_zoom_level)
        logger.debug("Max zoom level set to %s", max_zoom_level)
        return True

    def set_min_zoom_level(self, min_zoom_level: float) -> bool:
        """Lower or raise the zoom floor, pulling the current zoom up to meet it."""

        limits = self._zoom_boundaries or ZoomLevelLimits()
        if limits.max is not None and limits.max < min_zoom_level:
            return False
        self._zoom_boundaries = limits.with_min(min_zoom_level)
        if self._zoom_level < min_zoom_level:
            self._zoom_level = min_zoom_level
        logger.debug("Min zoom level set to %s", min_zoom_level)
        return True

    # ------------------------------------------------------------------
    # Guarded state
    # ------------------------------------------------------------------
    @property
    def position(self) -> Point:
        return self._position

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def state(self) -> CameraState:
        return CameraState(self._position, self._rotation, self._zoom_level)

    def set_position(self, destination: SupportsXY) -> bool:
        destination = Point.of(destination)
        if not within_boundaries(destination, self._boundaries):
            return False
        displacement = (destination - self._position).magnitude()
        if displacement < POSITION_DEADBAND and displacement < 1 / self._zoom_level:
            return False
        self._position = destination
        return True

    def set_zoom_level(self, zoom_level: float) -> bool:
        if not zoom_level_within_limits(zoom_level, self._zoom_boundaries):
            return False
        limits = self._zoom_boundaries
        if limits is not None:
            clamped = clamp_zoom_level(zoom_level, limits)
            # Already parked on a limit and asked to stay there.
            if limits.max is not None and clamped == limits.max and self._zoom_level == limits.max:
                return False
            if limits.min is not None and clamped == limits.min and self._zoom_level == limits.min:
                return False
        self._zoom_level = zoom_level
        return True

    def set_rotation(self, rotation: float) -> bool:
        if not rotation_within_limits(rotation, self._rotation_boundaries):
            return False
        rotation = normalize_angle_zero_to_two_pi(rotation)
        limits = self._rotation_boundaries
        if limits is not None:
            clamped = normalize_angle_zero_to_two_pi(clamp_rotation(rotation, limits))
            # Endpoints may lie outside [0, 2π); compare them in stored form.
            for endpoint in (limits.end, limits.start):
                endpoint = normalize_angle_zero_to_two_pi(endpoint)
                if clamped == endpoint and self._rotation == endpoint:
                    return False
        self._rotation = rotation
        return True

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------
    def get_transform(
        self,
        device_pixel_ratio: float = DEFAULT_DEVICE_PIXEL_RATIO,
        align_coordinate: bool = True,
    ) -> TransformationMatrix:
        """Return the world to device-pixel matrix for the current state.

        With ``align_coordinate`` the world y axis points down like the screen
        and the result equals :func:`create_camera_matrix`. Without it the
        signs of the rotation and the vertical translation are flipped for a
        y-up world. The last result is cached until one of its inputs changes.
        """

        key = (
            device_pixel_ratio,
            align_coordinate,
            self._position.x,
            self._position.y,
            self._rotation,
            self._zoom_level,
            self._viewport_width,
            self._viewport_height,
        )
        cached = self._cached_transform
        if cached is not None and cached.key == key:
            return cached.matrix

        tx = device_pixel_ratio * self._viewport_width / 2
        ty = device_pixel_ratio * self._viewport_height / 2
        tx2 = -self._position.x
        ty2 = -self._position.y if align_coordinate else self._position.y
        theta = -self._rotation if align_coordinate else self._rotation
        scale = device_pixel_ratio * self._zoom_level
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)

        matrix = TransformationMatrix(
            a=scale * cos_t,
            b=scale * sin_t,
            c=-scale * sin_t,
            d=scale * cos_t,
            e=scale * cos_t * tx2 - scale * sin_t * ty2 + tx,
            f=scale * sin_t * tx2 + scale * cos_t * ty2 + ty,
        )
        self._cached_transform = _TransformCacheEntry(key, matrix)
        logger.debug("Recomputed camera transform for dpr=%s align=%s", device_pixel_ratio, align_coordinate)
        return matrix

    def get_trs(
        self,
        device_pixel_ratio: float = DEFAULT_DEVICE_PIXEL_RATIO,
        align_coordinate: bool = True,
    ) -> TRSDecomposition:
        return decompose_trs(self.get_transform(device_pixel_ratio, align_coordinate))

    def set_using_transformation_matrix(
        self,
        matrix: TransformationMatrix,
        device_pixel_ratio: float = DEFAULT_DEVICE_PIXEL_RATIO,
    ) -> None:
        """Apply a :func:`create_camera_matrix` style matrix through the guarded setters.

        Raises :class:`~board_camera.errors.SingularMatrixError` for a
        singular matrix; limit rejections are silent as with the setters.
        """

        decomposed = decompose_camera_matrix(
            matrix, device_pixel_ratio, self._viewport_width, self._viewport_height
        )
        self.set_position(decomposed.position)
        self.set_rotation(decomposed.rotation)
        self.set_zoom_level(decomposed.zoom)

    # ------------------------------------------------------------------
    # Coordinate conversion
    # ------------------------------------------------------------------
    def convert_from_viewport_to_world(self, point: SupportsXY) -> Point:
        return convert_to_world_space_anchor_at_center(
            point, self._position, self._zoom_level, self._rotation
        )

    def convert_from_world_to_viewport(self, point: SupportsXY) -> Point:
        return convert_to_viewport_space_anchor_at_center(
            point, self._position, self._zoom_level, self._rotation
        )

    def invert_from_world_space_to_viewport(self, point: SupportsXY) -> Point:
        """Project ``point`` into viewport pixels measured from the viewport corner."""

        return invert_from_world_space(
            point,
            self._viewport_width,
            self._viewport_height,
            self._position,
            self._zoom_level,
            self._rotation,
        )

    def viewport_in_world_space(self, align_coordinate: bool = True) -> ViewportCorners:
        half_w = self._viewport_width / 2
        # Screen "top" is negative y when the world is y-down.
        top = -self._viewport_height / 2 if align_coordinate else self._viewport_height / 2
        bottom = -top
        to_world = self.convert_from_viewport_to_world
        return ViewportCorners(
            top_left=to_world(Point(-half_w, top)),
            top_right=to_world(Point(half_w, top)),
            bottom_left=to_world(Point(-half_w, bottom)),
            bottom_right=to_world(Point(half_w, bottom)),
        )

    def viewport_aabb(self, align_coordinate: bool = True) -> AABB:
        return AABB.of_points(self.viewport_in_world_space(align_coordinate))


__all__ = [
    "AABB",
    "BaseCamera",
    "CameraState",
    "DEFAULT_BOUNDARIES",
    "DEFAULT_ZOOM_LIMITS",
    "ViewportCorners",
]
