"""Conversions between viewport space and world space.

Unless stated otherwise viewport coordinates have their origin at the centre
of the viewport. World-space deltas are viewport deltas rotated by the camera
rotation and divided by the zoom level.
"""

from __future__ import annotations

from ...geometry import Point, SupportsXY
from .matrix import TransformationMatrix, multiply_matrix


def convert_to_world_space_anchor_at_center(
    point: SupportsXY, camera_position: SupportsXY, zoom_level: float, rotation: float
) -> Point:
    return Point.of(camera_position) + (Point.of(point) / zoom_level).rotate(rotation)


def convert_to_viewport_space_anchor_at_center(
    point: SupportsXY, camera_position: SupportsXY, zoom_level: float, rotation: float
) -> Point:
    return (Point.of(point) - Point.of(camera_position)).rotate(-rotation) * zoom_level


def invert_from_world_space(
    point: SupportsXY,
    viewport_width: float,
    viewport_height: float,
    camera_position: SupportsXY,
    zoom_level: float,
    rotation: float,
) -> Point:
    """Project a world point into viewport pixels measured from a viewport corner."""

    centre = Point(viewport_width / 2, viewport_height / 2)
    return centre + convert_to_viewport_space_anchor_at_center(
        point, camera_position, zoom_level, rotation
    )


def point_is_in_viewport(
    point: SupportsXY,
    viewport_width: float,
    viewport_height: float,
    camera_position: SupportsXY,
    zoom_level: float,
    rotation: float,
) -> bool:
    projected = invert_from_world_space(
        point, viewport_width, viewport_height, camera_position, zoom_level, rotation
    )
    return 0 <= projected.x <= viewport_width and 0 <= projected.y <= viewport_height


def convert_delta_in_viewport_to_world(delta: SupportsXY, zoom_level: float, rotation: float) -> Point:
    return Point.of(delta).rotate(rotation) / zoom_level


def convert_delta_in_world_to_viewport(delta: SupportsXY, zoom_level: float, rotation: float) -> Point:
    return Point.of(delta).rotate(-rotation) * zoom_level


def camera_position_to_get(
    point_in_world: SupportsXY, to_point_in_viewport: SupportsXY, zoom_level: float, rotation: float
) -> Point:
    """Return the camera position that puts ``point_in_world`` at ``to_point_in_viewport``."""

    return Point.of(point_in_world) - (Point.of(to_point_in_viewport) / zoom_level).rotate(rotation)


def transformation_matrix_from_camera(
    camera_position: SupportsXY, zoom_level: float, rotation: float
) -> TransformationMatrix:
    """Return the viewport (centre origin) to world matrix of a camera."""

    translate_rotate = multiply_matrix(
        TransformationMatrix(1.0, 0.0, 0.0, 1.0, camera_position.x, camera_position.y),
        _rotation_matrix(rotation),
    )
    inverse_zoom = 1 / zoom_level
    return multiply_matrix(
        translate_rotate, TransformationMatrix(inverse_zoom, 0.0, 0.0, inverse_zoom, 0.0, 0.0)
    )


def _rotation_matrix(rotation: float) -> TransformationMatrix:
    unit = Point(1.0, 0.0).rotate(rotation)
    return TransformationMatrix(unit.x, unit.y, -unit.y, unit.x, 0.0, 0.0)


def convert_to_world_space_with_transformation_matrix(
    point: SupportsXY, matrix: TransformationMatrix
) -> Point:
    return matrix.apply(point)


__all__ = [
    "camera_position_to_get",
    "convert_delta_in_viewport_to_world",
    "convert_delta_in_world_to_viewport",
    "convert_to_viewport_space_anchor_at_center",
    "convert_to_world_space_anchor_at_center",
    "convert_to_world_space_with_transformation_matrix",
    "invert_from_world_space",
    "point_is_in_viewport",
    "transformation_matrix_from_camera",
]
