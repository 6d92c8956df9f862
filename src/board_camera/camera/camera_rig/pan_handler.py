"""Pan handlers: restriction and clamping steps for world-space translations.

"By" handlers transform a world-space delta, "to" handlers a world-space
destination. Each takes ``(value, camera, config)`` and returns the adjusted
value so they can be chained with :func:`create_handler_chain`.
"""

from __future__ import annotations

from typing import Callable

from ...geometry import ORIGIN, Point, project_onto
from ...utils.handler_pipeline import create_handler_chain
from ..interface import BoardCamera
from ..utils.position import clamp_point, clamp_point_entire_viewport
from .rig_config import CameraRigConfig

PanHandler = Callable[[Point, BoardCamera, CameraRigConfig], Point]


def convert_delta_to_comply_with_restriction(
    delta: Point, camera: BoardCamera, config: CameraRigConfig
) -> Point:
    """Zero the components of *delta* that the restriction flags forbid."""

    if config.restrict_x_translation and config.restrict_y_translation:
        return ORIGIN
    if config.restrict_relative_x_translation and config.restrict_relative_y_translation:
        return ORIGIN
    if config.restrict_x_translation:
        delta = Point(0.0, delta.y)
    if config.restrict_y_translation:
        delta = Point(delta.x, 0.0)
    if config.restrict_relative_x_translation:
        # Keep only the motion along the rotated viewport vertical.
        delta = project_onto(delta, Point(0.0, 1.0).rotate(camera.rotation))
    if config.restrict_relative_y_translation:
        delta = project_onto(delta, Point(1.0, 0.0).rotate(camera.rotation))
    return delta


def restrict_pan_by_handler(delta: Point, camera: BoardCamera, config: CameraRigConfig) -> Point:
    return convert_delta_to_comply_with_restriction(Point.of(delta), camera, config)


def restrict_pan_to_handler(destination: Point, camera: BoardCamera, config: CameraRigConfig) -> Point:
    delta = Point.of(destination) - camera.position
    return camera.position + convert_delta_to_comply_with_restriction(delta, camera, config)


def _clamp_destination(destination: Point, camera: BoardCamera, config: CameraRigConfig) -> Point:
    if config.limit_entire_viewport:
        return clamp_point_entire_viewport(
            destination,
            camera.viewport_width,
            camera.viewport_height,
            camera.boundaries,
            camera.zoom_level,
            camera.rotation,
        )
    return clamp_point(destination, camera.boundaries)


def clamp_pan_to_handler(destination: Point, camera: BoardCamera, config: CameraRigConfig) -> Point:
    if not config.clamp_translation:
        return destination
    return _clamp_destination(Point.of(destination), camera, config)


def clamp_pan_by_handler(delta: Point, camera: BoardCamera, config: CameraRigConfig) -> Point:
    if not config.clamp_translation:
        return delta
    return _clamp_destination(camera.position + delta, camera, config) - camera.position


def create_default_pan_by_handler() -> PanHandler:
    return create_handler_chain(restrict_pan_by_handler, clamp_pan_by_handler)


def create_default_pan_to_handler() -> PanHandler:
    return create_handler_chain(restrict_pan_to_handler, clamp_pan_to_handler)


__all__ = [
    "PanHandler",
    "clamp_pan_by_handler",
    "clamp_pan_to_handler",
    "convert_delta_to_comply_with_restriction",
    "create_default_pan_by_handler",
    "create_default_pan_to_handler",
    "restrict_pan_by_handler",
    "restrict_pan_to_handler",
]
