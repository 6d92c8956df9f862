"""Rotation handlers: restrict then clamp a rotation target or delta."""

from __future__ import annotations

from typing import Callable

from ...utils.handler_pipeline import create_handler_chain
from ..interface import BoardCamera
from ..utils.rotation import angle_span, clamp_rotation, normalize_angle_zero_to_two_pi
from .rig_config import CameraRigConfig

RotationHandler = Callable[[float, BoardCamera, CameraRigConfig], float]


def clamp_rotate_by_handler(delta: float, camera: BoardCamera, config: CameraRigConfig) -> float:
    """Shrink *delta* so the resulting rotation stays on the allowed arc."""

    if not config.clamp_rotation:
        return delta
    target = normalize_angle_zero_to_two_pi(camera.rotation + delta)
    clamped = clamp_rotation(target, camera.rotation_boundaries)
    if clamped == target:
        return delta
    return angle_span(camera.rotation, clamped)


def restrict_rotate_by_handler(delta: float, camera: BoardCamera, config: CameraRigConfig) -> float:
    if config.restrict_rotation:
        return 0.0
    return delta


def clamp_rotate_to_handler(target: float, camera: BoardCamera, config: CameraRigConfig) -> float:
    if not config.clamp_rotation:
        return target
    return clamp_rotation(target, camera.rotation_boundaries)


def restrict_rotate_to_handler(target: float, camera: BoardCamera, config: CameraRigConfig) -> float:
    if config.restrict_rotation:
        return camera.rotation
    return target


def create_default_rotate_by_handler() -> RotationHandler:
    return create_handler_chain(restrict_rotate_by_handler, clamp_rotate_by_handler)


def create_default_rotate_to_handler() -> RotationHandler:
    return create_handler_chain(restrict_rotate_to_handler, clamp_rotate_to_handler)


__all__ = [
    "RotationHandler",
    "clamp_rotate_by_handler",
    "clamp_rotate_to_handler",
    "create_default_rotate_by_handler",
    "create_default_rotate_to_handler",
    "restrict_rotate_by_handler",
    "restrict_rotate_to_handler",
]
