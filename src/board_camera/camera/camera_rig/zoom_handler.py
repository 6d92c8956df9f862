"""Zoom handlers: clamp then restrict a zoom target or an additive zoom delta."""

from __future__ import annotations

from typing import Callable

from ...utils.handler_pipeline import create_handler_chain
from ..interface import BoardCamera
from ..utils.zoom import clamp_zoom_level
from .rig_config import CameraRigConfig

ZoomHandler = Callable[[float, BoardCamera, CameraRigConfig], float]


def clamp_zoom_to_handler(destination: float, camera: BoardCamera, config: CameraRigConfig) -> float:
    if not config.clamp_zoom:
        return destination
    return clamp_zoom_level(destination, camera.zoom_boundaries)


def clamp_zoom_by_handler(delta: float, camera: BoardCamera, config: CameraRigConfig) -> float:
    if not config.clamp_zoom:
        return delta
    target = clamp_zoom_level(camera.zoom_level + delta, camera.zoom_boundaries)
    return target - camera.zoom_level


def restrict_zoom_to_handler(destination: float, camera: BoardCamera, config: CameraRigConfig) -> float:
    if config.restrict_zoom:
        return camera.zoom_level
    return destination


def restrict_zoom_by_handler(delta: float, camera: BoardCamera, config: CameraRigConfig) -> float:
    if config.restrict_zoom:
        return 0.0
    return delta


def create_default_zoom_to_handler() -> ZoomHandler:
    return create_handler_chain(clamp_zoom_to_handler, restrict_zoom_to_handler)


def create_default_zoom_by_handler() -> ZoomHandler:
    return create_handler_chain(clamp_zoom_by_handler, restrict_zoom_by_handler)


__all__ = [
    "ZoomHandler",
    "clamp_zoom_by_handler",
    "clamp_zoom_to_handler",
    "create_default_zoom_by_handler",
    "create_default_zoom_to_handler",
    "restrict_zoom_by_handler",
    "restrict_zoom_to_handler",
]
