"""Structural type shared by :class:`BaseCamera` and :class:`DefaultBoardCamera`."""

from __future__ import annotations

from typing import Optional, Protocol

from ..geometry import Point, SupportsXY
from .utils.position import Boundaries
from .utils.rotation import RotationLimits
from .utils.zoom import ZoomLevelLimits


class BoardCamera(Protocol):
    """What the rig and its handlers need from a camera."""

    @property
    def position(self) -> Point: ...

    @property
    def zoom_level(self) -> float: ...

    @property
    def rotation(self) -> float: ...

    @property
    def viewport_width(self) -> float: ...

    @property
    def viewport_height(self) -> float: ...

    @property
    def boundaries(self) -> Optional[Boundaries]: ...

    @property
    def zoom_boundaries(self) -> Optional[ZoomLevelLimits]: ...

    @property
    def rotation_boundaries(self) -> Optional[RotationLimits]: ...

    def set_position(self, destination: SupportsXY) -> bool: ...

    def set_zoom_level(self, zoom_level: float) -> bool: ...

    def set_rotation(self, rotation: float) -> bool: ...

    def convert_from_viewport_to_world(self, point: SupportsXY) -> Point: ...

    def convert_from_world_to_viewport(self, point: SupportsXY) -> Point: ...


__all__ = ["BoardCamera"]
