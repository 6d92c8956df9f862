"""Observable camera: a :class:`BaseCamera` that publishes every committed change."""

from __future__ import annotations

from typing import Optional

from ..config import (
    DEFAULT_DEVICE_PIXEL_RATIO,
    DEFAULT_POSITION,
    DEFAULT_ROTATION,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_VIEWPORT_WIDTH,
    DEFAULT_ZOOM_LEVEL,
)
from ..geometry import Point, SupportsXY
from ..utils.observable import AbortSignal, Scheduler, Unsubscribe
from .base import (
    AABB,
    DEFAULT_BOUNDARIES,
    DEFAULT_ZOOM_LIMITS,
    BaseCamera,
    CameraState,
    ViewportCorners,
)
from .update_publisher import (
    CameraEventName,
    CameraObserver,
    CameraPanEvent,
    CameraRotateEvent,
    CameraUpdatePublisher,
    CameraZoomEvent,
)
from .utils.matrix import TRSDecomposition, TransformationMatrix, decompose_camera_matrix
from .utils.position import Boundaries
from .utils.rotation import RotationLimits, angle_span
from .utils.zoom import ZoomLevelLimits


class DefaultBoardCamera:
    """Camera whose guarded setters notify subscribers after each successful change.

    State lives in a wrapped :class:`BaseCamera`; this class only adds the
    pan/zoom/rotate notifications. Rejected mutations publish nothing.
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
        *,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self._base = BaseCamera(
            viewport_width,
            viewport_height,
            position,
            rotation,
            zoom_level,
            boundaries,
            zoom_level_boundaries,
            rotation_boundaries,
        )
        self._publisher = CameraUpdatePublisher(scheduler)

    @property
    def base_camera(self) -> BaseCamera:
        return self._base

    # ------------------------------------------------------------------
    # Delegated configuration
    # ------------------------------------------------------------------
    @property
    def viewport_width(self) -> float:
        return self._base.viewport_width

    @viewport_width.setter
    def viewport_width(self, width: float) -> None:
        self._base.viewport_width = width

    @property
    def viewport_height(self) -> float:
        return self._base.viewport_height

    @viewport_height.setter
    def viewport_height(self, height: float) -> None:
        self._base.viewport_height = height

    @property
    def boundaries(self) -> Optional[Boundaries]:
        return self._base.boundaries

    @boundaries.setter
    def boundaries(self, boundaries: Optional[Boundaries]) -> None:
        self._base.boundaries = boundaries

    def set_horizontal_boundaries(self, low: float, high: float) -> None:
        self._base.set_horizontal_boundaries(low, high)

    def set_vertical_boundaries(self, low: float, high: float) -> None:
        self._base.set_vertical_boundaries(low, high)

    @property
    def zoom_boundaries(self) -> Optional[ZoomLevelLimits]:
        return self._base.zoom_boundaries

    @zoom_boundaries.setter
    def zoom_boundaries(self, limits: Optional[ZoomLevelLimits]) -> None:
        self._base.zoom_boundaries = limits

    @property
    def rotation_boundaries(self) -> Optional[RotationLimits]:
        return self._base.rotation_boundaries

    @rotation_boundaries.setter
    def rotation_boundaries(self, limits: Optional[RotationLimits]) -> None:
        self._base.rotation_boundaries = limits

    def set_max_zoom_level(self, max_zoom_level: float) -> bool:
        return self._base.set_max_zoom_level(max_zoom_level)

    def set_min_zoom_level(self, min_zoom_level: float) -> bool:
        # A floor raised above the current zoom moves the zoom level as well.
        previous = self._base.zoom_level
        if not self._base.set_min_zoom_level(min_zoom_level):
            return False
        if self._base.zoom_level != previous:
            self._publisher.notify_zoom(CameraZoomEvent(self._base.zoom_level - previous), self.state)
        return True

    # ------------------------------------------------------------------
    # Observed state
    # ------------------------------------------------------------------
    @property
    def position(self) -> Point:
        return self._base.position

    @property
    def zoom_level(self) -> float:
        return self._base.zoom_level

    @property
    def rotation(self) -> float:
        return self._base.rotation

    @property
    def state(self) -> CameraState:
        return self._base.state

    def set_position(self, destination: SupportsXY) -> bool:
        previous = self._base.position
        if not self._base.set_position(destination):
            return False
        self._publisher.notify_pan(CameraPanEvent(self._base.position - previous), self.state)
        return True

    def set_zoom_level(self, zoom_level: float) -> bool:
        previous = self._base.zoom_level
        if not self._base.set_zoom_level(zoom_level):
            return False
        self._publisher.notify_zoom(CameraZoomEvent(self._base.zoom_level - previous), self.state)
        return True

    def set_rotation(self, rotation: float) -> bool:
        previous = self._base.rotation
        if not self._base.set_rotation(rotation):
            return False
        self._publisher.notify_rotate(
            CameraRotateEvent(angle_span(previous, self._base.rotation)), self.state
        )
        return True

    def on(
        self,
        event_name: CameraEventName,
        callback: CameraObserver,
        signal: Optional[AbortSignal] = None,
    ) -> Unsubscribe:
        """Subscribe to ``pan``, ``zoom``, ``rotate`` or ``all`` notifications.

        Callbacks receive ``(event, camera_state)`` on a later event-loop turn.
        """

        return self._publisher.on(event_name, callback, signal)

    # ------------------------------------------------------------------
    # Transforms and conversions
    # ------------------------------------------------------------------
    def get_transform(
        self,
        device_pixel_ratio: float = DEFAULT_DEVICE_PIXEL_RATIO,
        align_coordinate: bool = True,
    ) -> TransformationMatrix:
        return self._base.get_transform(device_pixel_ratio, align_coordinate)

    def get_trs(
        self,
        device_pixel_ratio: float = DEFAULT_DEVICE_PIXEL_RATIO,
        align_coordinate: bool = True,
    ) -> TRSDecomposition:
        return self._base.get_trs(device_pixel_ratio, align_coordinate)

    def set_using_transformation_matrix(
        self,
        matrix: TransformationMatrix,
        device_pixel_ratio: float = DEFAULT_DEVICE_PIXEL_RATIO,
    ) -> None:
        decomposed = decompose_camera_matrix(
            matrix, device_pixel_ratio, self.viewport_width, self.viewport_height
        )
        self.set_position(decomposed.position)
        self.set_rotation(decomposed.rotation)
        self.set_zoom_level(decomposed.zoom)

    def convert_from_viewport_to_world(self, point: SupportsXY) -> Point:
        return self._base.convert_from_viewport_to_world(point)

    def convert_from_world_to_viewport(self, point: SupportsXY) -> Point:
        return self._base.convert_from_world_to_viewport(point)

    def invert_from_world_space_to_viewport(self, point: SupportsXY) -> Point:
        return self._base.invert_from_world_space_to_viewport(point)

    def viewport_in_world_space(self, align_coordinate: bool = True) -> ViewportCorners:
        return self._base.viewport_in_world_space(align_coordinate)

    def viewport_aabb(self, align_coordinate: bool = True) -> AABB:
        return self._base.viewport_aabb(align_coordinate)


__all__ = ["DefaultBoardCamera"]
