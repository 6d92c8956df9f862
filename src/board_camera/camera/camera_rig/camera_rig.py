"""High-level camera control that keeps anchors fixed and honours restrictions."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ...geometry import Point, SupportsXY
from ...utils.logging import get_logger
from ..interface import BoardCamera
from ..utils.coordinate_conversion import convert_delta_in_viewport_to_world
from ..utils.position import clamp_point, viewport_corner_offsets, worst_corner_correction
from ..utils.rotation import clamp_rotation
from ..utils.zoom import clamp_zoom_level
from .pan_handler import create_default_pan_by_handler, create_default_pan_to_handler
from .rig_config import CameraRigConfig
from .rotation_handler import create_default_rotate_by_handler, create_default_rotate_to_handler
from .zoom_handler import create_default_zoom_by_handler, create_default_zoom_to_handler

logger = get_logger(__name__)


class CameraRig:
    """Translate pan, zoom and rotate intents into guarded camera mutations.

    The rig keeps no camera state of its own; every call reads the wrapped
    camera and writes back through its guarded setters, so a rejected setter
    simply ends the operation.
    """

    def __init__(self, camera: BoardCamera, config: Optional[CameraRigConfig] = None) -> None:
        self._camera = camera
        self._config = config or CameraRigConfig()
        self._pan_by = create_default_pan_by_handler()
        self._pan_to = create_default_pan_to_handler()
        self._zoom_by = create_default_zoom_by_handler()
        self._zoom_to = create_default_zoom_to_handler()
        self._rotate_by = create_default_rotate_by_handler()
        self._rotate_to = create_default_rotate_to_handler()

    @property
    def camera(self) -> BoardCamera:
        return self._camera

    @camera.setter
    def camera(self, camera: BoardCamera) -> None:
        self._camera = camera

    @property
    def config(self) -> CameraRigConfig:
        return self._config

    @config.setter
    def config(self, config: CameraRigConfig) -> None:
        self._config = config

    @property
    def limit_entire_viewport(self) -> bool:
        return self._config.limit_entire_viewport

    @limit_entire_viewport.setter
    def limit_entire_viewport(self, value: bool) -> None:
        self._config = self._config.merged(limit_entire_viewport=value)

    def configure(self, partial: Mapping[str, Any] | None = None, **flags: Any) -> None:
        """Shallow-merge *partial* and *flags* into the configuration."""

        self._config = self._config.merged(partial, **flags)

    # ------------------------------------------------------------------
    # Pan
    # ------------------------------------------------------------------
    def pan_by_viewport(self, delta: SupportsXY) -> None:
        camera = self._camera
        self.pan_by_world(convert_delta_in_viewport_to_world(delta, camera.zoom_level, camera.rotation))

    def pan_by_world(self, delta: SupportsXY) -> None:
        adjusted = self._pan_by(Point.of(delta), self._camera, self._config)
        self._camera.set_position(self._settle_position(self._camera.position + adjusted))

    def pan_to_world(self, target: SupportsXY) -> None:
        self._camera.set_position(self._pan_to(Point.of(target), self._camera, self._config))

    def pan_to_viewport(self, target: SupportsXY) -> None:
        self.pan_to_world(self._camera.convert_from_viewport_to_world(target))

    # ------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------
    def zoom_by(self, delta: float) -> None:
        self._camera.set_zoom_level(self._zoom_target_by(delta))

    def zoom_to(self, target: float) -> None:
        self._camera.set_zoom_level(self._zoom_to(target, self._camera, self._config))

    def zoom_by_at(self, delta: float, anchor: SupportsXY) -> None:
        """Zoom by *delta* keeping the world point under viewport *anchor* in place."""

        self._zoom_keeping_viewport_anchor(self._zoom_target_by(delta), Point.of(anchor))

    def zoom_to_at(self, target: float, anchor: SupportsXY) -> None:
        self._zoom_keeping_viewport_anchor(
            self._zoom_to(target, self._camera, self._config), Point.of(anchor)
        )

    def zoom_by_at_world(self, delta: float, anchor: SupportsXY) -> None:
        """Zoom by *delta* keeping world point *anchor* at the same viewport position."""

        self._zoom_keeping_world_anchor(self._zoom_target_by(delta), Point.of(anchor))

    def zoom_to_at_world(self, target: float, anchor: SupportsXY) -> None:
        self._zoom_keeping_world_anchor(
            self._zoom_to(target, self._camera, self._config), Point.of(anchor)
        )

    def _zoom_target_by(self, delta: float) -> float:
        camera = self._camera
        target = camera.zoom_level + self._zoom_by(delta, camera, self._config)
        if self._config.clamp_zoom:
            # Adding the clamped delta back can land an ulp outside the limits.
            target = clamp_zoom_level(target, camera.zoom_boundaries)
        return target

    def _zoom_keeping_viewport_anchor(self, target: float, anchor: Point) -> None:
        camera = self._camera
        previous = camera.zoom_level
        if target == previous:
            return
        if not camera.set_zoom_level(target):
            return
        current = camera.zoom_level
        diff = anchor.rotate(camera.rotation) * (1 / previous - 1 / current)
        self._apply_position_correction(diff)

    def _zoom_keeping_world_anchor(self, target: float, anchor: Point) -> None:
        camera = self._camera
        previous = camera.zoom_level
        position = camera.position
        if target == previous:
            return
        if not camera.set_zoom_level(target):
            return
        destination = anchor - (anchor - position) * (previous / camera.zoom_level)
        self._apply_position_correction(destination - position)

    def _apply_position_correction(self, diff: Point) -> None:
        adjusted = self._pan_by(diff, self._camera, self._config)
        self._camera.set_position(self._settle_position(self._camera.position + adjusted))

    def _settle_position(self, destination: Point) -> Point:
        if self._config.clamp_translation:
            return clamp_point(destination, self._camera.boundaries)
        return destination

    # ------------------------------------------------------------------
    # Rotate
    # ------------------------------------------------------------------
    def rotate_by(self, delta: float) -> None:
        if self._config.restrict_rotation:
            return
        adjusted = self._rotate_by(delta, self._camera, self._config)
        target = self._camera.rotation + adjusted
        if self._config.clamp_rotation:
            target = clamp_rotation(target, self._camera.rotation_boundaries)
        if self._camera.set_rotation(target):
            self._keep_viewport_inside_boundaries()

    def rotate_to(self, target: float) -> None:
        if self._config.restrict_rotation:
            return
        if self._camera.set_rotation(self._rotate_to(target, self._camera, self._config)):
            self._keep_viewport_inside_boundaries()

    def _keep_viewport_inside_boundaries(self) -> None:
        if not self._config.limit_entire_viewport:
            return
        camera = self._camera
        corners = [
            camera.position + offset
            for offset in viewport_corner_offsets(
                camera.viewport_width, camera.viewport_height, camera.zoom_level, camera.rotation
            )
        ]
        correction = worst_corner_correction(corners, camera.boundaries)
        if correction.x == 0.0 and correction.y == 0.0:
            return
        logger.debug("Shifting camera by %s to keep the rotated viewport in bounds", correction.as_tuple())
        camera.set_position(camera.position + correction)


def create_default_camera_rig(camera: BoardCamera) -> CameraRig:
    """Return a rig that clamps the whole viewport, not only its centre, to the boundaries."""

    return CameraRig(camera, CameraRigConfig(limit_entire_viewport=True))


__all__ = ["CameraRig", "create_default_camera_rig"]
