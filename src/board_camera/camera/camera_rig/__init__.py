from .camera_rig import CameraRig, create_default_camera_rig
from .pan_handler import (
    clamp_pan_by_handler,
    clamp_pan_to_handler,
    create_default_pan_by_handler,
    create_default_pan_to_handler,
    restrict_pan_by_handler,
    restrict_pan_to_handler,
)
from .rig_config import CameraRigConfig
from .rotation_handler import (
    clamp_rotate_by_handler,
    clamp_rotate_to_handler,
    create_default_rotate_by_handler,
    create_default_rotate_to_handler,
    restrict_rotate_by_handler,
    restrict_rotate_to_handler,
)
from .zoom_handler import (
    clamp_zoom_by_handler,
    clamp_zoom_to_handler,
    create_default_zoom_by_handler,
    create_default_zoom_to_handler,
    restrict_zoom_by_handler,
    restrict_zoom_to_handler,
)

__all__ = [
    "CameraRig",
    "CameraRigConfig",
    "clamp_pan_by_handler",
    "clamp_pan_to_handler",
    "clamp_rotate_by_handler",
    "clamp_rotate_to_handler",
    "clamp_zoom_by_handler",
    "clamp_zoom_to_handler",
    "create_default_camera_rig",
    "create_default_pan_by_handler",
    "create_default_pan_to_handler",
    "create_default_rotate_by_handler",
    "create_default_rotate_to_handler",
    "create_default_zoom_by_handler",
    "create_default_zoom_to_handler",
    "restrict_pan_by_handler",
    "restrict_pan_to_handler",
    "restrict_rotate_by_handler",
    "restrict_rotate_to_handler",
    "restrict_zoom_by_handler",
    "restrict_zoom_to_handler",
]
