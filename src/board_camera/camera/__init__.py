from .base import AABB, BaseCamera, CameraState, ViewportCorners
from .camera_rig import CameraRig, CameraRigConfig, create_default_camera_rig
from .default_camera import DefaultBoardCamera
from .interface import BoardCamera
from .update_publisher import (
    AllCameraEvent,
    CameraPanEvent,
    CameraRotateEvent,
    CameraUpdatePublisher,
    CameraZoomEvent,
)

__all__ = [
    "AABB",
    "AllCameraEvent",
    "BaseCamera",
    "BoardCamera",
    "CameraPanEvent",
    "CameraRig",
    "CameraRigConfig",
    "CameraRotateEvent",
    "CameraState",
    "CameraUpdatePublisher",
    "CameraZoomEvent",
    "DefaultBoardCamera",
    "ViewportCorners",
    "create_default_camera_rig",
]
