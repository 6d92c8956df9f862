"""2D board camera: guarded viewport state, coordinate conversion and a constrained rig."""

from .camera import (
    AABB,
    BaseCamera,
    CameraRig,
    CameraRigConfig,
    CameraState,
    DefaultBoardCamera,
    ViewportCorners,
    create_default_camera_rig,
)
from .camera.utils import (
    Boundaries,
    RotationLimits,
    TransformationMatrix,
    ZoomLevelLimits,
)
from .errors import BoardCameraError, CameraConfigError, SingularMatrixError
from .geometry import Point

__version__ = "0.1.0"

__all__ = [
    "AABB",
    "BaseCamera",
    "BoardCameraError",
    "Boundaries",
    "CameraConfigError",
    "CameraRig",
    "CameraRigConfig",
    "CameraState",
    "DefaultBoardCamera",
    "Point",
    "RotationLimits",
    "SingularMatrixError",
    "TransformationMatrix",
    "ViewportCorners",
    "ZoomLevelLimits",
    "create_default_camera_rig",
]
