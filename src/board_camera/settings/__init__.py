from .schema import (
    CAMERA_OPTIONS_SCHEMA,
    DEFAULT_CAMERA_OPTIONS,
    camera_from_options,
    merge_with_defaults,
    validate_camera_options,
)

__all__ = [
    "CAMERA_OPTIONS_SCHEMA",
    "DEFAULT_CAMERA_OPTIONS",
    "camera_from_options",
    "merge_with_defaults",
    "validate_camera_options",
]
