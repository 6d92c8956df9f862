"""Schema helpers for plain-data camera construction options."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Union

from jsonschema import Draft202012Validator, ValidationError

from ..camera.base import BaseCamera
from ..camera.default_camera import DefaultBoardCamera
from ..camera.utils.position import Boundaries
from ..camera.utils.rotation import RotationLimits
from ..camera.utils.zoom import ZoomLevelLimits
from ..config import (
    DEFAULT_BOUNDARY_MAX,
    DEFAULT_BOUNDARY_MIN,
    DEFAULT_MAX_ZOOM_LEVEL,
    DEFAULT_MIN_ZOOM_LEVEL,
    DEFAULT_POSITION,
    DEFAULT_ROTATION,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_VIEWPORT_WIDTH,
    DEFAULT_ZOOM_LEVEL,
)
from ..errors import CameraConfigError

SCHEMA_VERSION = "board-camera/options@1"

_NULLABLE_NUMBER = {"type": ["number", "null"]}

_POINT = {
    "type": "object",
    "required": ["x", "y"],
    "properties": {"x": {"type": "number"}, "y": {"type": "number"}},
    "additionalProperties": False,
}

_AXIS_LIMITS = {
    "type": ["object", "null"],
    "properties": {"x": _NULLABLE_NUMBER, "y": _NULLABLE_NUMBER},
    "additionalProperties": False,
}

CAMERA_OPTIONS_SCHEMA: dict[str, Any] = {
    "$id": "board-camera/options.schema.json",
    "type": "object",
    "required": ["schema", "viewport", "position", "rotation", "zoom_level"],
    "properties": {
        "schema": {"const": SCHEMA_VERSION},
        "viewport": {
            "type": "object",
            "required": ["width", "height"],
            "properties": {
                "width": {"type": "number", "exclusiveMinimum": 0},
                "height": {"type": "number", "exclusiveMinimum": 0},
            },
            "additionalProperties": False,
        },
        "position": _POINT,
        "rotation": {"type": "number"},
        "zoom_level": {"type": "number", "exclusiveMinimum": 0},
        "boundaries": {
            "type": ["object", "null"],
            "properties": {"min": _AXIS_LIMITS, "max": _AXIS_LIMITS},
            "additionalProperties": False,
        },
        "zoom_limits": {
            "type": ["object", "null"],
            "properties": {
                "min": {"type": ["number", "null"], "exclusiveMinimum": 0},
                "max": {"type": ["number", "null"], "exclusiveMinimum": 0},
            },
            "additionalProperties": False,
        },
        "rotation_limits": {
            "type": ["object", "null"],
            "required": ["start", "end"],
            "properties": {
                "start": {"type": "number"},
                "end": {"type": "number"},
                "ccw": {"type": "boolean"},
                "start_as_tie_breaker": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}

DEFAULT_CAMERA_OPTIONS: dict[str, Any] = {
    "schema": SCHEMA_VERSION,
    "viewport": {"width": DEFAULT_VIEWPORT_WIDTH, "height": DEFAULT_VIEWPORT_HEIGHT},
    "position": {"x": DEFAULT_POSITION[0], "y": DEFAULT_POSITION[1]},
    "rotation": DEFAULT_ROTATION,
    "zoom_level": DEFAULT_ZOOM_LEVEL,
    "boundaries": {
        "min": {"x": DEFAULT_BOUNDARY_MIN[0], "y": DEFAULT_BOUNDARY_MIN[1]},
        "max": {"x": DEFAULT_BOUNDARY_MAX[0], "y": DEFAULT_BOUNDARY_MAX[1]},
    },
    "zoom_limits": {"min": DEFAULT_MIN_ZOOM_LEVEL, "max": DEFAULT_MAX_ZOOM_LEVEL},
    "rotation_limits": None,
}

_validator = Draft202012Validator(CAMERA_OPTIONS_SCHEMA)

# Sections merged key by key rather than replaced wholesale.
_NESTED_SECTIONS = ("viewport", "position")


def _swap_inverted(low: Any, high: Any) -> tuple[Any, Any]:
    if low is not None and high is not None and low > high:
        return high, low
    return low, high


def _normalise_limits(options: dict[str, Any]) -> None:
    zoom_limits = options.get("zoom_limits")
    if isinstance(zoom_limits, dict):
        zoom_limits["min"], zoom_limits["max"] = _swap_inverted(
            zoom_limits.get("min"), zoom_limits.get("max")
        )
    boundaries = options.get("boundaries")
    if isinstance(boundaries, dict):
        low = boundaries.get("min") or {}
        high = boundaries.get("max") or {}
        if isinstance(low, dict) and isinstance(high, dict):
            for axis in ("x", "y"):
                low_value, high_value = _swap_inverted(low.get(axis), high.get(axis))
                if axis in low or low_value is not None:
                    low[axis] = low_value
                if axis in high or high_value is not None:
                    high[axis] = high_value
            if low:
                boundaries["min"] = low
            if high:
                boundaries["max"] = high


def validate_camera_options(data: dict[str, Any]) -> None:
    """Validate *data* against :data:`CAMERA_OPTIONS_SCHEMA`.

    Raises
    ------
    CameraConfigError
        Chained from the underlying :class:`jsonschema.ValidationError`.
    """

    try:
        _validator.validate(data)
    except ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise CameraConfigError(f"Invalid camera options at {location}: {exc.message}") from exc


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* over :data:`DEFAULT_CAMERA_OPTIONS` and validate the result.

    Inverted ``min``/``max`` pairs are swapped instead of rejected.
    """

    merged = deepcopy(DEFAULT_CAMERA_OPTIONS)
    if data:
        for key, value in data.items():
            if key in _NESTED_SECTIONS and isinstance(value, dict):
                merged.setdefault(key, {}).update(deepcopy(value))
                continue
            merged[key] = deepcopy(value)
    _normalise_limits(merged)
    validate_camera_options(merged)
    return merged


def camera_from_options(
    data: dict[str, Any] | None = None,
    observable: bool = True,
    **kwargs: Any,
) -> Union[DefaultBoardCamera, BaseCamera]:
    """Build a camera from plain-data options.

    Extra keyword arguments (such as ``scheduler``) are forwarded to
    :class:`DefaultBoardCamera` when *observable* is true.
    """

    options = merge_with_defaults(data)
    args = (
        float(options["viewport"]["width"]),
        float(options["viewport"]["height"]),
        (float(options["position"]["x"]), float(options["position"]["y"])),
        float(options["rotation"]),
        float(options["zoom_level"]),
        Boundaries.from_mapping(options.get("boundaries")),
        ZoomLevelLimits.from_mapping(options.get("zoom_limits")),
        RotationLimits.from_mapping(options.get("rotation_limits")),
    )
    if observable:
        return DefaultBoardCamera(*args, **kwargs)
    return BaseCamera(*args)


__all__ = [
    "CAMERA_OPTIONS_SCHEMA",
    "DEFAULT_CAMERA_OPTIONS",
    "SCHEMA_VERSION",
    "camera_from_options",
    "merge_with_defaults",
    "validate_camera_options",
]
