from .coordinate_conversion import (
    camera_position_to_get,
    convert_delta_in_viewport_to_world,
    convert_delta_in_world_to_viewport,
    convert_to_viewport_space_anchor_at_center,
    convert_to_world_space_anchor_at_center,
    convert_to_world_space_with_transformation_matrix,
    invert_from_world_space,
    point_is_in_viewport,
    transformation_matrix_from_camera,
)
from .matrix import (
    CameraDecomposition,
    TRSDecomposition,
    TransformationMatrix,
    create_camera_matrix,
    create_trs_matrix,
    decompose_camera_matrix,
    decompose_trs,
    multiply_matrix,
)
from .position import (
    AxisLimits,
    Boundaries,
    boundaries_fully_defined,
    clamp_point,
    clamp_point_entire_viewport,
    half_translation_height_of,
    half_translation_width_of,
    is_valid_boundaries,
    translation_height_of,
    translation_width_of,
    within_boundaries,
)
from .rotation import (
    RotationLimits,
    angle_span,
    clamp_rotation,
    deg_to_rad,
    normalize_angle_zero_to_two_pi,
    rad_to_deg,
    rotation_within_limits,
)
from .zoom import (
    ZoomLevelLimits,
    clamp_zoom_level,
    is_valid_zoom_level_limits,
    zoom_level_within_limits,
)

__all__ = [
    "AxisLimits",
    "Boundaries",
    "CameraDecomposition",
    "RotationLimits",
    "TRSDecomposition",
    "TransformationMatrix",
    "ZoomLevelLimits",
    "angle_span",
    "boundaries_fully_defined",
    "camera_position_to_get",
    "clamp_point",
    "clamp_point_entire_viewport",
    "clamp_rotation",
    "clamp_zoom_level",
    "convert_delta_in_viewport_to_world",
    "convert_delta_in_world_to_viewport",
    "convert_to_viewport_space_anchor_at_center",
    "convert_to_world_space_anchor_at_center",
    "convert_to_world_space_with_transformation_matrix",
    "create_camera_matrix",
    "create_trs_matrix",
    "decompose_camera_matrix",
    "decompose_trs",
    "deg_to_rad",
    "half_translation_height_of",
    "half_translation_width_of",
    "invert_from_world_space",
    "is_valid_boundaries",
    "is_valid_zoom_level_limits",
    "multiply_matrix",
    "normalize_angle_zero_to_two_pi",
    "point_is_in_viewport",
    "rad_to_deg",
    "rotation_within_limits",
    "transformation_matrix_from_camera",
    "translation_height_of",
    "translation_width_of",
    "within_boundaries",
    "zoom_level_within_limits",
]
