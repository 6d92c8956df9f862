"""Default configuration values for board-camera."""

from __future__ import annotations

from typing import Final

# Viewport dimensions are expressed in CSS pixels; the device pixel ratio is
# applied only when the rendering transform is built.
DEFAULT_VIEWPORT_WIDTH: Final[float] = 1000.0
DEFAULT_VIEWPORT_HEIGHT: Final[float] = 1000.0

DEFAULT_POSITION: Final[tuple[float, float]] = (0.0, 0.0)
DEFAULT_ROTATION: Final[float] = 0.0
DEFAULT_ZOOM_LEVEL: Final[float] = 1.0

DEFAULT_BOUNDARY_MIN: Final[tuple[float, float]] = (-10000.0, -10000.0)
DEFAULT_BOUNDARY_MAX: Final[tuple[float, float]] = (10000.0, 10000.0)
DEFAULT_MIN_ZOOM_LEVEL: Final[float] = 0.1
DEFAULT_MAX_ZOOM_LEVEL: Final[float] = 10.0

DEFAULT_DEVICE_PIXEL_RATIO: Final[float] = 1.0

# ---------------------------------------------------------------------------
# Numeric tolerances
# ---------------------------------------------------------------------------

# Matrices whose determinant magnitude falls below this value are rejected by
# the TRS and camera decompositions.
SINGULAR_DETERMINANT_EPSILON: Final[float] = 1e-10

# ``set_position`` ignores displacements shorter than both this value and one
# screen pixel at the current zoom level (``1 / zoom_level`` world units).
POSITION_DEADBAND: Final[float] = 1e-9

# A rotation arc whose endpoints coincide after nudging both by this amount is
# treated as unbounded.
DEGENERATE_ARC_EPSILON: Final[float] = 0.01
