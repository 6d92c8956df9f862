"""Affine 2x3 matrices: composition, camera transforms and TRS decomposition.

Matrices use the canvas ``(a, b, c, d, e, f)`` layout::

    | a  c  e |
    | b  d  f |
    | 0  0  1 |
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ...config import SINGULAR_DETERMINANT_EPSILON
from ...errors import SingularMatrixError
from ...geometry import Point, SupportsXY


@dataclass(frozen=True)
class TransformationMatrix:
    """Affine map ``(x, y) -> (a*x + c*y + e, b*x + d*y + f)``."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @classmethod
    def identity(cls) -> "TransformationMatrix":
        return cls(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "TransformationMatrix":
        """Build a matrix from a 3x3 (or 2x3) homogeneous ``ndarray``."""

        values = np.asarray(array, dtype=np.float64)
        if values.shape not in ((3, 3), (2, 3)):
            raise ValueError(f"Expected a 3x3 or 2x3 array, got shape {values.shape}")
        return cls(
            float(values[0, 0]),
            float(values[1, 0]),
            float(values[0, 1]),
            float(values[1, 1]),
            float(values[0, 2]),
            float(values[1, 2]),
        )

    def to_numpy(self) -> np.ndarray:
        return np.array(
            [
                [self.a, self.c, self.e],
                [self.b, self.d, self.f],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def apply(self, point: SupportsXY) -> Point:
        return Point(
            point.x * self.a + point.y * self.c + self.e,
            point.x * self.b + point.y * self.d + self.f,
        )

    def is_close(self, other: "TransformationMatrix", tolerance: float = 1e-9) -> bool:
        return all(abs(x - y) <= tolerance for x, y in zip(self.as_tuple(), other.as_tuple()))


@dataclass(frozen=True)
class TRSDecomposition:
    translation: Point
    rotation: float
    scale: Point


@dataclass(frozen=True)
class CameraDecomposition:
    position: Point
    zoom: float
    rotation: float


def multiply_matrix(m1: TransformationMatrix, m2: TransformationMatrix) -> TransformationMatrix:
    """Return ``m1 x m2``; the product applies ``m2`` first and then ``m1``."""

    return TransformationMatrix(
        a=m1.a * m2.a + m1.c * m2.b,
        b=m1.b * m2.a + m1.d * m2.b,
        c=m1.a * m2.c + m1.c * m2.d,
        d=m1.b * m2.c + m1.d * m2.d,
        e=m1.a * m2.e + m1.c * m2.f + m1.e,
        f=m1.b * m2.e + m1.d * m2.f + m1.f,
    )


def _scale(sx: float, sy: float | None = None) -> TransformationMatrix:
    return TransformationMatrix(sx, 0.0, 0.0, sx if sy is None else sy, 0.0, 0.0)


def _translate(tx: float, ty: float) -> TransformationMatrix:
    return TransformationMatrix(1.0, 0.0, 0.0, 1.0, tx, ty)


def _rotate(angle: float) -> TransformationMatrix:
    cos_r = math.cos(angle)
    sin_r = math.sin(angle)
    return TransformationMatrix(cos_r, sin_r, -sin_r, cos_r, 0.0, 0.0)


def create_camera_matrix(
    camera_position: SupportsXY,
    zoom: float,
    rotation: float,
    device_pixel_ratio: float,
    viewport_width: float,
    viewport_height: float,
) -> TransformationMatrix:
    """Return the world to device-pixel transform of a camera.

    The chain is ``scale(dpr) . translate(viewport centre) . rotate(-rotation)
    . scale(zoom) . translate(-position)``; viewport dimensions are CSS pixels.
    """

    matrix = _scale(device_pixel_ratio)
    matrix = multiply_matrix(matrix, _translate(viewport_width / 2, viewport_height / 2))
    matrix = multiply_matrix(matrix, _rotate(-rotation))
    matrix = multiply_matrix(matrix, _scale(zoom))
    return multiply_matrix(matrix, _translate(-camera_position.x, -camera_position.y))


def _require_non_singular(matrix: TransformationMatrix) -> None:
    determinant = matrix.determinant()
    if abs(determinant) < SINGULAR_DETERMINANT_EPSILON:
        raise SingularMatrixError(determinant)


def decompose_camera_matrix(
    matrix: TransformationMatrix,
    device_pixel_ratio: float,
    viewport_width: float,
    viewport_height: float,
) -> CameraDecomposition:
    """Recover camera position, zoom and rotation from a :func:`create_camera_matrix` result.

    Raises
    ------
    SingularMatrixError
        If ``|det(matrix)| < 1e-10``.
    """

    _require_non_singular(matrix)
    rotation = -math.atan2(matrix.b, matrix.a)
    zoom = math.hypot(matrix.a, matrix.b) / device_pixel_ratio

    reverse = Point(matrix.e, matrix.f) / device_pixel_ratio
    reverse = reverse - Point(viewport_width / 2, viewport_height / 2)
    reverse = reverse.rotate(rotation) / zoom
    return CameraDecomposition(position=-reverse, zoom=zoom, rotation=rotation)


def create_trs_matrix(translation: SupportsXY, rotation: float, scale: SupportsXY) -> TransformationMatrix:
    """Compose scale, then rotation, then translation into one matrix."""

    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    return TransformationMatrix(
        a=scale.x * cos_r,
        b=scale.x * sin_r,
        c=-scale.y * sin_r,
        d=scale.y * cos_r,
        e=translation.x,
        f=translation.y,
    )


def _normalise_half_turn(angle: float) -> float:
    while angle > math.pi:
        angle -= 2 * math.pi
    while angle <= -math.pi:
        angle += 2 * math.pi
    return angle


def decompose_trs(matrix: TransformationMatrix) -> TRSDecomposition:
    """Split ``matrix`` into translation, rotation and scale.

    Rotation is read from the first column and removed to leave the scale.
    ``scale.x`` is never negative this way, so a reflection shows up as a
    negative ``scale.y`` and is kept as such; ``create_trs_matrix`` of the
    result reproduces the input. A pair of negative scales is already a
    half-turn to ``atan2`` and comes back as two positive scales. The rotation
    is returned in ``(-π, π]``.

    Raises
    ------
    SingularMatrixError
        If ``|det(matrix)| < 1e-10``.
    """

    _require_non_singular(matrix)
    rotation = math.atan2(matrix.b, matrix.a)
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    scale_x = matrix.a * cos_r + matrix.b * sin_r
    scale_y = -matrix.c * sin_r + matrix.d * cos_r

    return TRSDecomposition(
        translation=Point(matrix.e, matrix.f),
        rotation=_normalise_half_turn(rotation),
        scale=Point(scale_x, scale_y),
    )


__all__ = [
    "CameraDecomposition",
    "TRSDecomposition",
    "TransformationMatrix",
    "create_camera_matrix",
    "create_trs_matrix",
    "decompose_camera_matrix",
    "decompose_trs",
    "multiply_matrix",
]
