"""Custom exception hierarchy for board-camera."""

from __future__ import annotations


class BoardCameraError(Exception):
    """Base class for all custom errors raised by board-camera."""


class SingularMatrixError(BoardCameraError, ValueError):
    """Raised when an affine matrix is too close to singular to be decomposed."""

    def __init__(self, determinant: float) -> None:
        super().__init__(f"Matrix is singular and cannot be decomposed (det={determinant!r})")
        self.determinant = determinant


class CameraConfigError(BoardCameraError, ValueError):
    """Raised when camera or rig configuration data is malformed."""


__all__ = ["BoardCameraError", "CameraConfigError", "SingularMatrixError"]
