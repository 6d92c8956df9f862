"""Angle normalisation and angular-arc rotation limits.

Angles are radians and positive spans run counter-clockwise. A rotation limit
is an arc walked from ``start`` to ``end`` in the ``ccw`` direction; an arc whose
endpoints coincide is treated as unbounded.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from ...config import DEGENERATE_ARC_EPSILON

TWO_PI = math.pi * 2.0


@dataclass(frozen=True)
class RotationLimits:
    """Arc of allowed camera rotations.

    Parameters
    ----------
    start, end:
        Arc endpoints in radians.
    ccw:
        Walk the arc counter-clockwise from ``start`` to ``end`` when ``True``.
    start_as_tie_breaker:
        Clamp to ``start`` when a rejected angle is equally far from both ends.
    """

    start: float
    end: float
    ccw: bool = True
    start_as_tie_breaker: bool = True

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "RotationLimits | None":
        if values is None:
            return None
        return cls(
            start=float(values["start"]),
            end=float(values["end"]),
            ccw=bool(values.get("ccw", True)),
            start_as_tie_breaker=bool(values.get("start_as_tie_breaker", True)),
        )

    def normalised(self) -> "RotationLimits":
        """Return a copy with ``start`` and ``end`` swapped when ``start > end``."""

        if self.start > self.end:
            return RotationLimits(self.end, self.start, self.ccw, self.start_as_tie_breaker)
        return self

    def is_degenerate(self) -> bool:
        return normalize_angle_zero_to_two_pi(self.start) == normalize_angle_zero_to_two_pi(
            self.end
        ) or normalize_angle_zero_to_two_pi(
            self.start + DEGENERATE_ARC_EPSILON
        ) == normalize_angle_zero_to_two_pi(self.end + DEGENERATE_ARC_EPSILON)


def normalize_angle_zero_to_two_pi(angle: float) -> float:
    """Reduce ``angle`` to ``[0, 2π)``."""

    # Python's ``%`` takes the sign of the divisor; tiny negative inputs can
    # still round up to exactly 2π.
    angle = angle % TWO_PI
    if angle >= TWO_PI:
        return 0.0
    return angle


def angle_span(from_angle: float, to_angle: float) -> float:
    """Return the signed shortest span from ``from_angle`` to ``to_angle`` in ``(-π, π]``."""

    from_angle = normalize_angle_zero_to_two_pi(from_angle)
    to_angle = normalize_angle_zero_to_two_pi(to_angle)
    diff = to_angle - from_angle
    if diff > math.pi:
        diff = -(TWO_PI - diff)
    if diff <= -math.pi:
        diff += TWO_PI
    return diff


def _outside_arc(span_from_start: float, span_from_end: float, ccw: bool) -> bool:
    if ccw:
        return span_from_start < 0 or span_from_end > 0
    return span_from_start > 0 or span_from_end < 0


def rotation_within_limits(rotation: float, limits: RotationLimits | None) -> bool:
    """Return ``True`` when ``rotation`` lies on the arc described by ``limits``."""

    if limits is None or limits.is_degenerate():
        return True
    normalised = normalize_angle_zero_to_two_pi(rotation)
    span_from_start = angle_span(limits.start, normalised)
    span_from_end = angle_span(limits.end, normalised)
    return not _outside_arc(span_from_start, span_from_end, limits.ccw)


def clamp_rotation(rotation: float, limits: RotationLimits | None) -> float:
    """Snap ``rotation`` to the nearer arc endpoint when it falls outside ``limits``.

    Angles already on the arc are returned unchanged (not normalised). On an
    exact tie the endpoint is picked by ``start_as_tie_breaker``.
    """

    if limits is None or rotation_within_limits(rotation, limits):
        return rotation
    normalised = normalize_angle_zero_to_two_pi(rotation)
    distance_to_start = abs(angle_span(limits.start, normalised))
    distance_to_end = abs(angle_span(limits.end, normalised))
    if distance_to_start == distance_to_end:
        return limits.start if limits.start_as_tie_breaker else limits.end
    return limits.start if distance_to_start < distance_to_end else limits.end


def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def rad_to_deg(radians: float) -> float:
    return radians * 180.0 / math.pi


__all__ = [
    "TWO_PI",
    "RotationLimits",
    "angle_span",
    "clamp_rotation",
    "deg_to_rad",
    "normalize_angle_zero_to_two_pi",
    "rad_to_deg",
    "rotation_within_limits",
]
