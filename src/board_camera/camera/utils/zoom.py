"""Zoom level limits and the predicates that enforce them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ZoomLevelLimits:
    """Optional lower and upper bounds for the camera zoom level.

    A zoom level of ``1.0`` is 100%; values above it zoom in. Either bound may
    be ``None`` to leave that side unconstrained.
    """

    min: Optional[float] = None
    max: Optional[float] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "ZoomLevelLimits | None":
        if values is None:
            return None
        low = values.get("min")
        high = values.get("max")
        return cls(
            None if low is None else float(low),
            None if high is None else float(high),
        ).normalised()

    def normalised(self) -> "ZoomLevelLimits":
        """Return a copy whose bounds are swapped when ``min > max``."""

        if self.min is not None and self.max is not None and self.min > self.max:
            return ZoomLevelLimits(min=self.max, max=self.min)
        return self

    def with_min(self, value: Optional[float]) -> "ZoomLevelLimits":
        return ZoomLevelLimits(min=value, max=self.max)

    def with_max(self, value: Optional[float]) -> "ZoomLevelLimits":
        return ZoomLevelLimits(min=self.min, max=value)


def is_valid_zoom_level_limits(limits: ZoomLevelLimits | None) -> bool:
    """Return ``False`` only when both bounds are set and ``min > max``."""

    if limits is None:
        return True
    if limits.min is not None and limits.max is not None and limits.min > limits.max:
        return False
    return True


def zoom_level_within_limits(zoom_level: float, limits: ZoomLevelLimits | None) -> bool:
    """Return ``True`` when ``zoom_level`` is positive and inside ``limits``.

    Non-positive zoom levels are rejected even when no limits are configured.
    """

    if zoom_level <= 0:
        return False
    if limits is None:
        return True
    if limits.max is not None and zoom_level > limits.max:
        return False
    if limits.min is not None and zoom_level < limits.min:
        return False
    return True


def clamp_zoom_level(zoom_level: float, limits: ZoomLevelLimits | None) -> float:
    """Clamp ``zoom_level`` to the bounds that ``limits`` defines."""

    if limits is None or zoom_level_within_limits(zoom_level, limits):
        return zoom_level
    if limits.max is not None:
        zoom_level = min(limits.max, zoom_level)
    if limits.min is not None:
        zoom_level = max(limits.min, zoom_level)
    return zoom_level


__all__ = [
    "ZoomLevelLimits",
    "clamp_zoom_level",
    "is_valid_zoom_level_limits",
    "zoom_level_within_limits",
]
