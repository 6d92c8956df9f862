"""Restriction and clamping flags consulted by the camera rig handlers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

from ...errors import CameraConfigError


@dataclass(frozen=True)
class CameraRigConfig:
    """Flags controlling how rig intents are restricted and clamped.

    ``restrict_*`` flags suppress movement: the absolute x/y flags zero a
    world-axis component of a pan, the relative flags zero the component along
    the rotated viewport axis. ``clamp_*`` flags keep results inside the camera
    limits, and ``limit_entire_viewport`` extends translation clamping from the
    camera centre to all four viewport corners.
    """

    restrict_x_translation: bool = False
    restrict_y_translation: bool = False
    restrict_relative_x_translation: bool = False
    restrict_relative_y_translation: bool = False
    restrict_rotation: bool = False
    restrict_zoom: bool = False
    limit_entire_viewport: bool = False
    clamp_translation: bool = True
    clamp_zoom: bool = True
    clamp_rotation: bool = True

    @classmethod
    def flag_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def merged(self, partial: Mapping[str, Any] | None = None, **overrides: Any) -> "CameraRigConfig":
        """Return a copy with the given flags replaced; unspecified flags are kept.

        Raises
        ------
        CameraConfigError
            If a key does not name a flag.
        """

        updates = dict(partial or {})
        updates.update(overrides)
        unknown = sorted(set(updates) - set(self.flag_names()))
        if unknown:
            raise CameraConfigError(f"Unknown camera rig option(s): {', '.join(unknown)}")
        return replace(self, **{key: bool(value) for key, value in updates.items()})

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)


__all__ = ["CameraRigConfig"]
