"""Camera change events and the publisher that fans them out."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal, Optional, Union

from ..errors import CameraConfigError
from ..geometry import Point
from ..utils.observable import AbortSignal, AsyncObservable, Scheduler, Unsubscribe
from .base import CameraState


@dataclass(frozen=True)
class CameraPanEvent:
    diff: Point
    type: Literal["pan"] = field(default="pan", init=False)


@dataclass(frozen=True)
class CameraZoomEvent:
    delta_zoom_amount: float
    type: Literal["zoom"] = field(default="zoom", init=False)


@dataclass(frozen=True)
class CameraRotateEvent:
    delta_rotation: float
    type: Literal["rotate"] = field(default="rotate", init=False)


AllCameraEvent = Union[CameraPanEvent, CameraZoomEvent, CameraRotateEvent]
CameraEventName = Literal["pan", "zoom", "rotate", "all"]
CameraObserver = Callable[[AllCameraEvent, CameraState], None]

EVENT_NAMES: tuple[str, ...] = ("pan", "zoom", "rotate", "all")


class CameraUpdatePublisher:
    """Deliver pan, zoom and rotate events to their own observers and to ``all``.

    Each ``notify_*`` call is delivered to the specific channel first and then,
    as the same event object, to the ``all`` channel. Delivery is deferred by
    :class:`~board_camera.utils.observable.AsyncObservable`.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None) -> None:
        self._channels: dict[str, AsyncObservable] = {
            name: AsyncObservable(scheduler) for name in EVENT_NAMES
        }

    def _publish(self, event: AllCameraEvent, state: CameraState) -> None:
        self._channels[event.type].notify(event, state)
        self._channels["all"].notify(event, state)

    def notify_pan(self, event: CameraPanEvent, state: CameraState) -> None:
        self._publish(event, state)

    def notify_zoom(self, event: CameraZoomEvent, state: CameraState) -> None:
        self._publish(event, state)

    def notify_rotate(self, event: CameraRotateEvent, state: CameraState) -> None:
        self._publish(event, state)

    def on(
        self,
        event_name: CameraEventName,
        callback: CameraObserver,
        signal: Optional[AbortSignal] = None,
    ) -> Unsubscribe:
        """Subscribe *callback* to *event_name* and return the unsubscribe callable.

        Raises
        ------
        CameraConfigError
            If *event_name* is not one of ``pan``, ``zoom``, ``rotate`` or ``all``.
        """

        channel = self._channels.get(event_name)
        if channel is None:
            raise CameraConfigError(f"Invalid event name: {event_name!r}")
        return channel.subscribe(callback, signal)


__all__ = [
    "AllCameraEvent",
    "CameraEventName",
    "CameraObserver",
    "CameraPanEvent",
    "CameraRotateEvent",
    "CameraUpdatePublisher",
    "CameraZoomEvent",
    "EVENT_NAMES",
]
