"""Minimal observer lists with cancellation tokens.

:class:`AsyncObservable` defers each observer call to the Qt event loop with a
zero-delay ``QTimer.singleShot`` so a burst of camera mutations settles before
any observer runs, and an observer that mutates the camera cannot re-enter the
dispatch that invoked it. :class:`SynchronousObservable` calls observers
immediately. Both share the subscription API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar

from PySide6.QtCore import QTimer

logger = logging.getLogger(__name__)

Observer = Callable[..., None]
Scheduler = Callable[[Callable[[], None]], None]
Unsubscribe = Callable[[], None]

T = TypeVar("T", bound=Observer)


def qt_scheduler(callback: Callable[[], None]) -> None:
    """Run *callback* on the next turn of the running Qt event loop."""

    QTimer.singleShot(0, callback)


class AbortSignal:
    """Cancellation token handed to :meth:`subscribe`."""

    def __init__(self) -> None:
        self._aborted = False
        self._listeners: List[Callable[[], None]] = []

    @property
    def aborted(self) -> bool:
        return self._aborted

    def add_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[], None]) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _abort(self) -> None:
        if self._aborted:
            return
        self._aborted = True
        for listener in list(self._listeners):
            listener()
        self._listeners.clear()


class AbortController:
    """Owner of an :class:`AbortSignal`; :meth:`abort` cancels every linked subscription."""

    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self) -> None:
        self.signal._abort()


@dataclass
class Subscription(Generic[T]):
    observer: T
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class _ObservableBase(Generic[T]):
    def __init__(self) -> None:
        self._subscriptions: List[Subscription[T]] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, observer: T, signal: Optional[AbortSignal] = None) -> Unsubscribe:
        """Register *observer* and return a callable that removes it again.

        When *signal* is already aborted the observer is not registered at
        all. Unsubscribing twice, or after the signal fired, is harmless.
        """

        if signal is not None and signal.aborted:
            return lambda: None

        subscription: Subscription[T] = Subscription(observer)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            subscription.cancel()
            try:
                self._subscriptions.remove(subscription)
            except ValueError:
                pass
            if signal is not None:
                signal.remove_listener(unsubscribe)

        if signal is not None:
            signal.add_listener(unsubscribe)
        return unsubscribe

    def _invoke(self, subscription: Subscription[T], args: tuple[Any, ...]) -> None:
        if not subscription.active:
            return
        try:
            subscription.observer(*args)
        except Exception:
            logger.exception("Observer %r failed", subscription.observer)

    def notify(self, *args: Any) -> None:
        raise NotImplementedError


class AsyncObservable(_ObservableBase[T]):
    """Observer list whose notifications run on a later event-loop turn.

    Parameters
    ----------
    scheduler:
        Callable that runs its argument later. Defaults to
        :func:`qt_scheduler`, which needs a ``QCoreApplication`` event loop.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None) -> None:
        super().__init__()
        self._scheduler: Scheduler = scheduler or qt_scheduler

    def notify(self, *args: Any) -> None:
        # Observers subscribed before this call are the ones scheduled.
        for subscription in list(self._subscriptions):
            self._scheduler(lambda sub=subscription: self._invoke(sub, args))


class SynchronousObservable(_ObservableBase[T]):
    """Observer list that calls every observer before :meth:`notify` returns."""

    def notify(self, *args: Any) -> None:
        for subscription in list(self._subscriptions):
            self._invoke(subscription, args)


__all__ = [
    "AbortController",
    "AbortSignal",
    "AsyncObservable",
    "Observer",
    "Scheduler",
    "Subscription",
    "SynchronousObservable",
    "Unsubscribe",
    "qt_scheduler",
]
