"""Compose value-transforming handlers into a single callable."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

V = TypeVar("V")

Handler = Callable[..., Any]


def create_handler_chain(*handlers: Handler) -> Callable[..., Any]:
    """Return a handler that threads its first argument through *handlers* in order.

    Every handler receives the previous handler's result followed by the
    remaining arguments of the call unchanged.
    """

    def chain(value: V, *args: Any) -> V:
        for handler in handlers:
            value = handler(value, *args)
        return value

    return chain


__all__ = ["Handler", "create_handler_chain"]
