"""Logging helpers shared by the board-camera modules."""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "board_camera"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child logger when *name* is given.

    Names already inside the package namespace (``__name__`` of a module in
    this package) are used as-is so module loggers stay hierarchical.
    """

    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


__all__ = ["ROOT_LOGGER_NAME", "get_logger"]
