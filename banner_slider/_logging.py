"""Central logging configuration for banner_slider."""

from __future__ import annotations

import logging

_DEFAULT_LEVEL = logging.INFO
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-level logger; handlers are left to the application."""
    return logging.getLogger(name)


def configure_logging(level: int | str = _DEFAULT_LEVEL) -> None:
    """Apply the package log format once, unless the host already configured logging."""
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=_FORMAT)


__all__ = ["configure_logging", "get_logger"]
