"""Process-wide active logger cell and access helpers."""

from __future__ import annotations

from threading import RLock

from ._logger import Logger

_ACTIVE: Logger = Logger()
_STATE_LOCK = RLock()


def active_logger() -> Logger:
    """Return the logger currently installed for the process."""

    return _ACTIVE


def set_active_logger(logger: Logger) -> Logger:
    """Install ``logger`` as the active logger and return the previous one."""

    if not isinstance(logger, Logger):
        raise TypeError(f"expected a Logger, got {type(logger).__name__}")
    with _STATE_LOCK:
        global _ACTIVE
        previous = _ACTIVE
        _ACTIVE = logger
    return previous


def reset_active_logger() -> Logger:
    """Install a fresh, unconfigured logger; returns the new instance."""

    fresh = Logger()
    set_active_logger(fresh)
    return fresh


__all__ = ["active_logger", "reset_active_logger", "set_active_logger"]
