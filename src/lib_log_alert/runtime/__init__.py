"""Runtime façade exposing the process-wide logging API.

Purpose
-------
Offer module-level functions (``configure``, ``info``, ``errorf`` ...) that
delegate to the active :class:`Logger`, obtained through the explicit
:func:`active_logger` accessor rather than a hidden global.

Contents
--------
* ``configure`` and the typed options (``with_slack``, ``with_output_file`` ...).
* Per-level functions ``trace``/``tracef`` through ``alert``/``alertf``.
* Active-logger accessors for tests and hosts owning several loggers.
* :func:`inspect_runtime` – read-only snapshot of the active configuration.

System Role
-----------
Outer shell of the package: callers depend on this surface only, while the
domain, use cases, and adapters remain replaceable behind it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lib_log_alert.domain import Level

from ._composition import LoggingRuntime, SystemClock, build_runtime, create_console
from ._logger import Logger
from ._options import (
    LoggerOption,
    WithConsoleColor,
    WithDiagnosticHook,
    WithNotification,
    WithOutputFile,
    apply_options,
    coerce_level,
    with_output_file,
    with_slack,
)
from ._state import active_logger, reset_active_logger, set_active_logger


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logger configuration."""

    level: Level
    identity: str
    configured: bool
    notification_level: Level | None
    output_file: str | None
    delivery_failures: int


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the active logger."""

    logger = active_logger()
    config = logger.config
    return RuntimeSnapshot(
        level=config.level,
        identity=config.identity,
        configured=logger.configured,
        notification_level=config.notification.level if config.notification else None,
        output_file=str(config.output_file) if config.output_file else None,
        delivery_failures=logger.delivery_failures,
    )


def configure(level: str | Level, identity: str = "", *options: LoggerOption) -> None:
    """Build a configuration and install it on the active logger.

    Inputs
    ------
    level:
        Global floor (:class:`Level` or level name).
    identity:
        Host/service tag shown in notification titles.
    *options:
        Zero or more typed options; see :func:`with_slack`,
        :func:`with_output_file`, :class:`WithConsoleColor`,
        :class:`WithDiagnosticHook`.

    Side Effects
    ------------
    Replaces the active logger's configuration as one unit. Raises
    :class:`~lib_log_alert.domain.ConfigurationError` on invalid input, leaving
    the previous configuration active.

    Examples
    --------
    >>> from io import StringIO
    >>> from rich.console import Console
    >>> from lib_log_alert.adapters import RichConsoleAdapter
    >>> sink = Console(file=StringIO())
    >>> previous = set_active_logger(Logger(console_factory=lambda config: RichConsoleAdapter(console=sink)))
    >>> configure("warn", "svc1")
    >>> infof("hidden")
    >>> warnf("disk %s at %d%%", "/var", 80)
    >>> sink.file.getvalue().splitlines()[-1].endswith("disk /var at 80%")
    True
    >>> "hidden" in sink.file.getvalue()
    False
    >>> _ = set_active_logger(previous)
    """

    active_logger().configure(level, identity, *options)


def log(level: Level, *args: Any) -> None:
    active_logger().log(level, *args)


def logf(level: Level, fmt: str, *args: Any) -> None:
    active_logger().logf(level, fmt, *args)


def trace(*args: Any) -> None:
    active_logger().log(Level.TRACE, *args)


def debug(*args: Any) -> None:
    active_logger().log(Level.DEBUG, *args)


def info(*args: Any) -> None:
    active_logger().log(Level.INFO, *args)


def warn(*args: Any) -> None:
    active_logger().log(Level.WARN, *args)


def error(*args: Any) -> None:
    active_logger().log(Level.ERROR, *args)


def alert(*args: Any) -> None:
    active_logger().log(Level.ALERT, *args)


def tracef(fmt: str, *args: Any) -> None:
    active_logger().logf(Level.TRACE, fmt, *args)


def debugf(fmt: str, *args: Any) -> None:
    active_logger().logf(Level.DEBUG, fmt, *args)


def infof(fmt: str, *args: Any) -> None:
    active_logger().logf(Level.INFO, fmt, *args)


def warnf(fmt: str, *args: Any) -> None:
    active_logger().logf(Level.WARN, fmt, *args)


def errorf(fmt: str, *args: Any) -> None:
    active_logger().logf(Level.ERROR, fmt, *args)


def alertf(fmt: str, *args: Any) -> None:
    active_logger().logf(Level.ALERT, fmt, *args)


__all__ = [
    "Logger",
    "LoggerOption",
    "LoggingRuntime",
    "RuntimeSnapshot",
    "SystemClock",
    "WithConsoleColor",
    "WithDiagnosticHook",
    "WithNotification",
    "WithOutputFile",
    "active_logger",
    "alert",
    "alertf",
    "apply_options",
    "build_runtime",
    "coerce_level",
    "configure",
    "create_console",
    "debug",
    "debugf",
    "error",
    "errorf",
    "info",
    "infof",
    "inspect_runtime",
    "log",
    "logf",
    "reset_active_logger",
    "set_active_logger",
    "trace",
    "tracef",
    "warn",
    "warnf",
    "with_output_file",
    "with_slack",
]
