"""Public package surface for leveled logging with webhook alerts.

Importing the package installs an unconfigured active logger (INFO floor, no
identity, no notification sink), so the per-level functions work before any
``configure`` call::

    import lib_log_alert as log

    log.configure("info", "svc1", log.with_slack("error", WEBHOOK_URL, "ops-bot", error="#alerts"))
    log.warn("disk at 80%")      # console only
    log.error("disk full")       # console and one post to #alerts
"""

from __future__ import annotations

from .cli import summary_info
from .domain import (
    UNKNOWN_LEVEL,
    ConfigurationError,
    DeliveryError,
    Level,
    LogAlertError,
    LoggerConfig,
    NotificationConfig,
    NotificationRoute,
    Priority,
    compare_levels,
    parse_level,
)
from .runtime import (
    Logger,
    WithConsoleColor,
    WithDiagnosticHook,
    WithNotification,
    WithOutputFile,
    active_logger,
    alert,
    alertf,
    configure,
    debug,
    debugf,
    error,
    errorf,
    info,
    infof,
    inspect_runtime,
    log,
    logf,
    reset_active_logger,
    set_active_logger,
    trace,
    tracef,
    warn,
    warnf,
    with_output_file,
    with_slack,
)

__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "Level",
    "LogAlertError",
    "Logger",
    "LoggerConfig",
    "NotificationConfig",
    "NotificationRoute",
    "Priority",
    "UNKNOWN_LEVEL",
    "WithConsoleColor",
    "WithDiagnosticHook",
    "WithNotification",
    "WithOutputFile",
    "active_logger",
    "alert",
    "alertf",
    "compare_levels",
    "configure",
    "debug",
    "debugf",
    "error",
    "errorf",
    "info",
    "infof",
    "inspect_runtime",
    "log",
    "logf",
    "parse_level",
    "reset_active_logger",
    "set_active_logger",
    "summary_info",
    "trace",
    "tracef",
    "warn",
    "warnf",
    "with_output_file",
    "with_slack",
]
