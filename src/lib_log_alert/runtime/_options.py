"""Typed configuration options accepted by ``configure``.

Purpose
-------
Replace loosely typed option bags with a closed set of frozen dataclasses.
Each option sets one named part of a fresh :class:`LoggerConfig` and options
are applied in a fixed declared order, whatever order the caller passed them in.

Contents
--------
* :class:`LoggerOption` base and the four concrete options.
* :func:`with_slack` / :func:`with_output_file` convenience constructors.
* :func:`apply_options` – folds options into a config.
* :func:`coerce_level` – strict level normalisation for API arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, ClassVar, Iterable, Mapping

from lib_log_alert.domain import (
    ConfigurationError,
    Level,
    LoggerConfig,
    NotificationConfig,
    NotificationRoute,
    is_known,
    parse_level,
)


def coerce_level(level: str | Level) -> Level:
    """Normalise level inputs (string or enum) into :class:`Level`.

    Unknown names raise :class:`ConfigurationError` rather than silently
    falling back to a default.

    Examples
    --------
    >>> coerce_level("warning") is Level.WARN
    True
    >>> coerce_level(Level.ERROR) is Level.ERROR
    True
    """
    if isinstance(level, Level):
        return level
    if isinstance(level, str):
        parsed = parse_level(level)
        if is_known(parsed):
            return parsed  # type: ignore[return-value]
    raise ConfigurationError(f"Unknown log level: {level!r}")


class LoggerOption:
    """Base class for configuration options."""

    order: ClassVar[int] = 0

    def apply(self, config: LoggerConfig) -> LoggerConfig:  # pragma: no cover - abstract
        raise NotImplementedError


@dataclass(frozen=True)
class WithNotification(LoggerOption):
    """Attach the webhook notification sink."""

    notification: NotificationConfig
    order: ClassVar[int] = 0

    def apply(self, config: LoggerConfig) -> LoggerConfig:
        if not isinstance(self.notification, NotificationConfig):
            raise ConfigurationError("WithNotification requires a NotificationConfig")
        return replace(config, notification=self.notification)


@dataclass(frozen=True)
class WithOutputFile(LoggerOption):
    """Send console lines to a file instead of standard error."""

    path: Path
    order: ClassVar[int] = 1

    def apply(self, config: LoggerConfig) -> LoggerConfig:
        if not str(self.path).strip():
            raise ConfigurationError("output file path must not be empty")
        return replace(config, output_file=Path(self.path))


@dataclass(frozen=True)
class WithConsoleColor(LoggerOption):
    """Override console colour handling and per-level styles."""

    force_color: bool = False
    no_color: bool = False
    styles: Mapping[Level | str, str] | None = None
    order: ClassVar[int] = 2

    def apply(self, config: LoggerConfig) -> LoggerConfig:
        styles = None
        if self.styles:
            styles = {coerce_level(key): str(value) for key, value in self.styles.items()}
        return replace(config, force_color=self.force_color, no_color=self.no_color, console_styles=styles)


@dataclass(frozen=True)
class WithDiagnosticHook(LoggerOption):
    """Receive ``(event_name, payload)`` milestones such as ``notification_failed``."""

    hook: Callable[[str, dict[str, Any]], None]
    order: ClassVar[int] = 3

    def apply(self, config: LoggerConfig) -> LoggerConfig:
        if not callable(self.hook):
            raise ConfigurationError("diagnostic hook must be callable")
        return replace(config, diagnostic_hook=self.hook)


def with_slack(
    level: str | Level,
    webhook: str,
    user: str,
    icon: str = "",
    *,
    trace: str = "",
    debug: str = "",
    info: str = "",
    warn: str = "",
    error: str = "",
    alert: str = "",
    colors: Mapping[Level, str] | None = None,
) -> WithNotification:
    """Build a :class:`WithNotification` option from flat arguments.

    Examples
    --------
    >>> option = with_slack("error", "https://hooks.example/T0", "bot", error="#alerts")
    >>> option.notification.level is Level.ERROR
    True
    >>> option.notification.route.channel_for(Level.ERROR)
    '#alerts'
    """

    route = NotificationRoute.from_channels(
        trace=trace,
        debug=debug,
        info=info,
        warn=warn,
        error=error,
        alert=alert,
        colors=colors,
    )
    return WithNotification(
        NotificationConfig(webhook=webhook, user=user, icon=icon, level=coerce_level(level), route=route)
    )


def with_output_file(path: str | Path) -> WithOutputFile:
    return WithOutputFile(Path(path))


def apply_options(config: LoggerConfig, options: Iterable[LoggerOption]) -> LoggerConfig:
    """Return ``config`` with ``options`` applied in declared order.

    Options of the same kind are applied in the order given, so the last wins.
    """

    collected = list(options)
    for option in collected:
        if not isinstance(option, LoggerOption):
            raise ConfigurationError(f"unsupported logger option: {option!r}")
    for option in sorted(collected, key=lambda item: item.order):
        config = option.apply(config)
    return config


__all__ = [
    "LoggerOption",
    "WithConsoleColor",
    "WithDiagnosticHook",
    "WithNotification",
    "WithOutputFile",
    "apply_options",
    "coerce_level",
    "with_output_file",
    "with_slack",
]
