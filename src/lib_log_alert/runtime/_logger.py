"""Logger owning the current configuration and the per-level API.

Purpose
-------
Expose fire-and-forget logging methods (``info``/``infof`` ...) that read one
complete :class:`LoggingRuntime`, reject below-floor events before doing any
work, and delegate admitted events to the fan-out use case.

Contents
--------
* :class:`Logger` – independent logger instance; the package keeps one active.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from lib_log_alert.adapters import WebhookAdapter
from lib_log_alert.application.ports import ClockPort, DeliveryPort
from lib_log_alert.domain import DEFAULT_CONFIG, DeliveryError, Level, LogEvent, LoggerConfig

from ._composition import ConsoleFactory, LoggingRuntime, SystemClock, build_runtime, create_console
from ._options import LoggerOption, apply_options, coerce_level

logger = logging.getLogger(__name__)


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:  # noqa: BLE001 - a broken __str__ must not fail the log call
        return object.__repr__(value)


def _join(args: tuple[Any, ...]) -> str:
    return " ".join(_safe_str(arg) for arg in args)


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    if not args:
        return _safe_str(fmt)
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        logger.debug("could not format %r with %d args: %s", fmt, len(args), exc)
        return _join((fmt, *args))


class Logger:
    """Leveled logger with a console sink and an optional notification sink.

    A new logger is *unconfigured*: INFO floor, empty identity, no
    notification sink. :meth:`configure` builds a complete replacement runtime
    and swaps it in with one reference assignment.

    Parameters
    ----------
    delivery:
        :class:`DeliveryPort` used by notification sinks; defaults to
        :class:`WebhookAdapter`.
    clock:
        :class:`ClockPort` supplying event timestamps.
    console_factory:
        Callable building the console adapter for each configuration.

    Examples
    --------
    >>> from io import StringIO
    >>> from rich.console import Console
    >>> from lib_log_alert.adapters import RichConsoleAdapter
    >>> sink = Console(file=StringIO(), record=True)
    >>> log = Logger(console_factory=lambda config: RichConsoleAdapter(console=sink))
    >>> log.configure("warn", "svc")
    >>> log.info("hidden")
    >>> log.warnf("disk at %d%%", 80)
    >>> text = sink.export_text()
    >>> "disk at 80%" in text, "hidden" in text
    (True, False)
    """

    def __init__(
        self,
        *,
        delivery: DeliveryPort | None = None,
        clock: ClockPort | None = None,
        console_factory: ConsoleFactory | None = None,
    ) -> None:
        self._delivery: DeliveryPort = delivery if delivery is not None else WebhookAdapter()
        self._clock: ClockPort = clock if clock is not None else SystemClock()
        self._console_factory: ConsoleFactory = console_factory if console_factory is not None else create_console
        self._configure_lock = threading.Lock()
        self._failure_lock = threading.Lock()
        self._delivery_failures = 0
        self._configured = False
        self._runtime = self._build(DEFAULT_CONFIG)

    # ------------------------------------------------------------------ state

    @property
    def configured(self) -> bool:
        """``True`` once :meth:`configure` has installed a configuration."""
        return self._configured

    @property
    def config(self) -> LoggerConfig:
        """Return the active immutable configuration."""
        return self._runtime.config

    @property
    def level(self) -> Level:
        return self._runtime.config.level

    @property
    def delivery_failures(self) -> int:
        """Number of notifications that failed since this logger was created."""
        return self._delivery_failures

    def is_enabled_for(self, level: Level) -> bool:
        return self._runtime.config.level.admits(level)

    def configure(self, level: str | Level, identity: str = "", *options: LoggerOption) -> None:
        """Build a configuration from ``level``, ``identity`` and ``options`` and install it.

        Raises
        ------
        ConfigurationError
            When the level or an option is invalid. The previously installed
            configuration stays active.
        """

        config = apply_options(LoggerConfig(level=coerce_level(level), identity=str(identity)), options)
        with self._configure_lock:
            runtime = self._build(config)
            previous = self._runtime
            self._runtime = runtime
            self._configured = True
        if previous.console is not runtime.console:
            previous.console.close()

    def close(self) -> None:
        """Release the active console's open file; later lines reopen it per write."""
        self._runtime.console.close()

    def _build(self, config: LoggerConfig) -> LoggingRuntime:
        return build_runtime(
            config,
            delivery=self._delivery,
            clock=self._clock,
            console_factory=self._console_factory,
            on_delivery_failure=self._count_failure,
        )

    def _count_failure(self, event: LogEvent, error: DeliveryError) -> None:
        with self._failure_lock:
            self._delivery_failures += 1

    # ---------------------------------------------------------------- logging

    def log(self, level: Level, *args: Any) -> None:
        """Log ``args`` space-joined at ``level``; never raises."""
        runtime = self._runtime
        if level < runtime.config.level:
            return
        runtime.process(level, _join(args))

    def logf(self, level: Level, fmt: str, *args: Any) -> None:
        """Log ``fmt % args`` at ``level``; never raises."""
        runtime = self._runtime
        if level < runtime.config.level:
            return
        runtime.process(level, _format(fmt, args))

    def trace(self, *args: Any) -> None:
        self.log(Level.TRACE, *args)

    def debug(self, *args: Any) -> None:
        self.log(Level.DEBUG, *args)

    def info(self, *args: Any) -> None:
        self.log(Level.INFO, *args)

    def warn(self, *args: Any) -> None:
        self.log(Level.WARN, *args)

    def error(self, *args: Any) -> None:
        self.log(Level.ERROR, *args)

    def alert(self, *args: Any) -> None:
        """Log at the highest severity; typically routed to an on-call channel."""
        self.log(Level.ALERT, *args)

    def tracef(self, fmt: str, *args: Any) -> None:
        self.logf(Level.TRACE, fmt, *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.DEBUG, fmt, *args)

    def infof(self, fmt: str, *args: Any) -> None:
        self.logf(Level.INFO, fmt, *args)

    def warnf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.WARN, fmt, *args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.ERROR, fmt, *args)

    def alertf(self, fmt: str, *args: Any) -> None:
        self.logf(Level.ALERT, fmt, *args)

    def __repr__(self) -> str:
        config = self._runtime.config
        notify = config.notification.level.name if config.notification else None
        return f"Logger(level={config.level.name}, identity={config.identity!r}, notify={notify})"


__all__ = ["Logger"]
