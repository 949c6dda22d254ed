"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate an immutable :class:`LoggerConfig` into a :class:`LoggingRuntime`:
the console adapter, the optional notifier, and the frozen fan-out callable.

Contents
--------
* :class:`LoggingRuntime` – one configuration generation.
* :class:`SystemClock` – default :class:`ClockPort`.
* :func:`create_console` – default console factory.
* :func:`build_runtime` – composition root.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from lib_log_alert.adapters import RichConsoleAdapter
from lib_log_alert.application.ports import ClockPort, ConsolePort, DeliveryPort
from lib_log_alert.application.use_cases.notify import create_notifier
from lib_log_alert.application.use_cases.process_event import (
    FailureCallback,
    ProcessCallable,
    create_process_log_event,
)
from lib_log_alert.domain import ConfigurationError, LoggerConfig

ConsoleFactory = Callable[[LoggerConfig], ConsolePort]


@dataclass(slots=True, frozen=True)
class LoggingRuntime:
    """Aggregate of live collaborators for one configuration.

    Readers grab the whole runtime through a single reference, so the floor,
    console, and notifier they use always come from the same ``configure`` call.
    """

    config: LoggerConfig
    console: ConsolePort
    process: ProcessCallable


class SystemClock(ClockPort):
    """Clock returning timezone-aware local timestamps."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


def create_console(config: LoggerConfig) -> ConsolePort:
    """Build the Rich console adapter described by ``config``."""

    return RichConsoleAdapter(
        output_file=config.output_file,
        force_color=config.force_color,
        no_color=config.no_color,
        styles=config.console_styles,
    )


def build_runtime(
    config: LoggerConfig,
    *,
    delivery: DeliveryPort,
    clock: ClockPort,
    console_factory: ConsoleFactory = create_console,
    on_delivery_failure: FailureCallback | None = None,
) -> LoggingRuntime:
    """Assemble the runtime for ``config``.

    Raises
    ------
    ConfigurationError
        When the console destination cannot be opened.
    """

    try:
        console = console_factory(config)
    except OSError as exc:
        raise ConfigurationError(f"cannot open output file {config.output_file}: {exc}") from exc
    notifier = create_notifier(config.notification, delivery) if config.notification is not None else None
    process = create_process_log_event(
        console=console,
        identity=config.identity,
        clock=clock,
        notifier=notifier,
        diagnostic=config.diagnostic_hook,
        on_delivery_failure=on_delivery_failure,
    )
    return LoggingRuntime(config=config, console=console, process=process)


__all__ = ["ConsoleFactory", "LoggingRuntime", "SystemClock", "build_runtime", "create_console"]
