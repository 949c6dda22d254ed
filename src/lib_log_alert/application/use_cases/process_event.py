"""Use case fanning a single admitted event out to console and notification sinks.

Purpose
-------
Turn an admitted ``(level, message)`` pair into a :class:`LogEvent`, write it
to the console, and hand it to the notifier when one is attached. Every
failure reachable from here is absorbed and reported.

Contents
--------
* :func:`build_diagnostic_emitter` – wraps the optional diagnostic hook.
* :func:`create_process_log_event` – factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator frozen per configuration by the composition
root; the logger calls it only after the global floor has admitted the event.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from lib_log_alert.application.ports import ClockPort, ConsolePort
from lib_log_alert.domain.config import DiagnosticHook
from lib_log_alert.domain.errors import DeliveryError
from lib_log_alert.domain.events import LogEvent
from lib_log_alert.domain.levels import Level

from .notify import Notifier

logger = logging.getLogger(__name__)

ProcessResult = dict[str, Any]
ProcessCallable = Callable[[Level, str], ProcessResult]
FailureCallback = Callable[[LogEvent, DeliveryError], None]


def build_diagnostic_emitter(diagnostic: DiagnosticHook) -> Callable[[str, dict[str, Any]], None]:
    """Return a callable forwarding milestones to ``diagnostic`` without raising.

    Examples
    --------
    >>> seen = []
    >>> emit = build_diagnostic_emitter(lambda name, payload: seen.append(name))
    >>> emit("notified", {})
    >>> seen
    ['notified']
    >>> build_diagnostic_emitter(lambda *_: 1 / 0)("notified", {})
    """

    if diagnostic is None:

        def _noop(event_name: str, payload: dict[str, Any]) -> None:
            return None

        return _noop

    def _emit(event_name: str, payload: dict[str, Any]) -> None:
        try:
            diagnostic(event_name, payload)
        except Exception:  # noqa: BLE001 - hooks must never break logging
            logger.debug("diagnostic hook raised for %s", event_name, exc_info=True)

    return _emit


def create_process_log_event(
    *,
    console: ConsolePort,
    identity: str,
    clock: ClockPort,
    notifier: Notifier | None = None,
    diagnostic: DiagnosticHook = None,
    on_delivery_failure: FailureCallback | None = None,
) -> ProcessCallable:
    """Build the fan-out callable for one configuration generation.

    Parameters
    ----------
    console:
        Adapter implementing :class:`ConsolePort`.
    identity:
        Identity tag stamped on every event.
    clock:
        Provider of the event timestamp (read once per admitted event).
    notifier:
        Optional notifier produced by :func:`create_notifier`.
    diagnostic:
        Optional hook receiving ``notified``, ``notification_failed``, and
        ``console_failed`` milestones.
    on_delivery_failure:
        Optional callback invoked once per failed delivery (used for counters).

    Returns
    -------
    Callable[[Level, str], dict[str, Any]]
        Function accepting an admitted level and rendered message and returning
        a diagnostic dictionary (``ok``, ``notified``, ``reason``).

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class DummyConsole:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def emit(self, event):
    ...         self.lines.append(event.message)
    ...     def emit_failure(self, event, error):
    ...         self.lines.append(str(error))
    ...     def close(self):
    ...         pass
    >>> class DummyClock:
    ...     def now(self):
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> console = DummyConsole()
    >>> process = create_process_log_event(console=console, identity="svc", clock=DummyClock())
    >>> process(Level.INFO, "hello")
    {'ok': True, 'notified': False}
    >>> console.lines
    ['hello']
    """

    emit = build_diagnostic_emitter(diagnostic)

    def process(level: Level, message: str) -> ProcessResult:
        event = LogEvent(level=level, timestamp=clock.now(), identity=identity, message=message)
        console_ok = _write_console(console, event, emit)
        if notifier is None:
            return _result(console_ok, notified=False)
        outcome = notifier(event)
        if outcome.error is not None:
            _report_failure(console, event, outcome.error, emit, on_delivery_failure)
            return {"ok": False, "notified": False, "reason": "delivery_failed"}
        if outcome.delivered:
            emit("notified", {"level": level.name, "channel": outcome.channel})
        return _result(console_ok, notified=outcome.delivered)

    return process


def _result(console_ok: bool, *, notified: bool) -> ProcessResult:
    if console_ok:
        return {"ok": True, "notified": notified}
    return {"ok": False, "notified": notified, "reason": "console_failed"}


def _write_console(console: ConsolePort, event: LogEvent, emit: Callable[[str, dict[str, Any]], None]) -> bool:
    try:
        console.emit(event)
    except Exception as exc:  # noqa: BLE001 - logging calls never fail
        logger.warning("console sink failed to write %s event: %s", event.level.name, exc)
        emit("console_failed", {"level": event.level.name, "error": str(exc)})
        return False
    return True


def _report_failure(
    console: ConsolePort,
    event: LogEvent,
    error: DeliveryError,
    emit: Callable[[str, dict[str, Any]], None],
    on_delivery_failure: FailureCallback | None,
) -> None:
    if on_delivery_failure is not None:
        on_delivery_failure(event, error)
    emit("notification_failed", {"level": event.level.name, "error": str(error)})
    try:
        console.emit_failure(event, error)
    except Exception as exc:  # noqa: BLE001 - logging calls never fail
        logger.warning("console sink failed to report delivery failure: %s", exc)


__all__ = [
    "FailureCallback",
    "ProcessCallable",
    "ProcessResult",
    "build_diagnostic_emitter",
    "create_process_log_event",
]
