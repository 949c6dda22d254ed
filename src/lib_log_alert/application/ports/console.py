"""Console port describing terminal emission contracts.

Purpose
-------
Define the abstraction for adapters that render admitted log events to a text
stream, letting the application layer depend on a narrow protocol.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol for line emission,
  delivery-failure notices, and resource release.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_alert.domain.errors import DeliveryError
from lib_log_alert.domain.events import LogEvent


@runtime_checkable
class ConsolePort(Protocol):
    """Render log events as single, whole lines."""

    def emit(self, event: LogEvent) -> None:
        """Write the rendered line for ``event``."""

    def emit_failure(self, event: LogEvent, error: DeliveryError) -> None:
        """Write the secondary line reporting a failed notification for ``event``."""

    def close(self) -> None:
        """Release owned streams; later writes must still succeed."""


__all__ = ["ConsolePort"]
