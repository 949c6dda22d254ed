"""Domain event describing a single admitted log line.

Purpose
-------
Carry the level, timestamp, identity tag, and rendered message from the
logger to both sinks as one immutable value.

Contents
--------
* :data:`TIME_FORMAT` console timestamp layout.
* :class:`LogEvent` dataclass with timestamp helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .levels import Level

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
"""Second-resolution layout; milliseconds are appended by :meth:`LogEvent.console_timestamp`."""


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event shared by the console and notification sinks.

    Attributes
    ----------
    level:
        :class:`Level` the event was logged at.
    timestamp:
        Wall-clock time read once per admitted event.
    identity:
        Host or service tag configured on the logger (may be empty).
    message:
        Fully rendered message text.
    """

    level: Level
    timestamp: datetime
    identity: str
    message: str

    def console_timestamp(self) -> str:
        """Return ``YYYY-MM-DD HH:MM:SS.mmm``; lexical order matches time order.

        Examples
        --------
        >>> from datetime import datetime
        >>> event = LogEvent(Level.INFO, datetime(2025, 1, 2, 3, 4, 5, 678900), "svc", "msg")
        >>> event.console_timestamp()
        '2025-01-02 03:04:05.678'
        """

        millis = self.timestamp.microsecond // 1000
        return f"{self.timestamp.strftime(TIME_FORMAT)}.{millis:03d}"

    def extended_timestamp(self) -> str:
        """Return the ISO 8601 timestamp (seconds precision) used in alert fields."""

        return self.timestamp.isoformat(timespec="seconds")

    def unix_seconds(self) -> int:
        """Return the POSIX timestamp truncated to whole seconds."""

        return int(self.timestamp.timestamp())


__all__ = ["LogEvent", "TIME_FORMAT"]
