"""Use cases executed for every admitted log event."""

from __future__ import annotations

from .notify import NotifyOutcome, create_notifier
from .process_event import create_process_log_event

__all__ = ["NotifyOutcome", "create_notifier", "create_process_log_event"]
