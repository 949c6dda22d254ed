from __future__ import annotations

from datetime import datetime, timedelta, timezone
from io import StringIO
from typing import Callable

import pytest
from rich.console import Console

from lib_log_alert import runtime
from lib_log_alert.adapters import RichConsoleAdapter
from lib_log_alert.domain import WebhookMessage
from lib_log_alert.runtime import Logger


class FixedClock:
    """Clock returning a fixed instant, advancing one millisecond per read."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2025, 9, 30, 12, 0, 0, tzinfo=timezone.utc)
        self.reads = 0

    def now(self) -> datetime:
        self.reads += 1
        value = self.current
        self.current = value + timedelta(milliseconds=1)
        return value


class RecordingDelivery:
    """Delivery port recording every attempt; fails when ``error`` is set."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, WebhookMessage]] = []

    def deliver(self, endpoint: str, message: WebhookMessage) -> None:
        self.calls.append((endpoint, message))
        if self.error is not None:
            raise self.error

    @property
    def channels(self) -> list[str]:
        return [message.channel for _, message in self.calls]


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def console_text(record_console: Console) -> Callable[[], str]:
    def _read() -> str:
        return record_console.file.getvalue()  # type: ignore[attr-defined]

    return _read


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def delivery() -> RecordingDelivery:
    return RecordingDelivery()


@pytest.fixture
def failing_delivery() -> RecordingDelivery:
    return RecordingDelivery(error=ConnectionError("connection refused"))


@pytest.fixture
def make_logger(record_console: Console, clock: FixedClock) -> Callable[..., Logger]:
    """Build loggers writing to ``record_console`` with the shared clock."""

    def _make(delivery: RecordingDelivery | None = None) -> Logger:
        return Logger(
            delivery=delivery if delivery is not None else RecordingDelivery(),
            clock=clock,
            console_factory=lambda config: RichConsoleAdapter(console=record_console, styles=config.console_styles),
        )

    return _make


@pytest.fixture
def isolated_active_logger(make_logger: Callable[..., Logger], delivery: RecordingDelivery):
    """Install a recording logger as the active logger for one test."""

    logger = make_logger(delivery)
    previous = runtime.set_active_logger(logger)
    try:
        yield logger
    finally:
        runtime.set_active_logger(previous)
