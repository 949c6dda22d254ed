"""Use case turning admitted log events into webhook alerts.

Purpose
-------
Apply the notification sink's own floor and per-level routing, build the
alert payload, and attempt a single synchronous delivery whose failure is
returned rather than raised.

Contents
--------
* :class:`NotifyOutcome` – result of one notification attempt.
* :func:`build_webhook_message` – payload construction.
* :func:`create_notifier` – factory returning the per-event callable.

System Role
-----------
Invoked by the process use case after the console line has been written, so a
slow or failing webhook never hides local output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from lib_log_alert.application.ports.delivery import DeliveryPort
from lib_log_alert.domain.alert import Attachment, AttachmentField, WebhookMessage
from lib_log_alert.domain.errors import DeliveryError
from lib_log_alert.domain.events import LogEvent
from lib_log_alert.domain.notification import NotificationConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class NotifyOutcome:
    """Result of a notification attempt.

    ``delivered`` is ``False`` both for silent skips (floor or empty route) and
    for failures; only failures carry ``error``.
    """

    delivered: bool
    error: DeliveryError | None = None
    channel: str = ""

    @property
    def failed(self) -> bool:
        return self.error is not None


SKIPPED = NotifyOutcome(delivered=False)

Notifier = Callable[[LogEvent], NotifyOutcome]


def alert_title(event: LogEvent) -> str:
    """Return ``[SEVERITY] <timestamp> @<identity>``.

    Examples
    --------
    >>> from datetime import datetime
    >>> from lib_log_alert.domain.levels import Level
    >>> alert_title(LogEvent(Level.ERROR, datetime(2025, 1, 1), "svc1", "disk full"))
    '[ERROR] 2025-01-01 00:00:00.000 @svc1'
    """

    return f"[{event.level.severity}] {event.console_timestamp()} @{event.identity}"


def build_webhook_message(config: NotificationConfig, event: LogEvent, channel: str) -> WebhookMessage:
    """Assemble the webhook body for ``event`` posted to ``channel``."""

    attachment = Attachment(
        title=alert_title(event),
        text=f"```{event.message}```",
        color=config.route.color_for(event.level),
        author_name=config.user,
        author_icon=config.icon,
        ts=event.unix_seconds(),
        fields=(
            AttachmentField(title="Priority", value=event.level.priority.value, short=True),
            AttachmentField(title="Severity", value=event.level.severity, short=True),
            AttachmentField(title="Timestamp", value=event.extended_timestamp(), short=False),
        ),
    )
    return WebhookMessage(
        username=config.user,
        icon_url=config.icon,
        channel=channel,
        attachments=(attachment,),
    )


def create_notifier(config: NotificationConfig, delivery: DeliveryPort) -> Notifier:
    """Bind ``config`` and ``delivery`` into a callable notifier.

    Examples
    --------
    >>> from datetime import datetime
    >>> from lib_log_alert.domain.levels import Level
    >>> from lib_log_alert.domain.notification import NotificationRoute
    >>> class Recorder:
    ...     def __init__(self):
    ...         self.sent = []
    ...     def deliver(self, endpoint, message):
    ...         self.sent.append((endpoint, message.channel))
    >>> recorder = Recorder()
    >>> cfg = NotificationConfig(
    ...     webhook="https://hooks.example/T0", user="bot", icon="", level=Level.WARN,
    ...     route=NotificationRoute.from_channels(warn="#ops"),
    ... )
    >>> notify = create_notifier(cfg, recorder)
    >>> notify(LogEvent(Level.INFO, datetime(2025, 1, 1), "svc", "quiet")).delivered
    False
    >>> notify(LogEvent(Level.WARN, datetime(2025, 1, 1), "svc", "loud")).delivered
    True
    >>> recorder.sent
    [('https://hooks.example/T0', '#ops')]
    """

    def notify(event: LogEvent) -> NotifyOutcome:
        if not config.level.admits(event.level):
            return SKIPPED
        channel = config.route.channel_for(event.level)
        if not channel:
            return SKIPPED
        message = build_webhook_message(config, event, channel)
        try:
            delivery.deliver(config.webhook, message)
        except Exception as exc:
            error = DeliveryError(f"delivery of {event.level.severity} event to {channel} failed: {exc}")
            error.__cause__ = exc
            logger.debug("notification delivery failed", exc_info=True)
            return NotifyOutcome(delivered=False, error=error, channel=channel)
        return NotifyOutcome(delivered=True, channel=channel)

    return notify


__all__ = ["NotifyOutcome", "Notifier", "SKIPPED", "alert_title", "build_webhook_message", "create_notifier"]
