"""Webhook payload model for chat-ops alerts.

Mirrors the incoming-webhook message shape (message → attachments → fields)
so the delivery adapter only needs to serialise :meth:`WebhookMessage.to_dict`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class AttachmentField:
    title: str
    value: str
    short: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}


@dataclass(slots=True, frozen=True)
class Attachment:
    """Single coloured block rendered under the webhook message."""

    title: str
    text: str
    color: str
    author_name: str
    author_icon: str
    ts: int
    fields: tuple[AttachmentField, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "text": self.text,
            "color": self.color,
            "author_name": self.author_name,
            "author_icon": self.author_icon,
            "ts": str(self.ts),
            "fields": [item.to_dict() for item in self.fields],
        }


@dataclass(slots=True, frozen=True)
class WebhookMessage:
    """Complete body posted to the webhook endpoint."""

    username: str
    icon_url: str
    channel: str
    attachments: tuple[Attachment, ...] = field(default_factory=tuple)
    parse: str = "full"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON-ready dictionary expected by the webhook.

        Examples
        --------
        >>> msg = WebhookMessage(username="bot", icon_url="", channel="#ops")
        >>> msg.to_dict()["channel"], msg.to_dict()["attachments"]
        ('#ops', [])
        """

        return {
            "username": self.username,
            "icon_url": self.icon_url,
            "channel": self.channel,
            "parse": self.parse,
            "attachments": [item.to_dict() for item in self.attachments],
        }


__all__ = ["Attachment", "AttachmentField", "WebhookMessage"]
