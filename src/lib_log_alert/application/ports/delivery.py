"""Port for outbound webhook delivery."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_alert.domain.alert import WebhookMessage


@runtime_checkable
class DeliveryPort(Protocol):
    """Post a :class:`WebhookMessage` to ``endpoint`` exactly once.

    Implementations enforce their own timeout and raise on failure; they must
    not retry.
    """

    def deliver(self, endpoint: str, message: WebhookMessage) -> None:
        """Send ``message`` or raise describing why it could not be sent."""


__all__ = ["DeliveryPort"]
