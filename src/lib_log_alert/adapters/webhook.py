"""Webhook delivery adapter posting alerts with ``requests``.

Purpose
-------
Implement :class:`DeliveryPort` for incoming-webhook style endpoints: one JSON
POST per alert with a bounded timeout and no retries.

Contents
--------
* :data:`DEFAULT_TIMEOUT` - seconds allowed per delivery attempt.
* :class:`WebhookAdapter` - concrete adapter used by default.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from lib_log_alert.application.ports.delivery import DeliveryPort
from lib_log_alert.domain.alert import WebhookMessage
from lib_log_alert.domain.errors import DeliveryError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class WebhookAdapter(DeliveryPort):
    """POST webhook messages as JSON.

    Examples
    --------
    >>> class FakeResponse:
    ...     status_code = 200
    ...     text = "ok"
    >>> class FakeSession:
    ...     def __init__(self):
    ...         self.calls = []
    ...     def post(self, url, *, json, timeout):
    ...         self.calls.append((url, json["channel"], timeout))
    ...         return FakeResponse()
    >>> session = FakeSession()
    >>> adapter = WebhookAdapter(session=session, timeout=2.0)
    >>> adapter.deliver("https://hooks.example/T0", WebhookMessage(username="bot", icon_url="", channel="#ops"))
    >>> session.calls
    [('https://hooks.example/T0', '#ops', 2.0)]
    """

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT, session: Any | None = None) -> None:
        """Create the adapter.

        Parameters
        ----------
        timeout:
            Connect/read timeout in seconds; must be positive so a delivery
            attempt always completes.
        session:
            Object exposing ``post(url, *, json, timeout)``; defaults to the
            :mod:`requests` module itself.
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self._timeout = timeout
        self._session = session if session is not None else requests

    @property
    def timeout(self) -> float:
        return self._timeout

    def deliver(self, endpoint: str, message: WebhookMessage) -> None:
        """Send ``message`` to ``endpoint``; raise :class:`DeliveryError` on failure."""
        try:
            response = self._session.post(endpoint, json=message.to_dict(), timeout=self._timeout)
        except requests.RequestException as exc:
            raise DeliveryError(f"webhook request failed: {exc}") from exc
        status = getattr(response, "status_code", 0)
        if not 200 <= status < 300:
            body = (getattr(response, "text", "") or "").strip()
            raise DeliveryError(f"webhook returned HTTP {status}: {body[:200]}")
        logger.debug("webhook delivered to %s (HTTP %s)", message.channel, status)


__all__ = ["DEFAULT_TIMEOUT", "WebhookAdapter"]
