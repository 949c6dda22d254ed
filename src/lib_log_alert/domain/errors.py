"""Exception hierarchy raised by the logging backbone."""

from __future__ import annotations


class LogAlertError(Exception):
    """Base class for errors raised by :mod:`lib_log_alert`."""


class ConfigurationError(LogAlertError, ValueError):
    """Invalid or incomplete configuration passed to ``configure``.

    Raised before the new configuration is installed, so the previously active
    logger keeps running unchanged.
    """


class DeliveryError(LogAlertError, RuntimeError):
    """A notification could not be delivered to the webhook endpoint.

    Never escapes the logging API; the logger reports it on the console and
    through the diagnostic hook instead.
    """


__all__ = ["ConfigurationError", "DeliveryError", "LogAlertError"]
