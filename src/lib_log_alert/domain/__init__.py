"""Domain entities and value objects used by the logging backbone."""

from __future__ import annotations

from .alert import Attachment, AttachmentField, WebhookMessage
from .config import DEFAULT_CONFIG, DiagnosticHook, LoggerConfig
from .errors import ConfigurationError, DeliveryError, LogAlertError
from .events import LogEvent
from .levels import UNKNOWN_LEVEL, Level, Priority, compare_levels, is_known, parse_level
from .notification import DEFAULT_ACCENT_COLORS, NotificationConfig, NotificationRoute

__all__ = [
    "Attachment",
    "AttachmentField",
    "ConfigurationError",
    "DEFAULT_ACCENT_COLORS",
    "DEFAULT_CONFIG",
    "DeliveryError",
    "DiagnosticHook",
    "Level",
    "LogAlertError",
    "LogEvent",
    "LoggerConfig",
    "NotificationConfig",
    "NotificationRoute",
    "Priority",
    "UNKNOWN_LEVEL",
    "WebhookMessage",
    "compare_levels",
    "is_known",
    "parse_level",
]
