"""Immutable logger configuration captured by ``configure``.

A :class:`LoggerConfig` is never mutated after construction; reconfiguration
builds a new instance and swaps it in as one unit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

from .errors import ConfigurationError
from .levels import Level
from .notification import NotificationConfig

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None


@dataclass(frozen=True)
class LoggerConfig:
    """Complete settings for one logger generation.

    Attributes
    ----------
    level:
        Global floor; events below it are dropped before any work is done.
    identity:
        Host/service tag shown in notification titles.
    notification:
        Optional :class:`NotificationConfig`; ``None`` disables alerts.
    output_file:
        Optional file the console sink appends to instead of standard error.
    force_color / no_color:
        Console colour overrides passed to Rich.
    console_styles:
        Optional per-level Rich style overrides.
    diagnostic_hook:
        Optional callback receiving ``(event_name, payload)`` milestones.
    """

    level: Level = Level.INFO
    identity: str = ""
    notification: NotificationConfig | None = None
    output_file: Path | None = None
    force_color: bool = False
    no_color: bool = False
    console_styles: Mapping[Level | str, str] | None = None
    diagnostic_hook: DiagnosticHook = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.level, Level):
            raise ConfigurationError(f"logger level must be a Level, got {self.level!r}")
        if self.force_color and self.no_color:
            raise ConfigurationError("force_color and no_color are mutually exclusive")


DEFAULT_CONFIG = LoggerConfig()


__all__ = ["DEFAULT_CONFIG", "DiagnosticHook", "LoggerConfig"]
