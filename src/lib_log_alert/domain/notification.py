"""Notification routing and sink configuration value objects.

Purpose
-------
Describe where (channel) and how (accent colour) each level is posted, plus
the webhook identity used for every alert.

Contents
--------
* :data:`DEFAULT_ACCENT_COLORS` - per-level attachment colours.
* :class:`NotificationRoute` - exhaustive Level → channel/colour mapping.
* :class:`NotificationConfig` - immutable notification sink settings.

System Role
-----------
Validated at configuration time so a malformed route is rejected before it is
installed; the notifier then relies on every lookup succeeding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .errors import ConfigurationError
from .levels import Level

DEFAULT_ACCENT_COLORS: Mapping[Level, str] = MappingProxyType(
    {
        Level.TRACE: "#ff77ff",
        Level.DEBUG: "#444999",
        Level.INFO: "#009999",
        Level.WARN: "#fff000",
        Level.ERROR: "#ff4444",
        Level.ALERT: "#990000",
    }
)


def _complete(name: str, values: Mapping[Level, str]) -> Mapping[Level, str]:
    missing = [level.name for level in Level if level not in values]
    if missing:
        raise ConfigurationError(f"notification route {name} missing levels: {', '.join(missing)}")
    unexpected = [key for key in values if not isinstance(key, Level)]
    if unexpected:
        raise ConfigurationError(f"notification route {name} has non-level keys: {unexpected!r}")
    return MappingProxyType({level: str(values[level] or "") for level in Level})


@dataclass(frozen=True)
class NotificationRoute:
    """Per-level channel and accent colour tables.

    Both tables must name every :class:`Level`. An empty channel suppresses
    notifications for that level.
    """

    channels: Mapping[Level, str]
    colors: Mapping[Level, str] = field(default_factory=lambda: DEFAULT_ACCENT_COLORS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "channels", _complete("channels", self.channels))
        object.__setattr__(self, "colors", _complete("colors", self.colors))

    @classmethod
    def from_channels(
        cls,
        *,
        trace: str = "",
        debug: str = "",
        info: str = "",
        warn: str = "",
        error: str = "",
        alert: str = "",
        colors: Mapping[Level, str] | None = None,
    ) -> "NotificationRoute":
        """Build a route from keyword channels, filling colours from the defaults.

        Examples
        --------
        >>> route = NotificationRoute.from_channels(error="#alerts")
        >>> route.channel_for(Level.ERROR), route.channel_for(Level.WARN)
        ('#alerts', '')
        """

        channels = {
            Level.TRACE: trace,
            Level.DEBUG: debug,
            Level.INFO: info,
            Level.WARN: warn,
            Level.ERROR: error,
            Level.ALERT: alert,
        }
        merged_colors = dict(DEFAULT_ACCENT_COLORS)
        if colors:
            merged_colors.update(colors)
        return cls(channels=channels, colors=merged_colors)

    def channel_for(self, level: Level) -> str:
        return self.channels[level]

    def color_for(self, level: Level) -> str:
        return self.colors[level]

    def routes(self, level: Level) -> bool:
        """Return ``True`` when ``level`` has a non-empty channel."""

        return bool(self.channels[level])


@dataclass(frozen=True)
class NotificationConfig:
    """Settings for the webhook notification sink.

    Attributes
    ----------
    webhook:
        Endpoint URL receiving the JSON payload.
    user:
        Sender display name shown by the chat service.
    icon:
        Sender avatar URL.
    level:
        Severity floor of the notification sink, evaluated independently of the
        logger's own floor.
    route:
        :class:`NotificationRoute` selecting channel and colour per level.
    """

    webhook: str
    user: str
    icon: str
    level: Level
    route: NotificationRoute

    def __post_init__(self) -> None:
        if not self.webhook or not self.webhook.strip():
            raise ConfigurationError("notification webhook endpoint must not be empty")
        if not isinstance(self.level, Level):
            raise ConfigurationError(f"notification level must be a Level, got {self.level!r}")
        if not isinstance(self.route, NotificationRoute):
            raise ConfigurationError("notification route must be a NotificationRoute")

    def admits(self, level: Level) -> bool:
        """Return ``True`` when ``level`` meets the floor and has a route."""

        return self.level.admits(level) and self.route.routes(level)


__all__ = ["DEFAULT_ACCENT_COLORS", "NotificationConfig", "NotificationRoute"]
