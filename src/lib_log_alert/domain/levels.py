"""Severity model shared by the console and notification sinks.

Purpose
-------
Define the closed, totally ordered set of log levels together with the
presentation metadata each sink needs (prefix, colour, priority).

Contents
--------
* :class:`Level` enum with ordering and presentation helpers.
* :class:`Priority` enum derived from :class:`Level`.
* :data:`UNKNOWN_LEVEL` sentinel and :func:`parse_level` lenient lookup.
* ``_PREFIX_TABLE`` / ``_STYLE_TABLE`` / ``_PRIORITY_TABLE`` constants.

System Role
-----------
Leaf of the dependency graph: every other layer compares, renders, and routes
events using these values.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class Priority(Enum):
    """Urgency label attached to notifications; never gates admission."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Level(Enum):
    """Enumerated logging levels ordered from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    ALERT = 5

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value >= other.value

    @property
    def prefix(self) -> str:
        """Return the fixed-width console prefix (``" info"``, ``"error"``...)."""

        return _PREFIX_TABLE[self]

    @property
    def severity(self) -> str:
        """Return the upper-case severity label used in notification payloads."""

        return self.name

    @property
    def color(self) -> str:
        """Return the Rich style used for the console prefix."""

        return _STYLE_TABLE[self]

    @property
    def priority(self) -> Priority:
        """Return the :class:`Priority` derived from this level."""

        return _PRIORITY_TABLE[self]

    def admits(self, level: "Level") -> bool:
        """Return ``True`` when ``level`` passes this level used as a floor.

        Examples
        --------
        >>> Level.WARN.admits(Level.ERROR)
        True
        >>> Level.WARN.admits(Level.INFO)
        False
        """

        return level >= self

    @classmethod
    def from_name(cls, name: str) -> "Level":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


class _UnknownLevel:
    """Sentinel returned by :func:`parse_level` when no level name matches."""

    _instance: "_UnknownLevel | None" = None

    def __new__(cls) -> "_UnknownLevel":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNKNOWN_LEVEL"

    def __reduce__(self) -> str:
        return "UNKNOWN_LEVEL"


UNKNOWN_LEVEL: Final = _UnknownLevel()


_PREFIX_TABLE = {
    Level.TRACE: "trace",
    Level.DEBUG: "debug",
    Level.INFO: " info",
    Level.WARN: " warn",
    Level.ERROR: "error",
    Level.ALERT: "alert",
}

_STYLE_TABLE = {
    Level.TRACE: "bold bright_magenta",
    Level.DEBUG: "bold blue",
    Level.INFO: "bold bright_blue",
    Level.WARN: "bold yellow",
    Level.ERROR: "bold bright_red",
    Level.ALERT: "bold bright_white on red",
}

_PRIORITY_TABLE = {
    Level.TRACE: Priority.LOW,
    Level.DEBUG: Priority.LOW,
    Level.INFO: Priority.LOW,
    Level.WARN: Priority.MEDIUM,
    Level.ERROR: Priority.HIGH,
    Level.ALERT: Priority.HIGH,
}

_ALIASES = {"WARNING": "WARN"}


def compare_levels(a: Level, b: Level) -> int:
    """Return ``-1``, ``0`` or ``1`` as ``a`` is below, equal to, or above ``b``.

    Examples
    --------
    >>> compare_levels(Level.INFO, Level.ERROR)
    -1
    >>> compare_levels(Level.ALERT, Level.ALERT)
    0
    """

    return (a.value > b.value) - (a.value < b.value)


def parse_level(name: str) -> Level | _UnknownLevel:
    """Resolve ``name`` leniently, returning :data:`UNKNOWN_LEVEL` on failure.

    Exact names (and the ``warning`` alias) win; otherwise the first level, in
    ascending order, whose name occurs inside ``name`` is returned.

    Examples
    --------
    >>> parse_level("warning") is Level.WARN
    True
    >>> parse_level("info-ish") is Level.INFO
    True
    >>> parse_level("nonsense") is UNKNOWN_LEVEL
    True
    """

    normalized = name.strip().upper()
    if not normalized:
        return UNKNOWN_LEVEL
    normalized = _ALIASES.get(normalized, normalized)
    if normalized in Level.__members__:
        return Level[normalized]
    for level in Level:
        if level.name in normalized:
            return level
    return UNKNOWN_LEVEL


def is_known(value: object) -> bool:
    """Return ``True`` when ``value`` is a real :class:`Level`."""

    return isinstance(value, Level)


__all__ = ["Level", "Priority", "UNKNOWN_LEVEL", "compare_levels", "is_known", "parse_level"]
