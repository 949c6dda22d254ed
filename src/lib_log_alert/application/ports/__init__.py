"""Protocols the application layer depends on."""

from __future__ import annotations

from .console import ConsolePort
from .delivery import DeliveryPort
from .time import ClockPort

__all__ = ["ClockPort", "ConsolePort", "DeliveryPort"]
