"""Concrete adapters for the console and webhook ports."""

from __future__ import annotations

from .console.rich_console import RichConsoleAdapter
from .webhook import WebhookAdapter

__all__ = ["RichConsoleAdapter", "WebhookAdapter"]
