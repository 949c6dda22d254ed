"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Render admitted events as ``[prefix] timestamp message`` lines with per-level
colours, writing each line whole.

Contents
--------
* :data:`TIMESTAMP_STYLE` / :data:`FAILURE_STYLE` - fixed styles.
* :class:`RichConsoleAdapter` - adapter constructed by the composition root.

System Role
-----------
Primary human-facing sink. Rich performs the colour rendering and falls back
to plain text when the target is not a terminal or colour is disabled.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import IO, Mapping

from rich.console import Console
from rich.text import Text

from lib_log_alert.application.ports.console import ConsolePort
from lib_log_alert.domain.errors import DeliveryError
from lib_log_alert.domain.events import LogEvent
from lib_log_alert.domain.levels import Level

TIMESTAMP_STYLE = "bold bright_black"
FAILURE_STYLE = "bold red"
FAILURE_LABEL = "[notify]"


class RichConsoleAdapter(ConsolePort):
    """Render log events using Rich with optional style overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        output_file: Path | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[Level | str, str] | None = None,
    ) -> None:
        """Configure destination, colour handling, and level styles.

        ``console`` wins over ``output_file``; without either the adapter
        writes to standard error.
        """
        self._force_color = force_color
        self._no_color = no_color
        self._lock = threading.Lock()
        self._stream: IO[str] | None = None
        self._path: Path | None = None
        self._closed = False
        if console is not None:
            self._console = console
        elif output_file is not None:
            self._path = Path(output_file)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._stream = self._path.open("a", encoding="utf-8")
            self._console = self._make_console(file=self._stream)
        else:
            self._console = self._make_console()
        self._style_map = {level: level.color for level in Level}
        for key, value in (styles or {}).items():
            level = Level.from_name(key) if isinstance(key, str) else key
            self._style_map[level] = value

    def _make_console(self, *, file: IO[str] | None = None) -> Console:
        force_terminal = True if self._force_color else None
        if file is None:
            return Console(stderr=True, force_terminal=force_terminal, no_color=self._no_color, highlight=False)
        return Console(file=file, force_terminal=force_terminal, no_color=self._no_color, highlight=False)

    def render(self, event: LogEvent) -> Text:
        """Return the styled line for ``event``.

        Examples
        --------
        >>> from datetime import datetime
        >>> adapter = RichConsoleAdapter(console=Console(record=True))
        >>> event = LogEvent(Level.WARN, datetime(2025, 9, 30, 12, 0, 1, 250000), "svc", "disk at 80%")
        >>> adapter.render(event).plain
        '[ warn] 2025-09-30 12:00:01.250 disk at 80%'
        """

        return Text.assemble(
            (f"[{event.level.prefix}]", self._style_map[event.level]),
            " ",
            (event.console_timestamp(), TIMESTAMP_STYLE),
            " ",
            event.message,
        )

    def render_failure(self, event: LogEvent, error: DeliveryError) -> Text:
        """Return the labelled line reporting a failed notification."""

        return Text.assemble(
            (FAILURE_LABEL, FAILURE_STYLE),
            " ",
            (event.console_timestamp(), TIMESTAMP_STYLE),
            " ",
            str(error),
        )

    def emit(self, event: LogEvent) -> None:
        """Write ``event`` as one line."""
        self._write(self.render(event))

    def emit_failure(self, event: LogEvent, error: DeliveryError) -> None:
        """Write the ``[notify]`` line describing ``error``."""
        self._write(self.render_failure(event, error))

    def close(self) -> None:
        """Close an owned output file.

        Lines written afterwards, e.g. by a caller still holding a replaced
        configuration, are appended to the same file one open at a time.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if self._stream is not None:
                self._stream.close()
                self._stream = None

    def _write(self, line: Text) -> None:
        with self._lock:
            if self._closed and self._path is not None:
                with self._path.open("a", encoding="utf-8") as stream:
                    self._make_console(file=stream).print(line, soft_wrap=True)
                return
            self._console.print(line, soft_wrap=True)
            if self._stream is not None:
                self._stream.flush()


__all__ = ["FAILURE_LABEL", "RichConsoleAdapter", "TIMESTAMP_STYLE"]
