from __future__ import annotations

import threading
from datetime import datetime
from io import StringIO
from pathlib import Path

from rich.console import Console

from lib_log_alert.adapters import RichConsoleAdapter
from lib_log_alert.domain import DeliveryError, Level, LogEvent

STAMP = datetime(2025, 9, 30, 12, 0, 1, 250000)


def _event(level: Level = Level.INFO, message: str = "service started") -> LogEvent:
    return LogEvent(level, STAMP, "svc1", message)


def test_emit_writes_prefix_timestamp_and_message(record_console: Console, console_text) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.emit(_event())
    assert console_text() == "[ info] 2025-09-30 12:00:01.250 service started\n"


def test_every_level_renders_its_prefix(record_console: Console, console_text) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    for level in Level:
        adapter.emit(_event(level, "x"))
    prefixes = [line.split("]")[0] + "]" for line in console_text().splitlines()]
    assert prefixes == ["[trace]", "[debug]", "[ info]", "[ warn]", "[error]", "[alert]"]


def test_render_applies_level_style() -> None:
    adapter = RichConsoleAdapter(console=Console(file=StringIO()))
    line = adapter.render(_event(Level.ERROR))
    assert line.spans[0].style == Level.ERROR.color


def test_style_overrides_accept_names_and_levels() -> None:
    adapter = RichConsoleAdapter(console=Console(file=StringIO()), styles={"error": "green", Level.WARN: "cyan"})
    assert adapter.render(_event(Level.ERROR)).spans[0].style == "green"
    assert adapter.render(_event(Level.WARN)).spans[0].style == "cyan"
    assert adapter.render(_event(Level.INFO)).spans[0].style == Level.INFO.color


def test_forced_colour_emits_ansi_sequences() -> None:
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=True, color_system="truecolor")
    RichConsoleAdapter(console=console).emit(_event(Level.ALERT))
    assert "\x1b[" in buffer.getvalue()
    assert "service started" in buffer.getvalue()


def test_failure_line_is_labelled(record_console: Console, console_text) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.emit_failure(_event(Level.ERROR), DeliveryError("delivery of ERROR event to #alerts failed: boom"))
    assert console_text() == "[notify] 2025-09-30 12:00:01.250 delivery of ERROR event to #alerts failed: boom\n"


def test_long_messages_are_not_wrapped(record_console: Console, console_text) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.emit(_event(message="x" * 500))
    assert len(console_text().splitlines()) == 1


def test_output_file_appends_and_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "logs" / "app.log"
    target.parent.mkdir()
    target.write_text("existing\n", encoding="utf-8")

    adapter = RichConsoleAdapter(output_file=target, no_color=True)
    adapter.emit(_event())
    adapter.close()

    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines == ["existing", "[ info] 2025-09-30 12:00:01.250 service started"]


def test_output_file_parent_is_created(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "deeper" / "app.log"
    adapter = RichConsoleAdapter(output_file=target, no_color=True)
    adapter.emit(_event())
    adapter.close()
    assert target.exists()


def test_close_is_idempotent_and_writes_continue_to_same_file(tmp_path: Path, capsys) -> None:
    target = tmp_path / "app.log"
    adapter = RichConsoleAdapter(output_file=target, no_color=True)
    adapter.emit(_event(message="before close"))
    adapter.close()
    adapter.close()
    adapter.emit(_event(message="after close"))

    lines = target.read_text(encoding="utf-8").splitlines()
    assert [line.rsplit(" ", 2)[-2:] for line in lines] == [["before", "close"], ["after", "close"]]
    assert "after close" not in capsys.readouterr().err


def test_closed_stderr_adapter_keeps_writing(capsys) -> None:
    adapter = RichConsoleAdapter(no_color=True)
    adapter.close()
    adapter.emit(_event(message="after close"))
    assert "after close" in capsys.readouterr().err


def test_concurrent_writes_keep_lines_whole(record_console: Console, console_text) -> None:
    adapter = RichConsoleAdapter(console=record_console)

    def worker(index: int) -> None:
        for item in range(50):
            adapter.emit(_event(message=f"worker-{index}-line-{item}-" + "y" * 40))

    threads = [threading.Thread(target=worker, args=(index,)) for index in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = console_text().splitlines()
    assert len(lines) == 400
    assert all(line.startswith("[ info] 2025-09-30 12:00:01.250 worker-") for line in lines)
    assert all(line.endswith("y" * 40) for line in lines)
