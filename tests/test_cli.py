"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from lib_log_alert import __init__conf__, summary_info
from lib_log_alert import cli as cli_mod
from lib_log_alert import config as log_config
from lib_log_alert import runtime
from lib_log_alert.domain import Level


def run_cli(args: list[str] | None = None):
    runner = CliRunner()
    return runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command)


def test_cli_without_subcommand_prints_summary() -> None:
    result = run_cli()

    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = run_cli(["info"])

    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_version_flag() -> None:
    result = run_cli(["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __init__conf__.version


def test_cli_use_dotenv_flag_triggers_loading(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[object] = []
    monkeypatch.setattr(log_config, "enable_dotenv", lambda path=None: calls.append(path))

    assert run_cli(["--use-dotenv", "info"]).exit_code == 0
    assert calls == [None]

    monkeypatch.setenv(log_config.DOTENV_ENV_VAR, "1")
    assert run_cli(["--no-use-dotenv", "info"]).exit_code == 0
    assert calls == [None]


def test_cli_dotenv_env_toggle(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[object] = []
    monkeypatch.setattr(log_config, "enable_dotenv", lambda path=None: calls.append(path))
    monkeypatch.setenv(log_config.DOTENV_ENV_VAR, "true")

    assert run_cli(["info"]).exit_code == 0
    assert calls == [None]


def test_cli_demo_emits_every_level(isolated_active_logger, console_text) -> None:
    result = run_cli(["demo", "--identity", "demo-host", "--no-color"])

    assert result.exit_code == 0
    lines = console_text().splitlines()
    assert [line[:7] for line in lines] == ["[trace]", "[debug]", "[ info]", "[ warn]", "[error]", "[alert]"]
    assert lines[3].endswith("warn message (priority MEDIUM)")
    assert isolated_active_logger.config.identity == "demo-host"


def test_cli_demo_respects_level(isolated_active_logger, console_text) -> None:
    result = run_cli(["demo", "--level", "error"])

    assert result.exit_code == 0
    assert len(console_text().splitlines()) == 2
    assert isolated_active_logger.level is Level.ERROR


def test_cli_demo_rejects_unknown_level(isolated_active_logger) -> None:
    result = run_cli(["demo", "--level", "chatty"])

    assert result.exit_code == 2
    assert "chatty" in result.output
    assert not isolated_active_logger.configured


def test_cli_demo_from_environment(isolated_active_logger, console_text, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "alert")
    monkeypatch.setenv("LOG_IDENTITY", "env-host")
    monkeypatch.delenv("LOG_SLACK_WEBHOOK", raising=False)
    monkeypatch.delenv("LOG_OUTPUT_FILE", raising=False)
    monkeypatch.delenv("LOG_FORCE_COLOR", raising=False)
    monkeypatch.delenv("LOG_NO_COLOR", raising=False)

    result = run_cli(["demo", "--from-env"])

    assert result.exit_code == 0
    assert console_text().splitlines()[0].startswith("[alert]")
    assert isolated_active_logger.config.identity == "env-host"


def test_main_returns_exit_codes(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["info"]) == 0
    assert capsys.readouterr().out == summary_info()

    assert cli_mod.main(["no-such-command"]) == 2
    assert "no-such-command" in capsys.readouterr().err


def test_cli_demo_reports_unopenable_output_file(tmp_path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setenv("LOG_OUTPUT_FILE", str(tmp_path))
    monkeypatch.delenv("LOG_SLACK_WEBHOOK", raising=False)
    monkeypatch.delenv("LOG_FORCE_COLOR", raising=False)
    monkeypatch.delenv("LOG_NO_COLOR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    previous = runtime.set_active_logger(runtime.Logger())
    try:
        assert cli_mod.main(["demo", "--from-env"]) == 2
    finally:
        runtime.set_active_logger(previous)

    assert "cannot open output file" in capsys.readouterr().err
