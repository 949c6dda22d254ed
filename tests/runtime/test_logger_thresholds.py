from __future__ import annotations

from typing import Any

import pytest

from lib_log_alert.domain import ConfigurationError, Level
from lib_log_alert.runtime import Logger, WithDiagnosticHook, with_output_file, with_slack

WEBHOOK = "https://hooks.example/T0"


def _slack(level: str = "error", **channels: str):
    return with_slack(level, WEBHOOK, "ops-bot", **channels)


def test_unconfigured_logger_uses_info_floor(make_logger, console_text) -> None:
    logger = make_logger()
    assert not logger.configured
    assert logger.level is Level.INFO

    logger.debug("hidden")
    logger.info("visible")

    assert "hidden" not in console_text()
    assert "visible" in console_text()


@pytest.mark.parametrize("floor", list(Level))
def test_console_admits_exactly_levels_at_or_above_floor(make_logger, console_text, floor: Level) -> None:
    logger = make_logger()
    logger.configure(floor)
    for level in Level:
        logger.log(level, f"message-{level.name}")

    emitted = [level for level in Level if f"message-{level.name}" in console_text()]
    assert emitted == [level for level in Level if level >= floor]


def test_below_floor_calls_do_no_work(make_logger, clock) -> None:
    logger = make_logger()
    logger.configure("error")

    class Exploding:
        def __str__(self) -> str:
            raise AssertionError("argument should not be rendered")

    logger.info(Exploding())
    logger.warnf("%s", Exploding())
    assert clock.reads == 0


def test_notification_requires_both_floors(make_logger, delivery) -> None:
    logger = make_logger(delivery)
    logger.configure("warn", "svc1", _slack("error", warn="#ops", error="#alerts", alert="#oncall"))

    logger.info("dropped everywhere")
    logger.warn("console only")
    logger.error("to alerts")
    logger.alert("to oncall")

    assert delivery.channels == ["#alerts", "#oncall"]


def test_notification_floor_below_global_floor_never_fires_for_dropped_events(make_logger, delivery, console_text) -> None:
    logger = make_logger(delivery)
    logger.configure("error", "svc1", _slack("trace", info="#info", error="#alerts"))

    logger.info("dropped")
    logger.error("kept")

    assert delivery.channels == ["#alerts"]
    assert "dropped" not in console_text()


def test_empty_route_suppresses_notification(make_logger, delivery, console_text) -> None:
    logger = make_logger(delivery)
    logger.configure("info", "svc1", _slack("warn", error="#alerts"))

    logger.warn("no channel configured")

    assert delivery.calls == []
    assert "no channel configured" in console_text()


def test_message_formatting(make_logger, console_text) -> None:
    logger = make_logger()
    logger.configure("trace")

    logger.info("joined", 42, None)
    logger.infof("disk %s at %d%%", "/var", 80)
    logger.infof("literal 100%")
    logger.infof("too few %s %s", "args")

    lines = console_text().splitlines()
    assert lines[0].endswith("joined 42 None")
    assert lines[1].endswith("disk /var at 80%")
    assert lines[2].endswith("literal 100%")
    assert lines[3].endswith("too few %s %s args")


def test_invalid_configuration_keeps_previous(make_logger, delivery) -> None:
    logger = make_logger(delivery)
    logger.configure("warn", "svc1", _slack(error="#alerts"))
    before = logger.config

    with pytest.raises(ConfigurationError):
        logger.configure("chatty", "svc2")
    with pytest.raises(ConfigurationError):
        logger.configure("info", "svc2", with_slack("error", "", "ops-bot", error="#alerts"))
    with pytest.raises(ConfigurationError):
        logger.configure("info", "svc2", "not an option")  # type: ignore[arg-type]

    assert logger.config is before
    assert logger.config.identity == "svc1"


def test_reconfigure_replaces_every_field(make_logger, delivery) -> None:
    logger = make_logger(delivery)
    logger.configure("trace", "svc1", _slack("trace", trace="#all"))
    logger.configure("error", "svc2")

    logger.error("console only now")

    assert logger.config.identity == "svc2"
    assert logger.config.notification is None
    assert delivery.calls == []


def test_delivery_failure_is_absorbed_and_reported(make_logger, failing_delivery, console_text) -> None:
    hook_events: list[tuple[str, dict[str, Any]]] = []
    logger = make_logger(failing_delivery)
    logger.configure(
        "info",
        "svc1",
        _slack(error="#alerts"),
        WithDiagnosticHook(lambda name, payload: hook_events.append((name, payload))),
    )

    logger.error("disk full")
    logger.info("still running")

    lines = console_text().splitlines()
    assert lines[0].startswith("[error] ")
    assert lines[0].endswith("disk full")
    assert lines[1].startswith("[notify] ")
    assert "connection refused" in lines[1]
    assert lines[2].endswith("still running")
    assert len(lines) == 3
    assert logger.delivery_failures == 1
    assert [name for name, _ in hook_events] == ["notification_failed"]


def test_configured_flag_and_repr(make_logger) -> None:
    logger = make_logger()
    logger.configure("warning", "svc1", _slack())
    assert logger.configured
    assert repr(logger) == "Logger(level=WARN, identity='svc1', notify=ERROR)"
    assert logger.is_enabled_for(Level.ERROR)
    assert not logger.is_enabled_for(Level.INFO)


def test_independent_loggers_do_not_share_configuration(make_logger) -> None:
    first: Logger = make_logger()
    second: Logger = make_logger()
    first.configure("alert", "one")
    assert second.level is Level.INFO
    assert second.config.identity == ""


def test_unopenable_output_file_is_a_configuration_error(tmp_path) -> None:
    logger = Logger()
    logger.configure("warn", "svc1")
    before = logger.config

    with pytest.raises(ConfigurationError, match="cannot open output file") as info:
        logger.configure("info", "svc2", with_output_file(tmp_path))

    assert isinstance(info.value.__cause__, OSError)
    assert logger.config is before
