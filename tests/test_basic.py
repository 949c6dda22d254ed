"""Public surface checks for the package root."""

from __future__ import annotations

import pytest

import lib_log_alert as log
from lib_log_alert import summary_info


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for lib_log_alert" in summary
    assert "version" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


@pytest.mark.parametrize("name", ["trace", "debug", "info", "warn", "error", "alert"])
def test_package_exposes_level_functions(name: str) -> None:
    assert callable(getattr(log, name))
    assert callable(getattr(log, f"{name}f"))


def test_package_all_names_resolve() -> None:
    missing = [name for name in log.__all__ if not hasattr(log, name)]
    assert missing == []


def test_errors_share_a_common_base() -> None:
    assert issubclass(log.ConfigurationError, log.LogAlertError)
    assert issubclass(log.DeliveryError, log.LogAlertError)
    assert issubclass(log.ConfigurationError, ValueError)
