"""Environment and ``.env`` configuration helpers.

Purpose
-------
Let deployments configure the active logger through ``LOG_*`` environment
variables, optionally seeded from the nearest ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle consulted by the CLI.
* :func:`enable_dotenv` / :func:`should_use_dotenv` – ``.env`` loading.
* :func:`options_from_env` / :func:`configure_from_env` – environment parsing.

System Role
-----------
Sits outside the core: it only produces ``configure`` arguments, so the logger
itself never reads the environment.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .domain import ConfigurationError, Level, is_known, parse_level
from .runtime import Logger, LoggerOption, WithConsoleColor, active_logger, with_output_file, with_slack

DOTENV_ENV_VAR = "LOG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_dotenv_loaded: Path | None = None


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded
    _dotenv_loaded = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is requested; explicit flags win.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="1")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(path: str | Path | None = None) -> Path | None:
    """Load ``path`` or the nearest ``.env`` above the working directory.

    Existing environment variables keep precedence. Returns the resolved file
    that was loaded, or ``None`` when none was found.
    """

    global _dotenv_loaded
    if path is None:
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        target = Path(found)
    else:
        target = Path(path)
        if not target.is_file():
            return None
    load_dotenv(target, override=False)
    _dotenv_loaded = target.resolve()
    return _dotenv_loaded


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    """Return the boolean value of ``name`` in ``env`` with fallback.

    Examples
    --------
    >>> _env_bool({"LOG_NO_COLOR": "yes"}, "LOG_NO_COLOR", False)
    True
    >>> _env_bool({}, "LOG_NO_COLOR", True)
    True
    """
    value = env.get(name)
    if value is None or not value.strip():
        return default
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {value!r}")


def _env_level(env: Mapping[str, str], name: str, default: Level) -> Level:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    parsed = parse_level(raw)
    if not is_known(parsed):
        raise ConfigurationError(f"{name}={raw!r} is not a known log level")
    return parsed  # type: ignore[return-value]


def options_from_env(env: Mapping[str, str] | None = None) -> tuple[Level, str, list[LoggerOption]]:
    """Translate ``LOG_*`` variables into ``configure`` arguments.

    Recognised variables: ``LOG_LEVEL``, ``LOG_IDENTITY``, ``LOG_OUTPUT_FILE``,
    ``LOG_FORCE_COLOR``, ``LOG_NO_COLOR``, ``LOG_SLACK_WEBHOOK``,
    ``LOG_SLACK_USER``, ``LOG_SLACK_ICON``, ``LOG_SLACK_LEVEL`` and
    ``LOG_SLACK_CHANNEL_<LEVEL>``.

    Examples
    --------
    >>> level, identity, options = options_from_env({"LOG_LEVEL": "debug", "LOG_IDENTITY": "node-1"})
    >>> level.name, identity, options
    ('DEBUG', 'node-1', [])
    """

    source = os.environ if env is None else env
    level = _env_level(source, "LOG_LEVEL", Level.INFO)
    identity = source.get("LOG_IDENTITY", "")
    options: list[LoggerOption] = []

    webhook = source.get("LOG_SLACK_WEBHOOK", "").strip()
    if webhook:
        channels = {lvl.name.lower(): source.get(f"LOG_SLACK_CHANNEL_{lvl.name}", "") for lvl in Level}
        options.append(
            with_slack(
                _env_level(source, "LOG_SLACK_LEVEL", Level.ERROR),
                webhook,
                source.get("LOG_SLACK_USER", "logger"),
                source.get("LOG_SLACK_ICON", ""),
                **channels,
            )
        )

    output_file = source.get("LOG_OUTPUT_FILE", "").strip()
    if output_file:
        options.append(with_output_file(output_file))

    force_color = _env_bool(source, "LOG_FORCE_COLOR", False)
    no_color = _env_bool(source, "LOG_NO_COLOR", False)
    if force_color or no_color:
        options.append(WithConsoleColor(force_color=force_color, no_color=no_color))

    return level, identity, options


def configure_from_env(logger: Logger | None = None, env: Mapping[str, str] | None = None) -> Logger:
    """Configure ``logger`` (default: the active logger) from the environment."""

    target = logger if logger is not None else active_logger()
    level, identity, options = options_from_env(env)
    target.configure(level, identity, *options)
    return target


__all__ = [
    "DOTENV_ENV_VAR",
    "configure_from_env",
    "enable_dotenv",
    "options_from_env",
    "should_use_dotenv",
]
