"""Click command group for metadata and a console/notification demo.

Purpose
-------
Expose ``lib_log_alert`` / ``python -m lib_log_alert`` for packaging smoke
tests and for operators checking colours and webhook routing on a host.

Contents
--------
* :func:`summary_info` – metadata banner used by ``info`` and the bare command.
* :func:`cli` – Click group with ``info`` and ``demo`` subcommands.
* :func:`main` – test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .domain import ConfigurationError, Level
from .runtime import WithConsoleColor, active_logger


def summary_info() -> str:
    """Return the metadata banner ending with a newline."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load a nearby .env before running commands (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, *, version: bool, use_dotenv: bool | None) -> None:
    """Emit the metadata banner or run a subcommand."""

    if log_config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info")
def info_command() -> None:
    """Print the metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("demo")
@click.option("--level", default="trace", show_default=True, help="Global floor for the demo logger.")
@click.option("--identity", default="demo", show_default=True, help="Identity tag shown in alert titles.")
@click.option("--from-env", is_flag=True, help="Configure from LOG_* variables instead of the flags.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colours.")
def demo_command(level: str, identity: str, from_env: bool, no_color: bool) -> None:
    """Emit one line per level through the active logger."""

    logger = active_logger()
    try:
        if from_env:
            log_config.configure_from_env(logger)
        else:
            options = [WithConsoleColor(no_color=True)] if no_color else []
            logger.configure(level, identity, *options)
    except ConfigurationError as exc:
        raise click.BadParameter(str(exc)) from exc

    for item in Level:
        logger.logf(item, "%s message (priority %s)", item.name.lower(), item.priority.value)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Exit as exit_request:
        return exit_request.exit_code
    return 0


__all__ = ["cli", "main", "summary_info"]
