"""``monthpick`` entry point.

Global flags are folded into :class:`MonthPickSettings` once, before any
subcommand runs; subcommands receive the resulting :class:`AppContext`.
"""

from __future__ import annotations

import click

from monthpick import __version__
from monthpick.commands import register_commands
from monthpick.commands._context import AppContext
from monthpick.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from monthpick.config.settings import MonthPickSettings

_EPILOG = (
    f"Configuration comes from {CONFIG_FILENAME} in the current directory or "
    f"the nearest parent, from ${CONFIG_ENV_VAR}, or from --config."
)


@click.group(
    invoke_without_command=True,
    epilog=_EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="monthpick")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Log parse attempts and field changes.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Use this file instead of searching for {CONFIG_FILENAME}.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Parse, format, and validate year-month values."""
    ctx.obj = AppContext(
        MonthPickSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
