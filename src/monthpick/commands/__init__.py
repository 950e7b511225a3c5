"""Subcommand modules for monthpick.

Provides register_commands() which uses deferred imports to keep
``monthpick --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from monthpick.commands.describe import describe
    from monthpick.commands.format_cmd import format_cmd
    from monthpick.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(format_cmd)
    cli.add_command(describe)
