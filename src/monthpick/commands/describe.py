"""Command: show the configured field as host properties."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from monthpick.commands._base import MonthCommand

if TYPE_CHECKING:
    from monthpick.commands._context import AppContext


@click.command(
    cls=MonthCommand,
    examples="""\
  monthpick describe
  monthpick --json describe
  monthpick -c ./monthpick.toml describe""",
)
@click.pass_obj
def describe(app: AppContext) -> None:
    """Show formats, vocabulary, bounds, and options from configuration."""
    app.emit(app.picker.describe())
