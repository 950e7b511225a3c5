"""Command: format an ISO year-month with the canonical pattern."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from monthpick.commands._base import MonthCommand, pattern_option

if TYPE_CHECKING:
    from monthpick.commands._context import AppContext


@click.command(
    "format",
    cls=MonthCommand,
    examples="""\
  monthpick format 2024-01
  monthpick format 2024-01 -f "MMM YYYY"
  monthpick --json format 2019-06 -f MM/YY""",
)
@click.argument("value")
@pattern_option
@click.pass_obj
def format_cmd(app: AppContext, value: str, patterns: tuple[str, ...]) -> None:
    """Format VALUE (YYYY-MM) with the canonical pattern."""
    app.emit(app.picker.format(value, patterns=patterns))
