"""Command: parse text into a year-month."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from monthpick.commands._base import MonthCommand, pattern_option

if TYPE_CHECKING:
    from monthpick.commands._context import AppContext


@click.command(
    cls=MonthCommand,
    examples="""\
  monthpick parse 2024-06
  monthpick parse "06/2019" -f MM.YYYY -f MM/YYYY
  monthpick parse "Jan 2024" -f "MMM YYYY"
  monthpick parse 06.19 -f MM.YY --min-year 2020 --max-year 2026""",
)
@click.argument("text")
@pattern_option
@click.option("--min-year", type=int, default=None, help="Override [range] min_year.")
@click.option("--max-year", type=int, default=None, help="Override [range] max_year.")
@click.pass_obj
def parse(
    app: AppContext,
    text: str,
    patterns: tuple[str, ...],
    min_year: int | None,
    max_year: int | None,
) -> None:
    """Parse TEXT and check it against the year bounds."""
    app.emit(app.picker.parse(text, patterns=patterns, min_year=min_year, max_year=max_year))
