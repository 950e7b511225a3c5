"""YearMonth — an immutable (year, month) pair with no day or time.

Equality and hashing come from the frozen pydantic model; ordering is
lexicographic by ``(year, month)``.

The ISO-8601 ``YYYY-MM`` text form is the default exchange format with a
host binding layer. Years outside 0..9999 carry an explicit sign, the
way ISO-8601 expanded years do (``+10000-01``, ``-0001-12``).
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Self

from pydantic import BaseModel, Field

_ISO_PATTERN = re.compile(r"^([+-]?)([0-9]{4,})-([0-9]{2})$")


class YearMonth(BaseModel):
    """A month within a year."""

    model_config = {"frozen": True}

    year: int
    month: int = Field(ge=1, le=12)

    @classmethod
    def of(cls, year: int, month: int) -> Self:
        return cls(year=year, month=month)

    @classmethod
    def from_date(cls, value: date) -> Self:
        return cls(year=value.year, month=value.month)

    @classmethod
    def parse_iso(cls, text: str) -> Self:
        """Parse ``YYYY-MM`` (optionally signed). Raises ValueError if malformed."""
        match = _ISO_PATTERN.match(text.strip())
        if match is None:
            msg = f"Not an ISO year-month: {text!r}"
            raise ValueError(msg)
        sign, digits, month = match.groups()
        year = int(digits)
        if sign == "-":
            year = -year
        return cls(year=year, month=int(month))

    def plus_months(self, months: int) -> Self:
        """Return the year-month *months* later (negative goes back)."""
        index = self.year * 12 + (self.month - 1) + months
        return type(self)(year=index // 12, month=index % 12 + 1)

    def iso(self) -> str:
        if 0 <= self.year <= 9999:
            return f"{self.year:04d}-{self.month:02d}"
        sign = "+" if self.year > 0 else "-"
        return f"{sign}{abs(self.year):04d}-{self.month:02d}"

    def __str__(self) -> str:
        return self.iso()

    # --- ordering ---

    def as_tuple(self) -> tuple[int, int]:
        return (self.year, self.month)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self.as_tuple() >= other.as_tuple()
