"""Range validation — year bounds for a parsed or selected year-month.

Only the year is checked. Month range is a syntax constraint already
enforced by the pattern compiler and by :class:`YearMonth` itself.
The empty value is always valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, model_validator

from monthpick.domain.errors import ConfigurationError
from monthpick.domain.yearmonth import YearMonth


class InvalidReason(StrEnum):
    """Why a field value is flagged invalid."""

    UNPARSEABLE = "unparseable"
    BELOW_MINIMUM = "below minimum"
    ABOVE_MAXIMUM = "above maximum"


class RangeBounds(BaseModel):
    """Inclusive year bounds. An unset bound is unbounded on that side."""

    model_config = {"frozen": True}

    min_year: int | None = None
    max_year: int | None = None

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if self.min_year is not None and self.max_year is not None:
            if self.min_year > self.max_year:
                msg = f"min_year {self.min_year} is greater than max_year {self.max_year}"
                raise ConfigurationError(msg)
        return self

    def contains(self, year: int) -> bool:
        return check_year(year, self) is None


@dataclass(frozen=True)
class RangeCheck:
    """Outcome of :func:`validate_range`."""

    valid: bool
    reason: InvalidReason | None = None


def check_year(year: int, bounds: RangeBounds) -> InvalidReason | None:
    """Return the violated side of *bounds* for *year*, or None if inside."""
    if bounds.min_year is not None and year < bounds.min_year:
        return InvalidReason.BELOW_MINIMUM
    if bounds.max_year is not None and year > bounds.max_year:
        return InvalidReason.ABOVE_MAXIMUM
    return None


def validate_range(value: YearMonth | None, bounds: RangeBounds) -> RangeCheck:
    """Check *value* against *bounds*."""
    if value is None:
        return RangeCheck(valid=True)
    reason = check_year(value.year, bounds)
    if reason is None:
        return RangeCheck(valid=True)
    return RangeCheck(valid=False, reason=reason)
