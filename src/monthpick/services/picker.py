"""PickerService — MonthField operations for the command line.

Each call builds a fresh field from settings plus per-call overrides,
so no state leaks between invocations.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from monthpick.domain.errors import ConfigurationError
from monthpick.domain.formats import FormatSpec
from monthpick.domain.yearmonth import YearMonth
from monthpick.services.field import MonthField
from monthpick.services.result import ErrorCode, ServiceResult
from monthpick.services.validation import InvalidReason, RangeBounds

if TYPE_CHECKING:
    from monthpick.config.settings import MonthPickSettings

logger = logging.getLogger(__name__)


class PickerService:
    """Parse, format, and describe year-months using configured settings."""

    def __init__(self, settings: MonthPickSettings) -> None:
        self._settings = settings

    def parse(
        self,
        text: str,
        *,
        patterns: Sequence[str] = (),
        min_year: int | None = None,
        max_year: int | None = None,
    ) -> ServiceResult:
        """Parse *text* and validate it against the year bounds."""
        op = "parse"
        try:
            field = self._build_field(patterns, min_year=min_year, max_year=max_year)
            field.parse_and_set(text)
            data = _state_data(field)
        except ConfigurationError as exc:
            return _config_error(op, exc)

        data["input"] = text
        reason = field.error_reason
        if reason is InvalidReason.UNPARSEABLE:
            return ServiceResult.failure(
                op,
                ErrorCode.UNPARSEABLE,
                f"No pattern matched {text!r}",
                {"patterns": list(field.spec.patterns)},
            )
        if reason is not None:
            return ServiceResult.failure(
                op, ErrorCode.OUT_OF_RANGE, f"{data['value']} is {reason}", data
            )
        return ServiceResult.success(op, data)

    def format(self, value: str, *, patterns: Sequence[str] = ()) -> ServiceResult:
        """Format an ISO ``YYYY-MM`` *value* with the canonical pattern."""
        op = "format"
        try:
            year_month = YearMonth.parse_iso(value)
        except ValueError as exc:
            return ServiceResult.failure(op, ErrorCode.BAD_VALUE, str(exc))
        try:
            field = self._build_field(patterns)
            field.set_value(year_month)
            data = _state_data(field)
        except ConfigurationError as exc:
            return _config_error(op, exc)

        warnings: list[str] = []
        if not field.valid:
            warnings.append(f"{year_month} is {field.error_reason}")
        return ServiceResult.success(op, data, warnings)

    def describe(self) -> ServiceResult:
        """Return the property snapshot of a field built from settings."""
        op = "describe"
        try:
            field = MonthField.from_settings(self._settings)
        except ConfigurationError as exc:
            return _config_error(op, exc)
        data: dict[str, Any] = field.to_properties()
        if self._settings.config_path is not None:
            data["configPath"] = str(self._settings.config_path)
        return ServiceResult.success(op, data)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _build_field(
        self,
        patterns: Sequence[str],
        *,
        min_year: int | None = None,
        max_year: int | None = None,
    ) -> MonthField:
        field = MonthField.from_settings(self._settings)
        if patterns:
            field.set_format_spec(FormatSpec.of(*patterns))
        if min_year is not None or max_year is not None:
            field.set_bounds(
                RangeBounds(
                    min_year=min_year if min_year is not None else field.min_year,
                    max_year=max_year if max_year is not None else field.max_year,
                )
            )
        return field


def _state_data(field: MonthField) -> dict[str, Any]:
    value = field.value
    return {
        "value": value.iso() if value else None,
        "text": field.text,
        "status": str(field.status),
        "valid": field.valid,
        "reason": str(field.error_reason) if field.error_reason else None,
    }


def _config_error(op: str, exc: ConfigurationError) -> ServiceResult:
    logger.debug("Configuration error in %s: %s", op, exc)
    return ServiceResult.failure(op, ErrorCode.CONFIG_ERROR, str(exc))
