"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: PickerService methods return ServiceResult and never raise
for bad input or bad configuration. The field API itself raises
ConfigurationError; the service converts it at this boundary.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure codes carried by :class:`ServiceError`."""

    UNPARSEABLE = "UNPARSEABLE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    BAD_VALUE = "BAD_VALUE"
    CONFIG_ERROR = "CONFIG_ERROR"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"parse"``, ``"format"``, ``"describe"``).
        data: Field state or property snapshot on success.
        warnings: Non-fatal issues, e.g. a formatted value outside the bounds.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: Iterable[str] = ()
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=list(warnings))

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        error = ServiceError(code=str(code), message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error)
