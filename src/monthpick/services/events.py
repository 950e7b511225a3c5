"""Change notification payloads emitted by :class:`MonthField`.

Every notification records its origin. Downstream consumers filter on
it, so the distinction survives from the mutating call to the listener.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from monthpick.domain.yearmonth import YearMonth
from monthpick.services.validation import InvalidReason


class Origin(StrEnum):
    """Who triggered a change."""

    PROGRAMMATIC = "programmatic"
    USER = "user"


class ChangeKind(StrEnum):
    """Whether the value itself changed or only its validity."""

    VALUE = "value"
    VALIDITY = "validity"


class ValueChangeEvent(BaseModel):
    """Value or validity change of a field.

    For ``kind == VALIDITY`` the old and new values are equal.
    """

    model_config = {"frozen": True}

    old_value: YearMonth | None
    new_value: YearMonth | None
    origin: Origin
    kind: ChangeKind = ChangeKind.VALUE
    valid: bool = True
    error_reason: InvalidReason | None = None

    @property
    def from_client(self) -> bool:
        return self.origin is Origin.USER


class OpenedChangeEvent(BaseModel):
    """The calendar overlay was opened or closed."""

    model_config = {"frozen": True}

    opened: bool
    origin: Origin = Origin.USER

    @property
    def from_client(self) -> bool:
        return self.origin is Origin.USER
