"""MonthField — the public year-month input field.

Holds the current value and its validity, delegates text handling to
the parse/format engine and bounds checks to the range validator, and
notifies listeners synchronously when the externally visible state
changes.

States::

    Empty ──set_value(v)──▶ Valid(v) ──set_bounds──▶ Invalid(v, reason)
      ▲                        │
      └──────set_value(None)───┘

A parse failure keeps the stored value and flags it
``Invalid(value, "unparseable")`` so in-progress typing is never erased.

Configuration setters (format spec, vocabulary) only affect future
parse/format calls. Bounds setters re-validate immediately.

Not thread-safe: one field per session, mutated from one thread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel

from monthpick.config.models import FieldOptions
from monthpick.domain.errors import ParseFailure
from monthpick.domain.formats import FormatSpec
from monthpick.domain.vocabulary import LocaleVocabulary
from monthpick.domain.yearmonth import YearMonth
from monthpick.plugins.event_bus import EventBus
from monthpick.plugins.manager import ListenerManager, Registration
from monthpick.services.engine import format_value, parse_text
from monthpick.services.events import ChangeKind, OpenedChangeEvent, Origin, ValueChangeEvent
from monthpick.services.validation import InvalidReason, RangeBounds, validate_range

if TYPE_CHECKING:
    from monthpick.config.settings import MonthPickSettings

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGES: dict[InvalidReason, str] = {
    InvalidReason.UNPARSEABLE: "Enter a month in a recognized format",
    InvalidReason.BELOW_MINIMUM: "Month is before the minimum year",
    InvalidReason.ABOVE_MAXIMUM: "Month is after the maximum year",
}


class FieldStatus(StrEnum):
    """Observable state of a field."""

    EMPTY = "empty"
    VALID = "valid"
    INVALID = "invalid"


class FieldState(BaseModel):
    """Snapshot of a field's value and validity."""

    model_config = {"frozen": True}

    value: YearMonth | None = None
    valid: bool = True
    error_reason: InvalidReason | None = None

    @property
    def status(self) -> FieldStatus:
        if not self.valid:
            return FieldStatus.INVALID
        if self.value is None:
            return FieldStatus.EMPTY
        return FieldStatus.VALID


class MonthField:
    """A bounded, localizable year-month field.

    Usage::

        field = MonthField(spec=FormatSpec.of("MM.YYYY", "MM/YYYY"))
        field.add_value_change_listener(print)
        field.parse_and_set("06/2019")
        field.text  # "06.2019"
    """

    def __init__(
        self,
        value: YearMonth | None = None,
        *,
        spec: FormatSpec | None = None,
        vocabulary: LocaleVocabulary | None = None,
        bounds: RangeBounds | None = None,
        options: FieldOptions | None = None,
        reference_year: int | None = None,
    ) -> None:
        self._spec = spec or FormatSpec()
        self._vocabulary = vocabulary or LocaleVocabulary()
        self._bounds = bounds or RangeBounds()
        self._options = options or FieldOptions()
        self._reference_year = reference_year
        self._opened = False
        self._listeners = ListenerManager()
        self._bus = EventBus(self._listeners)
        self._state = self._checked_state(value)

    @classmethod
    def from_settings(cls, settings: MonthPickSettings) -> Self:
        """Build an empty field from the configuration layer.

        Raises ConfigurationError for invalid patterns, vocabularies, or bounds.
        """
        return cls(
            spec=settings.format_spec(),
            vocabulary=settings.vocabulary(),
            bounds=settings.bounds(),
            options=settings.field,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> FieldState:
        return self._state

    @property
    def value(self) -> YearMonth | None:
        return self._state.value

    @property
    def status(self) -> FieldStatus:
        return self._state.status

    @property
    def valid(self) -> bool:
        return self._state.valid

    @property
    def error_reason(self) -> InvalidReason | None:
        return self._state.error_reason

    @property
    def text(self) -> str:
        """The current value in the canonical pattern, ``""`` when empty."""
        return format_value(self._state.value, self._spec, self._vocabulary)

    @property
    def error_text(self) -> str:
        """Message to show while invalid; ``""`` while valid."""
        reason = self._state.error_reason
        if self._state.valid or reason is None:
            return ""
        return self._options.error_message or DEFAULT_ERROR_MESSAGES[reason]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_value(
        self, value: YearMonth | None, *, origin: Origin = Origin.PROGRAMMATIC
    ) -> FieldState:
        """Store an already structured value and re-validate it."""
        self._apply(self._checked_state(value), origin)
        return self._state

    def parse_and_set(self, text: str | None, *, origin: Origin = Origin.USER) -> FieldState:
        """Parse *text* and store the result.

        On a parse failure the stored value is kept and flagged
        unparseable. Raises ConfigurationError for configuration problems
        only detectable at parse time.
        """
        result = parse_text(
            text, self._spec, self._vocabulary, reference_year=self._reference_year
        )
        if isinstance(result, ParseFailure):
            failed = FieldState(
                value=self._state.value,
                valid=False,
                error_reason=InvalidReason.UNPARSEABLE,
            )
            self._apply(failed, origin)
            return self._state
        return self.set_value(result, origin=origin)

    def select(self, value: YearMonth) -> FieldState:
        """A month picked in the calendar overlay."""
        return self.set_value(value, origin=Origin.USER)

    def clear(self, *, origin: Origin = Origin.PROGRAMMATIC) -> FieldState:
        return self.set_value(None, origin=origin)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def spec(self) -> FormatSpec:
        return self._spec

    def set_format_spec(self, spec: FormatSpec | None) -> None:
        """Replace the patterns. Does not re-parse or re-validate the current value."""
        self._spec = spec or FormatSpec()

    @property
    def vocabulary(self) -> LocaleVocabulary:
        return self._vocabulary

    def set_vocabulary(self, vocabulary: LocaleVocabulary | None) -> None:
        """Replace the month names. Does not re-validate the current value."""
        self._vocabulary = vocabulary or LocaleVocabulary()

    @property
    def bounds(self) -> RangeBounds:
        return self._bounds

    def set_bounds(self, bounds: RangeBounds | None) -> FieldState:
        """Replace the year bounds and re-validate the current value now.

        A stored unparseable flag is kept: the pending input still does
        not parse, whatever the bounds.
        """
        self._bounds = bounds or RangeBounds()
        if self._state.error_reason is InvalidReason.UNPARSEABLE:
            return self._state
        self._apply(self._checked_state(self._state.value), Origin.PROGRAMMATIC)
        return self._state

    @property
    def min_year(self) -> int | None:
        return self._bounds.min_year

    def set_min_year(self, year: int | None) -> FieldState:
        return self.set_bounds(RangeBounds(min_year=year, max_year=self._bounds.max_year))

    @property
    def max_year(self) -> int | None:
        return self._bounds.max_year

    def set_max_year(self, year: int | None) -> FieldState:
        return self.set_bounds(RangeBounds(min_year=self._bounds.min_year, max_year=year))

    @property
    def options(self) -> FieldOptions:
        return self._options

    def set_options(self, options: FieldOptions | None = None, **changes: Any) -> None:
        """Replace presentation options, or update individual keys."""
        base = options or self._options
        self._options = base.model_copy(update=changes) if changes else base

    # ------------------------------------------------------------------
    # Overlay
    # ------------------------------------------------------------------

    @property
    def opened(self) -> bool:
        return self._opened

    def set_opened(self, opened: bool, *, origin: Origin = Origin.USER) -> None:
        if opened == self._opened:
            return
        self._opened = opened
        self._bus.dispatch("opened_changed", event=OpenedChangeEvent(opened=opened, origin=origin))

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_value_change_listener(
        self, callback: Callable[[ValueChangeEvent], None]
    ) -> Registration:
        return self._listeners.add_value_listener(callback)

    def add_opened_change_listener(
        self, callback: Callable[[OpenedChangeEvent], None]
    ) -> Registration:
        return self._listeners.add_opened_listener(callback)

    def register_listener(self, listener: object, name: str | None = None) -> Registration:
        """Register an object with ``@hookimpl`` methods for both hooks."""
        return self._listeners.register(listener, name=name)

    # ------------------------------------------------------------------
    # Host binding
    # ------------------------------------------------------------------

    def to_properties(self) -> dict[str, Any]:
        """JSON-ready snapshot of everything a client widget renders."""
        i18n: dict[str, Any] = {"formats": list(self._spec.patterns)}
        if self._vocabulary.full_names is not None:
            i18n["monthNames"] = list(self._vocabulary.full_names)
        if self._vocabulary.short_labels is not None:
            i18n["monthLabels"] = list(self._vocabulary.short_labels)
        if self._vocabulary.short_names is not None:
            i18n["shortMonthNames"] = list(self._vocabulary.short_names)

        props: dict[str, Any] = {
            "value": self._state.value.iso() if self._state.value else "",
            "text": self.text,
            "invalid": not self._state.valid,
            "errorReason": str(self._state.error_reason) if self._state.error_reason else None,
            "errorMessage": self.error_text,
            "opened": self._opened,
            "autoOpen": self._options.auto_open,
            "clearButtonVisible": self._options.clear_button_visible,
            "i18n": i18n,
        }
        for key, val in (
            ("label", self._options.label),
            ("placeholder", self._options.placeholder),
            ("helperText", self._options.helper_text),
            ("minYear", self._bounds.min_year),
            ("maxYear", self._bounds.max_year),
        ):
            if val is not None:
                props[key] = val
        return props

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _checked_state(self, value: YearMonth | None) -> FieldState:
        check = validate_range(value, self._bounds)
        return FieldState(value=value, valid=check.valid, error_reason=check.reason)

    def _apply(self, new: FieldState, origin: Origin) -> None:
        old = self._state
        self._state = new
        if old.value != new.value:
            kind = ChangeKind.VALUE
        elif (old.valid, old.error_reason) != (new.valid, new.error_reason):
            kind = ChangeKind.VALIDITY
        else:
            return

        logger.debug("Field %s -> %s (%s, %s)", old.status, new.status, kind, origin)
        event = ValueChangeEvent(
            old_value=old.value,
            new_value=new.value,
            origin=origin,
            kind=kind,
            valid=new.valid,
            error_reason=new.error_reason,
        )
        self._bus.dispatch("value_changed", event=event)
