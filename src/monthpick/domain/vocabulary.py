"""Locale vocabulary — month names and labels, January first.

Three independent lists:

- ``full_names``: consulted by the ``MMMM`` pattern token.
- ``short_names``: consulted by the ``MMM`` pattern token.
- ``short_labels``: display-only labels for the calendar overlay. The
  engine never reads them.

INVARIANT: a list that is set has exactly 12 entries.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, model_validator

from monthpick.domain.errors import ConfigurationError

MONTHS_IN_YEAR = 12

ENGLISH_MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

ENGLISH_SHORT_MONTH_NAMES: tuple[str, ...] = tuple(name[:3] for name in ENGLISH_MONTH_NAMES)


class LocaleVocabulary(BaseModel):
    """Month vocabularies for one locale. Unset lists stay ``None``."""

    model_config = {"frozen": True}

    full_names: tuple[str, ...] | None = None
    short_labels: tuple[str, ...] | None = None
    short_names: tuple[str, ...] | None = None

    @model_validator(mode="after")
    def _check_lengths(self) -> Self:
        for name in ("full_names", "short_labels", "short_names"):
            entries = getattr(self, name)
            if entries is not None and len(entries) != MONTHS_IN_YEAR:
                msg = f"{name} must have exactly {MONTHS_IN_YEAR} entries, got {len(entries)}"
                raise ConfigurationError(msg)
        return self

    @classmethod
    def english(cls) -> Self:
        """A vocabulary with every list populated in English."""
        return cls(
            full_names=ENGLISH_MONTH_NAMES,
            short_labels=ENGLISH_SHORT_MONTH_NAMES,
            short_names=ENGLISH_SHORT_MONTH_NAMES,
        )

    def display_names(self) -> tuple[str, ...]:
        """Full names for display, English when unset."""
        return self.full_names if self.full_names is not None else ENGLISH_MONTH_NAMES

    def display_labels(self) -> tuple[str, ...]:
        """Overlay cell labels, English abbreviations when unset."""
        if self.short_labels is not None:
            return self.short_labels
        return ENGLISH_SHORT_MONTH_NAMES
