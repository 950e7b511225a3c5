"""Format specification — canonical pattern plus ordered fallbacks.

The first pattern formats values and is the first parse attempt. The
rest are parse-only and are tried in the order listed, so fallback order
is part of the observable contract.

INVARIANT: ``patterns`` is never empty and every entry tokenizes to
exactly one year token and one month token.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, model_validator

from monthpick.domain.errors import ConfigurationError
from monthpick.domain.patterns import check_pattern

# ISO-8601 year-month, the exchange format when nothing is configured.
DEFAULT_PATTERN = "YYYY-MM"


class FormatSpec(BaseModel):
    """Ordered, non-empty list of year-month patterns."""

    model_config = {"frozen": True}

    patterns: tuple[str, ...] = (DEFAULT_PATTERN,)

    @model_validator(mode="after")
    def _check_patterns(self) -> Self:
        if not self.patterns:
            msg = "A format spec needs at least one pattern"
            raise ConfigurationError(msg)
        for pattern in self.patterns:
            check_pattern(pattern)
        return self

    @classmethod
    def of(cls, primary: str | None, *fallbacks: str | None) -> Self:
        """Build a spec from a primary pattern and parse-only fallbacks.

        A ``None`` primary resets to the default spec. ``None`` fallbacks
        are skipped.
        """
        if primary is None:
            return cls()
        return cls(patterns=(primary, *(p for p in fallbacks if p is not None)))

    @property
    def canonical(self) -> str:
        return self.patterns[0]

    @property
    def fallbacks(self) -> tuple[str, ...]:
        return self.patterns[1:]
