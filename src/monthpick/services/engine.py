"""Parse/format engine — stateless functions over (spec, vocabulary, input).

Formatting always uses the canonical pattern. Parsing tries the
canonical pattern, then each fallback in listed order, and the first
match wins. Blank input is the empty value, not a failure.

Round-trip: for any value the canonical pattern can represent,
``parse_text(format_value(v, spec, vocab), spec, vocab) == v``.
"""

from __future__ import annotations

import logging

from monthpick.domain.errors import ParseFailure
from monthpick.domain.formats import FormatSpec
from monthpick.domain.patterns import compile_pattern
from monthpick.domain.vocabulary import LocaleVocabulary
from monthpick.domain.yearmonth import YearMonth

logger = logging.getLogger(__name__)


def format_value(
    value: YearMonth | None,
    spec: FormatSpec,
    vocabulary: LocaleVocabulary,
) -> str:
    """Render *value* with the canonical pattern. The empty value renders as ``""``."""
    if value is None:
        return ""
    return compile_pattern(spec.canonical, vocabulary).render(value)


def parse_text(
    text: str | None,
    spec: FormatSpec,
    vocabulary: LocaleVocabulary,
    *,
    reference_year: int | None = None,
) -> YearMonth | ParseFailure | None:
    """Parse *text* against every pattern of *spec*, in order.

    Returns None for empty/blank text, the first matching
    :class:`YearMonth`, or :class:`ParseFailure` if nothing matched.
    Raises ConfigurationError if a name pattern is reached while its
    vocabulary list is unset.
    """
    if text is None or not text.strip():
        return None

    for pattern in spec.patterns:
        compiled = compile_pattern(pattern, vocabulary, reference_year=reference_year)
        value = compiled.match(text)
        if value is not None:
            logger.debug("Parsed %r as %s using pattern %r", text, value, pattern)
            return value

    logger.debug("No pattern matched %r (tried %d)", text, len(spec.patterns))
    return ParseFailure(text=text, patterns=spec.patterns)
