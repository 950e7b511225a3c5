"""Pattern compiler — year-month pattern strings to matcher/renderer pairs.

Token vocabulary (longest token wins at each position):

==========  ===============================================
``YYYY``    year, 4 or more ASCII digits
``YY``      year, exactly 2 digits, resolved in the current century
``MMMM``    full month name from ``LocaleVocabulary.full_names``
``MMM``     short month name from ``LocaleVocabulary.short_names``
``MM``      month, zero-padded to 2 digits on output
``M``       month, no padding on output
==========  ===============================================

Any other character is a literal that must appear verbatim in the input.
Numeric months accept 1 or 2 digits on input and must lie in 1..12; a
month outside that range fails the match itself.

Name tokens look up the vocabulary lazily: a missing list raises
:class:`ConfigurationError` from ``match``/``render``, not from
``compile_pattern``, because the vocabulary may be attached after the
pattern.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from monthpick.domain.errors import ConfigurationError
from monthpick.domain.vocabulary import LocaleVocabulary
from monthpick.domain.yearmonth import YearMonth


class TokenKind(StrEnum):
    """Recognized pattern tokens plus the literal catch-all."""

    YEAR_FULL = "YYYY"
    YEAR_SHORT = "YY"
    MONTH_FULL_NAME = "MMMM"
    MONTH_SHORT_NAME = "MMM"
    MONTH_PADDED = "MM"
    MONTH = "M"
    LITERAL = "literal"


# Longest first so that "MMMM" is never read as "MM" + "MM".
_TOKEN_ORDER: tuple[TokenKind, ...] = (
    TokenKind.YEAR_FULL,
    TokenKind.YEAR_SHORT,
    TokenKind.MONTH_FULL_NAME,
    TokenKind.MONTH_SHORT_NAME,
    TokenKind.MONTH_PADDED,
    TokenKind.MONTH,
)

YEAR_TOKENS = frozenset({TokenKind.YEAR_FULL, TokenKind.YEAR_SHORT})
MONTH_TOKENS = frozenset(
    {
        TokenKind.MONTH_FULL_NAME,
        TokenKind.MONTH_SHORT_NAME,
        TokenKind.MONTH_PADDED,
        TokenKind.MONTH,
    }
)

# 10-12 before 1-9 so "MMYYYY" reads "122019" as December 2019.
_NUMERIC_MONTH = r"1[0-2]|0?[1-9]"

_TOKEN_REGEX: dict[TokenKind, str] = {
    # Lazy so "YYYYMM" reads "201906" as June 2019, not month 6 of year 20190.
    TokenKind.YEAR_FULL: r"[0-9]{4,}?",
    TokenKind.YEAR_SHORT: r"[0-9]{2}",
    TokenKind.MONTH_PADDED: _NUMERIC_MONTH,
    TokenKind.MONTH: _NUMERIC_MONTH,
}


@dataclass(frozen=True)
class Token:
    """One piece of a tokenized pattern."""

    kind: TokenKind
    text: str


def tokenize(pattern: str) -> tuple[Token, ...]:
    """Split *pattern* into tokens, merging adjacent literal characters."""
    tokens: list[Token] = []
    literal: list[str] = []
    pos = 0
    while pos < len(pattern):
        for kind in _TOKEN_ORDER:
            if pattern.startswith(kind.value, pos):
                if literal:
                    tokens.append(Token(TokenKind.LITERAL, "".join(literal)))
                    literal.clear()
                tokens.append(Token(kind, kind.value))
                pos += len(kind.value)
                break
        else:
            literal.append(pattern[pos])
            pos += 1
    if literal:
        tokens.append(Token(TokenKind.LITERAL, "".join(literal)))
    return tuple(tokens)


def check_pattern(pattern: str) -> tuple[Token, ...]:
    """Tokenize *pattern* and require exactly one year and one month token."""
    tokens = tokenize(pattern)
    years = sum(1 for t in tokens if t.kind in YEAR_TOKENS)
    months = sum(1 for t in tokens if t.kind in MONTH_TOKENS)
    if years != 1 or months != 1:
        msg = (
            f"Pattern {pattern!r} must contain exactly one year token and one month "
            f"token (found {years} year, {months} month)"
        )
        raise ConfigurationError(msg)
    return tokens


def resolve_two_digit_year(two_digits: int, reference_year: int | None = None) -> int:
    """Place a 2-digit year in the century of *reference_year* (default: today)."""
    if reference_year is None:
        reference_year = date.today().year
    return (reference_year // 100) * 100 + two_digits


class CompiledPattern:
    """Matcher and renderer for one pattern string.

    Usage::

        compiled = compile_pattern("MMM YYYY", LocaleVocabulary.english())
        compiled.match("jan 2024")  # YearMonth(year=2024, month=1)
        compiled.render(YearMonth.of(2024, 1))  # "Jan 2024"
    """

    def __init__(
        self,
        pattern: str,
        tokens: tuple[Token, ...],
        vocabulary: LocaleVocabulary,
        *,
        reference_year: int | None = None,
    ) -> None:
        self.pattern = pattern
        self.tokens = tokens
        self._vocabulary = vocabulary
        self._reference_year = reference_year
        self._regex: re.Pattern[str] | None = None

    @property
    def month_token(self) -> Token:
        return next(t for t in self.tokens if t.kind in MONTH_TOKENS)

    @property
    def year_token(self) -> Token:
        return next(t for t in self.tokens if t.kind in YEAR_TOKENS)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def match(self, text: str) -> YearMonth | None:
        """Return the year-month in *text*, or None if the whole text doesn't match."""
        found = self._compiled_regex().fullmatch(text)
        if found is None:
            return None
        year_text, month_text = found.group("year"), found.group("month")

        if self.year_token.kind is TokenKind.YEAR_SHORT:
            year = resolve_two_digit_year(int(year_text), self._reference_year)
        else:
            try:
                year = int(year_text)
            except ValueError:
                # Past the interpreter's int-string digit limit.
                return None

        month_kind = self.month_token.kind
        if month_kind in (TokenKind.MONTH_FULL_NAME, TokenKind.MONTH_SHORT_NAME):
            month = self._month_from_name(month_kind, month_text)
        else:
            month = int(month_text)
        return YearMonth(year=year, month=month)

    def render(self, value: YearMonth) -> str:
        """Format *value* with this pattern."""
        parts: list[str] = []
        for token in self.tokens:
            if token.kind is TokenKind.LITERAL:
                parts.append(token.text)
            elif token.kind is TokenKind.YEAR_FULL:
                parts.append(f"{value.year:04d}")
            elif token.kind is TokenKind.YEAR_SHORT:
                parts.append(f"{value.year % 100:02d}")
            elif token.kind is TokenKind.MONTH_PADDED:
                parts.append(f"{value.month:02d}")
            elif token.kind is TokenKind.MONTH:
                parts.append(str(value.month))
            else:
                parts.append(self._names(token.kind)[value.month - 1])
        return "".join(parts)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _names(self, kind: TokenKind) -> tuple[str, ...]:
        if kind is TokenKind.MONTH_FULL_NAME:
            names, field = self._vocabulary.full_names, "full_names"
        else:
            names, field = self._vocabulary.short_names, "short_names"
        if names is None:
            msg = f"Pattern {self.pattern!r} uses {kind.value} but vocabulary {field} is not set"
            raise ConfigurationError(msg)
        return names

    def _month_from_name(self, kind: TokenKind, text: str) -> int:
        folded = text.casefold()
        for index, name in enumerate(self._names(kind)):
            if name.casefold() == folded:
                return index + 1
        # Unreachable: the regex alternation only admits vocabulary entries.
        msg = f"Month name {text!r} not in vocabulary"
        raise ConfigurationError(msg)

    def _compiled_regex(self) -> re.Pattern[str]:
        if self._regex is None:
            self._regex = re.compile(self._build_regex())
        return self._regex

    def _build_regex(self) -> str:
        parts: list[str] = []
        for token in self.tokens:
            if token.kind is TokenKind.LITERAL:
                parts.append(re.escape(token.text))
            elif token.kind in YEAR_TOKENS:
                parts.append(f"(?P<year>{_TOKEN_REGEX[token.kind]})")
            elif token.kind in (TokenKind.MONTH_FULL_NAME, TokenKind.MONTH_SHORT_NAME):
                # Longest entry first when names share a prefix ("Jun" / "June").
                names = sorted(self._names(token.kind), key=len, reverse=True)
                alternation = "|".join(re.escape(name) for name in names)
                parts.append(f"(?P<month>(?i:{alternation}))")
            else:
                parts.append(f"(?P<month>{_TOKEN_REGEX[token.kind]})")
        return "".join(parts)


def compile_pattern(
    pattern: str,
    vocabulary: LocaleVocabulary,
    *,
    reference_year: int | None = None,
) -> CompiledPattern:
    """Compile *pattern* against *vocabulary*.

    Raises ConfigurationError if the pattern lacks exactly one year and
    one month token. Missing name vocabularies surface later, from
    ``match`` or ``render``.
    """
    tokens = check_pattern(pattern)
    return CompiledPattern(pattern, tokens, vocabulary, reference_year=reference_year)
