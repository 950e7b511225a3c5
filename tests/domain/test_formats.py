"""Tests for FormatSpec."""

import pytest
from pydantic import ValidationError

from monthpick.domain.errors import ConfigurationError
from monthpick.domain.formats import DEFAULT_PATTERN, FormatSpec


class TestFormatSpec:
    def test_default_is_iso(self) -> None:
        spec = FormatSpec()
        assert spec.patterns == (DEFAULT_PATTERN,)
        assert spec.canonical == "YYYY-MM"
        assert spec.fallbacks == ()

    def test_of_keeps_order(self) -> None:
        spec = FormatSpec.of("MM.YYYY", "MM/YYYY", "M-YY")
        assert spec.canonical == "MM.YYYY"
        assert spec.fallbacks == ("MM/YYYY", "M-YY")

    def test_none_primary_resets_to_default(self) -> None:
        assert FormatSpec.of(None, "MM/YYYY") == FormatSpec()

    def test_none_fallbacks_skipped(self) -> None:
        spec = FormatSpec.of("MM.YYYY", None, "MM/YYYY")
        assert spec.patterns == ("MM.YYYY", "MM/YYYY")

    def test_empty_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="at least one pattern"):
            FormatSpec(patterns=())

    @pytest.mark.parametrize("bad", ["YYYY", "MM", "MM.YY.YYYY"])
    def test_malformed_pattern_rejected(self, bad: str) -> None:
        with pytest.raises(ConfigurationError):
            FormatSpec.of("MM.YYYY", bad)

    def test_name_patterns_accepted_without_vocabulary(self) -> None:
        assert FormatSpec.of("MMMM YYYY").canonical == "MMMM YYYY"

    def test_frozen(self) -> None:
        spec = FormatSpec()
        with pytest.raises(ValidationError):
            spec.patterns = ("MM.YYYY",)  # type: ignore[misc]
