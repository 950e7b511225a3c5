"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, monthpick.toml only contains
overrides. An empty file yields an unbounded ISO ``YYYY-MM`` field.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from monthpick.domain.formats import DEFAULT_PATTERN

# --- monthpick.toml sections ---


class FormatConfig(BaseModel):
    """[format] section. First pattern is canonical, the rest parse-only."""

    model_config = {"frozen": True}

    patterns: list[str] = Field(default_factory=lambda: [DEFAULT_PATTERN])


class I18nConfig(BaseModel):
    """[i18n] section. Each list is January first, exactly 12 entries."""

    model_config = {"frozen": True}

    month_names: list[str] | None = None
    month_labels: list[str] | None = None
    short_month_names: list[str] | None = None


class RangeConfig(BaseModel):
    """[range] section."""

    model_config = {"frozen": True}

    min_year: int | None = None
    max_year: int | None = None


class FieldOptions(BaseModel):
    """[field] section — presentation options forwarded to the host."""

    model_config = {"frozen": True}

    label: str | None = None
    placeholder: str | None = None
    helper_text: str | None = None
    error_message: str | None = None
    clear_button_visible: bool = False
    auto_open: bool = True
