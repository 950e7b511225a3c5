"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``MONTHPICK_*`` prefix, ``__`` for nested keys
  3. TOML file    — ``monthpick.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`monthpick.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from monthpick.config.discovery import find_config, read_config_file
from monthpick.config.models import FieldOptions, FormatConfig, I18nConfig, RangeConfig
from monthpick.domain.errors import ConfigurationError
from monthpick.domain.formats import FormatSpec
from monthpick.domain.vocabulary import LocaleVocabulary
from monthpick.services.validation import RangeBounds


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``monthpick.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = read_config_file(toml_path)
            except ConfigurationError as exc:
                raise click.ClickException(str(exc)) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class MonthPickSettings(BaseSettings):
    """Unified settings for the monthpick CLI and field factory.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MONTHPICK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    format: FormatConfig = Field(default_factory=FormatConfig)
    i18n: I18nConfig = Field(default_factory=I18nConfig)
    range: RangeConfig = Field(default_factory=RangeConfig)
    field: FieldOptions = Field(default_factory=FieldOptions)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> MonthPickSettings:
        """Construct settings from a CLI invocation.

        Discovers ``monthpick.toml`` via walk-up from *start_dir* (or an
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start_dir)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    # --- Engine configuration built from the sections ---

    def format_spec(self) -> FormatSpec:
        """Raises ConfigurationError for malformed patterns."""
        if not self.format.patterns:
            return FormatSpec()
        return FormatSpec.of(*self.format.patterns)

    def vocabulary(self) -> LocaleVocabulary:
        """Raises ConfigurationError for lists that are not 12 long."""

        def _tuple(entries: list[str] | None) -> tuple[str, ...] | None:
            return tuple(entries) if entries is not None else None

        return LocaleVocabulary(
            full_names=_tuple(self.i18n.month_names),
            short_labels=_tuple(self.i18n.month_labels),
            short_names=_tuple(self.i18n.short_month_names),
        )

    def bounds(self) -> RangeBounds:
        """Raises ConfigurationError if min_year > max_year."""
        return RangeBounds(min_year=self.range.min_year, max_year=self.range.max_year)
