"""Error kinds shared by the engine and the value field.

ConfigurationError is a programmer error and is always raised.
ParseFailure is routine and is returned, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass


class ConfigurationError(Exception):
    """Invalid vocabulary, bounds, or pattern configuration."""


@dataclass(frozen=True)
class ParseFailure:
    """Result of a parse where no configured pattern matched."""

    text: str
    patterns: tuple[str, ...]
