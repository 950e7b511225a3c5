"""Locating and reading ``monthpick.toml``.

Lookup order: the ``MONTHPICK_CONFIG`` env var, then the nearest
``monthpick.toml`` in the start directory or any parent. An explicit
``--config`` path bypasses discovery entirely (see
:meth:`MonthPickSettings.from_cli`).
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from monthpick.domain.errors import ConfigurationError

CONFIG_FILENAME = "monthpick.toml"
CONFIG_ENV_VAR = "MONTHPICK_CONFIG"


def iter_candidates(start: Path | None = None) -> Iterator[Path]:
    """Yield ``<dir>/monthpick.toml`` for *start* (default: cwd) and each parent."""
    current = (start or Path.cwd()).resolve()
    yield current / CONFIG_FILENAME
    yield from (parent / CONFIG_FILENAME for parent in current.parents)


def find_config(
    start: Path | None = None, *, environ: Mapping[str, str] | None = None
) -> Path | None:
    """Return the config file that applies to *start*, or None.

    A set but dangling ``MONTHPICK_CONFIG`` disables the walk-up.
    """
    env_path = (os.environ if environ is None else environ).get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None
    return next((c for c in iter_candidates(start) if c.is_file()), None)


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML. Raises ConfigurationError on a syntax error."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigurationError(msg) from exc
