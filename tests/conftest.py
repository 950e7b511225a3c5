"""Shared pytest fixtures and test helpers for monthpick tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from monthpick.domain.vocabulary import LocaleVocabulary
from monthpick.services.events import OpenedChangeEvent, ValueChangeEvent

SPANISH_MONTH_NAMES = [
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
]

SPANISH_MONTH_LABELS = [name[:3] for name in SPANISH_MONTH_NAMES]


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's MONTHPICK_CONFIG from leaking into tests."""
    monkeypatch.delenv("MONTHPICK_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test; the CLI reconfigures it."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pick = logging.getLogger("monthpick")
    pick_level = pick.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pick.setLevel(pick_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def english() -> LocaleVocabulary:
    return LocaleVocabulary.english()


@pytest.fixture
def spanish() -> LocaleVocabulary:
    return LocaleVocabulary(
        full_names=tuple(SPANISH_MONTH_NAMES),
        short_labels=tuple(SPANISH_MONTH_LABELS),
        short_names=tuple(SPANISH_MONTH_LABELS),
    )


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so config walk-up finds only test files.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class EventRecorder:
    """Collects field notifications in delivery order."""

    def __init__(self) -> None:
        self.values: list[ValueChangeEvent] = []
        self.opened: list[OpenedChangeEvent] = []

    def on_value(self, event: ValueChangeEvent) -> None:
        self.values.append(event)

    def on_opened(self, event: OpenedChangeEvent) -> None:
        self.opened.append(event)
