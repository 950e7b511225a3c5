"""Pluggy hook specifications for month field notifications.

Two events, both dispatched synchronously in the call stack of the
mutation that triggered them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from monthpick.services.events import OpenedChangeEvent, ValueChangeEvent

PROJECT_NAME = "monthpick"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class MonthPickHookSpec:
    """Hook specifications for month field listeners."""

    @hookspec
    def value_changed(self, event: ValueChangeEvent) -> None:
        """Called after the field value or its validity changed."""

    @hookspec
    def opened_changed(self, event: OpenedChangeEvent) -> None:
        """Called after the calendar overlay opened or closed."""
