"""Listener registration for a single month field.

Each field owns its own pluggy manager, so listeners of one field never
see events of another. Listeners are either objects carrying
``@hookimpl`` methods or plain callables wrapped in an adapter.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import pluggy

from monthpick.plugins.hookspecs import PROJECT_NAME, MonthPickHookSpec, hookimpl

if TYPE_CHECKING:
    from monthpick.services.events import OpenedChangeEvent, ValueChangeEvent

logger = logging.getLogger(__name__)


class Registration:
    """Handle returned by listener registration; ``remove()`` unsubscribes."""

    def __init__(self, manager: ListenerManager, plugin: object) -> None:
        self._manager = manager
        self._plugin: object | None = plugin

    @property
    def active(self) -> bool:
        return self._plugin is not None

    def remove(self) -> None:
        """Unregister the listener. Calling twice is a no-op."""
        if self._plugin is None:
            return
        self._manager.unregister(self._plugin)
        self._plugin = None


class _ValueCallback:
    def __init__(self, callback: Callable[[ValueChangeEvent], None]) -> None:
        self._callback = callback

    @hookimpl
    def value_changed(self, event: ValueChangeEvent) -> None:
        self._callback(event)


class _OpenedCallback:
    def __init__(self, callback: Callable[[OpenedChangeEvent], None]) -> None:
        self._callback = callback

    @hookimpl
    def opened_changed(self, event: OpenedChangeEvent) -> None:
        self._callback(event)


class ListenerManager:
    """Manages listener registration and exposes the hook relay."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(MonthPickHookSpec)

    def register(self, listener: object, name: str | None = None) -> Registration:
        """Register an object whose methods carry ``@hookimpl``."""
        self._pm.register(listener, name=name)
        logger.debug("Registered listener: %s", name or listener.__class__.__name__)
        return Registration(self, listener)

    def add_value_listener(self, callback: Callable[[ValueChangeEvent], None]) -> Registration:
        return self.register(_ValueCallback(callback))

    def add_opened_listener(self, callback: Callable[[OpenedChangeEvent], None]) -> Registration:
        return self.register(_OpenedCallback(callback))

    def unregister(self, listener: object) -> None:
        """Unregister a listener. Unknown listeners are ignored."""
        if self._pm.is_registered(listener):
            self._pm.unregister(listener)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def get_listeners(self) -> list[object]:
        return list(self._pm.get_plugins())
