"""Notification layer — listener registration and dispatch via pluggy.

INVARIANT: Listener failures are warnings, never errors.
"""

from monthpick.plugins.event_bus import EventBus
from monthpick.plugins.hookspecs import hookimpl
from monthpick.plugins.manager import ListenerManager, Registration

__all__ = ["EventBus", "ListenerManager", "Registration", "hookimpl"]
