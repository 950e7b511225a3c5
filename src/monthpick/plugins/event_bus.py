"""Synchronous event dispatch via pluggy.

Events are delivered in the caller's stack before the mutating call
returns. There is no queue, no worker pool, and no batching.

INVARIANT: Listener failures are warnings, never errors. A raising
listener never rolls back the state change that produced the event.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from monthpick.plugins.manager import ListenerManager

logger = logging.getLogger(__name__)


class EventBus:
    """Dispatch hook calls to the listeners of one manager."""

    def __init__(self, manager: ListenerManager) -> None:
        self._manager = manager

    def dispatch(self, hook_name: str, **payload: Any) -> bool:
        """Call *hook_name* with *payload*.

        Returns False if a listener raised; the failure is logged.
        """
        hook_fn = getattr(self._manager.hook, hook_name, None)
        if hook_fn is None:
            logger.debug("No hook named %s", hook_name)
            return True
        try:
            hook_fn(**payload)
        except Exception:
            logger.warning("Listener failed for %s", hook_name, exc_info=True)
            return False
        return True
