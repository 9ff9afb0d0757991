"""Observable key/value store for page state."""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Optional

logger = logging.getLogger(__name__)


class DataStore:
    """
    Minimal publish/subscribe state container.

    set_state() merges the given keys into the current state and then calls
    every listener synchronously, in the order they were added.
    """

    def __init__(self, initial_state: Optional[Mapping[str, Any]] = None):
        """
        Initialize store.

        Args:
            initial_state: Starting key/value pairs (copied)
        """
        self.state: dict[str, Any] = dict(initial_state or {})
        self.listeners: list[Callable[[], None]] = []

    def get(self, key: str) -> Any:
        """Get the current value for a key, or None if unset."""
        return self.state.get(key)

    def set_state(self, new_state: Mapping[str, Any]):
        """Merge new_state into the store and notify listeners."""
        self.state = {**self.state, **new_state}
        logger.debug(f"State updated: {sorted(new_state)}")

        for listener in self.listeners:
            listener()

    def add_change_listener(self, listener: Callable[[], None]):
        """Register a callback to run after every set_state()."""
        self.listeners.append(listener)
