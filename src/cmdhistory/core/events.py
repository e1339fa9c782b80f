"""
Synchronous observer signals.

Used by the history engine to tell a host (toolbar buttons, menus, status
bars) that undo/redo availability changed, without depending on any UI
toolkit.
"""
from typing import Callable, List

from loguru import logger


class Signal:
    """
    A simple observer pattern implementation (Synchronous).
    
    Subscribers are called in connection order. A subscriber that raises is
    logged and skipped so the remaining subscribers still run.
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable) -> None:
        """Connect a callback function to this signal."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def disconnect(self, callback: Callable) -> None:
        """Disconnect a callback function from this signal."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, *args, **kwargs) -> None:
        """Broadcast arguments to all subscribers synchronously."""
        # Copy so a subscriber may disconnect itself while handling
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{sub}': {e}")


ObserverEvent = Signal
