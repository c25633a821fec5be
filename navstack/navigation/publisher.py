"""
Change notification for coordinators.

The coordinator does not know how a UI repaints. After every mutating
operation it hands a `NavigationChange` to its `Publisher` and lets the
render layer decide what to do.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Protocol

from loguru import logger

from ..state.navigation_state import NavigationState


class ChangeKind(Enum):
    """Operation that produced a change."""
    PUSH = "push"
    POP = "pop"
    PRESENT = "present"
    DISMISS = "dismiss"
    DISMISS_ALL = "dismiss_all"
    SET_ROOT = "set_root"


@dataclass(frozen=True)
class NavigationChange:
    """A state-changed signal."""
    kind: ChangeKind
    state: NavigationState
    coordinator_id: int


class Publisher(Protocol):
    """Protocol for change observers."""

    def notify(self, change: NavigationChange) -> None:
        """Receive a state-changed signal."""
        ...


class NullPublisher:
    """Publisher that drops every change."""

    def notify(self, change: NavigationChange) -> None:
        pass


class SignalPublisher:
    """Fan changes out to subscribed callables, in subscription order."""

    def __init__(self):
        self._subscribers: List[Callable[[NavigationChange], None]] = []

    def subscribe(self, callback: Callable[[NavigationChange], None]) -> Callable[[], None]:
        """
        Register a callback.

        Returns:
            A function that removes the callback again
        """
        self._subscribers.append(callback)
        logger.debug(f"Subscribed {getattr(callback, '__name__', callback)!r} to navigation changes")

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def notify(self, change: NavigationChange) -> None:
        # Copy so callbacks may unsubscribe while being notified
        for callback in list(self._subscribers):
            callback(change)
