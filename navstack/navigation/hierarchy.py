"""
Parent/child relationships between coordinators.

A child coordinator only holds a weak reference to its parent. The parent is
owned by whatever created it (usually a render-layer container) and never by
its children.
"""

import weakref
from typing import Iterator, Optional, TYPE_CHECKING

from .errors import NavigationError, NavigationErrorType

if TYPE_CHECKING:
    from .coordinator import Coordinator


class ParentLink:
    """Non-owning handle to a parent coordinator, set at most once."""

    __slots__ = ("_ref",)

    def __init__(self, parent: Optional["Coordinator"] = None):
        self._ref: Optional[weakref.ReferenceType] = None
        if parent is not None:
            self._ref = weakref.ref(parent)

    @property
    def is_attached(self) -> bool:
        return self.get() is not None

    def get(self) -> Optional["Coordinator"]:
        """The parent, or None when unattached or already collected."""
        if self._ref is None:
            return None
        return self._ref()

    def attach(self, owner: "Coordinator", parent: "Coordinator") -> None:
        """
        Attach `owner` to `parent`.

        Raises:
            NavigationError: If a different parent is already attached, or if
                the link would make `owner` its own ancestor
        """
        current = self.get()
        if current is parent:
            return
        # A collected parent no longer counts as attached
        if current is not None:
            raise NavigationError(
                NavigationErrorType.ALREADY_ATTACHED,
                "Coordinator already has a parent",
            )
        if parent is owner or owner in ancestors(parent):
            raise NavigationError(
                NavigationErrorType.CYCLE,
                "Attaching this parent would create a cycle",
            )
        self._ref = weakref.ref(parent)


def ancestors(coordinator: "Coordinator") -> Iterator["Coordinator"]:
    """Yield the parent, grandparent, ... of `coordinator`."""
    current = coordinator.parent
    while current is not None:
        yield current
        current = current.parent


def root_coordinator(coordinator: "Coordinator") -> "Coordinator":
    """The outermost coordinator of the chain `coordinator` belongs to."""
    outermost = coordinator
    for outermost in ancestors(coordinator):
        pass
    return outermost


def nesting_level(coordinator: "Coordinator") -> int:
    """Number of ancestors above `coordinator`."""
    return sum(1 for _ in ancestors(coordinator))


def is_presenting_in_chain(coordinator: "Coordinator") -> bool:
    """Whether `coordinator` or any of its ancestors shows a modal."""
    if coordinator.has_presented_view:
        return True
    return any(parent.has_presented_view for parent in ancestors(coordinator))
