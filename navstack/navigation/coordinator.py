# coordinator.py
# Description: Navigation coordinator state machine
#
"""
Coordinator
-----------

A coordinator owns one navigation context:

- a root destination, always shown beneath the stack
- a stack of pushed destinations
- two independent modal slots (sheet and full-screen cover)
- the dismissal callbacks registered for pages and modals
- an optional, non-owning link to a parent coordinator

Every operation runs synchronously on the UI thread. State is fully updated
and published before any dismissal callback runs, so a callback that calls
back into the coordinator sees the new state.
"""

from typing import Callable, Dict, List, Optional, Tuple, Union
from uuid import UUID

from loguru import logger

from ..config import get_bool_setting, get_setting
from ..state.navigation_state import NavigationState
from .destination import Destination, ErasedDestination, erase
from .errors import NavigationError, NavigationErrorType
from .hierarchy import ParentLink, nesting_level
from .pop_target import (
    BACK, ROOT, Back, ByIndex, ByKind, ByPredicate, PopOutcome, PopTarget, Root,
)
from .presentation import FullScreen, PresentationConfiguration, resolve_presentation
from .publisher import ChangeKind, NavigationChange, NullPublisher, Publisher

DismissCallback = Callable[[], None]


def _noop() -> None:
    pass


class Coordinator:
    """
    Manages the push stack and modal presentations of one navigation context.
    """

    def __init__(
        self,
        root: Destination,
        parent: Optional["Coordinator"] = None,
        publisher: Optional[Publisher] = None,
    ):
        self._root: ErasedDestination = erase(root)
        self._stack: List[ErasedDestination] = []
        self._sheet: Optional[ErasedDestination] = None
        self._full_screen: Optional[ErasedDestination] = None
        self._presentations: Dict[UUID, PresentationConfiguration] = {}
        self._push_dismiss_callbacks: List[DismissCallback] = []
        self._sheet_dismiss_callbacks: List[DismissCallback] = []
        self._full_screen_dismiss_callbacks: List[DismissCallback] = []
        self._last_presented_id: Optional[UUID] = None
        self._parent_link = ParentLink(parent)
        self.publisher: Publisher = publisher or NullPublisher()

        logger.debug(f"Coordinator created with root {self._root!r} (parent: {parent is not None})")

    # --- Read-only state ---

    @property
    def root(self) -> ErasedDestination:
        return self._root

    @property
    def stack(self) -> Tuple[ErasedDestination, ...]:
        """Pushed pages, bottom first."""
        return tuple(self._stack)

    @property
    def pages(self) -> Tuple[Destination, ...]:
        """Concrete destinations of the pushed pages, bottom first."""
        return tuple(page.destination for page in self._stack)

    @property
    def top(self) -> ErasedDestination:
        """The page currently shown beneath any modal."""
        return self._stack[-1] if self._stack else self._root

    @property
    def sheet(self) -> Optional[ErasedDestination]:
        return self._sheet

    @property
    def full_screen(self) -> Optional[ErasedDestination]:
        return self._full_screen

    @property
    def last_presented_id(self) -> Optional[UUID]:
        return self._last_presented_id

    @property
    def pages_count(self) -> int:
        """Number of pages pushed on top of the root."""
        return len(self._stack)

    @property
    def has_presented_view(self) -> bool:
        """Whether a sheet or a full-screen cover is presented."""
        return self._sheet is not None or self._full_screen is not None

    @property
    def parent(self) -> Optional["Coordinator"]:
        return self._parent_link.get()

    @property
    def nesting_level(self) -> int:
        return nesting_level(self)

    def presentation_for(
        self, item: Union[UUID, Destination, ErasedDestination]
    ) -> Optional[PresentationConfiguration]:
        """Configuration a destination was last presented with, if any."""
        key = item if isinstance(item, UUID) else item.id
        return self._presentations.get(key)

    def contains(self, kind: type) -> bool:
        """Whether the stack or either modal slot holds a destination of `kind`."""
        if any(page.is_kind(kind) for page in self._stack):
            return True
        return self.is_presenting(kind)

    def is_presenting(self, kind: type) -> bool:
        """Whether the sheet or the full-screen cover is of `kind`."""
        if self._sheet is not None and self._sheet.is_kind(kind):
            return True
        return self._full_screen is not None and self._full_screen.is_kind(kind)

    def snapshot(self) -> NavigationState:
        """Capture the current state."""
        return NavigationState(
            root_id=self._root.id,
            stack_ids=tuple(page.id for page in self._stack),
            sheet_id=self._sheet.id if self._sheet else None,
            full_screen_id=self._full_screen.id if self._full_screen else None,
            last_presented_id=self._last_presented_id,
            nesting_level=self.nesting_level,
        )

    # --- Hierarchy ---

    def attach_parent(self, parent: "Coordinator") -> None:
        """
        Link this coordinator to `parent`. The link is set once while the parent lives.

        Raises:
            NavigationError: If another parent is attached or the link would form a cycle
        """
        self._parent_link.attach(self, parent)
        logger.debug(f"Coordinator attached to parent (nesting level {self.nesting_level})")

    def make_child(self, root: Destination, publisher: Optional[Publisher] = None) -> "Coordinator":
        """Create a coordinator nested in this one, e.g. for a navigable modal."""
        return Coordinator(root, parent=self, publisher=publisher)

    # --- Push and pop ---

    def push(self, destination: Destination, on_dismiss: Optional[DismissCallback] = None) -> None:
        """
        Push a page onto the stack.

        Args:
            destination: Page to show
            on_dismiss: Called once when the page is popped
        """
        page = erase(destination)
        self._stack.append(page)
        self._push_dismiss_callbacks.append(on_dismiss or _noop)
        self._publish(ChangeKind.PUSH)

    def pop(self, target: PopTarget = BACK) -> PopOutcome:
        """
        Pop pages off the stack.

        Args:
            target: Root, Back, ByKind, ByIndex or ByPredicate

        Returns:
            POPPED when pages were removed, otherwise why nothing happened
        """
        if isinstance(target, Root):
            if not self._stack:
                return PopOutcome.UNCHANGED
            # Root discards the pending callbacks without calling them
            self._stack.clear()
            self._push_dismiss_callbacks.clear()
            self._publish(ChangeKind.POP)
            return PopOutcome.POPPED

        if isinstance(target, Back):
            if len(self._stack) == 1:
                return self.pop(ROOT)
            return self._truncate(len(self._stack) - 2)

        if isinstance(target, ByKind):
            for index in range(len(self._stack) - 1, -1, -1):
                if self._stack[index].is_kind(target.kind):
                    return self._truncate(index)
            return self._report(PopOutcome.NOT_FOUND, f"No {target.kind.__name__} in the stack")

        if isinstance(target, ByIndex):
            return self._pop_to_index(target.index)

        if isinstance(target, ByPredicate):
            index = target.finder(self.pages)
            if index is None:
                return self._report(PopOutcome.NOT_FOUND, "Predicate did not find a page to pop to")
            return self._pop_to_index(index)

        raise NavigationError(
            NavigationErrorType.INVALID_POP_TARGET,
            f"Unknown pop target: {target!r}",
        )

    def _pop_to_index(self, index: int) -> PopOutcome:
        if index < 0 or index >= len(self._stack):
            return self._report(
                PopOutcome.OUT_OF_BOUNDS,
                f"Index {index} out of bounds for a stack of {len(self._stack)}",
            )
        if index == 0:
            return self._truncate(-1)
        return self._truncate(index)

    def _truncate(self, keep_through: int) -> PopOutcome:
        """Keep pages [0, keep_through] and call the removed pages' callbacks top first."""
        keep = max(keep_through + 1, 0)
        if keep >= len(self._stack):
            return PopOutcome.UNCHANGED

        removed_callbacks = self._push_dismiss_callbacks[keep:]
        del self._stack[keep:]
        del self._push_dismiss_callbacks[keep:]
        self._publish(ChangeKind.POP)

        for callback in reversed(removed_callbacks):
            callback()
        return PopOutcome.POPPED

    # --- Present and dismiss ---

    def present(
        self,
        destination: Destination,
        config: Optional[PresentationConfiguration] = None,
        on_dismiss: Optional[DismissCallback] = None,
    ) -> None:
        """
        Present a destination modally.

        Args:
            destination: Destination to present
            config: Overrides the destination's own configuration. Defaults to a plain sheet
            on_dismiss: Called once when the modal is dismissed
        """
        modal = erase(destination)
        presentation = resolve_presentation(config, modal.destination)
        self._presentations[modal.id] = presentation
        self._last_presented_id = modal.id

        # Sheet and full-screen slots are independent; neither evicts the other
        if isinstance(presentation, FullScreen):
            replaced = self._full_screen
            self._full_screen = modal
            callbacks = self._full_screen_dismiss_callbacks
        else:
            replaced = self._sheet
            self._sheet = modal
            callbacks = self._sheet_dismiss_callbacks

        # The replaced modal's callback can never run; drop it instead of queueing behind it
        if replaced is not None and callbacks:
            logger.debug(f"Replacing presented {replaced!r}; its dismiss callback is dropped")
            callbacks[-1] = on_dismiss or _noop
        else:
            callbacks.append(on_dismiss or _noop)
        self._publish(ChangeKind.PRESENT)

    def dismiss(self) -> None:
        """
        Dismiss the most recently presented modal.

        With nothing of ours to dismiss, the request goes to the parent, or
        becomes a pop back when there is no parent.
        """
        last_id = self._last_presented_id
        if last_id is not None and self._full_screen is not None and self._full_screen.id == last_id:
            callback = self._clear_full_screen()
        elif last_id is not None and self._sheet is not None and self._sheet.id == last_id:
            callback = self._clear_sheet()
        else:
            parent = self.parent
            if parent is not None:
                logger.debug("Nothing presented here, delegating dismiss to parent")
                parent.dismiss()
            else:
                self.pop(BACK)
            return

        self._publish(ChangeKind.DISMISS)
        if callback is not None:
            callback()

    def dismiss_all(self) -> None:
        """Dismiss both modal slots here and in every ancestor."""
        callbacks: List[DismissCallback] = []
        if self._full_screen is not None:
            callback = self._clear_full_screen()
            if callback is not None:
                callbacks.append(callback)
        if self._sheet is not None:
            callback = self._clear_sheet()
            if callback is not None:
                callbacks.append(callback)

        if callbacks:
            self._publish(ChangeKind.DISMISS_ALL)
        for callback in callbacks:
            callback()

        parent = self.parent
        if parent is not None:
            parent.dismiss_all()

    def _clear_full_screen(self) -> Optional[DismissCallback]:
        self._full_screen = None
        self._last_presented_id = self._sheet.id if self._sheet else None
        if self._full_screen_dismiss_callbacks:
            return self._full_screen_dismiss_callbacks.pop()
        return None

    def _clear_sheet(self) -> Optional[DismissCallback]:
        self._sheet = None
        self._last_presented_id = self._full_screen.id if self._full_screen else None
        if self._sheet_dismiss_callbacks:
            return self._sheet_dismiss_callbacks.pop()
        return None

    # --- Root ---

    def set_root(self, root: Destination, pop_all: bool = False) -> None:
        """
        Replace the root destination.

        Args:
            root: New root
            pop_all: Also drop every pushed page
        """
        self._root = erase(root)
        self._publish(ChangeKind.SET_ROOT)
        if pop_all:
            self.pop(ROOT)

    # --- Internals ---

    def _publish(self, kind: ChangeKind) -> None:
        state = self.snapshot()
        if get_bool_setting("navigation", "log_transitions", True):
            logger.debug(f"Navigation {kind.value}: {state.to_dict()}")
        self.publisher.notify(NavigationChange(kind=kind, state=state, coordinator_id=id(self)))

    def _report(self, outcome: PopOutcome, message: str) -> PopOutcome:
        level = str(get_setting("navigation", "soft_failure_level", "WARNING")).upper()
        try:
            logger.log(level, f"{message} ({outcome.value})")
        except ValueError:
            logger.warning(f"{message} ({outcome.value})")
        return outcome

    def __repr__(self) -> str:
        return (
            f"Coordinator(root={self._root!r}, pages={len(self._stack)}, "
            f"sheet={self._sheet!r}, full_screen={self._full_screen!r})"
        )
