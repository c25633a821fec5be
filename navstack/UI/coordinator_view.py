"""Textual container that renders a coordinator's state."""

from typing import Any, Dict, Optional
from uuid import UUID

from loguru import logger

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.dom import DOMNode
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from ..config import get_bool_setting, get_setting
from ..navigation.coordinator import Coordinator
from ..navigation.destination import ErasedDestination
from ..navigation.errors import NavigationError, NavigationErrorType
from ..navigation.presentation import (
    DEFAULT_PRESENTATION, PresentationConfiguration, Sheet, resting_hint,
)
from ..navigation.publisher import NavigationChange, NullPublisher, Publisher
from ..navigation.rendering import ViewRenderer


class NavigationChanged(Message, bubble=False):
    """Posted to a CoordinatorView when its coordinator changed."""

    def __init__(self, change: NavigationChange):
        super().__init__()
        self.change = change


class TextualPublisher:
    """
    Publisher that forwards changes to a CoordinatorView as messages.

    The publisher the coordinator had before it was hosted keeps receiving
    every change, ahead of the view.
    """

    def __init__(self, view: "CoordinatorView", downstream: Optional[Publisher] = None):
        self.view = view
        # A re-hosted coordinator already carries a TextualPublisher; keep its downstream only
        if isinstance(downstream, TextualPublisher):
            downstream = downstream.downstream
        if isinstance(downstream, NullPublisher):
            downstream = None
        self.downstream: Optional[Publisher] = downstream

    def notify(self, change: NavigationChange) -> None:
        if self.downstream is not None:
            self.downstream.notify(change)
        self.view.post_message(NavigationChanged(change))


class TextualRenderer:
    """Renderer producing widgets; plain view descriptions are wrapped in Static."""

    def render(self, destination: ErasedDestination) -> Widget:
        view: Any = destination.render()
        if isinstance(view, Widget):
            return view
        return Static("" if view is None else view)


class CoordinatorView(Widget):
    """
    Hosts a coordinator: the top page, then the sheet and full-screen overlays.

    Modals that allow nested navigation get their own CoordinatorView backed
    by a child coordinator, so pushes inside the modal stay inside it.
    """

    DEFAULT_CSS = """
    CoordinatorView {
        layers: page overlay;
        width: 1fr;
        height: 1fr;
    }

    CoordinatorView > .navstack-page {
        layer: page;
        width: 100%;
        height: 100%;
    }

    CoordinatorView > .navstack-sheet {
        layer: overlay;
        dock: bottom;
        width: 100%;
        background: $panel;
        border-top: tall $accent;
    }

    CoordinatorView > .navstack-full-screen {
        layer: overlay;
        width: 100%;
        height: 100%;
        background: $background;
    }

    .navstack-drag-indicator {
        width: 100%;
        height: 1;
        content-align: center middle;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("escape", "navigate_back", "Back", show=False),
    ]

    def __init__(
        self,
        coordinator: Coordinator,
        renderer: Optional[ViewRenderer] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.coordinator = coordinator
        self.renderer: ViewRenderer = renderer or TextualRenderer()
        # Child coordinators of navigable modals, by modal id
        self._child_coordinators: Dict[UUID, Coordinator] = {}
        coordinator.publisher = TextualPublisher(self, downstream=coordinator.publisher)

    def compose(self) -> ComposeResult:
        """Compose the top page and any presented modals."""
        self._prune_child_coordinators()
        with Container(classes="navstack-page"):
            yield self.renderer.render(self.coordinator.top)

        sheet = self.coordinator.sheet
        if sheet is not None:
            yield self._build_sheet(sheet)

        full_screen = self.coordinator.full_screen
        if full_screen is not None:
            yield Container(
                self._build_modal_content(full_screen, self._presentation_of(full_screen)),
                classes="navstack-full-screen",
            )

    def _presentation_of(self, modal: ErasedDestination) -> PresentationConfiguration:
        return self.coordinator.presentation_for(modal) or DEFAULT_PRESENTATION

    def _build_sheet(self, sheet: ErasedDestination) -> Widget:
        config = self._presentation_of(sheet)
        children = []
        if get_bool_setting("ui", "show_drag_indicator", True):
            children.append(Static("━━━━━━", classes="navstack-drag-indicator"))
        children.append(self._build_modal_content(sheet, config))

        container = Vertical(*children, classes="navstack-sheet")
        hint = resting_hint(config.size_hints) if isinstance(config, Sheet) else None
        if hint is not None:
            container.styles.height = hint.css_height()
        else:
            container.styles.height = str(get_setting("ui", "default_sheet_height", "50%"))
        return container

    def _build_modal_content(self, modal: ErasedDestination, config: PresentationConfiguration) -> Widget:
        if not config.allows_nested_navigation:
            return self.renderer.render(modal)

        child = self._child_coordinators.get(modal.id)
        if child is None:
            child = self.coordinator.make_child(modal.destination)
            self._child_coordinators[modal.id] = child
            logger.debug(f"Created nested coordinator for {modal!r}")
        return CoordinatorView(child, renderer=self.renderer)

    def _prune_child_coordinators(self) -> None:
        presented = {
            modal.id
            for modal in (self.coordinator.sheet, self.coordinator.full_screen)
            if modal is not None
        }
        for modal_id in list(self._child_coordinators):
            if modal_id not in presented:
                del self._child_coordinators[modal_id]

    def child_coordinator_for(self, modal: ErasedDestination) -> Optional[Coordinator]:
        """The nested coordinator hosting `modal`, if it has one."""
        return self._child_coordinators.get(modal.id)

    async def on_navigation_changed(self, message: NavigationChanged) -> None:
        """Re-render after the coordinator changed."""
        message.stop()
        await self.recompose()

    def action_navigate_back(self) -> None:
        """Dismiss the top modal, else pop a page, else leave a nested modal."""
        if self.coordinator.has_presented_view:
            self.coordinator.dismiss()
        elif self.coordinator.pages_count:
            self.coordinator.pop()
        elif self.coordinator.parent is not None:
            self.coordinator.dismiss()


def find_coordinator(node: DOMNode) -> Coordinator:
    """
    Find the coordinator of the nearest enclosing CoordinatorView.

    Raises:
        NavigationError: If `node` is not inside a CoordinatorView
    """
    for ancestor in node.ancestors_with_self:
        if isinstance(ancestor, CoordinatorView):
            return ancestor.coordinator
    raise NavigationError(
        NavigationErrorType.NO_COORDINATOR,
        f"{node!r} is not inside a CoordinatorView",
    )
