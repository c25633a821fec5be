# navstack - demo application
# Description: A small Textual app exercising a coordinator: pushes, sheets,
# nested full-screen covers and dismissals.
#
# Imports
from dataclasses import dataclass
from typing import Optional
#
# 3rd-Party Libraries
from loguru import logger
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Button, Footer, Header, Label
#
# Local Imports
from .config import ensure_config_file
from .navigation import BACK, ROOT, Coordinator, Destination, FullScreen, Sheet, SizeHint
from .UI.coordinator_view import CoordinatorView, find_coordinator
from .Utils.logging_config import configure_logging
#
#######################################################################################################################
#
# Classes:


@dataclass(eq=False)
class ExampleDestination(Destination):
    """A titled page with navigation buttons."""
    title: str

    def make_view(self) -> Widget:
        return ExamplePage(self.title)


class ExamplePage(Vertical):
    """Renders an ExampleDestination."""

    DEFAULT_CSS = """
    ExamplePage {
        padding: 1 2;
    }

    ExamplePage .example-title {
        text-style: bold;
        margin-bottom: 1;
    }

    ExamplePage .example-actions {
        height: auto;
    }

    ExamplePage Button {
        margin-right: 1;
    }
    """

    def __init__(self, title: str, **kwargs):
        super().__init__(**kwargs)
        self.page_title = title

    def compose(self) -> ComposeResult:
        yield Label(self.page_title, classes="example-title")
        with Horizontal(classes="example-actions"):
            yield Button("Push", id="example-push")
            yield Button("Sheet", id="example-sheet")
            yield Button("Nested cover", id="example-cover")
        with Horizontal(classes="example-actions"):
            yield Button("Back", id="example-back")
            yield Button("Dismiss", id="example-dismiss")
            yield Button("Dismiss all", id="example-dismiss-all")
            yield Button("Root", id="example-root")

    @on(Button.Pressed, "#example-push")
    def handle_push(self) -> None:
        coordinator = find_coordinator(self)
        title = f"Page {coordinator.pages_count + 1}"
        coordinator.push(
            ExampleDestination(title),
            on_dismiss=lambda: logger.info(f"{title} popped"),
        )

    @on(Button.Pressed, "#example-sheet")
    def handle_sheet(self) -> None:
        find_coordinator(self).present(
            ExampleDestination("Sheet"),
            Sheet(size_hints={SizeHint.medium(), SizeHint.large()}),
            on_dismiss=lambda: logger.info("Sheet dismissed"),
        )

    @on(Button.Pressed, "#example-cover")
    def handle_cover(self) -> None:
        find_coordinator(self).present(
            ExampleDestination("Cover"),
            FullScreen(allows_nested_navigation=True),
            on_dismiss=lambda: logger.info("Cover dismissed"),
        )

    @on(Button.Pressed, "#example-back")
    def handle_back(self) -> None:
        find_coordinator(self).pop(BACK)

    @on(Button.Pressed, "#example-dismiss")
    def handle_dismiss(self) -> None:
        find_coordinator(self).dismiss()

    @on(Button.Pressed, "#example-dismiss-all")
    def handle_dismiss_all(self) -> None:
        find_coordinator(self).dismiss_all()

    @on(Button.Pressed, "#example-root")
    def handle_root(self) -> None:
        find_coordinator(self).pop(ROOT)


class NavstackDemoApp(App):
    """Demo app hosting a single coordinator."""

    TITLE = "navstack demo"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, coordinator: Optional[Coordinator] = None, **kwargs):
        super().__init__(**kwargs)
        self.coordinator = coordinator or Coordinator(ExampleDestination("Root"))

    def compose(self) -> ComposeResult:
        yield Header()
        yield CoordinatorView(self.coordinator, id="root-coordinator")
        yield Footer()


def main() -> None:
    """Entry point for `navstack-demo` and `python -m navstack`."""
    ensure_config_file()
    # stderr would draw over the running app, log to the configured file only
    configure_logging(console=False)
    logger.info("Starting navstack demo")
    NavstackDemoApp().run()

#
# End of app.py
#######################################################################################################################
