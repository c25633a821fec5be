"""
Rendering capability consumed by render layers.
"""

from typing import Any, Protocol

from .destination import ErasedDestination


class ViewRenderer(Protocol):
    """Protocol for turning a destination into a UI description."""

    def render(self, destination: ErasedDestination) -> Any:
        """Render a destination. Called only when it is actually displayed."""
        ...


class DestinationRenderer:
    """Renderer that returns whatever the destination's make_view() builds."""

    def render(self, destination: ErasedDestination) -> Any:
        return destination.render()
