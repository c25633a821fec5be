"""
navstack - navigation state for stacked screens and modal overlays

A coordinator keeps a push/pop stack of destinations on top of a root, a
sheet slot and a full-screen slot, and the dismissal callbacks registered
for each. Coordinators can be nested: a child created for a navigable modal
hands dismissals it cannot serve to its parent. A Textual container renders
a coordinator's state.
"""

__version__ = "0.1.0"

# Version tuple for programmatic comparison
VERSION_TUPLE = (0, 1, 0)

from .navigation import (
    BACK,
    ROOT,
    ByIndex,
    ByKind,
    ByPredicate,
    Coordinator,
    Destination,
    ErasedDestination,
    FullScreen,
    NavigationError,
    PopOutcome,
    Sheet,
    SizeHint,
    erase,
)

# Export key components when package is imported
__all__ = [
    "__version__",
    "VERSION_TUPLE",
    "BACK",
    "ROOT",
    "ByIndex",
    "ByKind",
    "ByPredicate",
    "Coordinator",
    "Destination",
    "ErasedDestination",
    "FullScreen",
    "NavigationError",
    "PopOutcome",
    "Sheet",
    "SizeHint",
    "erase",
]
