"""
Targets accepted by `Coordinator.pop()` and the outcomes it reports.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .destination import Destination


class PopOutcome(Enum):
    """Result of a pop request. Only POPPED changes the stack."""
    POPPED = "popped"
    UNCHANGED = "unchanged"
    NOT_FOUND = "not_found"
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass(frozen=True)
class Root:
    """Drop every pushed page, discarding their callbacks."""


@dataclass(frozen=True)
class Back:
    """Remove the top page. With a single page this is the same as Root."""


@dataclass(frozen=True)
class ByKind:
    """Pop back to the topmost page of the given kind, keeping it."""
    kind: type


@dataclass(frozen=True)
class ByIndex:
    """Keep pages [0, index]. Index 0 goes back to the root."""
    index: int


@dataclass(frozen=True)
class ByPredicate:
    """Let `finder` pick the index to pop back to from the current pages."""
    finder: Callable[[Sequence["Destination"]], Optional[int]]


PopTarget = Union[Root, Back, ByKind, ByIndex, ByPredicate]

ROOT = Root()
BACK = Back()
