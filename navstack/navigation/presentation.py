"""
Presentation configuration for modal destinations.

A destination is shown either as a sheet or as a full-screen cover. Both
variants can ask for nested navigation, in which case the render layer hosts
the destination inside its own child coordinator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Union, TYPE_CHECKING

from .errors import NavigationError, NavigationErrorType

if TYPE_CHECKING:
    from .destination import Destination


class SizeHintKind(Enum):
    """How a sheet size hint is measured."""
    FRACTION = "fraction"
    ROWS = "rows"


@dataclass(frozen=True)
class SizeHint:
    """A resting size a sheet may settle at."""
    kind: SizeHintKind
    value: float

    @classmethod
    def medium(cls) -> "SizeHint":
        return cls(SizeHintKind.FRACTION, 0.5)

    @classmethod
    def large(cls) -> "SizeHint":
        return cls(SizeHintKind.FRACTION, 1.0)

    @classmethod
    def fraction(cls, value: float) -> "SizeHint":
        """Fraction of the available height, in (0, 1]."""
        if not 0 < value <= 1:
            raise NavigationError(
                NavigationErrorType.INVALID_CONFIGURATION,
                f"Sheet fraction must be in (0, 1], got {value}",
            )
        return cls(SizeHintKind.FRACTION, float(value))

    @classmethod
    def height(cls, rows: int) -> "SizeHint":
        """Fixed height in rows."""
        if rows <= 0:
            raise NavigationError(
                NavigationErrorType.INVALID_CONFIGURATION,
                f"Sheet height must be positive, got {rows}",
            )
        return cls(SizeHintKind.ROWS, rows)

    def css_height(self) -> str:
        """Height expressed as a Textual CSS scalar."""
        if self.kind is SizeHintKind.FRACTION:
            return f"{round(self.value * 100)}%"
        return str(int(self.value))


@dataclass(frozen=True)
class FullScreen:
    """Cover the whole container."""
    allows_nested_navigation: bool = False


@dataclass(frozen=True)
class Sheet:
    """Slide a sheet over part of the container."""
    allows_nested_navigation: bool = False
    size_hints: Optional[FrozenSet[SizeHint]] = None

    def __post_init__(self):
        # Accept any iterable of hints but store an immutable set
        if self.size_hints is not None and not isinstance(self.size_hints, frozenset):
            object.__setattr__(self, "size_hints", frozenset(self.size_hints))


PresentationConfiguration = Union[FullScreen, Sheet]

DEFAULT_PRESENTATION: PresentationConfiguration = Sheet()


def resting_hint(hints: Optional[Iterable[SizeHint]]) -> Optional[SizeHint]:
    """
    Pick the hint a sheet should open at.

    Fractions come before fixed heights; within a kind the smallest wins.
    """
    if not hints:
        return None
    order = {SizeHintKind.FRACTION: 0, SizeHintKind.ROWS: 1}
    return min(hints, key=lambda hint: (order[hint.kind], hint.value))


def resolve_presentation(
    explicit: Optional[PresentationConfiguration],
    destination: Optional["Destination"] = None,
) -> PresentationConfiguration:
    """
    Resolve the configuration a destination is presented with.

    Args:
        explicit: Configuration passed by the caller, wins when given
        destination: Destination whose attached configuration is the fallback

    Returns:
        The explicit configuration, else the one attached to the destination,
        else the default sheet
    """
    config = explicit
    if config is None and destination is not None:
        config = getattr(destination, "presentation", None)
    if config is None:
        return DEFAULT_PRESENTATION
    if not isinstance(config, (FullScreen, Sheet)):
        raise NavigationError(
            NavigationErrorType.INVALID_CONFIGURATION,
            f"Unknown presentation configuration: {config!r}",
        )
    return config
