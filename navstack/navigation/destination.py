# destination.py
# Description: Destination values and their type-erased wrapper
#
"""
Destinations
------------

A destination describes a navigable screen. Concrete kinds subclass
`Destination` as dataclasses. Equality and hashing stay identity based even
under a plain `@dataclass`, unless the subclass defines its own `__eq__`:

    @dataclass
    class ProfileDestination(Destination):
        user_name: str

        def make_view(self):
            return ProfileView(self.user_name)

The coordinator stores every destination as an `ErasedDestination` so that
different kinds can live in one stack while keeping identity, equality and
late rendering.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional, Type, TypeVar
from uuid import UUID, uuid4

from .errors import NavigationError, NavigationErrorType
from .presentation import PresentationConfiguration

D = TypeVar("D", bound="Destination")


@dataclass(eq=False)
class Destination(ABC):
    """A navigable screen plus optional presentation metadata."""

    id: UUID = field(default_factory=uuid4, kw_only=True)
    presentation: Optional[PresentationConfiguration] = field(default=None, kw_only=True)

    @abstractmethod
    def make_view(self) -> Any:
        """Build the UI description of this destination."""

    def with_presentation(self: D, config: Optional[PresentationConfiguration]) -> D:
        """Return a copy carrying `config`. The id is kept."""
        return replace(self, presentation=config)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Pin the inherited methods before @dataclass runs; it keeps an __eq__ or __hash__ already in the class body
        if "__eq__" not in cls.__dict__:
            cls.__eq__ = cls.__eq__
            if "__hash__" not in cls.__dict__:
                cls.__hash__ = cls.__hash__

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))


class ErasedDestination:
    """
    Type-erased box around a concrete destination.

    Only identity, equality, rendering and kind checks go through the box.
    Field access needs an explicit `as_kind()` downcast.
    """

    __slots__ = ("id", "destination", "_make_view", "_equals", "_hash")

    def __init__(self, destination: Destination):
        concrete_type = type(destination)
        self.id: UUID = destination.id
        self.destination = destination
        self._make_view: Callable[[], Any] = destination.make_view
        self._equals: Callable[["ErasedDestination"], bool] = (
            lambda other: type(other.destination) is concrete_type and destination == other.destination
        )
        self._hash: Callable[[], int] = lambda: hash((concrete_type, destination.id))

    @property
    def kind(self) -> type:
        """The concrete destination type."""
        return type(self.destination)

    @property
    def presentation(self) -> Optional[PresentationConfiguration]:
        return self.destination.presentation

    def render(self) -> Any:
        """Invoke the wrapped destination's `make_view()`."""
        return self._make_view()

    def equals(self, other: "ErasedDestination") -> bool:
        return self._equals(other)

    def is_kind(self, kind: type) -> bool:
        """Whether the wrapped value is an instance of `kind`."""
        return isinstance(self.destination, kind)

    def as_kind(self, kind: Type[D]) -> Optional[D]:
        """Downcast to `kind`, or None when the wrapped value is of another kind."""
        if isinstance(self.destination, kind):
            return self.destination
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErasedDestination):
            return NotImplemented
        return self._equals(other)

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f"ErasedDestination({self.kind.__name__}, id={self.id})"


def erase(destination: Destination) -> ErasedDestination:
    """
    Wrap a destination for homogeneous storage.

    Args:
        destination: Concrete destination, or an already erased one

    Returns:
        An ErasedDestination carrying the destination's id

    Raises:
        NavigationError: If `destination` is not a Destination
    """
    if isinstance(destination, ErasedDestination):
        return destination
    if not isinstance(destination, Destination):
        raise NavigationError(
            NavigationErrorType.INVALID_DESTINATION,
            f"Cannot navigate to {type(destination).__name__}: not a Destination",
        )
    return ErasedDestination(destination)
