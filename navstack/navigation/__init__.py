"""
Navigation core: destinations, presentation and the coordinator.
"""

from .coordinator import Coordinator
from .destination import Destination, ErasedDestination, erase
from .errors import NavigationError, NavigationErrorType
from .hierarchy import ancestors, is_presenting_in_chain, nesting_level, root_coordinator
from .pop_target import BACK, ROOT, Back, ByIndex, ByKind, ByPredicate, PopOutcome, Root
from .presentation import (
    DEFAULT_PRESENTATION, FullScreen, Sheet, SizeHint, resolve_presentation, resting_hint,
)
from .publisher import ChangeKind, NavigationChange, NullPublisher, Publisher, SignalPublisher
from .rendering import DestinationRenderer, ViewRenderer

__all__ = [
    'Coordinator',
    'Destination',
    'ErasedDestination',
    'erase',
    'NavigationError',
    'NavigationErrorType',
    'ancestors',
    'is_presenting_in_chain',
    'nesting_level',
    'root_coordinator',
    'BACK',
    'ROOT',
    'Back',
    'ByIndex',
    'ByKind',
    'ByPredicate',
    'PopOutcome',
    'Root',
    'DEFAULT_PRESENTATION',
    'FullScreen',
    'Sheet',
    'SizeHint',
    'resolve_presentation',
    'resting_hint',
    'ChangeKind',
    'NavigationChange',
    'NullPublisher',
    'Publisher',
    'SignalPublisher',
    'DestinationRenderer',
    'ViewRenderer',
]
