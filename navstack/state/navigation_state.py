"""
Navigation state snapshots.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from uuid import UUID


@dataclass(frozen=True)
class NavigationState:
    """Immutable picture of a coordinator at one point in time."""

    # Base screen
    root_id: UUID

    # Pushed pages, bottom first
    stack_ids: Tuple[UUID, ...] = field(default_factory=tuple)

    # Modal slots
    sheet_id: Optional[UUID] = None
    full_screen_id: Optional[UUID] = None
    last_presented_id: Optional[UUID] = None

    # Number of coordinators above this one
    nesting_level: int = 0

    @property
    def pages_count(self) -> int:
        return len(self.stack_ids)

    @property
    def has_presented_view(self) -> bool:
        return self.sheet_id is not None or self.full_screen_id is not None

    @property
    def top_id(self) -> UUID:
        """Id of the page currently on top (the root when nothing is pushed)."""
        return self.stack_ids[-1] if self.stack_ids else self.root_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert state to a plain dictionary for logging."""
        return {
            "root": str(self.root_id),
            "stack": [str(page_id) for page_id in self.stack_ids],
            "sheet": str(self.sheet_id) if self.sheet_id else None,
            "full_screen": str(self.full_screen_id) if self.full_screen_id else None,
            "last_presented": str(self.last_presented_id) if self.last_presented_id else None,
            "nesting_level": self.nesting_level,
        }
