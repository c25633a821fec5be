"""
State containers for navstack.
"""

from .navigation_state import NavigationState

__all__ = [
    'NavigationState',
]
