# errors.py
# Description: Error types for navigation operations
#
"""
Navigation Errors
-----------------

Invalid navigation requests (unknown kind, index out of range) are soft and
reported through `PopOutcome`. The exceptions here are raised only for
programming errors such as handing the coordinator something that is not a
destination.
"""

from enum import Enum
from typing import Optional

from loguru import logger


class NavigationErrorType(Enum):
    """Types of navigation errors."""
    INVALID_DESTINATION = "invalid_destination"
    INVALID_CONFIGURATION = "invalid_configuration"
    INVALID_POP_TARGET = "invalid_pop_target"
    ALREADY_ATTACHED = "already_attached"
    CYCLE = "cycle"
    NO_COORDINATOR = "no_coordinator"


class NavigationError(Exception):
    """Base exception for navigation programming errors."""

    def __init__(
        self,
        error_type: NavigationErrorType,
        message: str,
        details: Optional[str] = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details = details

        logger.error(f"NavigationError [{error_type.value}]: {message}")
        if details:
            logger.error(f"Details: {details}")

    def get_full_message(self) -> str:
        """Get full error message with details."""
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message
