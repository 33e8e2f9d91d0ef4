"""Domain errors for the studio backend."""
from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a record or draft is missing required data."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
