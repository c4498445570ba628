"""
DomainValidationError - Raised when a business rule is violated.
Maps to: HTTP 400 Bad Request (translated to a feature error code first)
"""

from typing import Optional


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
