"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by entities and value objects.
Application handlers translate them into feature error codes.
"""

from community_os.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "DomainValidationError",
]
