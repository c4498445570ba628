"""Access control queries."""

from .check_access import CheckAccessQuery, CheckAccessHandler

__all__ = ["CheckAccessQuery", "CheckAccessHandler"]
