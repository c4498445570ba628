"""Progress queries."""

from .get_progress import GetProgressQuery, GetProgressHandler

__all__ = ["GetProgressQuery", "GetProgressHandler"]
