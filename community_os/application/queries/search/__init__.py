"""Search queries."""

from .search import SearchQuery, SearchHandler

__all__ = ["SearchQuery", "SearchHandler"]
