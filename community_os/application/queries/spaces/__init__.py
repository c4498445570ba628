"""Space queries."""

from .list_spaces import ListSpacesQuery, ListSpacesHandler

__all__ = ["ListSpacesQuery", "ListSpacesHandler"]
