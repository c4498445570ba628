"""Channel queries."""

from .list_channels import ListChannelsQuery, ListChannelsHandler

__all__ = ["ListChannelsQuery", "ListChannelsHandler"]
