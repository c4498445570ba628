"""Progress commands."""

from .track_progress import TrackProgressCommand, TrackProgressHandler
from .mark_complete import MarkCompleteCommand, MarkCompleteHandler

__all__ = [
    "TrackProgressCommand",
    "TrackProgressHandler",
    "MarkCompleteCommand",
    "MarkCompleteHandler",
]
