"""Shared helpers for the Prisma repositories."""

from datetime import datetime, timezone
from typing import Any, Dict


def archived_now() -> Dict[str, Any]:
    """Update payload that archives a row."""
    return {"deleted_at": datetime.now(timezone.utc)}
