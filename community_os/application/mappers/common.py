from datetime import datetime
from typing import Optional


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
