"""
WebUrl helper - http(s) URL validation shared by entities.
"""

from typing import Optional
from urllib.parse import urlparse

from community_os.domain.exceptions import DomainValidationError


def is_web_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_optional_url(value: Optional[str], field: str, label: str) -> None:
    if value is None:
        return
    if not is_web_url(value):
        raise DomainValidationError(f"{label} must be a valid http(s) URL", field=field)
