"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass or Enum)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from community_os.domain.value_objects.email import Email
from community_os.domain.value_objects.hex_color import HexColor, HEX_COLOR_PATTERN
from community_os.domain.value_objects.role import Role
from community_os.domain.value_objects.web_url import is_web_url, validate_optional_url

__all__ = [
    "Email",
    "HexColor",
    "HEX_COLOR_PATTERN",
    "Role",
    "is_web_url",
    "validate_optional_url",
]
