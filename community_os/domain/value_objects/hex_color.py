"""
HexColor Value Object - CSS hex colour (#RGB or #RRGGBB).
"""

import re
from dataclasses import dataclass

from community_os.domain.exceptions import DomainValidationError

HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")


@dataclass(frozen=True)
class HexColor:
    value: str

    def __post_init__(self):
        if not self.value or not HEX_COLOR_PATTERN.match(self.value):
            raise DomainValidationError(
                f"Invalid hex color: {self.value}", field="primary_color"
            )

    def __str__(self) -> str:
        return self.value
