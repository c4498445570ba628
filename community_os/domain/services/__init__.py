"""
DOMAIN SERVICES - Pure helpers shared by entities and use cases (no I/O).
"""

from community_os.domain.services.content import (
    extract_mention_ids,
    make_snippet,
    strip_html,
)

__all__ = ["extract_mention_ids", "make_snippet", "strip_html"]
