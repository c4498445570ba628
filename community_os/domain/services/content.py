"""
Rich-text helpers.

Post and comment bodies arrive as editor HTML. Length rules apply to the
visible text, and mentions are embedded either as `@[user-id:Name]` markup
or as `data-mention-id="user-id"` attributes on mention spans.
"""

import html
import re

_TAG_PATTERN = re.compile(r"<[^>]*>")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_MARKUP_MENTION = re.compile(r"@\[([^:\]]+):[^\]]+\]")
_ATTRIBUTE_MENTION = re.compile(r'data-mention-id="([^"]+)"')


def strip_html(content: str) -> str:
    """Return the visible text of an HTML fragment, whitespace collapsed."""
    if not content:
        return ""
    text = html.unescape(_TAG_PATTERN.sub(" ", content))
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def extract_mention_ids(content: str) -> list[str]:
    """Return mentioned user ids in order of first appearance, without duplicates."""
    if not content:
        return []
    found: list[str] = []
    for match in _MARKUP_MENTION.finditer(content):
        found.append(match.group(1).strip())
    for match in _ATTRIBUTE_MENTION.finditer(content):
        found.append(match.group(1).strip())
    return list(dict.fromkeys(mention for mention in found if mention))


def make_snippet(content: str, query: str = "", length: int = 160) -> str:
    """Plain-text excerpt centred on the first occurrence of query."""
    text = strip_html(content)
    if len(text) <= length:
        return text
    start = 0
    if query:
        position = text.lower().find(query.lower())
        if position > length // 2:
            start = position - length // 2
    excerpt = text[start : start + length].strip()
    prefix = "..." if start > 0 else ""
    suffix = "..." if start + length < len(text) else ""
    return f"{prefix}{excerpt}{suffix}"
