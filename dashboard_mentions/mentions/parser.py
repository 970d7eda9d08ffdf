"""@jar, #tag and !priority extraction from committed text."""

from __future__ import annotations

import re

from .models import ParsedMentions
from .priorities import lookup_priority

JAR_PATTERN = re.compile(r"@([a-zA-Z0-9_-]+)")
TAG_PATTERN = re.compile(r"#([a-zA-Z0-9_-]+)")
PRIORITY_PATTERN = re.compile(r"!([a-zA-Z-]+)")

_WHITESPACE_RUN = re.compile(r"\s+")


def parse_mentions(text: str) -> ParsedMentions:
    """Extract jars, tags and priority from text.

    Finds patterns like:
    - @groceries
    - #urgent
    - !high, !h, !very-high

    Names are unique per kind, in first-seen order. Only the first priority
    token counts; an unknown alias leaves priority unset.

    Args:
        text: Text to extract mentions from.

    Returns:
        ParsedMentions with jar names, tag names (sigils excluded) and priority.
    """
    jars = _unique(JAR_PATTERN.findall(text))
    tags = _unique(TAG_PATTERN.findall(text))

    priority = None
    match = PRIORITY_PATTERN.search(text)
    if match:
        priority = lookup_priority(match.group(1))

    return ParsedMentions(jars=jars, tags=tags, priority=priority)


def strip_priority_tokens(text: str) -> str:
    """Remove every !token, collapse whitespace runs and trim.

    Example:
        >>> strip_priority_tokens("call mom !high today")
        'call mom today'
    """
    text = PRIORITY_PATTERN.sub("", text)
    return _WHITESPACE_RUN.sub(" ", text).strip()


def _unique(names: list[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result
