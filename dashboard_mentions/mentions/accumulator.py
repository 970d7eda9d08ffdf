"""Mention accumulation across several text fields."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import ParsedMentions
from .models import PriorityCode
from .models import TodoDraft
from .parser import parse_mentions
from .parser import strip_priority_tokens

logger = logging.getLogger(__name__)


class MentionAccumulator:
    """Merge parsed mentions from several fields (title, body, ...).

    Jar and tag names are deduplicated in first-seen order across all fields.
    When more than one field carries a priority, the last one added wins.
    """

    def __init__(self) -> None:
        """Initialize accumulator."""
        self._jars: dict[str, None] = {}
        self._tags: dict[str, None] = {}
        self._priority: PriorityCode | None = None

    def add_text(self, text: str | None) -> bool:
        """Parse one field and merge its mentions.

        Args:
            text: Field content. None and empty strings are skipped.

        Returns:
            True if the field contributed a new jar, tag or priority.
        """
        if not text:
            return False
        return self.add_parsed(parse_mentions(text))

    def add_parsed(self, parsed: ParsedMentions) -> bool:
        """Merge an already-parsed field."""
        changed = False
        for name in parsed.jars:
            if name not in self._jars:
                self._jars[name] = None
                changed = True
        for name in parsed.tags:
            if name not in self._tags:
                self._tags[name] = None
                changed = True
        if parsed.priority is not None:
            if self._priority is not None and parsed.priority != self._priority:
                logger.debug(f"Priority {self._priority.value} overridden by {parsed.priority.value}")
            changed = changed or parsed.priority != self._priority
            self._priority = parsed.priority
        return changed

    def is_seen(self, name: str) -> bool:
        """Check if a jar or tag name has already been collected."""
        return name in self._jars or name in self._tags

    def result(self) -> ParsedMentions:
        """Snapshot of everything collected so far."""
        return ParsedMentions(jars=list(self._jars), tags=list(self._tags), priority=self._priority)


def extract_mentions(texts: Iterable[str | None]) -> ParsedMentions:
    """Union the mentions of several fields. Last field with a priority wins."""
    accumulator = MentionAccumulator()
    for text in texts:
        accumulator.add_text(text)
    return accumulator.result()


def build_todo_draft(title: str, *extra_texts: str | None) -> TodoDraft:
    """Turn raw todo input into a draft ready for persistence.

    The stored title has priority tokens stripped; jar and tag mentions stay
    in the title text and are also returned as names to link. Priority
    defaults to MEDIUM.
    """
    parsed = extract_mentions([title, *extra_texts])
    return TodoDraft(
        title=strip_priority_tokens(title),
        jars=parsed.jars,
        tags=parsed.tags,
        priority=parsed.priority or PriorityCode.MEDIUM,
    )
