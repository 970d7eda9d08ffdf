"""Resolve mentioned names to stored jars and tags."""

from __future__ import annotations

import logging

from .models import MentionItem
from .models import MentionType
from .models import ParsedMentions
from .models import ResolvedMentions
from .protocol import EntityStoreProtocol

logger = logging.getLogger(__name__)


class EntityResolver:
    """Ensure every mentioned jar and tag exists, creating missing ones.

    This is where a committed "typed" row becomes a real entity: the popup
    leaves the typed name in the text, and at submit time the resolver finds
    or creates the matching entity in the store.

    Usage:
        resolver = EntityResolver(store)
        resolved = resolver.resolve(parse_mentions(text))
    """

    def __init__(self, store: EntityStoreProtocol) -> None:
        """Initialize resolver.

        Args:
            store: Entity store (find by name, create by name).
        """
        self.store = store

    def resolve(self, parsed: ParsedMentions) -> ResolvedMentions:
        """Resolve all names in ``parsed``.

        Args:
            parsed: Output of parse_mentions / extract_mentions.

        Returns:
            ResolvedMentions with entities in the order the names were parsed.
        """
        result = ResolvedMentions(priority=parsed.priority)
        for name in parsed.jars:
            result.jars.append(self._ensure(MentionType.JAR, name, result.created))
        for name in parsed.tags:
            result.tags.append(self._ensure(MentionType.TAG, name, result.created))
        return result

    def ensure(self, mention_type: MentionType, name: str) -> MentionItem:
        """Find or create a single entity."""
        return self._ensure(mention_type, name, [])

    def _ensure(self, mention_type: MentionType, name: str, created: list[MentionItem]) -> MentionItem:
        if mention_type is MentionType.PRIORITY:
            raise ValueError("Priorities are a fixed catalog and cannot be stored as entities")

        existing = self.store.find(mention_type, name)
        if existing is not None:
            return existing

        item = self.store.create(mention_type, name)
        logger.debug(f"Created {mention_type.value} '{name}' (id={item.id})")
        created.append(item)
        return item
