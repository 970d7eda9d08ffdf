"""Suggestion row building for the mention popup."""

from __future__ import annotations

from collections.abc import Sequence

from .models import ActiveMention
from .models import MentionItem
from .models import MentionRow
from .models import MentionType
from .models import PriorityRow
from .models import SuggestionRow
from .models import TypedRow
from .priorities import PRIORITY_OPTIONS

DEFAULT_MAX_SUGGESTIONS = 5

_TYPED_DESCRIPTIONS = {
    MentionType.JAR: "Use this as a new jar",
    MentionType.TAG: "Use this as a new tag",
}


def build_rows(
    mention: ActiveMention | None,
    jars: Sequence[MentionItem],
    tags: Sequence[MentionItem],
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> list[MentionRow]:
    """Build the popup rows for an active mention.

    Priority mentions list the fixed priority catalog, filtered by label
    (substring) or token (prefix). Jar and tag mentions list catalog items
    whose name starts with the query, capped at ``max_suggestions`` and kept
    in catalog order, preceded by a single "typed" row when the query is
    non-empty.

    Args:
        mention: Active mention, or None.
        jars: Jar catalog snapshot.
        tags: Tag catalog snapshot.
        max_suggestions: Cap on suggestion rows (the typed row is not counted).

    Returns:
        Rows in display order. Empty when there is no mention or nothing matches.
    """
    if mention is None:
        return []

    query = mention.query.lower()

    if mention.type is MentionType.PRIORITY:
        options = PRIORITY_OPTIONS
        if query:
            options = tuple(
                opt for opt in options if query in opt.label.lower() or opt.token.lower().startswith(query)
            )
        return [PriorityRow(option=opt) for opt in options]

    catalog = jars if mention.type is MentionType.JAR else tags
    matches = [item for item in catalog if item.name.lower().startswith(query)]
    matches = matches[: max(0, max_suggestions)]

    rows: list[MentionRow] = []
    if query:
        rows.append(
            TypedRow(
                label=f"{mention.type.sigil}{mention.query}",
                description=_TYPED_DESCRIPTIONS[mention.type],
            )
        )
    rows.extend(SuggestionRow(item=item) for item in matches)
    return rows


def without_priority_rows(rows: Sequence[MentionRow]) -> list[MentionRow]:
    """Drop priority rows, for hosts that do not offer priorities."""
    return [row for row in rows if not isinstance(row, PriorityRow)]
