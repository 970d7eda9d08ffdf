"""Splicing committed mentions back into text."""

from __future__ import annotations

from .models import ActiveMention
from .models import EditResult
from .models import MentionRow
from .models import MentionType
from .models import PriorityRow
from .models import SuggestionRow
from .models import TextSpan
from .models import TypedRow


def build_replacement(mention_type: MentionType, value: str) -> str:
    """Sigil + value + one trailing space."""
    return f"{mention_type.sigil}{value} "


def apply_replacement(text: str, span: TextSpan, replacement: str) -> EditResult:
    """Replace ``text[span.start:span.end]`` with ``replacement``.

    The caret lands right after the replacement (after its trailing space).
    """
    new_text = text[: span.start] + replacement + text[span.end :]
    return EditResult(text=new_text, caret=span.start + len(replacement))


def row_value(row: MentionRow) -> str:
    """The bare value a row stands for: typed query, item name or priority token."""
    if isinstance(row, TypedRow):
        return row.label[1:]
    if isinstance(row, SuggestionRow):
        return row.item.name
    if isinstance(row, PriorityRow):
        return row.option.token
    raise TypeError(f"Unknown mention row: {row!r}")


def commit_row(text: str, mention: ActiveMention, row: MentionRow) -> EditResult | None:
    """Compute the edit for committing ``row`` over ``mention``.

    Returns None for typed rows: the literally typed text stays as it is and
    the name is picked up later by the submit-time parse.
    """
    if isinstance(row, TypedRow):
        return None
    replacement = build_replacement(mention.type, row_value(row))
    return apply_replacement(text, mention, replacement)
