"""Active mention detection at the caret."""

from __future__ import annotations

from .models import SIGIL_TYPES
from .models import ActiveMention

# Only these characters end a token. Punctuation does not.
TOKEN_SEPARATORS = (" ", "\n", "\t")


def detect(text: str, caret: int) -> ActiveMention | None:
    """Detect the mention token being typed at ``caret``.

    The token runs from just after the nearest whitespace separator before the
    caret up to the caret. It is a mention only when its first character is a
    sigil (``@``, ``#`` or ``!``).

    Args:
        text: Full plain text of the input.
        caret: Caret offset into ``text``. Clamped into ``[0, len(text)]``.

    Returns:
        The active mention, or None if the caret is not inside a mention token.

    Example:
        >>> detect("buy milk @gro", 13)
        ActiveMention(type=<MentionType.JAR: 'jar'>, query='gro', start=9, end=13)
    """
    caret = max(0, min(caret, len(text)))
    before_caret = text[:caret]

    last_separator = max(before_caret.rfind(sep) for sep in TOKEN_SEPARATORS)
    token_start = last_separator + 1
    token = before_caret[token_start:]

    if not token:
        return None

    mention_type = SIGIL_TYPES.get(token[0])
    if mention_type is None:
        return None

    return ActiveMention(type=mention_type, query=token[1:], start=token_start, end=caret)
