"""Keyboard navigation state for the mention popup."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .filter import DEFAULT_MAX_SUGGESTIONS
from .filter import build_rows
from .filter import without_priority_rows
from .models import ActiveMention
from .models import KeyResult
from .models import MentionItem
from .models import MentionPosition
from .models import MentionRow

logger = logging.getLogger(__name__)

KEY_ARROW_DOWN = "ArrowDown"
KEY_ARROW_UP = "ArrowUp"
KEY_ENTER = "Enter"
KEY_TAB = "Tab"
KEY_ESCAPE = "Escape"

COMMIT_KEYS = frozenset({KEY_ENTER, KEY_TAB})


class MentionNavigator:
    """Popup state machine: active mention, rows, highlight and open status.

    The navigator is the only writer of its state. Hosts feed it mention
    changes and key events and read ``rows``, ``highlighted_index`` and
    ``is_open`` back for rendering.

    States:
    - closed: no active mention
    - open: active mention with at least one row
    - an active mention with no rows reads as closed

    Usage:
        nav = MentionNavigator(jars=jars, tags=tags)
        nav.set_active_mention(detect(text, caret))
        result = nav.on_key_down("Enter", shift=False)
        if result.selected_row:
            edit = commit_row(text, nav.active_mention, result.selected_row)
            nav.close()
    """

    def __init__(
        self,
        jars: Sequence[MentionItem] = (),
        tags: Sequence[MentionItem] = (),
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        enable_priority: bool = True,
    ) -> None:
        self.max_suggestions = max_suggestions
        self.enable_priority = enable_priority
        self._jars: Sequence[MentionItem] = jars
        self._tags: Sequence[MentionItem] = tags
        self._active_mention: ActiveMention | None = None
        self._rows: list[MentionRow] = []
        self._highlighted_index = -1
        self.position: MentionPosition | None = None

    @property
    def active_mention(self) -> ActiveMention | None:
        return self._active_mention

    @property
    def rows(self) -> tuple[MentionRow, ...]:
        return tuple(self._rows)

    @property
    def highlighted_index(self) -> int:
        return self._highlighted_index

    @property
    def is_open(self) -> bool:
        return self._active_mention is not None and len(self._rows) > 0

    @property
    def highlighted_row(self) -> MentionRow | None:
        if not self.is_open or self._highlighted_index < 0:
            return None
        return self._rows[self._highlighted_index]

    def set_catalogs(self, jars: Sequence[MentionItem], tags: Sequence[MentionItem]) -> None:
        """Swap in fresh catalog snapshots and rebuild rows for the current mention."""
        self._jars = jars
        self._tags = tags
        self._recompute()

    def set_active_mention(self, mention: ActiveMention | None) -> None:
        """Replace the active mention and rebuild rows. The highlight resets."""
        if mention != self._active_mention:
            logger.debug(f"Active mention changed: {self._active_mention} -> {mention}")
        self._active_mention = mention
        self._recompute()

    def set_highlighted_index(self, index: int) -> None:
        """Move the highlight (e.g. on hover). Out-of-range values are clamped."""
        if not self.is_open:
            self._highlighted_index = -1
            return
        self._highlighted_index = max(0, min(index, len(self._rows) - 1))

    def close(self) -> None:
        """Reset to closed: no mention, no rows, no position, no highlight."""
        if self._active_mention is not None:
            logger.debug(f"Closing mention popup for {self._active_mention}")
        self._active_mention = None
        self._rows = []
        self._highlighted_index = -1
        self.position = None

    def on_key_down(self, key: str, shift: bool = False) -> KeyResult:
        """Feed a key event.

        Args:
            key: Key name (``ArrowDown``, ``ArrowUp``, ``Enter``, ``Tab``,
                ``Escape``; anything else is ignored).
            shift: Whether shift was held.

        Returns:
            KeyResult. ``handled`` tells the host to suppress its default
            behavior; ``selected_row`` is set when the key commits a row.
        """
        if not self.is_open:
            return KeyResult(handled=False)

        count = len(self._rows)

        if key == KEY_ARROW_DOWN:
            self._highlighted_index = (self._highlighted_index + 1) % count
            return KeyResult(handled=True)

        if key == KEY_ARROW_UP:
            self._highlighted_index = (self._highlighted_index - 1 + count) % count
            return KeyResult(handled=True)

        if key in COMMIT_KEYS and not shift:
            index = self._highlighted_index if self._highlighted_index >= 0 else 0
            row = self._rows[index]
            logger.debug(f"Committing row {index} ({row.kind}) for {self._active_mention}")
            return KeyResult(handled=True, selected_row=row)

        if key == KEY_ESCAPE:
            self.close()
            return KeyResult(handled=True)

        return KeyResult(handled=False)

    def _recompute(self) -> None:
        rows = build_rows(self._active_mention, self._jars, self._tags, self.max_suggestions)
        if not self.enable_priority:
            rows = without_priority_rows(rows)
        self._rows = rows
        self._highlighted_index = 0 if self.is_open else -1
