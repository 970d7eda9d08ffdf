"""Block-editor mention host.

Rich-text editors keep a tree of blocks rather than one string. This host
models the part that matters for mentions: a list of paragraph blocks whose
plain-text projection joins blocks with ``"\\n"``. Detection runs on the
projection, and commits are applied by mapping flat offsets back to
(block, column) pairs.

The host talks to the session purely through messages: it reports
MentionChanged/KeyEvent and applies the CommitInstruction it gets back.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..mentions.models import MentionPosition
from ..mentions.navigation import KEY_ENTER
from ..mentions.navigation import MentionNavigator
from ..mentions.session import ClickOutside
from ..mentions.session import CommitInstruction
from ..mentions.session import KeyEvent
from ..mentions.session import MentionChanged
from ..mentions.session import MentionSession
from ..mentions.session import RowClicked
from ..mentions.session import SessionReply
from ..mentions.tokenizer import detect

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n"


class BlockDocument:
    """Paragraph blocks with a flat caret offset into their projection."""

    def __init__(self, blocks: Iterable[str] = ("",), caret: int | None = None) -> None:
        self.blocks: list[str] = list(blocks) or [""]
        self.caret = len(self.text) if caret is None else max(0, min(caret, len(self.text)))

    @property
    def text(self) -> str:
        return BLOCK_SEPARATOR.join(self.blocks)

    def locate(self, offset: int) -> tuple[int, int]:
        """Map a flat offset to (block index, column)."""
        offset = max(0, min(offset, len(self.text)))
        for index, block in enumerate(self.blocks):
            if offset <= len(block):
                return index, offset
            offset -= len(block) + len(BLOCK_SEPARATOR)
        last = len(self.blocks) - 1
        return last, len(self.blocks[last])

    def offset_of(self, block_index: int, column: int) -> int:
        """Inverse of locate()."""
        preceding = sum(len(block) + len(BLOCK_SEPARATOR) for block in self.blocks[:block_index])
        return preceding + column

    def replace_text(self, start: int, end: int, replacement: str) -> None:
        """Replace the flat range [start, end), possibly spanning blocks.

        The caret is left right after the inserted text.
        """
        start_block, start_col = self.locate(start)
        end_block, end_col = self.locate(end)
        merged = self.blocks[start_block][:start_col] + replacement + self.blocks[end_block][end_col:]
        self.blocks[start_block : end_block + 1] = merged.split(BLOCK_SEPARATOR)
        self.caret = self.offset_of(start_block, start_col) + len(replacement)

    def insert(self, text: str) -> None:
        """Insert text at the caret. Newlines split blocks."""
        self.replace_text(self.caret, self.caret, text)


def block_position(handle: BlockDocument, offset: int) -> MentionPosition | None:
    """Anchor the popup under the caret: one row per block, one column per character."""
    if handle is None:
        return None
    block_index, column = handle.locate(offset)
    return MentionPosition(top=block_index + 1, left=column)


class BlockEditorHost:
    """Editor-side integration for a BlockDocument.

    Usage:
        host = BlockEditorHost(MentionNavigator(jars=jars, tags=tags))
        host.type("finish @wo")
        host.key("Enter")
    """

    def __init__(
        self,
        navigator: MentionNavigator,
        document: BlockDocument | None = None,
        enter_inserts_block: bool = True,
    ) -> None:
        self.navigator = navigator
        self.document = document or BlockDocument()
        self.enter_inserts_block = enter_inserts_block
        self.session = MentionSession(navigator)

    @property
    def text(self) -> str:
        return self.document.text

    def type(self, text: str) -> None:
        """Insert typed text at the caret (editor update event)."""
        self.document.insert(text)
        self._report_mention()

    def move_caret(self, offset: int) -> None:
        """Move the caret (editor selection event)."""
        self.document.caret = max(0, min(offset, len(self.document.text)))
        self._report_mention()

    def key(self, key: str, shift: bool = False) -> bool:
        """Route a key to the session first, then to editor defaults.

        Returns:
            True if the mention session consumed the key.
        """
        reply = self.session.send(KeyEvent(key=key, shift=shift))
        if reply.handled:
            self._apply(reply)
            return True

        if key == KEY_ENTER and self.enter_inserts_block:
            self.type(BLOCK_SEPARATOR)
        return False

    def click_row(self, index: int) -> bool:
        reply = self.session.send(RowClicked(index=index))
        self._apply(reply)
        return reply.handled

    def click_outside(self) -> None:
        self.session.send(ClickOutside())

    def _report_mention(self) -> None:
        mention = detect(self.document.text, self.document.caret)
        position = block_position(self.document, self.document.caret) if mention else None
        self.session.send(MentionChanged(mention=mention, position=position))

    def _apply(self, reply: SessionReply) -> None:
        for instruction in reply.instructions:
            if isinstance(instruction, CommitInstruction):
                logger.debug(f"Applying {instruction.replacement!r} at [{instruction.start}, {instruction.end})")
                self.document.replace_text(instruction.start, instruction.end, instruction.replacement)
                self._report_mention()
