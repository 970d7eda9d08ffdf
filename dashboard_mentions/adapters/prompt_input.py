"""Plain-input mention host built on a prompt_toolkit Buffer.

Wires a Buffer to a MentionSession:
- text and cursor changes run mention detection
- Up/Down/Enter/Tab/Escape are bound only while the popup is open, so
  every other key (and shift-tab) keeps its normal meaning
- commits rewrite the buffer text and cursor
- rows are rendered as formatted text for a toolbar
"""

import logging
from collections.abc import Callable
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import FileHistory
from prompt_toolkit.history import History
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.key_binding import KeyBindings

from .. import events
from ..console import row_detail
from ..console import row_label
from ..mentions.models import MentionPosition
from ..mentions.navigation import KEY_ARROW_DOWN
from ..mentions.navigation import KEY_ARROW_UP
from ..mentions.navigation import KEY_ENTER
from ..mentions.navigation import KEY_ESCAPE
from ..mentions.navigation import KEY_TAB
from ..mentions.navigation import MentionNavigator
from ..mentions.replacement import apply_replacement
from ..mentions.session import CommitInstruction
from ..mentions.session import KeyEvent
from ..mentions.session import MentionSession
from ..mentions.session import Scheduler
from ..mentions.session import TextChanged

logger = logging.getLogger(__name__)


def document_position(handle: Document, offset: int) -> MentionPosition | None:
    """Anchor the popup one line below the caret, in terminal rows/columns."""
    if handle is None:
        return None
    row, col = handle.translate_index_to_position(offset)
    return MentionPosition(top=row + 1, left=col)


class PromptMentionInput:
    """Mention support for a single prompt_toolkit Buffer.

    Usage:
        mention_input = PromptMentionInput(MentionNavigator(jars=jars, tags=tags))
        session = create_prompt_session(mention_input)
        text = session.prompt()
    """

    def __init__(
        self,
        navigator: MentionNavigator,
        buffer: Buffer | None = None,
        scheduler: Scheduler | None = None,
        on_commit: Callable[[CommitInstruction], None] | None = None,
    ):
        self.navigator = navigator
        self.session = MentionSession(navigator, position_provider=document_position, scheduler=scheduler)
        self.session.register(events.MENTION_COMMIT, self._apply_commit, name="prompt-input-commit")
        if on_commit:
            self.session.register(events.MENTION_COMMIT, on_commit)
        self.buffer: Buffer | None = None
        if buffer is not None:
            self.attach(buffer)

    def attach(self, buffer: Buffer) -> None:
        """Start tracking ``buffer``."""
        if self.buffer is buffer:
            return
        if self.buffer is not None:
            self.detach()
        self.buffer = buffer
        buffer.on_text_changed += self._on_buffer_changed
        buffer.on_cursor_position_changed += self._on_buffer_changed

    def detach(self) -> None:
        """Stop tracking the current buffer and close the popup."""
        if self.buffer is None:
            return
        self.buffer.on_text_changed -= self._on_buffer_changed
        self.buffer.on_cursor_position_changed -= self._on_buffer_changed
        self.buffer = None
        self.navigator.close()

    def press(self, key: str, shift: bool = False) -> bool:
        """Feed a key to the session. Returns True if the key was consumed."""
        return self.session.send(KeyEvent(key=key, shift=shift)).handled

    def key_bindings(self) -> KeyBindings:
        """Bindings that are active only while the popup is open."""
        kb = KeyBindings()
        is_open = Condition(lambda: self.navigator.is_open)

        @kb.add("down", filter=is_open)
        def next_row(event):
            """Highlight the next row."""
            self.press(KEY_ARROW_DOWN)

        @kb.add("up", filter=is_open)
        def previous_row(event):
            """Highlight the previous row."""
            self.press(KEY_ARROW_UP)

        @kb.add("enter", filter=is_open)
        def commit_enter(event):
            """Commit the highlighted row."""
            self.press(KEY_ENTER)

        @kb.add("tab", filter=is_open)
        def commit_tab(event):
            """Commit the highlighted row."""
            self.press(KEY_TAB)

        @kb.add("escape", filter=is_open, eager=True)
        def dismiss(event):
            """Close the popup without committing."""
            self.press(KEY_ESCAPE)

        return kb

    def toolbar(self) -> FormattedText:
        """Popup rows as formatted text (empty when closed)."""
        if not self.navigator.is_open:
            return FormattedText([])

        mention = self.navigator.active_mention
        mention_type = mention.type if mention else None
        fragments: list[tuple[str, str]] = []
        for index, row in enumerate(self.navigator.rows):
            if index:
                fragments.append(("", "\n"))
            active = index == self.navigator.highlighted_index
            fragments.append(("reverse bold" if active else "bold", f" {row_label(row, mention_type)} "))
            detail = row_detail(row)
            if detail:
                fragments.append(("italic", f" {detail}"))
        return FormattedText(fragments)

    def _on_buffer_changed(self, buffer: Buffer) -> None:
        self.session.send(TextChanged(text=buffer.text, caret=buffer.cursor_position, handle=buffer.document))

    def _apply_commit(self, instruction: CommitInstruction) -> None:
        if self.buffer is None:
            return
        edit = apply_replacement(self.buffer.text, instruction, instruction.replacement)
        self.buffer.document = Document(edit.text, edit.caret)


def create_prompt_session(
    mention_input: PromptMentionInput,
    history_path: Path | None = None,
) -> PromptSession:
    """Create a PromptSession with mention support on its default buffer.

    Falls back to in-memory history when the history file can't be used.
    """
    history: History
    if history_path is None:
        history = InMemoryHistory()
    else:
        try:
            history_path.parent.mkdir(parents=True, exist_ok=True)
            history = FileHistory(str(history_path))
        except OSError as e:
            history = InMemoryHistory()
            logger.warning(f"Could not load history from {history_path}: {e}. Using in-memory history for this session.")

    session = PromptSession(
        message=HTML("<ansigreen><b>></b></ansigreen> "),
        history=history,
        key_bindings=mention_input.key_bindings(),
        bottom_toolbar=mention_input.toolbar,
    )
    mention_input.attach(session.default_buffer)
    return session
