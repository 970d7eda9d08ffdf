"""
Message-passing front end for the mention navigator.
Hosts send messages in; the session answers with commit/close instructions.
"""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from .. import events
from .models import ActiveMention
from .models import MentionPosition
from .models import MentionRow
from .models import TypedRow
from .navigation import MentionNavigator
from .protocol import PositionProvider
from .replacement import build_replacement
from .replacement import row_value
from .tokenizer import detect

logger = logging.getLogger(__name__)

Scheduler = Callable[[Callable[[], None]], Any]


# Messages (host -> session)


@dataclass(frozen=True)
class TextChanged:
    """Text or selection changed; the session runs detection itself."""

    text: str
    caret: int
    handle: Any = None
    event: str = field(default=events.TEXT_CHANGED, init=False)


@dataclass(frozen=True)
class MentionChanged:
    """The host ran detection and reports the result (editor hosts)."""

    mention: ActiveMention | None
    position: MentionPosition | None = None
    event: str = field(default=events.MENTION_CHANGED, init=False)


@dataclass(frozen=True)
class PositionChanged:
    position: MentionPosition | None
    event: str = field(default=events.POSITION_CHANGED, init=False)


@dataclass(frozen=True)
class KeyEvent:
    key: str
    shift: bool = False
    event: str = field(default=events.KEY_EVENT, init=False)


@dataclass(frozen=True)
class RowClicked:
    index: int
    event: str = field(default=events.ROW_CLICKED, init=False)


@dataclass(frozen=True)
class ClickOutside:
    event: str = field(default=events.CLICK_OUTSIDE, init=False)


HostMessage = TextChanged | MentionChanged | PositionChanged | KeyEvent | RowClicked | ClickOutside


# Instructions (session -> host)


@dataclass(frozen=True)
class CommitInstruction:
    """Replace ``[start, end)`` with ``replacement`` and put the caret at ``caret``."""

    replacement: str
    start: int
    end: int
    caret: int
    row: MentionRow
    event: str = field(default=events.MENTION_COMMIT, init=False)


@dataclass(frozen=True)
class CloseInstruction:
    """Hide the popup. ``row`` is set when a typed row was accepted as-is."""

    reason: str
    row: MentionRow | None = None
    event: str = field(default=events.MENTION_CLOSE, init=False)


Instruction = CommitInstruction | CloseInstruction


@dataclass
class SessionReply:
    """Answer to one host message."""

    handled: bool = False
    instructions: list[Instruction] = field(default_factory=list)


@dataclass
class InstructionHandler:
    """Registered instruction listener."""

    handler: Callable[[Instruction], None]
    name: str | None = None


def _call_now(callback: Callable[[], None]) -> None:
    callback()


class MentionSession:
    """
    Drives a MentionNavigator from host messages.

    Detection and position sampling after a text change go through
    ``scheduler`` so the host can run them after its next layout pass.
    Instructions are returned from ``send`` and also delivered to listeners
    registered with ``register``.
    """

    def __init__(
        self,
        navigator: MentionNavigator,
        position_provider: PositionProvider | None = None,
        scheduler: Scheduler | None = None,
    ):
        self.navigator = navigator
        self.position_provider = position_provider
        self.scheduler = scheduler or _call_now
        self._handlers: dict[str, list[InstructionHandler]] = defaultdict(list)

    def register(
        self,
        event: str,
        handler: Callable[[Instruction], None],
        name: str | None = None,
    ) -> Callable[[], None]:
        """
        Register a listener for an instruction.

        Args:
            event: Instruction name (events.MENTION_COMMIT or events.MENTION_CLOSE)
            handler: Called with the instruction
            name: Optional handler name for debugging

        Returns:
            Unregister function
        """
        if event not in events.INSTRUCTIONS:
            raise ValueError(f"Unknown instruction '{event}'. Expected one of: {events.INSTRUCTIONS}")

        instruction_handler = InstructionHandler(handler=handler, name=name or handler.__name__)
        self._handlers[event].append(instruction_handler)
        logger.debug(f"Registered '{instruction_handler.name}' for '{event}'")

        def unregister():
            """Remove this handler."""
            if instruction_handler in self._handlers[event]:
                self._handlers[event].remove(instruction_handler)
                logger.debug(f"Unregistered '{instruction_handler.name}' from '{event}'")

        return unregister

    on = register

    def send(self, message: HostMessage) -> SessionReply:
        """Process one host message."""
        if isinstance(message, TextChanged):
            self.scheduler(lambda: self._refresh(message.text, message.caret, message.handle))
            return SessionReply()

        if isinstance(message, MentionChanged):
            self.navigator.set_active_mention(message.mention)
            self.navigator.position = message.position if message.mention else None
            return SessionReply()

        if isinstance(message, PositionChanged):
            self.navigator.position = message.position
            return SessionReply()

        if isinstance(message, KeyEvent):
            result = self.navigator.on_key_down(message.key, message.shift)
            if not result.handled:
                return SessionReply()
            if result.selected_row is not None:
                return self._reply(self._commit(result.selected_row))
            if not self.navigator.is_open:
                # Escape already closed the navigator
                return self._reply(CloseInstruction(reason="escape"))
            return SessionReply(handled=True)

        if isinstance(message, RowClicked):
            rows = self.navigator.rows
            if not self.navigator.is_open or not 0 <= message.index < len(rows):
                return SessionReply()
            return self._reply(self._commit(rows[message.index]))

        if isinstance(message, ClickOutside):
            if not self.navigator.is_open:
                return SessionReply()
            self.navigator.close()
            return self._reply(CloseInstruction(reason="click-outside"))

        raise TypeError(f"Unknown host message: {message!r}")

    def _refresh(self, text: str, caret: int, handle: Any) -> None:
        mention = detect(text, caret)
        self.navigator.set_active_mention(mention)
        if mention is None or self.position_provider is None:
            self.navigator.position = None
            return
        self.navigator.position = self.position_provider(handle, caret)

    def _commit(self, row: MentionRow) -> Instruction:
        mention = self.navigator.active_mention
        self.navigator.close()
        if mention is None:
            return CloseInstruction(reason="no-mention")
        if isinstance(row, TypedRow):
            return CloseInstruction(reason="typed", row=row)

        replacement = build_replacement(mention.type, row_value(row))
        logger.debug(f"Commit {replacement!r} over [{mention.start}, {mention.end})")
        return CommitInstruction(
            replacement=replacement,
            start=mention.start,
            end=mention.end,
            caret=mention.start + len(replacement),
            row=row,
        )

    def _reply(self, instruction: Instruction) -> SessionReply:
        for instruction_handler in list(self._handlers[instruction.event]):
            instruction_handler.handler(instruction)
        return SessionReply(handled=True, instructions=[instruction])
