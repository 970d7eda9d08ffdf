"""Data models for @jar, #tag and !priority mentions."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Protocol


class MentionType(str, Enum):
    """Kinds of mention tokens. Each kind owns exactly one sigil."""

    JAR = "jar"
    TAG = "tag"
    PRIORITY = "priority"

    @property
    def sigil(self) -> str:
        return SIGILS[self]


SIGILS: dict[MentionType, str] = {
    MentionType.JAR: "@",
    MentionType.TAG: "#",
    MentionType.PRIORITY: "!",
}

SIGIL_TYPES: dict[str, MentionType] = {sigil: mention_type for mention_type, sigil in SIGILS.items()}


class PriorityCode(str, Enum):
    """Priority codes, ordered from lowest to highest urgency."""

    VERY_LOW = "VERY_LOW"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    VERY_HIGH = "VERY_HIGH"


@dataclass(frozen=True)
class ActiveMention:
    """The in-progress mention token at the caret.

    ``start`` is the offset of the sigil, ``end`` is the caret offset and
    ``query`` is everything strictly between them. ``start == end - 1`` with
    an empty query means the user has just typed the sigil.
    """

    type: MentionType
    query: str
    start: int
    end: int


class TextSpan(Protocol):
    """Anything with a [start, end) character range."""

    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...


@dataclass(frozen=True)
class MentionPosition:
    """Popup anchor supplied by the host (screen rows/pixels, host's choice)."""

    top: int
    left: int


@dataclass(frozen=True)
class MentionItem:
    """A selectable jar or tag from an externally owned catalog."""

    id: str
    name: str
    description: str | None = None


@dataclass(frozen=True)
class PriorityOption:
    """One entry of the fixed priority catalog."""

    code: PriorityCode
    token: str
    label: str
    description: str


# Row variants. The set is closed: every consumer dispatches over exactly
# TypedRow, SuggestionRow and PriorityRow.


@dataclass(frozen=True)
class TypedRow:
    """Accept the literally typed query as a new jar or tag."""

    label: str
    description: str
    kind: str = field(default="typed", init=False)


@dataclass(frozen=True)
class SuggestionRow:
    """A catalog item matching the query."""

    item: MentionItem
    kind: str = field(default="suggestion", init=False)


@dataclass(frozen=True)
class PriorityRow:
    """A priority option matching the query."""

    option: PriorityOption
    kind: str = field(default="priority", init=False)


MentionRow = TypedRow | SuggestionRow | PriorityRow


@dataclass(frozen=True)
class KeyResult:
    """Outcome of feeding one key event to the navigator."""

    handled: bool
    selected_row: MentionRow | None = None


@dataclass(frozen=True)
class EditResult:
    """New text and caret after splicing a replacement in."""

    text: str
    caret: int


@dataclass
class ParsedMentions:
    """Entities extracted from committed text."""

    jars: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    priority: PriorityCode | None = None

    @property
    def empty(self) -> bool:
        """True if no jar, tag or priority was found."""
        return not self.jars and not self.tags and self.priority is None


@dataclass
class TodoDraft:
    """A todo ready for persistence: clean title plus linked entity names."""

    title: str
    jars: list[str]
    tags: list[str]
    priority: PriorityCode = PriorityCode.MEDIUM


@dataclass
class ResolvedMentions:
    """Parsed mentions with every name resolved to a stored entity."""

    jars: list[MentionItem] = field(default_factory=list)
    tags: list[MentionItem] = field(default_factory=list)
    priority: PriorityCode | None = None
    created: list[MentionItem] = field(default_factory=list)  # Entities that did not exist before
