"""@jar, #tag and !priority mention detection, suggestion and commit."""

from .accumulator import MentionAccumulator
from .accumulator import build_todo_draft
from .accumulator import extract_mentions
from .filter import DEFAULT_MAX_SUGGESTIONS
from .filter import build_rows
from .filter import without_priority_rows
from .models import SIGILS
from .models import ActiveMention
from .models import EditResult
from .models import KeyResult
from .models import MentionItem
from .models import MentionPosition
from .models import MentionRow
from .models import MentionType
from .models import ParsedMentions
from .models import PriorityCode
from .models import PriorityOption
from .models import PriorityRow
from .models import ResolvedMentions
from .models import SuggestionRow
from .models import TodoDraft
from .models import TypedRow
from .navigation import MentionNavigator
from .parser import parse_mentions
from .parser import strip_priority_tokens
from .priorities import PRIORITY_LABEL
from .priorities import PRIORITY_OPTIONS
from .priorities import PRIORITY_TOKEN_MAP
from .priorities import lookup_priority
from .priorities import priority_label
from .protocol import EntityStoreProtocol
from .protocol import PositionProvider
from .replacement import apply_replacement
from .replacement import build_replacement
from .replacement import commit_row
from .replacement import row_value
from .resolver import EntityResolver
from .session import ClickOutside
from .session import CloseInstruction
from .session import CommitInstruction
from .session import KeyEvent
from .session import MentionChanged
from .session import MentionSession
from .session import PositionChanged
from .session import RowClicked
from .session import SessionReply
from .session import TextChanged
from .tokenizer import detect

__all__ = [
    "detect",
    "build_rows",
    "without_priority_rows",
    "build_replacement",
    "apply_replacement",
    "commit_row",
    "row_value",
    "parse_mentions",
    "strip_priority_tokens",
    "extract_mentions",
    "build_todo_draft",
    "lookup_priority",
    "priority_label",
    "MentionAccumulator",
    "MentionNavigator",
    "MentionSession",
    "EntityResolver",
    "EntityStoreProtocol",
    "PositionProvider",
    "DEFAULT_MAX_SUGGESTIONS",
    "PRIORITY_LABEL",
    "PRIORITY_OPTIONS",
    "PRIORITY_TOKEN_MAP",
    "SIGILS",
    "ActiveMention",
    "EditResult",
    "KeyResult",
    "MentionItem",
    "MentionPosition",
    "MentionRow",
    "MentionType",
    "ParsedMentions",
    "PriorityCode",
    "PriorityOption",
    "PriorityRow",
    "ResolvedMentions",
    "SuggestionRow",
    "TodoDraft",
    "TypedRow",
    "TextChanged",
    "MentionChanged",
    "PositionChanged",
    "KeyEvent",
    "RowClicked",
    "ClickOutside",
    "CommitInstruction",
    "CloseInstruction",
    "SessionReply",
]
