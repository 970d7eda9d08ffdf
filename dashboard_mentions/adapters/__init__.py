"""Host adapters that connect text surfaces to the mention session."""

from .block_editor import BlockDocument
from .block_editor import BlockEditorHost
from .block_editor import block_position
from .prompt_input import PromptMentionInput
from .prompt_input import create_prompt_session
from .prompt_input import document_position

__all__ = [
    "BlockDocument",
    "BlockEditorHost",
    "block_position",
    "PromptMentionInput",
    "create_prompt_session",
    "document_position",
]
