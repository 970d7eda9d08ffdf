"""Protocols for the host-side collaborators of the mention engine."""

from __future__ import annotations

from typing import Any
from typing import Protocol
from typing import runtime_checkable

from .models import MentionItem
from .models import MentionPosition
from .models import MentionType


@runtime_checkable
class PositionProvider(Protocol):
    """Samples popup anchor coordinates from the host's layout.

    The engine never computes geometry itself. Hosts implement this against
    whatever they render into (a terminal buffer, a widget, an editor view).
    """

    def __call__(self, handle: Any, offset: int) -> MentionPosition | None:
        """Return the anchor for a text offset, or None if it cannot be sampled.

        Args:
            handle: Host-owned reference to the text surface.
            offset: Character offset (the caret).
        """
        ...


@runtime_checkable
class EntityStoreProtocol(Protocol):
    """Persistence for jars and tags, keyed by name.

    Used at submit time to make sure every mentioned name exists.
    """

    def find(self, mention_type: MentionType, name: str) -> MentionItem | None:
        """Look up an entity by exact name."""
        ...

    def create(self, mention_type: MentionType, name: str) -> MentionItem:
        """Create an entity with the given name and return it."""
        ...
