"""Shared Rich console and row rendering for CLI output."""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .mentions.models import MentionRow
from .mentions.models import MentionType
from .mentions.models import PriorityRow
from .mentions.models import SuggestionRow
from .mentions.models import TypedRow


def row_label(row: MentionRow, mention_type: MentionType | None = None) -> str:
    """Main text of a popup row."""
    if isinstance(row, TypedRow):
        return row.label
    if isinstance(row, SuggestionRow):
        sigil = mention_type.sigil if mention_type in (MentionType.JAR, MentionType.TAG) else ""
        return f"{sigil}{row.item.name}"
    if isinstance(row, PriorityRow):
        return f"!{row.option.token}"
    raise TypeError(f"Unknown mention row: {row!r}")


def row_detail(row: MentionRow) -> str:
    """Secondary text of a popup row."""
    if isinstance(row, TypedRow):
        return row.description
    if isinstance(row, SuggestionRow):
        return row.item.description or ""
    if isinstance(row, PriorityRow):
        return f"{row.option.label} - {row.option.description}"
    raise TypeError(f"Unknown mention row: {row!r}")


def rows_table(
    rows: Sequence[MentionRow],
    highlighted_index: int = -1,
    mention_type: MentionType | None = None,
) -> Table:
    """Render popup rows as a table, marking the highlighted one."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Marker", width=1)
    table.add_column("Row")
    table.add_column("Detail", style="dim")

    for index, row in enumerate(rows):
        active = index == highlighted_index
        label = Text(row_label(row, mention_type), style="bold magenta" if active else "")
        table.add_row(">" if active else "", label, row_detail(row))

    return table


console = Console()

__all__ = ["console", "row_label", "row_detail", "rows_table"]
