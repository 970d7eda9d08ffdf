"""Dashboard Mentions CLI - inspect and try out @jar, #tag and !priority mentions."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
import yaml
from rich.table import Table
from rich.text import Text

from .catalog import Catalog
from .catalog import load_catalog
from .catalog import write_catalog
from .console import console
from .console import rows_table
from .exceptions import MentionError
from .mentions.accumulator import build_todo_draft
from .mentions.accumulator import extract_mentions
from .mentions.models import ParsedMentions
from .mentions.models import ResolvedMentions
from .mentions.models import TodoDraft
from .mentions.navigation import MentionNavigator
from .mentions.parser import strip_priority_tokens
from .mentions.priorities import priority_label
from .mentions.resolver import EntityResolver
from .mentions.tokenizer import detect
from .settings import AppSettings
from .settings import SCOPES
from .settings import SETTING_KEYS
from .settings import MentionSettings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}")
    sys.exit(1)


def _load_settings() -> MentionSettings:
    try:
        return AppSettings().get_mention_settings()
    except MentionError as e:
        _fail(str(e))


def _resolve_catalog(catalog_path: Path | None, settings: MentionSettings) -> tuple[Catalog, Path | None]:
    path = catalog_path or settings.catalog_path
    if path is None:
        return Catalog(), None
    try:
        return load_catalog(path), path
    except MentionError as e:
        _fail(str(e))


def _print_parsed(parsed: ParsedMentions) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="dim")
    table.add_column("Value")
    table.add_row("Jars", ", ".join(f"@{name}" for name in parsed.jars) or "-")
    table.add_row("Tags", ", ".join(f"#{name}" for name in parsed.tags) or "-")
    table.add_row("Priority", priority_label(parsed.priority) if parsed.priority else "-")
    console.print(table)


def _print_draft(draft: TodoDraft, resolved: ResolvedMentions | None = None) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="dim")
    table.add_column("Value")
    table.add_row("Title", Text(draft.title, style="bold"))
    table.add_row("Priority", priority_label(draft.priority))
    table.add_row("Jars", ", ".join(f"@{name}" for name in draft.jars) or "-")
    table.add_row("Tags", ", ".join(f"#{name}" for name in draft.tags) or "-")
    if resolved is not None and resolved.created:
        table.add_row("Created", ", ".join(item.name for item in resolved.created))
    console.print(table)


@click.group()
@click.version_option(package_name="dashboard-mentions", prog_name="dashboard-mentions")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Detect, suggest and parse @jar, #tag and !priority mentions."""
    _configure_logging(verbose)


@cli.command(name="detect")
@click.argument("text")
@click.option("--caret", type=int, default=None, help="Caret offset (defaults to end of text)")
def detect_cmd(text: str, caret: int | None):
    """Show the mention being typed at the caret."""
    mention = detect(text, len(text) if caret is None else caret)
    if mention is None:
        console.print("[dim]No active mention[/dim]")
        return
    console.print(
        f"[bold]{mention.type.value}[/bold] query=[cyan]{mention.query!r}[/cyan] start={mention.start} end={mention.end}"
    )


@cli.command()
@click.argument("text")
@click.option("--caret", type=int, default=None, help="Caret offset (defaults to end of text)")
@click.option("--catalog", "catalog_path", type=click.Path(path_type=Path), default=None, help="Catalog YAML file")
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Maximum catalog suggestions")
@click.option("--no-priority", is_flag=True, help="Hide priority suggestions")
@click.option("--down", type=click.IntRange(min=0), default=0, help="Press ArrowDown this many times")
def suggest(
    text: str,
    caret: int | None,
    catalog_path: Path | None,
    limit: int | None,
    no_priority: bool,
    down: int,
):
    """Show popup rows for the mention at the caret."""
    settings = _load_settings()
    catalog, _ = _resolve_catalog(catalog_path, settings)

    navigator = MentionNavigator(
        jars=catalog.jars,
        tags=catalog.tags,
        max_suggestions=settings.max_suggestions if limit is None else limit,
        enable_priority=settings.enable_priority and not no_priority,
    )
    navigator.set_active_mention(detect(text, len(text) if caret is None else caret))

    if navigator.active_mention is None:
        console.print("[dim]No active mention[/dim]")
        return
    if not navigator.is_open:
        console.print("[dim]No suggestions[/dim]")
        return

    for _ in range(down):
        navigator.on_key_down("ArrowDown")

    console.print(rows_table(navigator.rows, navigator.highlighted_index, navigator.active_mention.type))


@cli.command()
@click.argument("texts", nargs=-1, required=True)
@click.option("--catalog", "catalog_path", type=click.Path(path_type=Path), default=None, help="Catalog YAML file")
@click.option("--write", is_flag=True, help="Save newly created jars/tags back to the catalog file")
def parse(texts: tuple[str, ...], catalog_path: Path | None, write: bool):
    """Extract jars, tags and priority from one or more text fields."""
    parsed = extract_mentions(texts)
    _print_parsed(parsed)

    if catalog_path is None and not write:
        return

    settings = _load_settings()
    catalog, path = _resolve_catalog(catalog_path, settings)
    if write and path is None:
        _fail("--write needs a catalog file (pass --catalog or set mentions.catalog)")
    resolved = EntityResolver(catalog).resolve(parsed)
    if resolved.created:
        console.print(f"[yellow]New:[/yellow] {', '.join(item.name for item in resolved.created)}")
    if write and resolved.created:
        write_catalog(path, catalog)
        console.print(f"[green]✓[/green] Saved {path}")


@cli.command()
@click.argument("text")
def strip(text: str):
    """Print TEXT with priority tokens removed."""
    click.echo(strip_priority_tokens(text))


@cli.command()
@click.argument("texts", nargs=-1, required=True)
def todo(texts: tuple[str, ...]):
    """Build a todo draft from a title (and optional extra fields)."""
    title, *extra = texts
    _print_draft(build_todo_draft(title, *extra))


@cli.command()
@click.option("--catalog", "catalog_path", type=click.Path(path_type=Path), default=None, help="Catalog YAML file")
def repl(catalog_path: Path | None):
    """Type todos interactively with mention suggestions."""
    from .adapters.prompt_input import PromptMentionInput
    from .adapters.prompt_input import create_prompt_session

    settings = _load_settings()
    catalog, _ = _resolve_catalog(catalog_path, settings)
    navigator = MentionNavigator(
        jars=catalog.jars,
        tags=catalog.tags,
        max_suggestions=settings.max_suggestions,
        enable_priority=settings.enable_priority,
    )
    mention_input = PromptMentionInput(navigator)
    session = create_prompt_session(mention_input, settings.history_path)
    resolver = EntityResolver(catalog)

    console.print("[dim]Type a todo. @jar #tag !priority. Ctrl-D to exit.[/dim]")
    while True:
        try:
            line = session.prompt()
        except (EOFError, KeyboardInterrupt):
            break
        if not line.strip():
            continue
        draft = build_todo_draft(line)
        resolved = resolver.resolve(extract_mentions([line]))
        navigator.set_catalogs(catalog.jars, catalog.tags)
        _print_draft(draft, resolved)


@cli.command()
@click.argument("key", type=click.Choice(SETTING_KEYS))
@click.argument("value")
@click.option(
    "--scope",
    type=click.Choice(SCOPES),
    default="global",
    show_default=True,
    help="Settings file to write",
)
def config(key: str, value: str, scope: str):
    """Set a mentions setting (e.g. max_suggestions 8, enable_priority false)."""
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        parsed = value
    if key in ("catalog", "history"):
        parsed = value

    app_settings = AppSettings()
    try:
        app_settings.set_mention_setting(key, parsed, scope=scope)
    except MentionError as e:
        _fail(str(e))
    console.print(f"[green]✓[/green] Set mentions.{key} = {parsed!r} ({scope})")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
