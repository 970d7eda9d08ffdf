"""Jar and tag catalogs loaded from YAML files.

Catalog file format:

    jars:
      - name: groceries
        description: Weekly shopping
      - id: 3f2a
        name: growth
    tags:
      - name: urgent

``id`` defaults to the name. Names follow the mention grammar
(letters, digits, underscore, hyphen) so every entry can be mentioned.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from pathlib import Path

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import model_validator

from .exceptions import CatalogLoadError
from .exceptions import CatalogNotFoundError
from .exceptions import CatalogValidationError
from .mentions.models import MentionItem
from .mentions.models import MentionType

logger = logging.getLogger(__name__)

NAME_PATTERN = r"^[A-Za-z0-9_-]+$"


class CatalogEntry(BaseModel):
    """One jar or tag in a catalog file."""

    id: str | None = Field(default=None, description="Stable identifier (defaults to name)")
    name: str = Field(pattern=NAME_PATTERN, description="Mentionable name")
    description: str | None = Field(default=None, description="Shown next to the suggestion")

    def to_item(self) -> MentionItem:
        return MentionItem(id=self.id or self.name, name=self.name, description=self.description)


class CatalogFile(BaseModel):
    """Top-level catalog file schema."""

    jars: list[CatalogEntry] = Field(default_factory=list)
    tags: list[CatalogEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_names(self) -> CatalogFile:
        for kind, entries in (("jars", self.jars), ("tags", self.tags)):
            seen: set[str] = set()
            for entry in entries:
                if entry.name in seen:
                    raise ValueError(f"Duplicate name in {kind}: {entry.name}")
                seen.add(entry.name)
        return self


class Catalog:
    """In-memory jar and tag catalogs.

    Also satisfies EntityStoreProtocol, so submit-time resolution can create
    the entities a user typed but never picked from the popup.
    """

    def __init__(self, jars: Sequence[MentionItem] = (), tags: Sequence[MentionItem] = ()) -> None:
        self._items: dict[MentionType, list[MentionItem]] = {
            MentionType.JAR: list(jars),
            MentionType.TAG: list(tags),
        }

    @property
    def jars(self) -> tuple[MentionItem, ...]:
        return tuple(self._items[MentionType.JAR])

    @property
    def tags(self) -> tuple[MentionItem, ...]:
        return tuple(self._items[MentionType.TAG])

    def find(self, mention_type: MentionType, name: str) -> MentionItem | None:
        for item in self._items.get(mention_type, []):
            if item.name == name:
                return item
        return None

    def create(self, mention_type: MentionType, name: str) -> MentionItem:
        if mention_type not in self._items:
            raise ValueError(f"Cannot store {mention_type.value} entities")
        item = MentionItem(id=str(uuid.uuid4()), name=name)
        self._items[mention_type].append(item)
        return item

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        def dump(items: Sequence[MentionItem]) -> list[dict[str, str]]:
            result = []
            for item in items:
                entry = {"id": item.id, "name": item.name}
                if item.description:
                    entry["description"] = item.description
                result.append(entry)
            return result

        return {"jars": dump(self.jars), "tags": dump(self.tags)}


def parse_catalog(data: dict | None, source: str = "<data>") -> Catalog:
    """Validate raw catalog data.

    Raises:
        CatalogValidationError: If the data does not match the schema.
    """
    try:
        parsed = CatalogFile.model_validate(data or {})
    except ValidationError as e:
        raise CatalogValidationError(f"Invalid catalog {source}: {e}") from e

    return Catalog(
        jars=[entry.to_item() for entry in parsed.jars],
        tags=[entry.to_item() for entry in parsed.tags],
    )


def load_catalog(path: Path) -> Catalog:
    """Load a catalog YAML file.

    Args:
        path: Path to the catalog file.

    Returns:
        Validated catalog.

    Raises:
        CatalogNotFoundError: If the file doesn't exist.
        CatalogLoadError: If the file can't be read or isn't valid YAML.
        CatalogValidationError: If the contents don't match the schema.
    """
    if not path.exists():
        raise CatalogNotFoundError(f"Catalog not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise CatalogLoadError(f"Could not load catalog {path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise CatalogValidationError(f"Invalid catalog {path}: top level must be a mapping")

    catalog = parse_catalog(data, source=str(path))
    logger.debug(f"Loaded catalog {path}: {len(catalog.jars)} jars, {len(catalog.tags)} tags")
    return catalog


def write_catalog(path: Path, catalog: Catalog) -> None:
    """Write a catalog back to YAML (creates parent directories)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    content = yaml.dump(catalog.to_dict(), default_flow_style=False, allow_unicode=True, sort_keys=False)
    path.write_text(content, encoding="utf-8")
