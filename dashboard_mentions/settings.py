"""Scope-aware YAML settings for dashboard-mentions.

Only the ``mentions:`` section is read:

    mentions:
      max_suggestions: 5
      enable_priority: true
      catalog: ~/.dashboard/catalog.yaml
      history: ~/.dashboard/repl_history
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Literal

import yaml

from .exceptions import SettingsError
from .mentions.filter import DEFAULT_MAX_SUGGESTIONS

logger = logging.getLogger(__name__)

Scope = Literal["local", "project", "global"]

SCOPES: tuple[Scope, ...] = ("global", "project", "local")
SETTING_KEYS = ("max_suggestions", "enable_priority", "catalog", "history")


@dataclass
class SettingsPaths:
    """Where each settings scope lives on disk."""

    global_settings: Path
    project_settings: Path
    local_settings: Path

    @classmethod
    def default(cls) -> SettingsPaths:
        """Global scope under the home directory, project and local under the cwd."""
        return cls(
            global_settings=Path.home() / ".dashboard" / "settings.yaml",
            project_settings=Path.cwd() / ".dashboard" / "settings.yaml",
            local_settings=Path.cwd() / ".dashboard" / "settings.local.yaml",
        )


@dataclass
class MentionSettings:
    """Effective mention settings after merging all scopes."""

    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    enable_priority: bool = True
    catalog_path: Path | None = None
    history_path: Path | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MentionSettings:
        """Build settings from a ``mentions:`` section.

        Raises:
            SettingsError: If a value has the wrong type.
        """
        settings = cls()

        if "max_suggestions" in data:
            value = data["max_suggestions"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise SettingsError(f"mentions.max_suggestions must be a non-negative integer, got {value!r}")
            settings.max_suggestions = value

        if "enable_priority" in data:
            value = data["enable_priority"]
            if not isinstance(value, bool):
                raise SettingsError(f"mentions.enable_priority must be true or false, got {value!r}")
            settings.enable_priority = value

        if data.get("catalog"):
            settings.catalog_path = Path(str(data["catalog"])).expanduser()
        if data.get("history"):
            settings.history_path = Path(str(data["history"])).expanduser()

        return settings


def deep_merge(lower: dict[str, Any], higher: dict[str, Any]) -> dict[str, Any]:
    """Recursively combine two mappings. Values from ``higher`` take precedence."""
    merged = dict(lower)
    for name, incoming in higher.items():
        current = merged.get(name)
        if isinstance(current, dict) and isinstance(incoming, dict):
            merged[name] = deep_merge(current, incoming)
        else:
            merged[name] = incoming
    return merged


class AppSettings:
    """Reads and writes the ``mentions:`` section across settings scopes.

    Precedence, highest first:
    1. local (.dashboard/settings.local.yaml) - machine-specific, not committed
    2. project (.dashboard/settings.yaml) - shared with the project
    3. global (~/.dashboard/settings.yaml) - user defaults

    Usage:
        settings = AppSettings().get_mention_settings()
    """

    def __init__(self, paths: SettingsPaths | None = None) -> None:
        self.paths = paths if paths is not None else SettingsPaths.default()

    def path_for(self, scope: Scope) -> Path:
        if scope == "local":
            return self.paths.local_settings
        if scope == "project":
            return self.paths.project_settings
        return self.paths.global_settings

    def load_merged(self) -> dict[str, Any]:
        """Every readable scope file merged, lowest precedence first."""
        merged: dict[str, Any] = {}
        for scope in SCOPES:
            path = self.path_for(scope)
            if not path.exists():
                continue
            try:
                data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Skipping unreadable settings file {path}: {e}")
                continue
            if not isinstance(data, dict):
                logger.warning(f"Skipping settings file {path}: top level is not a mapping")
                continue
            merged = deep_merge(merged, data)
        return merged

    def get_mention_settings(self) -> MentionSettings:
        """Effective ``mentions:`` settings."""
        section = self.load_merged().get("mentions") or {}
        if not isinstance(section, dict):
            raise SettingsError("The 'mentions' settings section must be a mapping")
        return MentionSettings.from_dict(section)

    def set_mention_setting(self, key: str, value: Any, scope: Scope = "global") -> None:
        """Store ``mentions.<key>`` in one scope file, keeping its other keys.

        Raises:
            SettingsError: If the key is unknown, the value has the wrong type,
                or the scope file can't be read or written.
        """
        if key not in SETTING_KEYS:
            raise SettingsError(f"Unknown mentions setting '{key}'. Expected one of: {', '.join(SETTING_KEYS)}")
        MentionSettings.from_dict({key: value})

        path = self.path_for(scope)
        data = self._load_file(path)
        section = data.get("mentions")
        if not isinstance(section, dict):
            section = data["mentions"] = {}
        section[key] = value
        self._save_file(path, data)
        logger.debug(f"Set mentions.{key} in {scope} settings ({path})")

    def _load_file(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise SettingsError(f"Could not read settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping at the top level")
        return data

    def _save_file(self, path: Path, data: dict[str, Any]) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False), encoding="utf-8")
        except OSError as e:
            raise SettingsError(f"Could not write settings file {path}: {e}") from e
