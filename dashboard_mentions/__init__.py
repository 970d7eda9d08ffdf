"""Dashboard Mentions - @jar, #tag and !priority mentions for todo and note inputs.

The engine (``dashboard_mentions.mentions``) is pure text scanning: it detects
the mention at the caret, builds suggestion rows from catalogs it is handed,
drives keyboard navigation, and computes replacement text and caret targets.
It never fetches data or computes layout; hosts supply both.

Philosophy: Mechanism not policy. Hosts own rendering, persistence and geometry.
"""

from __future__ import annotations

# Catalogs
from dashboard_mentions.catalog import Catalog
from dashboard_mentions.catalog import load_catalog
from dashboard_mentions.catalog import parse_catalog

# Exceptions
from dashboard_mentions.exceptions import CatalogLoadError
from dashboard_mentions.exceptions import CatalogNotFoundError
from dashboard_mentions.exceptions import CatalogValidationError
from dashboard_mentions.exceptions import MentionError
from dashboard_mentions.exceptions import SettingsError

# Engine
from dashboard_mentions.mentions import ActiveMention
from dashboard_mentions.mentions import EntityResolver
from dashboard_mentions.mentions import MentionItem
from dashboard_mentions.mentions import MentionNavigator
from dashboard_mentions.mentions import MentionRow
from dashboard_mentions.mentions import MentionSession
from dashboard_mentions.mentions import MentionType
from dashboard_mentions.mentions import PriorityCode
from dashboard_mentions.mentions import apply_replacement
from dashboard_mentions.mentions import build_replacement
from dashboard_mentions.mentions import build_rows
from dashboard_mentions.mentions import build_todo_draft
from dashboard_mentions.mentions import detect
from dashboard_mentions.mentions import extract_mentions
from dashboard_mentions.mentions import parse_mentions
from dashboard_mentions.mentions import strip_priority_tokens

# Settings
from dashboard_mentions.settings import AppSettings
from dashboard_mentions.settings import MentionSettings

# Panel state
from dashboard_mentions.visibility import PanelVisibility

__all__ = [
    # Engine
    "detect",
    "build_rows",
    "build_replacement",
    "apply_replacement",
    "parse_mentions",
    "strip_priority_tokens",
    "extract_mentions",
    "build_todo_draft",
    "ActiveMention",
    "MentionItem",
    "MentionRow",
    "MentionType",
    "PriorityCode",
    "MentionNavigator",
    "MentionSession",
    "EntityResolver",
    # Catalogs
    "Catalog",
    "load_catalog",
    "parse_catalog",
    # Settings
    "AppSettings",
    "MentionSettings",
    # Panel state
    "PanelVisibility",
    # Exceptions
    "MentionError",
    "CatalogNotFoundError",
    "CatalogLoadError",
    "CatalogValidationError",
    "SettingsError",
]
