"""Exception hierarchy for dashboard-mentions.

The engine in ``dashboard_mentions.mentions`` never raises for user text.
These exceptions belong to the outer layers: catalog files and settings.
"""


class MentionError(Exception):
    """Base exception for all dashboard-mentions errors."""


class CatalogNotFoundError(MentionError):
    """Catalog file could not be located at the specified path."""


class CatalogLoadError(MentionError):
    """Catalog file exists but could not be read or parsed as YAML."""


class CatalogValidationError(MentionError):
    """Catalog file parsed but its contents do not match the catalog schema."""


class SettingsError(MentionError):
    """Settings could not be applied (invalid value types, etc)."""
