"""Fixed priority catalog and alias lookup."""

from __future__ import annotations

from .models import PriorityCode
from .models import PriorityOption

PRIORITY_OPTIONS: tuple[PriorityOption, ...] = (
    PriorityOption(PriorityCode.VERY_LOW, "very-low", "Very low", "Lowest urgency"),
    PriorityOption(PriorityCode.LOW, "low", "Low", "Nice to do"),
    PriorityOption(PriorityCode.MEDIUM, "medium", "Medium", "Default priority"),
    PriorityOption(PriorityCode.HIGH, "high", "High", "Important soon"),
    PriorityOption(PriorityCode.VERY_HIGH, "very-high", "Very high", "Top of your stack"),
)

# Aliases accepted in committed text. Live suggestions filter on
# PRIORITY_OPTIONS instead.
PRIORITY_TOKEN_MAP: dict[str, PriorityCode] = {
    "very-low": PriorityCode.VERY_LOW,
    "vlow": PriorityCode.VERY_LOW,
    "vl": PriorityCode.VERY_LOW,
    "low": PriorityCode.LOW,
    "l": PriorityCode.LOW,
    "medium": PriorityCode.MEDIUM,
    "med": PriorityCode.MEDIUM,
    "m": PriorityCode.MEDIUM,
    "high": PriorityCode.HIGH,
    "h": PriorityCode.HIGH,
    "very-high": PriorityCode.VERY_HIGH,
    "vhigh": PriorityCode.VERY_HIGH,
    "vh": PriorityCode.VERY_HIGH,
}

PRIORITY_LABEL: dict[PriorityCode, str] = {option.code: option.label for option in PRIORITY_OPTIONS}


def lookup_priority(alias: str) -> PriorityCode | None:
    """Resolve a priority alias (without the ``!``) case-insensitively.

    Unknown aliases resolve to None rather than raising.
    """
    return PRIORITY_TOKEN_MAP.get(alias.lower())


def priority_label(code: PriorityCode | str) -> str:
    """Human-readable label for a priority code."""
    return PRIORITY_LABEL[PriorityCode(code)]
