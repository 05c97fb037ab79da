"""UUID utility functions for GATT identifiers."""

import re
from typing import List, Optional

from gattfix.core.constants import BASE_UUID__BLUETOOTH, BASE_UUID__SUFFIX

# Standard BT SIG Base UUID
BT_SIG_BASE_UUID = BASE_UUID__BLUETOOTH

# 8-4-4-4-12, either case
UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

# Assigned-number names never contain hyphens and are never pure hex, so
# such strings are taken as (possibly malformed) UUIDs
HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")

__all__ = [
    "BT_SIG_BASE_UUID",
    "is_valid_uuid",
    "looks_like_uuid",
    "normalize_uuid",
    "expand_alias",
    "short_form",
    "ascii_to_decimal",
]


def is_valid_uuid(candidate) -> bool:
    """Return True when *candidate* is a syntactically valid 128-bit UUID string.

    Upper and lower case hex are both accepted; registry contents play no part.
    """
    if not isinstance(candidate, str):
        return False
    return UUID_PATTERN.fullmatch(candidate) is not None


def looks_like_uuid(candidate: str) -> bool:
    """Return True when *candidate* was meant as a UUID rather than a name."""
    return "-" in candidate or HEX_PATTERN.fullmatch(candidate) is not None


def normalize_uuid(candidate: str) -> Optional[str]:
    """Return the canonical lowercase form of *candidate*, or None if invalid."""
    if not is_valid_uuid(candidate):
        return None
    return candidate.lower()


def expand_alias(alias: int) -> str:
    """Embed a 16-bit or 32-bit *alias* into the base UUID.

    Range is not checked here: callers reject aliases wider than 32 bits
    first.  Anything wider is reduced to its low 32 bits.
    """
    return f"{alias & 0xFFFFFFFF:08x}{BASE_UUID__SUFFIX}"


def short_form(uuid: str) -> Optional[int]:
    """Return the 32-bit alias embedded in a base UUID, or None for custom UUIDs."""
    normalized = normalize_uuid(uuid)
    if normalized is None or normalized[8:] != BASE_UUID__SUFFIX:
        return None
    return int(normalized[:8], 16)


def ascii_to_decimal(text: str) -> List[int]:
    """Convert a string into the list of its character codes."""
    ascii_values = []
    for character in text:
        ascii_values.append(ord(character))
    return ascii_values
