"""
GATT blocklist.

UUIDs a conforming implementation refuses to expose, either completely
(``exclude``) or for one direction only (``exclude-reads``,
``exclude-writes``).  The write catalogs expect ``blocklisted`` outcomes for
exactly the identifiers listed here.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from gattfix.core import config
from gattfix.core.constants import (
    EXCLUDE,
    EXCLUDE_READS,
    EXCLUDE_WRITES,
    OP__DISCOVER,
    OP__READ,
    OP__WRITE,
)
from gattfix.core.errors import DataFileError
from gattfix.core.log import print_and_log, LOG__CATALOG
from gattfix.bt_ref.loader import data_path, load_yaml_mapping
from gattfix.bt_ref.uuid_utils import normalize_uuid

# Which exclusions block which operation
_BLOCKS = {
    OP__READ: (EXCLUDE, EXCLUDE_READS),
    OP__WRITE: (EXCLUDE, EXCLUDE_WRITES),
    OP__DISCOVER: (EXCLUDE,),
}


class Blocklist:
    """Immutable UUID -> exclusion mapping."""

    def __init__(self, entries: Mapping[str, str]):
        checked: Dict[str, str] = {}
        for uuid, exclusion in entries.items():
            canonical = normalize_uuid(uuid)
            if canonical is None:
                raise ValueError(f"Blocklist UUID is not valid: {uuid!r}")
            if exclusion not in (EXCLUDE, EXCLUDE_READS, EXCLUDE_WRITES):
                raise ValueError(f"Unknown exclusion {exclusion!r} for {uuid}")
            checked[canonical] = exclusion
        self._entries = MappingProxyType(checked)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Blocklist":
        data = load_yaml_mapping(path)
        entries: Dict[str, str] = {}
        for entry in data.get("blocklist") or []:
            if not isinstance(entry, dict) or "uuid" not in entry:
                raise DataFileError(path, f"blocklist entry without uuid: {entry!r}")
            entries[str(entry["uuid"])] = entry.get("exclusion", EXCLUDE)
        try:
            blocklist = cls(entries)
        except ValueError as e:
            raise DataFileError(path, str(e)) from e
        print_and_log(f"[+] Blocklist loaded ({len(blocklist)} entries)", LOG__CATALOG)
        return blocklist

    def exclusion(self, uuid: str) -> Optional[str]:
        """Return the exclusion for *uuid*, or None when it is not listed."""
        canonical = normalize_uuid(uuid)
        if canonical is None:
            return None
        return self._entries.get(canonical)

    def is_blocked(self, uuid: str, operation: str = OP__DISCOVER) -> bool:
        """Return True when *operation* on *uuid* must be refused."""
        if operation not in _BLOCKS:
            raise ValueError(f"Unknown operation: {operation}")
        return self.exclusion(uuid) in _BLOCKS[operation]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, uuid) -> bool:
        return isinstance(uuid, str) and self.exclusion(uuid) is not None

    def items(self):
        return self._entries.items()


_blocklist_instance: Optional[Blocklist] = None


def get_blocklist() -> Blocklist:
    """Get the global blocklist, loaded on first use."""
    global _blocklist_instance
    if _blocklist_instance is None:
        _blocklist_instance = Blocklist.from_yaml(data_path(config.BLOCKLIST_FILE))
    return _blocklist_instance
