"""
Identifier Registry for gattfix.

Canonical source of truth mapping between the three representations (alias,
name, UUID) of every GATT service, characteristic and descriptor the test
catalogs use.  The same scenario is exercised by alias, by name and by UUID,
so resolution must be representation-agnostic: all three land on the same
:class:`IdentifierRecord`.

The registry is built once from ``identifiers.yaml`` and never changes
afterwards; any number of readers may query it.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple, Union

from gattfix.core import config
from gattfix.core.constants import (
    ALIAS_MAX,
    GATT_KINDS,
    KIND__CHARACTERISTIC,
    KIND__DESCRIPTOR,
    KIND__SERVICE,
)
from gattfix.core.errors import DataFileError
from gattfix.core.log import print_and_log, LOG__CATALOG, LOG__DEBUG
from gattfix.bt_ref.identifiers import (
    Alias,
    Identifier,
    IdentifierRecord,
    InvalidFormat,
    Name,
    NotFound,
    Resolution,
    Uuid,
    as_identifier,
)
from gattfix.bt_ref.loader import data_path, load_yaml_mapping
from gattfix.bt_ref.uuid_utils import expand_alias, normalize_uuid

# Section name in identifiers.yaml -> GATT kind
_SECTIONS = {
    "services": KIND__SERVICE,
    "characteristics": KIND__CHARACTERISTIC,
    "descriptors": KIND__DESCRIPTOR,
}


def _check_alias(identifier: Alias) -> Optional[InvalidFormat]:
    value = identifier.value
    if value < 0 or value > ALIAS_MAX:
        return InvalidFormat(
            identifier, f"Alias {value:#x} does not fit in 16 or 32 bits"
        )
    return None


class IdentifierRegistry:
    """Lookup of canonical GATT identifier records."""

    def __init__(self, records: List[IdentifierRecord], source: str = "<memory>"):
        by_uuid: Dict[str, IdentifierRecord] = {}
        by_name: Dict[str, IdentifierRecord] = {}
        for record in records:
            if record.uuid in by_uuid:
                raise DataFileError(source, f"duplicate UUID {record.uuid}")
            by_uuid[record.uuid] = record
            if record.name is not None:
                if record.name in by_name:
                    raise DataFileError(source, f"duplicate name {record.name}")
                by_name[record.name] = record

        self._records: Tuple[IdentifierRecord, ...] = tuple(records)
        self._by_uuid = MappingProxyType(by_uuid)
        self._by_name = MappingProxyType(by_name)
        self.source = source

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "IdentifierRegistry":
        """Build a registry from an identifiers YAML file.

        Each section (``services``, ``characteristics``, ``descriptors``) is a
        list of entries with any of ``alias``, ``name`` and ``uuid``.  A missing
        UUID is derived from the alias; when both are given they must agree.
        """
        data = load_yaml_mapping(path)
        records: List[IdentifierRecord] = []
        for section, kind in _SECTIONS.items():
            for entry in data.get(section) or []:
                records.append(cls._record_from_entry(entry, kind, path))
        registry = cls(records, source=str(path))
        print_and_log(
            f"[+] Identifier registry built from {path} ({len(registry)} records)",
            LOG__CATALOG,
        )
        return registry

    @staticmethod
    def _record_from_entry(entry, kind: str, path) -> IdentifierRecord:
        if not isinstance(entry, dict):
            raise DataFileError(path, f"{kind} entry is not a mapping: {entry!r}")
        alias = entry.get("alias")
        name = entry.get("name")
        uuid = entry.get("uuid")
        if alias is None and name is None and uuid is None:
            raise DataFileError(path, f"{kind} entry has no alias, name or uuid")
        if alias is not None and (
            isinstance(alias, bool) or not isinstance(alias, int)
            or _check_alias(Alias(alias)) is not None
        ):
            raise DataFileError(path, f"{kind} alias out of range: {alias!r}")

        if uuid is not None:
            canonical = normalize_uuid(str(uuid))
            if canonical is None:
                raise DataFileError(path, f"{kind} uuid is not valid: {uuid!r}")
            if alias is not None and expand_alias(alias) != canonical:
                raise DataFileError(
                    path, f"{kind} alias {alias:#x} does not expand to {canonical}"
                )
        elif alias is not None:
            canonical = expand_alias(alias)
        else:
            raise DataFileError(path, f"{kind} {name} needs an alias or a uuid")

        return IdentifierRecord(uuid=canonical, kind=kind, alias=alias, name=name)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def resolve(
        self, identifier: Union[Identifier, int, str], kind: Optional[str] = None
    ) -> Resolution:
        """Resolve an alias, name or UUID to its canonical record.

        Returns the :class:`IdentifierRecord`, :class:`InvalidFormat` when a
        UUID string is malformed or an alias does not fit in 32 bits, or
        :class:`NotFound` when a well-formed identifier has no record (or the
        record is not of the requested *kind*).
        """
        identifier = as_identifier(identifier)

        if isinstance(identifier, Alias):
            failure = _check_alias(identifier)
            if failure is not None:
                return failure
            record = self._by_uuid.get(expand_alias(identifier.value))
        elif isinstance(identifier, Uuid):
            canonical = normalize_uuid(identifier.value)
            if canonical is None:
                return InvalidFormat(identifier, f"'{identifier.value}' is not a valid UUID")
            record = self._by_uuid.get(canonical)
        else:
            record = self._by_name.get(identifier.value)

        if record is None:
            print_and_log(f"[-] No record for {identifier!r}", LOG__DEBUG)
            return NotFound(identifier, f"No record for '{identifier}'")
        if kind is not None and record.kind != kind:
            return NotFound(identifier, f"'{identifier}' is a {record.kind}, not a {kind}")
        return record

    def canonicalize(
        self, identifier: Union[Identifier, int, str], kind: Optional[str] = None
    ) -> Union[str, NotFound, InvalidFormat]:
        """Return the canonical UUID string for *identifier*.

        Unlike :meth:`resolve`, any valid UUID or in-range alias canonicalises
        whether or not it is registered.  Names must be registered.
        """
        identifier = as_identifier(identifier)
        if isinstance(identifier, Alias):
            failure = _check_alias(identifier)
            if failure is not None:
                return failure
            return expand_alias(identifier.value)
        if isinstance(identifier, Uuid):
            canonical = normalize_uuid(identifier.value)
            if canonical is None:
                return InvalidFormat(identifier, f"'{identifier.value}' is not a valid UUID")
            return canonical
        result = self.resolve(identifier, kind)
        if isinstance(result, IdentifierRecord):
            return result.uuid
        return result

    def by_uuid(self, uuid: str) -> Optional[IdentifierRecord]:
        canonical = normalize_uuid(uuid)
        return self._by_uuid.get(canonical) if canonical else None

    def by_name(self, name: str) -> Optional[IdentifierRecord]:
        return self._by_name.get(name)

    def records(self, kind: Optional[str] = None) -> Tuple[IdentifierRecord, ...]:
        if kind is None:
            return self._records
        if kind not in GATT_KINDS:
            raise ValueError(f"Unknown GATT kind: {kind}")
        return tuple(r for r in self._records if r.kind == kind)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[IdentifierRecord]:
        return iter(self._records)

    def __contains__(self, identifier) -> bool:
        try:
            return isinstance(self.resolve(identifier), IdentifierRecord)
        except TypeError:
            return False


# Global registry instance for convenience
_registry_instance: Optional[IdentifierRegistry] = None


def get_registry() -> IdentifierRegistry:
    """
    Get the global identifier registry, built on first use from the
    configured data directory.
    """
    global _registry_instance
    if _registry_instance is None:
        _registry_instance = IdentifierRegistry.from_yaml(
            data_path(config.IDENTIFIERS_FILE)
        )
    return _registry_instance


def resolve(identifier: Union[Identifier, int, str], kind: Optional[str] = None) -> Resolution:
    """Resolve *identifier* against the global registry.

    Example:
        >>> resolve(0x2a19).name
        'battery_level'
    """
    return get_registry().resolve(identifier, kind)
