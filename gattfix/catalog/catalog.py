"""
Test-Case Catalog.

Ordered, immutable enumeration of conformance scenarios per operation
category.  A harness reports failures by ordinal, so the declaration order in
``catalogs.yaml`` is the contract: ``catalog(category)[0]`` is "Test 1" on
every run.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple, Union

from gattfix.core import config
from gattfix.core.constants import MAX_ATTRIBUTE_VALUE_LENGTH
from gattfix.core.errors import DataFileError, UnknownCategoryError
from gattfix.core.log import print_and_log, LOG__CATALOG
from gattfix.bt_ref.blocklist import Blocklist
from gattfix.bt_ref.identifiers import (
    IdentifierRecord,
    InvalidFormat,
    NotFound,
    as_identifier,
)
from gattfix.bt_ref.loader import data_path, load_yaml_mapping
from gattfix.bt_ref.registry import IdentifierRegistry
from gattfix.bt_ref.uuid_utils import normalize_uuid
from gattfix.catalog.records import Category, Expectation, RequestOptions, TestCaseRecord

CategoryLike = Union[Category, str]


def _category(category: CategoryLike) -> Category:
    if isinstance(category, Category):
        return category
    try:
        return Category(category)
    except ValueError:
        raise UnknownCategoryError(str(category)) from None


def _payload(raw: Any, where: str, path) -> bytes:
    # {fill: b, length: n} keeps oversized payloads readable in the YAML
    if isinstance(raw, dict):
        try:
            length = int(raw["length"])
            fill = bytes([raw.get("fill", 0)])
        except (KeyError, TypeError, ValueError) as e:
            raise DataFileError(path, f"{where}: bad value_to_write {raw!r}") from e
        if length < 0:
            raise DataFileError(path, f"{where}: value_to_write length {length} is negative")
        return fill * length
    if not isinstance(raw, list):
        raise DataFileError(path, f"{where}: bad value_to_write {raw!r}")
    try:
        return bytes(raw)
    except (TypeError, ValueError) as e:
        raise DataFileError(path, f"{where}: bad value_to_write {raw!r}") from e


def _identifier_list(raw: Any, field: str, where: str, path) -> tuple:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise DataFileError(path, f"{where}: {field} is not a list")
    return tuple(as_identifier(s) for s in raw)


def _options(raw: Any, where: str, path) -> RequestOptions:
    if not isinstance(raw, dict):
        raise DataFileError(path, f"{where}: options is not a mapping")
    raw_filters = raw.get("filters")
    if raw_filters is not None and not isinstance(raw_filters, list):
        raise DataFileError(path, f"{where}: filters is not a list")
    filters = []
    for f in raw_filters or []:
        if not isinstance(f, dict):
            raise DataFileError(path, f"{where}: filter is not a mapping: {f!r}")
        filters.append(_identifier_list(f.get("services"), "filter services", where, path))
    optional = _identifier_list(raw.get("optional_services"), "optional_services", where, path)
    return RequestOptions(filters=tuple(filters), optional_services=optional)


def _expected_uuid(raw: Any, where: str, path) -> Optional[str]:
    if raw is None:
        return None
    canonical = normalize_uuid(raw) if isinstance(raw, str) else None
    if canonical is None:
        raise DataFileError(path, f"{where}: expected_uuid is not a valid UUID: {raw!r}")
    return canonical


def _record(category: Category, ordinal: int, entry: Any, path) -> TestCaseRecord:
    where = f"{category.value} Test {ordinal}"
    if not isinstance(entry, dict):
        raise DataFileError(path, f"{where}: entry is not a mapping")
    try:
        expect = Expectation(entry.get("expect", Expectation.SUCCESS.value))
    except ValueError:
        raise DataFileError(path, f"{where}: unknown expectation {entry.get('expect')!r}") from None

    must_disconnect = entry.get("must_disconnect")
    if must_disconnect is not None and not isinstance(must_disconnect, bool):
        raise DataFileError(path, f"{where}: must_disconnect must be true or false")

    raw_target = entry.get(category.target_field)
    raw_service = entry.get("service")
    try:
        target = as_identifier(raw_target) if raw_target is not None else None
        service = as_identifier(raw_service) if raw_service is not None else None
        options = _options(entry["options"], where, path) if "options" in entry else None
    except TypeError as e:
        raise DataFileError(path, f"{where}: {e}") from e

    value = entry.get("value_to_write")
    return TestCaseRecord(
        category=category,
        ordinal=ordinal,
        expect=expect,
        target=target,
        service=service,
        value_to_write=_payload(value, where, path) if value is not None else None,
        options=options,
        must_disconnect=must_disconnect,
        expected_uuid=_expected_uuid(entry.get("expected_uuid"), where, path),
        description=str(entry.get("description", "")),
    )


class TestCaseCatalog:
    """Read-only catalogs of test cases keyed by category."""

    __test__ = False  # not a pytest class

    def __init__(self, catalogs: Dict[Category, Tuple[TestCaseRecord, ...]]):
        self._catalogs = MappingProxyType(dict(catalogs))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "TestCaseCatalog":
        """Build catalogs from a YAML file.

        Top-level keys are category names; keys starting with ``_`` hold
        shared anchors and are skipped.
        """
        data = load_yaml_mapping(path)
        catalogs: Dict[Category, Tuple[TestCaseRecord, ...]] = {}
        for key, entries in data.items():
            if str(key).startswith("_"):
                continue
            try:
                category = Category(key)
            except ValueError:
                raise DataFileError(path, f"unknown category {key!r}") from None
            if not isinstance(entries, list):
                raise DataFileError(path, f"{key} is not a list")
            catalogs[category] = tuple(
                _record(category, ordinal, entry, path)
                for ordinal, entry in enumerate(entries, start=1)
            )
            print_and_log(
                f"[*] Catalog {category.value}: {len(catalogs[category])} cases", LOG__CATALOG
            )
        return cls(catalogs)

    def catalog(self, category: CategoryLike) -> Tuple[TestCaseRecord, ...]:
        """Return the ordered test cases for *category*."""
        category = _category(category)
        if category not in self._catalogs:
            raise UnknownCategoryError(category.value)
        return self._catalogs[category]

    def categories(self) -> Tuple[Category, ...]:
        return tuple(self._catalogs)

    def labels(self, category: CategoryLike) -> List[str]:
        """Button-style labels ("Test 1", "Test 2", ...) for *category*."""
        return [record.label for record in self.catalog(category)]

    def case(self, category: CategoryLike, ordinal: int) -> TestCaseRecord:
        """Return "Test *ordinal*" of *category* (1-based)."""
        cases = self.catalog(category)
        if ordinal < 1 or ordinal > len(cases):
            raise IndexError(f"{_category(category).value} has no Test {ordinal}")
        return cases[ordinal - 1]

    def __iter__(self):
        for cases in self._catalogs.values():
            yield from cases

    def __len__(self) -> int:
        return sum(len(cases) for cases in self._catalogs.values())

    # ------------------------------------------------------------------
    # Consistency
    # ------------------------------------------------------------------

    def check_consistency(
        self, registry: IdentifierRegistry, blocklist: Blocklist
    ) -> List[str]:
        """Cross-check every case against the registry and blocklist.

        Returns a list of human-readable problems, empty when the catalogs
        agree with the reference data.
        """
        problems: List[str] = []
        for record in self:
            where = f"{record.category.value} {record.label}"
            if record.category is Category.BLUETOOTH_UUID:
                problems.extend(_check_canonical(record, registry, where))
            else:
                problems.extend(_check_operation(record, registry, blocklist, where))
        for problem in problems:
            print_and_log(f"[-] {problem}", LOG__CATALOG)
        return problems


def _check_canonical(record: TestCaseRecord, registry: IdentifierRegistry, where: str) -> List[str]:
    if record.target is None:
        return [f"{where}: no identifier"]
    result = registry.canonicalize(record.target)
    if record.expect is Expectation.SUCCESS:
        if not isinstance(result, str):
            return [f"{where}: expected a UUID, got {type(result).__name__}"]
        if record.expected_uuid is not None and result != record.expected_uuid:
            return [f"{where}: expected {record.expected_uuid}, got {result}"]
        return []
    if record.expect is Expectation.INVALID_FORMAT and not isinstance(result, InvalidFormat):
        return [f"{where}: expected InvalidFormat, got {result!r}"]
    if record.expect is Expectation.NOT_FOUND and not isinstance(result, NotFound):
        return [f"{where}: expected NotFound, got {result!r}"]
    return []


def _check_operation(
    record: TestCaseRecord, registry: IdentifierRegistry, blocklist: Blocklist, where: str
) -> List[str]:
    problems: List[str] = []
    operation = record.category.operation

    if record.value_to_write is not None and len(record.value_to_write) > MAX_ATTRIBUTE_VALUE_LENGTH:
        if record.expect is not Expectation.INVALID_LENGTH:
            problems.append(
                f"{where}: {len(record.value_to_write)}-byte write must expect invalid_length"
            )

    if record.service is not None:
        if not isinstance(registry.resolve(record.service), IdentifierRecord):
            problems.append(f"{where}: service {record.service} does not resolve")

    if record.target is None:
        return problems
    result = registry.resolve(record.target)

    if record.expect is Expectation.INVALID_FORMAT:
        if not isinstance(result, InvalidFormat):
            problems.append(f"{where}: {record.target} should be malformed")
    elif record.expect is not Expectation.NOT_FOUND:
        # success, blocklisted and invalid_length all need a real attribute
        if not isinstance(result, IdentifierRecord):
            problems.append(f"{where}: {record.target} does not resolve")
            return problems
        blocked = blocklist.is_blocked(result.uuid, operation)
        if record.expect is Expectation.BLOCKLISTED and not blocked:
            problems.append(f"{where}: {record.target} is not blocklisted for {operation}")
        if record.expect is not Expectation.BLOCKLISTED and blocked:
            problems.append(f"{where}: {record.target} is blocklisted for {operation}")
    return problems


_catalog_instance: Optional[TestCaseCatalog] = None


def get_catalog() -> TestCaseCatalog:
    """Get the global test-case catalog, loaded on first use."""
    global _catalog_instance
    if _catalog_instance is None:
        _catalog_instance = TestCaseCatalog.from_yaml(data_path(config.CATALOGS_FILE))
    return _catalog_instance


def catalog(category: CategoryLike) -> Tuple[TestCaseRecord, ...]:
    """Return the ordered test cases for *category* from the global catalog."""
    return get_catalog().catalog(category)
