"""Record types for the conformance test-case catalogs."""

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from gattfix.core.constants import OP__DISCOVER, OP__READ, OP__WRITE
from gattfix.bt_ref.identifiers import Identifier, to_raw


class Category(enum.Enum):
    """Operation categories; the values are the names harnesses use."""
    CHARACTERISTIC_READ_VALUE = "characteristicReadValue"
    CHARACTERISTIC_WRITE_VALUE = "characteristicWriteValue"
    GET_CHARACTERISTIC = "getCharacteristic"
    GET_CHARACTERISTICS = "getCharacteristics"
    DESCRIPTOR_READ_VALUE = "descriptorReadValue"
    DESCRIPTOR_WRITE_VALUE = "descriptorWriteValue"
    BLUETOOTH_UUID = "bluetoothUUID"

    @property
    def operation(self) -> Optional[str]:
        """Blocklist operation the category performs, None for pure UUID checks."""
        return _OPERATIONS[self]

    @property
    def target_field(self) -> str:
        """Name of the identifier field in the YAML catalog."""
        return _TARGET_FIELDS[self]


_OPERATIONS = {
    Category.CHARACTERISTIC_READ_VALUE: OP__READ,
    Category.CHARACTERISTIC_WRITE_VALUE: OP__WRITE,
    Category.GET_CHARACTERISTIC: OP__DISCOVER,
    Category.GET_CHARACTERISTICS: OP__DISCOVER,
    Category.DESCRIPTOR_READ_VALUE: OP__READ,
    Category.DESCRIPTOR_WRITE_VALUE: OP__WRITE,
    Category.BLUETOOTH_UUID: None,
}

_TARGET_FIELDS = {
    Category.CHARACTERISTIC_READ_VALUE: "characteristic",
    Category.CHARACTERISTIC_WRITE_VALUE: "characteristic",
    Category.GET_CHARACTERISTIC: "characteristic",
    Category.GET_CHARACTERISTICS: "characteristic",
    Category.DESCRIPTOR_READ_VALUE: "descriptor",
    Category.DESCRIPTOR_WRITE_VALUE: "descriptor",
    Category.BLUETOOTH_UUID: "identifier",
}


class Expectation(enum.Enum):
    """Outcome a conforming implementation must produce for a test case."""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INVALID_FORMAT = "invalid_format"
    BLOCKLISTED = "blocklisted"
    INVALID_LENGTH = "invalid_length"

    @property
    def is_rejection(self) -> bool:
        return self is not Expectation.SUCCESS


@dataclass(frozen=True)
class RequestOptions:
    """Device request options: filters (each a tuple of services) and optional services."""
    filters: Tuple[Tuple[Identifier, ...], ...] = ()
    optional_services: Tuple[Identifier, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filters": [{"services": [to_raw(s) for s in f]} for f in self.filters],
            "optionalServices": [to_raw(s) for s in self.optional_services],
        }


@dataclass(frozen=True)
class TestCaseRecord:
    """One conformance scenario.

    Attributes:
        category: Operation category the case belongs to
        ordinal: 1-based position in the category ("Test N")
        expect: Outcome oracle
        target: Characteristic/descriptor identifier, None when the operation has none
        service: Companion service identifier
        value_to_write: Payload for write categories
        options: Device request options
        must_disconnect: True/False oracle for the connection state, None when unspecified
        expected_uuid: Canonical UUID a canonicalisation case must produce
        description: Free text from the catalog
    """
    __test__ = False  # not a pytest class

    category: Category
    ordinal: int
    expect: Expectation
    target: Optional[Identifier] = None
    service: Optional[Identifier] = None
    value_to_write: Optional[bytes] = None
    options: Optional[RequestOptions] = None
    must_disconnect: Optional[bool] = None
    expected_uuid: Optional[str] = None
    description: str = field(default="", compare=False)

    @property
    def label(self) -> str:
        return f"Test {self.ordinal}"

    @property
    def expects_rejection(self) -> bool:
        return self.expect.is_rejection

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "category": self.category.value,
            "ordinal": self.ordinal,
            "label": self.label,
            "target": to_raw(self.target) if self.target is not None else None,
            "service": to_raw(self.service) if self.service is not None else None,
            "value_to_write": list(self.value_to_write) if self.value_to_write is not None else None,
            "options": self.options.to_dict() if self.options else None,
            "must_disconnect": self.must_disconnect,
            "expect": self.expect.value,
            "expected_uuid": self.expected_uuid,
            "description": self.description,
        }
