"""
Identifier types for GATT services, characteristics and descriptors.

A catalog field may hold a numeric alias, a name or a UUID string.  Raw values
are classified once into one of three variants so the registry dispatches on
the variant instead of inspecting types at every lookup:

- :class:`Alias`: 16/32-bit short form, e.g. ``0x2a19``
- :class:`Name`: assigned-number name, e.g. ``"battery_level"``
- :class:`Uuid`: 128-bit string, possibly malformed on purpose

Resolution failures are returned as :class:`NotFound` or :class:`InvalidFormat`
values, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from gattfix.core.constants import (
    GATT_KINDS,
    RESULT_ERR_INVALID_FORMAT,
    RESULT_ERR_NOT_FOUND,
)
from gattfix.bt_ref.uuid_utils import looks_like_uuid


@dataclass(frozen=True)
class Alias:
    value: int

    def __str__(self) -> str:
        return f"0x{self.value:04x}"


@dataclass(frozen=True)
class Name:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Uuid:
    value: str

    def __str__(self) -> str:
        return self.value


Identifier = Union[Alias, Name, Uuid]


def as_identifier(raw: Union[Identifier, int, str]) -> Identifier:
    """Classify a raw catalog value into an :data:`Identifier` variant.

    ``int`` becomes :class:`Alias`; a hyphenated or pure-hex string becomes
    :class:`Uuid`; any other string becomes :class:`Name`.
    """
    if isinstance(raw, (Alias, Name, Uuid)):
        return raw
    # bool is an int subclass but never an alias
    if isinstance(raw, bool):
        raise TypeError(f"Not an identifier: {raw!r}")
    if isinstance(raw, int):
        return Alias(raw)
    if isinstance(raw, str):
        if looks_like_uuid(raw):
            return Uuid(raw)
        return Name(raw)
    raise TypeError(f"Not an identifier: {raw!r}")


def to_raw(identifier: Identifier) -> Union[int, str]:
    """Return the plain int/str form of *identifier* (inverse of :func:`as_identifier`)."""
    return identifier.value


@dataclass(frozen=True)
class IdentifierRecord:
    """Canonical record for one GATT service, characteristic or descriptor."""

    uuid: str
    kind: str
    alias: Optional[int] = None
    name: Optional[str] = None

    def __post_init__(self):
        if self.kind not in GATT_KINDS:
            raise ValueError(f"Unknown GATT kind: {self.kind}")

    def to_dict(self) -> dict:
        return {
            "alias": self.alias,
            "name": self.name,
            "uuid": self.uuid,
            "kind": self.kind,
        }


@dataclass(frozen=True)
class ResolutionFailure:
    """Base for failed lookups; falsy so callers can write ``if not result``."""

    identifier: Identifier
    message: str

    code = 0

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return {
            "error": type(self).__name__,
            "identifier": to_raw(self.identifier),
            "message": self.message,
            "code": self.code,
        }


@dataclass(frozen=True)
class NotFound(ResolutionFailure):
    """A well-formed identifier with no matching record."""

    code = RESULT_ERR_NOT_FOUND


@dataclass(frozen=True)
class InvalidFormat(ResolutionFailure):
    """An identifier that is not syntactically a UUID or an in-range alias."""

    code = RESULT_ERR_INVALID_FORMAT


Resolution = Union[IdentifierRecord, NotFound, InvalidFormat]
