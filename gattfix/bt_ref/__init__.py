"""
Bluetooth reference data: identifier registry, blocklist and UUID helpers.
"""

from gattfix.bt_ref.identifiers import (
    Alias,
    Name,
    Uuid,
    Identifier,
    IdentifierRecord,
    NotFound,
    InvalidFormat,
    as_identifier,
)
from gattfix.bt_ref.uuid_utils import expand_alias, is_valid_uuid, ascii_to_decimal
from gattfix.bt_ref.registry import IdentifierRegistry, get_registry, resolve
from gattfix.bt_ref.blocklist import Blocklist, get_blocklist

__all__ = [
    "Alias",
    "Name",
    "Uuid",
    "Identifier",
    "IdentifierRecord",
    "NotFound",
    "InvalidFormat",
    "as_identifier",
    "expand_alias",
    "is_valid_uuid",
    "ascii_to_decimal",
    "IdentifierRegistry",
    "get_registry",
    "resolve",
    "Blocklist",
    "get_blocklist",
]
