"""
gattfix - GATT conformance-test fixture library
"""

__version__ = "1.0.0"

# ---------------------------------------------------------------------------
# Initialise logging on *package import* so every code path (even when the
# CLI is not used) writes to the same log files.
# ---------------------------------------------------------------------------
import importlib as _importlib

_importlib.import_module("gattfix.core.log")  # noqa: F401

from gattfix.bt_ref import (  # noqa: E402
    Alias,
    Name,
    Uuid,
    IdentifierRecord,
    NotFound,
    InvalidFormat,
    expand_alias,
    is_valid_uuid,
    resolve,
)
from gattfix.catalog import Category, Expectation, TestCaseRecord, catalog  # noqa: E402

__all__ = [
    "Alias",
    "Name",
    "Uuid",
    "IdentifierRecord",
    "NotFound",
    "InvalidFormat",
    "expand_alias",
    "is_valid_uuid",
    "resolve",
    "Category",
    "Expectation",
    "TestCaseRecord",
    "catalog",
]
