"""Core error classes for gattfix.

Resolution failures (an identifier that is malformed or unknown) are *not*
exceptions: they are returned as values from the registry, see
:mod:`gattfix.bt_ref.identifiers`.  The classes here cover programming and
data errors only.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from gattfix.core.constants import (
    RESULT_ERR,
    RESULT_ERR_BAD_ARGS,
    RESULT_ERR_DATA_FILE,
    RESULT_ERR_NOT_FOUND,
)


class GattFixError(Exception):
    """Base exception for gattfix.

    The `.code` attribute maps to the RESULT_* values in
    :mod:`gattfix.core.constants`.
    """

    def __init__(self, message: str, code: int = RESULT_ERR):
        super().__init__(message)
        self.code = code


class DataFileError(GattFixError):
    """Raised when a data file is missing, unparsable or violates a record invariant."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Bad data file {path}: {reason}", RESULT_ERR_DATA_FILE)
        self.path = str(path)
        self.reason = reason


class UnknownCategoryError(GattFixError):
    """Raised when a test-case category does not exist."""

    def __init__(self, category: str):
        super().__init__(f"Unknown test-case category: {category}", RESULT_ERR_BAD_ARGS)
        self.category = category


class UnknownDataSetError(GattFixError):
    """Raised when a mock adapter data set does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Unknown adapter data set: {name}", RESULT_ERR_NOT_FOUND)
        self.name = name


__all__ = [
    "GattFixError",
    "DataFileError",
    "UnknownCategoryError",
    "UnknownDataSetError",
]
