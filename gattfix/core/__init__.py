"""
Core package initialisation for gattfix.

Kept lightweight: configuration, logging, constants and the error hierarchy.
"""

from gattfix.core.errors import (
    GattFixError,
    DataFileError,
    UnknownCategoryError,
    UnknownDataSetError,
)

__all__ = [
    "GattFixError",
    "DataFileError",
    "UnknownCategoryError",
    "UnknownDataSetError",
]
