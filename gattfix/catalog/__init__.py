"""
Conformance test-case catalogs, mock adapter data sets and the result log.
"""

from gattfix.catalog.records import (
    Category,
    Expectation,
    RequestOptions,
    TestCaseRecord,
)
from gattfix.catalog.catalog import TestCaseCatalog, catalog, get_catalog
from gattfix.catalog.adapters import AdapterDataSet, adapter_data_set, adapter_data_sets
from gattfix.catalog.results import ResultLog

__all__ = [
    "Category",
    "Expectation",
    "RequestOptions",
    "TestCaseRecord",
    "TestCaseCatalog",
    "catalog",
    "get_catalog",
    "AdapterDataSet",
    "adapter_data_set",
    "adapter_data_sets",
    "ResultLog",
]
