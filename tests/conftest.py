"""Pytest configuration and fixtures for gattfix tests."""

import os
import tempfile

# Logs and config point at a throwaway directory; must be set before gattfix is imported
_scratch = tempfile.mkdtemp(prefix="gattfix-tests-")
os.environ.setdefault("GATTFIX_LOG_DIR", _scratch)
os.environ.setdefault("GATTFIX_CONFIG", os.path.join(_scratch, "config.yaml"))

import pytest  # noqa: E402

from gattfix.core import config  # noqa: E402
from gattfix.bt_ref.blocklist import Blocklist  # noqa: E402
from gattfix.bt_ref.registry import IdentifierRegistry  # noqa: E402
from gattfix.catalog.catalog import TestCaseCatalog  # noqa: E402


@pytest.fixture(scope="session")
def registry():
    return IdentifierRegistry.from_yaml(config.PACKAGED_DATA_DIR / config.IDENTIFIERS_FILE)


@pytest.fixture(scope="session")
def blocklist():
    return Blocklist.from_yaml(config.PACKAGED_DATA_DIR / config.BLOCKLIST_FILE)


@pytest.fixture(scope="session")
def test_catalog():
    return TestCaseCatalog.from_yaml(config.PACKAGED_DATA_DIR / config.CATALOGS_FILE)


@pytest.fixture
def write_yaml(tmp_path):
    """Write *text* to a YAML file under tmp_path and return its path."""
    def _write(text, name="data.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
