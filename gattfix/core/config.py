"""
Core configuration settings for gattfix.
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

# Base paths
GATTFIX_ROOT = Path(__file__).parent.parent
PACKAGED_DATA_DIR = GATTFIX_ROOT / "data"
DATA_DIR = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local/share")) / "gattfix"
CONFIG_DIR = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / "gattfix"
CONFIG_FILE = Path(os.getenv("GATTFIX_CONFIG", CONFIG_DIR / "config.yaml"))

# Log types
LOG__GENERAL = "GENERAL"
LOG__DEBUG = "DEBUG"
LOG__CATALOG = "CATALOG"
LOG__RESULTS = "RESULTS"

# Data file names (relative to the data directory)
IDENTIFIERS_FILE = "identifiers.yaml"
BLOCKLIST_FILE = "blocklist.yaml"
CATALOGS_FILE = "catalogs.yaml"
ADAPTERS_FILE = "adapters.yaml"

_DEFAULTS: Dict[str, Any] = {
    "data_dir": None,
    "log_level": "INFO",
}


def load_settings(path: Path = CONFIG_FILE) -> Dict[str, Any]:
    """Return settings from the optional YAML config file merged over defaults.

    A missing file is not an error.  A file that does not hold a mapping is
    ignored with the defaults kept.
    """
    settings = dict(_DEFAULTS)
    if not path.exists():
        return settings
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f)
    if isinstance(loaded, dict):
        settings.update({k: v for k, v in loaded.items() if k in _DEFAULTS})
    return settings


SETTINGS = load_settings()

# Environment variables win over the config file
LOG_DIR = Path(os.getenv("GATTFIX_LOG_DIR", DATA_DIR / "logs"))
DATA_FILES_DIR = Path(
    os.getenv("GATTFIX_DATA_DIR") or SETTINGS["data_dir"] or PACKAGED_DATA_DIR
)
LOG_LEVEL = getattr(logging, str(SETTINGS["log_level"]).upper(), logging.INFO)
