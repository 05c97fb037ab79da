"""YAML data-file loading shared by the registry, blocklist and catalogs."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from gattfix.core import config
from gattfix.core.errors import DataFileError
from gattfix.core.log import print_and_log, LOG__CATALOG


def data_path(file_name: str, data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return the path of *file_name* inside *data_dir* (default: configured data dir)."""
    return Path(data_dir or config.DATA_FILES_DIR) / file_name


def load_yaml_mapping(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML file whose top level must be a mapping.

    Raises DataFileError when the file is missing, unparsable or not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise DataFileError(path, "file does not exist")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataFileError(path, f"YAML parse error: {e}") from e
    if not isinstance(data, dict):
        raise DataFileError(path, "top level is not a mapping")
    print_and_log(f"[*] Loaded {path.name} ({len(data)} sections)", LOG__CATALOG)
    return data
