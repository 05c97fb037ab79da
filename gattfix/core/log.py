"""
Core logging functionality for gattfix.

Every log type gets its own file under ``config.LOG_DIR`` so catalog loading
noise stays apart from the results a harness records.
"""

import logging
from pathlib import Path
from typing import Dict
from . import config

# Re-export log type constants for external modules
LOG__GENERAL = config.LOG__GENERAL
LOG__DEBUG = config.LOG__DEBUG
LOG__CATALOG = config.LOG__CATALOG
LOG__RESULTS = config.LOG__RESULTS

_LOG_PATHS: Dict[str, Path] = {
    LOG__GENERAL: config.LOG_DIR / "general.log",
    LOG__DEBUG: config.LOG_DIR / "debug.log",
    LOG__CATALOG: config.LOG_DIR / "catalog.log",
    LOG__RESULTS: config.LOG_DIR / "results.log",
}

config.LOG_DIR.mkdir(parents=True, exist_ok=True)

# Raw message only
_formatter = logging.Formatter("%(message)s")

# Create and configure handlers
_handlers: Dict[str, logging.Handler] = {}
for log_type, path in _LOG_PATHS.items():
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(_formatter)
    _handlers[log_type] = handler

# Root logger for gattfix
_logger = logging.getLogger("gattfix")
_logger.setLevel(config.LOG_LEVEL)
_logger.propagate = False
_logger.addHandler(_handlers[LOG__GENERAL])

# Clean up temporary variables
del log_type, path, handler


# Debug-type lines are DEBUG records; everything else is INFO
_LOG_LEVELS: Dict[str, int] = {LOG__DEBUG: logging.DEBUG}


def _emit(line: str, log_type: str) -> None:
    level = _LOG_LEVELS.get(log_type, logging.INFO)
    if not _logger.isEnabledFor(level):
        return
    record = logging.LogRecord(
        name=f"gattfix.{log_type.lower()}",
        level=level,
        pathname=__file__,
        lineno=0,
        msg=line.rstrip("\n"),
        args=(),
        exc_info=None,
    )
    _handlers.get(log_type, _handlers[LOG__GENERAL]).handle(record)


def logging__debug_log(msg: str) -> None:
    """Write to debug log."""
    _emit(msg, LOG__DEBUG)


def logging__general_log(msg: str) -> None:
    """Write to general log."""
    _emit(msg, LOG__GENERAL)


def logging__catalog_log(msg: str) -> None:
    """Write to catalog log."""
    _emit(msg, LOG__CATALOG)


def logging__results_log(msg: str) -> None:
    """Write to results log."""
    _emit(msg, LOG__RESULTS)


_log_func_map = {
    LOG__GENERAL: logging__general_log,
    LOG__DEBUG: logging__debug_log,
    LOG__CATALOG: logging__catalog_log,
    LOG__RESULTS: logging__results_log,
}


def logging__log_event(log_type: str, string_to_log: str) -> None:
    """Log an event to the specified log type."""
    _log_func_map.get(log_type, logging__general_log)(string_to_log)


def print_and_log(output_string: str, log_type: str = LOG__GENERAL) -> None:
    """Print to stdout and log to the specified log type.

    Debug and catalog messages only go to their files.
    """
    if log_type not in (LOG__DEBUG, LOG__CATALOG):
        print(output_string)
    logging__log_event(log_type, output_string)
