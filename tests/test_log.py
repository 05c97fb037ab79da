"""Tests for log routing and level filtering."""

import logging

import pytest

from gattfix.cli import main
from gattfix.core import config
from gattfix.core.log import LOG__DEBUG, LOG__RESULTS, print_and_log


def _read(name):
    path = config.LOG_DIR / name
    return path.read_text(encoding="utf-8") if path.exists() else ""


@pytest.fixture
def gattfix_logger():
    logger = logging.getLogger("gattfix")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_debug_lines_dropped_at_info(gattfix_logger):
    gattfix_logger.setLevel(logging.INFO)
    print_and_log("debug line at info level", LOG__DEBUG)
    assert "debug line at info level" not in _read("debug.log")


def test_debug_lines_written_at_debug(gattfix_logger):
    gattfix_logger.setLevel(logging.DEBUG)
    print_and_log("debug line at debug level", LOG__DEBUG)
    assert "debug line at debug level" in _read("debug.log")


def test_results_dropped_above_info(gattfix_logger, capsys):
    gattfix_logger.setLevel(logging.ERROR)
    print_and_log("results line at error level", LOG__RESULTS)
    assert "results line at error level" not in _read("results.log")
    assert "results line at error level" in capsys.readouterr().out


def test_verbose_flag_enables_debug_log(gattfix_logger, capsys):
    gattfix_logger.setLevel(logging.INFO)
    marker = "[*] gattfix validate-uuid"
    before = _read("debug.log").count(marker)
    main(["validate-uuid", "00002a19-0000-1000-8000-00805f9b34fb"])
    assert _read("debug.log").count(marker) == before
    main(["validate-uuid", "--verbose", "00002a19-0000-1000-8000-00805f9b34fb"])
    assert _read("debug.log").count(marker) == before + 1
