"""Tests for verbose logging."""

import logging

from sizematch.config import CheckConfig
from sizematch.verbose import logger_for_config, setup_logger


def test_logger_creates_debug_log(tmp_path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_writes_to_file(tmp_path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp


def test_verbose_mode_adds_stderr_handler(tmp_path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=True)

    handler_types = [type(h).__name__ for h in logger.handlers]
    assert sorted(handler_types) == ["FileHandler", "StreamHandler"]


def test_no_file_no_verbose_has_no_handlers():
    logger = setup_logger()
    assert logger.handlers == []


def test_logger_creates_parent_directories(tmp_path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False)

    assert debug_file.exists()


def test_setup_twice_replaces_handlers(tmp_path):
    setup_logger(tmp_path / "a.log", verbose=True, logger_name="sizematch_twice")
    logger = setup_logger(tmp_path / "b.log", verbose=False, logger_name="sizematch_twice")

    assert len(logger.handlers) == 1


def test_logger_for_config(tmp_path):
    cfg = CheckConfig(
        assertions=[{"count": 1}],
        verbose=True,
        debug_log=str(tmp_path / "run.log"),
    )
    logger = logger_for_config(cfg, logger_name="sizematch_cfg")

    assert logger.name == "sizematch_cfg"
    assert len(logger.handlers) == 2
    assert (tmp_path / "run.log").exists()
