"""日志初始化的测试。"""
from __future__ import annotations

import logging
from pathlib import Path

from zhfmt.logging_utils import resolve_level, setup_logger


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_repeated_setup_replaces_handlers(tmp_path: Path) -> None:
    name = "zhfmt.test_logging"
    setup_logger(name, "info", log_file=tmp_path / "a.log")
    logger = setup_logger(name, "debug", log_file=tmp_path / "a.log")
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG
    assert not logger.propagate

    logger = setup_logger(name, "warning")
    assert len(logger.handlers) == 1


def test_file_handler_writes(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "run.log"
    logger = setup_logger("zhfmt.test_file", "info", log_file=log_file)
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
