from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

from sysfile.core.logging import SysFileLogger, get_logger, setup_logging


def test_setup_logging_with_rich() -> None:
    logger = setup_logging("debug", use_rich=True)
    assert isinstance(logger, SysFileLogger)
    assert logger.rich_enabled is True
    assert logger.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in logger.handlers)
    assert logger.log_file is None


def test_setup_logging_plain_console_and_file(tmp_path: Path) -> None:
    logger = setup_logging("INFO", use_rich=False, log_dir=tmp_path, file_prefix="run")
    assert logger.rich_enabled is False
    assert not any(isinstance(h, RichHandler) for h in logger.handlers)
    assert logger.log_file is not None
    assert logger.log_file.parent == tmp_path
    assert logger.log_file.name.startswith("run_")

    get_logger("sysfile.tests").info("hello from tests")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from tests" in logger.log_file.read_text(encoding="utf-8")

    setup_logging("WARNING", use_rich=False)


def test_setup_logging_rebuilds_handlers() -> None:
    first = setup_logging("INFO", use_rich=False)
    count = len(first.handlers)
    second = setup_logging("INFO", use_rich=False)
    assert second is first
    assert len(second.handlers) == count


def test_unknown_level_falls_back_to_info() -> None:
    logger = setup_logging("chatty", use_rich=False)
    assert logger.level == logging.INFO
    setup_logging("WARNING", use_rich=False)


def test_get_logger_namespaces_children() -> None:
    assert get_logger().name == "sysfile"
    assert get_logger("paths").name == "sysfile.paths"
    assert get_logger("sysfile.core.paths").name == "sysfile.core.paths"
