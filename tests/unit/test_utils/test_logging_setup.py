"""Tests for logging setup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from termformat.config.settings import LoggingConfig
from termformat.utils.logging import setup_logging


class TestSetupLogging:
    def teardown_method(self) -> None:
        logger = logging.getLogger("termformat")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    def test_defaults(self) -> None:
        setup_logging()
        logger = logging.getLogger("termformat")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        setup_logging(LoggingConfig(level="DEBUG"))
        setup_logging(LoggingConfig(level="DEBUG"))
        logger = logging.getLogger("termformat")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "termformat.log"
        setup_logging(LoggingConfig(level="INFO", file=str(log_file)))
        logging.getLogger("termformat.test").info("written")
        for handler in logging.getLogger("termformat").handlers:
            handler.flush()
        assert "written" in log_file.read_text()

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(LoggingConfig(level="chatty"))
        assert logging.getLogger("termformat").level == logging.INFO

    def test_file_handler_creates_parent_directory(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "nested" / "termformat.log"
        setup_logging(LoggingConfig(file=str(log_file)))
        assert log_file.parent.is_dir()
        assert len(logging.getLogger("termformat").handlers) == 2

    def test_console_handler_writes_to_stderr(self) -> None:
        setup_logging()
        (handler,) = logging.getLogger("termformat").handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
