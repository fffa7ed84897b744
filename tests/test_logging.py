"""Tests for setup_logging."""
import logging
from logging.handlers import RotatingFileHandler

import pytest

from autoshow.LoggingSetup import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:

    def test_terminal_run_logs_to_file_and_console(self, root_logger, tmp_path):
        setup_logging(tmp_path / "logs")

        kinds = [type(h) for h in root_logger.handlers]
        assert kinds == [RotatingFileHandler, logging.StreamHandler]
        assert root_logger.level == logging.INFO

    def test_detached_run_logs_to_file_only(self, root_logger, tmp_path):
        setup_logging(tmp_path / "logs", is_detached=True)

        assert [type(h) for h in root_logger.handlers] == [RotatingFileHandler]

    def test_verbose_sets_debug_level(self, root_logger, tmp_path):
        setup_logging(tmp_path / "logs", verbose=True, is_detached=True)

        assert root_logger.level == logging.DEBUG
        assert root_logger.handlers[0].level == logging.DEBUG

    def test_creates_log_file(self, root_logger, tmp_path):
        logs_dir = tmp_path / "nested" / "logs"

        setup_logging(logs_dir, is_detached=True)
        root_logger.handlers[0].flush()

        log_file = logs_dir / "autoshow.log"
        assert log_file.exists()
        assert "Logging initialized" in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(self, root_logger, tmp_path):
        setup_logging(tmp_path / "logs", is_detached=True)
        first = root_logger.handlers[0]

        setup_logging(tmp_path / "logs", is_detached=True)

        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0] is not first
        first.close()
