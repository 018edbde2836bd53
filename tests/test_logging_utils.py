"""Tests for logger setup."""

import logging

import pytest

from sudoku_engine.logging_utils import get_logger


@pytest.fixture
def logger_name(request):
    name = f"sudoku_engine.tests.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


class TestGetLogger:
    """Tests for get_logger."""

    def test_single_console_handler(self, logger_name):
        """Repeated calls do not stack console handlers."""
        get_logger(logger_name)
        logger = get_logger(logger_name)
        assert len(logger.handlers) == 1

    def test_file_added_on_later_call(self, logger_name, tmp_path):
        """A log file passed after the first call is still attached."""
        get_logger(logger_name)
        log_file = tmp_path / "logs" / "run.log"
        logger = get_logger(logger_name, log_file=log_file)

        assert len(file_handlers(logger)) == 1
        logger.info("written")
        for handler in file_handlers(logger):
            handler.flush()
        assert "written" in log_file.read_text()

    def test_file_not_duplicated(self, logger_name, tmp_path):
        log_file = tmp_path / "run.log"
        get_logger(logger_name, log_file=log_file)
        logger = get_logger(logger_name, log_file=log_file)
        assert len(file_handlers(logger)) == 1

    def test_level_updates_handlers(self, logger_name):
        get_logger(logger_name, level="INFO")
        logger = get_logger(logger_name, level="debug")
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)

    def test_unknown_level(self, logger_name):
        with pytest.raises(ValueError):
            get_logger(logger_name, level="chatty")
