"""Tests for logging setup."""

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from webxml_params.extraction.extractor import logger as extractor_logger
from webxml_params.utils.logging import ROOT_LOGGER, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Leave the package logger as it was found."""
    logger = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestGetLogger:
    """Tests for get_logger."""

    def test_area_is_prefixed(self):
        """Test area names land under the package hierarchy."""
        assert get_logger("extraction.reader").name == "webxml_params.extraction.reader"

    def test_package_names_kept(self):
        """Test names already in the hierarchy are not prefixed twice."""
        assert get_logger("webxml_params").name == "webxml_params"
        assert get_logger("webxml_params.config").name == "webxml_params.config"

    def test_modules_use_package_hierarchy(self):
        """Test module loggers propagate to the package logger."""
        assert extractor_logger.name == "webxml_params.extraction"
        assert extractor_logger.parent is logging.getLogger(ROOT_LOGGER)


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.mark.parametrize(
        "verbosity, level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (3, logging.DEBUG)],
    )
    def test_levels(self, verbosity: int, level: int):
        """Test verbosity maps to the console level."""
        logger = setup_logging(verbosity=verbosity)

        assert logger.level == level
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_repeated_setup_replaces_handlers(self):
        """Test calling setup twice does not stack handlers."""
        setup_logging(verbosity=1)
        logger = setup_logging(verbosity=0)

        assert len(logger.handlers) == 1

    def test_log_file_receives_debug(self, tmp_path: Path):
        """Test the log file gets DEBUG records while the console stays quiet."""
        log_file = tmp_path / "logs" / "extract.log"
        logger = setup_logging(verbosity=0, log_file=log_file)

        get_logger("extraction").debug("parsed web.xml")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.WARNING
        assert "webxml_params.extraction - DEBUG - parsed web.xml" in log_file.read_text(
            encoding="utf-8"
        )
