"""Tests for product_uploader/common/log_config.py"""

import logging
import sys

from product_uploader.common.log_config import LOGGER_NAME, setup_logging


class TestSetupLogging:
    def teardown_method(self):
        """Reset logger between tests."""
        logger = logging.getLogger(LOGGER_NAME)
        logger.handlers.clear()
        logger.setLevel(logging.WARNING)

    def test_default_level_is_info(self):
        setup_logging()
        assert logging.getLogger(LOGGER_NAME).level == logging.INFO

    def test_verbose_sets_debug(self):
        setup_logging(verbose=True)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_quiet_sets_warning(self):
        setup_logging(quiet=True)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_handler_outputs_to_stderr(self):
        setup_logging()
        logger = logging.getLogger(LOGGER_NAME)
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging()
        setup_logging(verbose=True)
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    def test_package_loggers_inherit(self):
        setup_logging(quiet=True)
        child = logging.getLogger("product_uploader.uploader")
        assert child.getEffectiveLevel() == logging.WARNING
