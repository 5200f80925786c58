import logging

import pytest

from spykit.core.config import LogLevel, SpyKitSettings
from spykit.core.logging_config import LOGGER_NAME, configure_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers = []
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


class TestConfigureLogging:

    def test_sets_level_from_settings(self, clean_logger):
        configure_logging(SpyKitSettings(_env_file=None, LOG_LEVEL=LogLevel.ERROR))
        assert clean_logger.level == logging.ERROR

    def test_adds_one_handler_only(self, clean_logger):
        settings = SpyKitSettings(_env_file=None, LOG_LEVEL=LogLevel.DEBUG)
        configure_logging(settings)
        configure_logging(settings)
        assert len(clean_logger.handlers) == 1

    def test_returns_package_logger(self, clean_logger):
        assert configure_logging(SpyKitSettings(_env_file=None)) is clean_logger
