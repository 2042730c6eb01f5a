import io
import logging

from licensetype.core.config import LoggingConfig
from licensetype.core.log import configure_logging, get_logger, temp_level


def test_configure_logging_sets_logger_level():
    logger = logging.getLogger("licensetype")
    logger.setLevel(logging.WARNING)

    configure_logging(level="DEBUG")

    assert logger.level == logging.DEBUG


def test_configure_logging_does_not_stack_handlers():
    stream = io.StringIO()
    configure_logging(level="INFO", stream=stream)
    configure_logging(level="INFO", stream=stream)
    logger = get_logger()
    assert sum(isinstance(h, logging.StreamHandler) for h in logger.handlers) == 1


def test_temp_level_changes_and_restores():
    logger = logging.getLogger("licensetype.test.temp")
    logger.setLevel(logging.WARNING)
    original_level = logger.level

    with temp_level(logging.DEBUG, name=logger.name):
        assert logger.level == logging.DEBUG

    assert logger.level == original_level


def test_logging_config_apply():
    LoggingConfig(level="ERROR", propagate=False).apply()
    logger = get_logger()
    assert logger.level == logging.ERROR
    assert logger.propagate is False


def test_get_logger_defaults_to_package():
    assert get_logger().name == "licensetype"
    assert get_logger("licensetype.core.scan").name == "licensetype.core.scan"
