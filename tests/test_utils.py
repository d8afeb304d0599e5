import io
import logging

import pytest

from ringcalc.utils.logging import get_logger


def test_logging():
    logger = get_logger("ringcalc-test")
    logger2 = get_logger("ringcalc-test")
    assert logger is logger2
    assert len(logger.handlers) == 1
    logger.debug("debug message")


def test_logging_level_by_name():
    stream = io.StringIO()
    logger = get_logger("ringcalc-test-stream", level="warning", stream=stream)
    assert logger.level == logging.WARNING
    logger.info("hidden")
    logger.warning("shown")
    assert stream.getvalue() == "WARNING:ringcalc-test-stream:shown\n"
    with pytest.raises(ValueError):
        get_logger("ringcalc-test-stream", level="loud")
