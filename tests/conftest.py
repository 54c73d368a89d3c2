import logging

import pytest

from brightnessqs.logs import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers installed by setup_logging between tests"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
