import logging

import pytest


@pytest.fixture
def clean_logger():
    # setup_logger() configures a process-wide logger; give each test a clean one
    logger = logging.getLogger("supermarket")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
