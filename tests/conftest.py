import logging

import pytest

from scopecheck.core.logger import DEFAULT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_project_logger():
    # handlers hold per-test tmp dirs and captured streams
    yield
    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
