import logging
import pytest
import structlog

@pytest.fixture(autouse=True)
def reset_logging():
    # the cli installs a handler bound to the runner's stderr; drop it after each test.
    yield
    package_logger = logging.getLogger("sassimport")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()
