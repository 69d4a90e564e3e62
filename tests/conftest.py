
# third-party
import pytest
from loguru import logger


@pytest.fixture
def messages():
    """Capture log records emitted by the package."""
    records = []
    logger.enable('strtools')
    handler = logger.add(records.append, level='TRACE',
                         format='{level}: {message}')
    yield records
    logger.remove(handler)
    logger.disable('strtools')
