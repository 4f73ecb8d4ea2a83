import pytest
from loguru import logger


@pytest.fixture
def logs():
    """
    Capture everything narigama_optional logs during the test, as loguru records.
    """
    records = []
    logger.enable("narigama_optional")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG", format="{message}")

    try:
        yield records

    finally:
        logger.remove(handler_id)
        logger.disable("narigama_optional")
