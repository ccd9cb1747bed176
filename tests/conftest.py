import logging

import pytest

from leathershop.infrastructure import bootstrap


@pytest.fixture(autouse=True)
def _isolate_app_state():
    """Undo the CLI's logging setup and cached settings between tests."""
    yield
    app_logger = logging.getLogger("leathershop")
    app_logger.handlers.clear()
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)
    bootstrap.reset()
