import logging
import os

import pytest

os.environ.setdefault("REDIS_URL", "redis://localhost:6379/9")
os.environ.setdefault("SALE_ID", "sale-123")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from basta_bridge.config import get_settings  # noqa: E402
from fakes import FakePublisher  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()


@pytest.fixture
def bridge_logs(caplog):
    """Capture package logs even though the package logger does not propagate."""

    logger = logging.getLogger("basta_bridge")
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.INFO, logger="basta_bridge")
    yield caplog
    logger.removeHandler(caplog.handler)
