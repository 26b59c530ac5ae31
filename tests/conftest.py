"""Root conftest: shared test configuration."""

import os

import pytest

from querygate.config import get_settings

# Tests never pick up a developer's local overrides
os.environ.setdefault("QUERYGATE_LOADER_ON_FETCH", "false")
os.environ.setdefault("QUERYGATE_LOG_FORMAT", "json")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are lru_cached; clear around every test so monkeypatched env applies."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
