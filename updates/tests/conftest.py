# updates/tests/conftest.py
import pytest
from django.core.cache import cache

from updates import stats
from updates.stats import UpdateStatsTracker
from updates.stores import get_version_store


@pytest.fixture(autouse=True)
def tracker(monkeypatch):
    """Fresh stats tracker, throttle cache and store for every test."""
    fresh = UpdateStatsTracker()
    monkeypatch.setattr(stats, "update_stats", fresh)
    cache.clear()
    get_version_store.cache_clear()
    yield fresh
    get_version_store.cache_clear()


@pytest.fixture
def memory_store(settings):
    settings.VERSION_STORE = {"BACKEND": "updates.stores.InMemoryVersionStore", "OPTIONS": {}}
    get_version_store.cache_clear()
    return get_version_store()


@pytest.fixture
def admin_key(settings):
    settings.ADMIN_KEY = "admin-secret"
    return {"HTTP_X_ADMIN_KEY": "admin-secret"}


@pytest.fixture
def webhook_secret(settings):
    settings.WEBHOOK_SECRET = "hook-secret"
    return {"HTTP_X_WEBHOOK_SECRET": "hook-secret"}
