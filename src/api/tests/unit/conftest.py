"""Unit test fixtures with mocked dependencies."""

import pytest


@pytest.fixture(autouse=True)
def isolate_settings_cache():
    """Clear cached settings so environment changes made by a test stay local."""
    from infrastructure.settings import (
        get_cors_settings,
        get_database_settings,
        get_identity_service_settings,
        get_settings,
    )

    caches = (
        get_settings,
        get_database_settings,
        get_identity_service_settings,
        get_cors_settings,
    )
    for cache in caches:
        cache.cache_clear()
    yield
    for cache in caches:
        cache.cache_clear()
