"""
Global pytest configuration and fixtures
"""

import pytest

from django.core.cache import caches


@pytest.fixture(autouse=True)
def clear_cache():
    """Clear every cache (timecard storage included) around each test"""
    from payroll.services.factory import reset_timecard_service

    for cache in caches.all():
        cache.clear()
    reset_timecard_service()
    yield
    for cache in caches.all():
        cache.clear()
    reset_timecard_service()


@pytest.fixture
def storage():
    """LocalStorage over the locmem timecard cache"""
    from core.storage import CacheStorageBackend, LocalStorage

    return LocalStorage(CacheStorageBackend("timecard"))


@pytest.fixture
def timecard_service(storage):
    from payroll.services.factory import create_timecard_service

    return create_timecard_service(storage)


@pytest.fixture
def pay_settings():
    """Salary/allowance pair used across payroll tests"""
    from payroll.services.contracts import PaySettings

    return PaySettings(monthly_salary="26000", admin_allowance="1000")
