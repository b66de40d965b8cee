"""
Tests for the timecard service factory
"""

from core.storage import CacheStorageBackend, LocalStorage
from payroll.services.factory import (
    create_timecard_service,
    get_timecard_service,
    reset_timecard_service,
)
from payroll.services.timecard_service import TimecardService


class TestTimecardServiceFactory:
    def test_shared_instance(self):
        assert get_timecard_service() is get_timecard_service()

    def test_reset_rebuilds_instance(self):
        first = get_timecard_service()

        reset_timecard_service()

        assert get_timecard_service() is not first

    def test_uses_configured_backend(self):
        backend = get_timecard_service().context.storage.backend

        assert isinstance(backend, CacheStorageBackend)
        assert backend.alias == "timecard"

    def test_explicit_storage(self, storage):
        service = create_timecard_service(storage)

        assert isinstance(service, TimecardService)
        assert service.context.storage is storage
        assert service.context.entries.storage is storage
        assert service is not get_timecard_service()

    def test_services_share_stored_data(self):
        storage = LocalStorage(CacheStorageBackend("timecard"))
        create_timecard_service(storage).change_settings("26000", "0")

        assert get_timecard_service().get_settings().monthly_salary == 26000
