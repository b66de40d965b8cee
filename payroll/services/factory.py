"""
Factory for the timecard service.

Builds the storage backend from settings once per process and hands every
caller the same service instance.
"""

import logging
import threading
from typing import Optional

from core.storage import LocalStorage, get_storage_backend

from .timecard_service import TimecardContext, TimecardService

logger = logging.getLogger(__name__)

_service: Optional[TimecardService] = None
_service_lock = threading.Lock()


def create_timecard_service(storage: Optional[LocalStorage] = None) -> TimecardService:
    """
    Build a new service over the given storage (or the configured one).

    Args:
        storage: LocalStorage to use; defaults to settings.TIMECARD_STORAGE
    """
    if storage is None:
        backend = get_storage_backend()
        storage = LocalStorage(backend)
        logger.debug(
            "Timecard storage created",
            extra={"backend": backend.__class__.__name__},
        )
    return TimecardService(TimecardContext.from_storage(storage))


def get_timecard_service() -> TimecardService:
    """
    Get the process-wide timecard service instance.

    Returns:
        TimecardService: Shared service instance
    """
    global _service
    if _service is None:
        with _service_lock:
            if _service is None:
                _service = create_timecard_service()
    return _service


def reset_timecard_service() -> None:
    """Forget the shared instance so the next call rebuilds it from settings"""
    global _service
    with _service_lock:
        _service = None
