"""
Health check views for DevOps monitoring
"""

import logging

from django.http import JsonResponse
from django.utils import timezone

from core.logging_utils import err_tag
from core.storage import get_storage_backend

logger = logging.getLogger(__name__)

CHECK_KEY = "health_check"


def health_check(request):
    """
    Liveness plus a write/read/delete round trip on the timecard storage
    """
    status = {
        "status": "healthy",
        "timestamp": timezone.now().isoformat(),
        "services": {"django": {"status": "healthy"}},
    }

    try:
        backend = get_storage_backend()
        marker = status["timestamp"]
        backend.write(CHECK_KEY, marker)
        if backend.read(CHECK_KEY) != marker:
            raise RuntimeError("storage returned a different value")
        backend.delete(CHECK_KEY)
        status["services"]["storage"] = {
            "status": "healthy",
            "backend": backend.__class__.__name__,
        }
    except (OSError, RuntimeError) as e:
        logger.error("Storage health check failed", extra={"err": err_tag(e)})
        status["services"]["storage"] = {
            "status": "unhealthy",
            "error": "Storage unavailable",
        }
        status["status"] = "unhealthy"

    http_status = 200 if status["status"] == "healthy" else 503
    return JsonResponse(status, status=http_status)
