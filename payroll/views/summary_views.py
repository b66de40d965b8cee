"""
Pay period and summary endpoints.

Contains endpoints for:
- Listing selectable pay periods with the default selection
- Summarizing one period (or all entries)
"""

import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers import SummarySerializer
from ..services.factory import get_timecard_service

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([AllowAny])
def pay_periods(request):
    """Selectable periods ("all" first, newest period next) and the default key"""
    service = get_timecard_service()
    periods = service.list_periods()
    return Response(
        {
            "default": service.default_period().key,
            "periods": [{"key": period.key, "label": period.label} for period in periods],
        }
    )


@api_view(["GET"])
@permission_classes([AllowAny])
def period_summary(request):
    """
    Summary for ?period=<key>; without a key the newest period is used.

    Unknown keys are rejected with INVALID_SELECTION.
    """
    service = get_timecard_service()
    summary = service.select_period(request.query_params.get("period"))
    return Response(SummarySerializer(summary).data)
