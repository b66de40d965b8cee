"""
Stand-alone calculator and maintenance endpoints.
"""

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers import QuickPayResultSerializer, QuickPaySerializer, ResetSerializer
from ..services.factory import get_timecard_service
from ..services.timecard_service import TimecardService

logger = logging.getLogger(__name__)


@api_view(["POST"])
@permission_classes([AllowAny])
def quick_pay(request):
    """Daily pay for one time span at a given hourly rate; nothing is stored"""
    serializer = QuickPaySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    result = TimecardService.quick_daily_pay(**serializer.validated_data)
    return Response(QuickPayResultSerializer(result).data)


@api_view(["POST"])
@permission_classes([AllowAny])
def reset_data(request):
    """Permanently delete entries, settings and holidays ({"confirm": true})"""
    serializer = ResetSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    get_timecard_service().clear_all_data()
    return Response(status=status.HTTP_204_NO_CONTENT)
