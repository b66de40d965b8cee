"""
Pay settings endpoint.
"""

import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..serializers import PaySettingsInputSerializer, PaySettingsSerializer
from ..services.factory import get_timecard_service

logger = logging.getLogger(__name__)


@api_view(["GET", "PUT"])
@permission_classes([AllowAny])
def pay_settings(request):
    """
    GET: current monthly salary and allowance
    PUT: replace both values (blank means 0)
    """
    service = get_timecard_service()

    if request.method == "GET":
        return Response(PaySettingsSerializer(service.get_settings()).data)

    serializer = PaySettingsInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    settings = service.change_settings(**serializer.validated_data)
    return Response(PaySettingsSerializer(settings).data)
