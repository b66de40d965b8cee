import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from payroll.services.factory import get_timecard_service

from .serializers import (
    HolidayInputSerializer,
    HolidayRecordSerializer,
    StatutoryHolidayUpdateSerializer,
)

logger = logging.getLogger(__name__)


@api_view(["GET", "POST"])
@permission_classes([AllowAny])
def holiday_list(request):
    """
    GET: effective holidays (statutory and custom) sorted by date
    POST: add or replace a custom holiday
    """
    service = get_timecard_service()

    if request.method == "GET":
        records = service.list_holidays()
        source = request.query_params.get("source")
        if source:
            records = [record for record in records if record.source.value == source]
        return Response(HolidayRecordSerializer(records, many=True).data)

    serializer = HolidayInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    values = serializer.validated_data
    record = service.save_holiday(values["date"], values["name"], values["kind"])
    return Response(
        HolidayRecordSerializer(record).data, status=status.HTTP_201_CREATED
    )


@api_view(["DELETE"])
@permission_classes([AllowAny])
def custom_holiday_detail(request, holiday_date):
    """Remove a custom holiday; statutory holidays cannot be deleted"""
    get_timecard_service().delete_custom_holiday(holiday_date)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["PUT"])
@permission_classes([AllowAny])
def statutory_holiday_detail(request, holiday_date):
    """Rename or reclassify a statutory holiday"""
    serializer = StatutoryHolidayUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    values = serializer.validated_data
    record = get_timecard_service().edit_statutory_holiday(
        holiday_date, values["name"], values["kind"]
    )
    return Response(HolidayRecordSerializer(record).data)
