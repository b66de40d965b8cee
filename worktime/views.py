import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from payroll.services.factory import get_timecard_service
from payroll.serializers import EntryDetailSerializer

from .serializers import BulkDeleteSerializer, EntryInputSerializer, EntrySerializer

logger = logging.getLogger(__name__)


@api_view(["GET", "POST"])
@permission_classes([AllowAny])
def entry_list(request):
    """
    GET: all entries, oldest first
    POST: save (insert or replace) the entry for one date
    """
    service = get_timecard_service()

    if request.method == "GET":
        entries = service.list_entries()
        return Response(
            {
                "count": len(entries),
                "results": EntrySerializer(entries, many=True).data,
            }
        )

    serializer = EntryInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    values = serializer.validated_data

    entry, created = service.save_entry(
        entry_date=values["date"],
        time_in=values["time_in"],
        time_out=values["time_out"],
        break_minutes=values["break_minutes"],
        location=values["location"],
    )
    return Response(
        EntrySerializer(entry).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
    )


@api_view(["GET", "DELETE"])
@permission_classes([AllowAny])
def entry_detail(request, entry_date):
    """
    GET: entry details with its non-zero hour buckets
    DELETE: remove the entry
    """
    service = get_timecard_service()

    if request.method == "GET":
        return Response(EntryDetailSerializer(service.entry_details(entry_date)).data)

    service.delete_entry(entry_date)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["POST"])
@permission_classes([AllowAny])
def bulk_delete(request):
    """
    Delete every entry of a pay period ({"period": "2025-06-H1"}) or every
    entry dated before a cutoff ({"before": "2025-06-01"}).
    """
    serializer = BulkDeleteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    values = serializer.validated_data
    service = get_timecard_service()

    if "period" in values:
        removed = service.bulk_delete_by_period(values["period"])
        target = {"period": values["period"]}
    else:
        removed = service.bulk_delete_before(values["before"])
        target = {"before": values["before"].isoformat()}

    return Response({"deleted": removed, **target})
