# dtrcalc/urls.py
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from django.urls import include, path
from django.views.generic import RedirectView

from .health import health_check


@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    """API root endpoint showing available endpoints"""
    return Response(
        {
            "message": "DTR Calculator API",
            "version": "1.0",
            "api_versions": {"current": "v1", "supported": ["v1"], "deprecated": []},
            "endpoints": {
                "entries": request.build_absolute_uri("/api/v1/worktime/entries/"),
                "holidays": request.build_absolute_uri("/api/v1/holidays/"),
                "settings": request.build_absolute_uri("/api/v1/payroll/settings/"),
                "periods": request.build_absolute_uri("/api/v1/payroll/periods/"),
                "summary": request.build_absolute_uri("/api/v1/payroll/summary/"),
                "quick_pay": request.build_absolute_uri("/api/v1/payroll/quick-pay/"),
                "health": request.build_absolute_uri("/health/"),
            },
        }
    )


urlpatterns = [
    path("", RedirectView.as_view(url="/api/v1/", permanent=False)),
    path("health/", health_check, name="health-check"),
    path("api/v1/", api_root, name="api-v1-root"),
    path("api/v1/health/", health_check, name="api-health-check"),
    path("api/v1/worktime/", include("worktime.urls")),
    path("api/v1/holidays/", include("holiday_registry.urls")),
    path("api/v1/payroll/", include("payroll.urls")),
]
