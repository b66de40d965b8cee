from django.urls import path

from .views import custom_holiday_detail, holiday_list, statutory_holiday_detail

urlpatterns = [
    path("", holiday_list, name="holiday-list"),
    path(
        "statutory/<str:holiday_date>/",
        statutory_holiday_detail,
        name="statutory-holiday-detail",
    ),
    path("<str:holiday_date>/", custom_holiday_detail, name="custom-holiday-detail"),
]
