from django.urls import path

from .views import pay_periods, pay_settings, period_summary, quick_pay, reset_data

urlpatterns = [
    path("settings/", pay_settings, name="pay-settings"),
    path("periods/", pay_periods, name="pay-periods"),
    path("summary/", period_summary, name="period-summary"),
    path("quick-pay/", quick_pay, name="quick-pay"),
    path("reset/", reset_data, name="reset-data"),
]
