from django.apps import AppConfig


class HolidayRegistryConfig(AppConfig):
    name = "holiday_registry"
    verbose_name = "Holiday registry"
