from django.apps import AppConfig


class PayrollConfig(AppConfig):
    name = "payroll"

    def ready(self):
        """Drop any service built before settings were final (test overrides)"""
        from payroll.services.factory import reset_timecard_service

        reset_timecard_service()
