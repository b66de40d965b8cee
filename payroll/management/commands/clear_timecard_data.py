"""
Permanently delete all timecard data (entries, settings, holidays).

Usage:
    python manage.py clear_timecard_data --yes
"""

from django.core.management.base import BaseCommand, CommandError

from payroll.services.factory import get_timecard_service


class Command(BaseCommand):
    help = "Delete all DTR entries, pay settings and holidays"

    def add_arguments(self, parser):
        parser.add_argument(
            "--yes",
            action="store_true",
            help="Confirm the deletion",
        )

    def handle(self, *args, **options):
        if not options["yes"]:
            raise CommandError("Refusing to delete data without --yes")

        get_timecard_service().clear_all_data()
        self.stdout.write(self.style.SUCCESS("All timecard data cleared"))
