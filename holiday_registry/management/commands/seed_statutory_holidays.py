"""
Seed the stored statutory holiday set from the built-in table.

Usage:
    # Seed only if nothing is stored yet
    python manage.py seed_statutory_holidays

    # Overwrite user edits with the built-in table
    python manage.py seed_statutory_holidays --force
"""

import logging

from django.core.management.base import BaseCommand

from holiday_registry.registry import STATUTORY_HOLIDAYS_COLLECTION
from payroll.services.factory import get_timecard_service

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Seeds statutory holidays into timecard storage"

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Replace the stored (possibly edited) statutory set",
        )

    def handle(self, *args, **options):
        registry = get_timecard_service().context.holidays

        if options["force"]:
            count = registry.reset_statutory()
            self.stdout.write(
                self.style.SUCCESS(f"Statutory holidays reset: {count} records")
            )
            return

        if registry.storage.contains(STATUTORY_HOLIDAYS_COLLECTION):
            self.stdout.write(
                "Statutory holidays already stored, nothing to do (use --force to reset)"
            )
            return

        count = len(registry.statutory())
        self.stdout.write(self.style.SUCCESS(f"Statutory holidays seeded: {count} records"))
