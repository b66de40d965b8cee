"""
Print the pay summary for one period.

Usage:
    # Newest period
    python manage.py payroll_summary

    # Specific half-month or everything
    python manage.py payroll_summary --period 2025-06-H1
    python manage.py payroll_summary --period all
"""

from django.core.management.base import BaseCommand, CommandError

from core.exceptions import InvalidSelectionError
from payroll.services.enums import PayCategory
from payroll.services.factory import get_timecard_service


class Command(BaseCommand):
    help = "Show hours and gross pay for a pay period"

    def add_arguments(self, parser):
        parser.add_argument(
            "--period",
            type=str,
            help='Period key such as "2025-06-H1", or "all" (defaults to the newest period)',
        )
        parser.add_argument(
            "--list",
            action="store_true",
            help="List selectable periods instead of summarizing",
        )

    def handle(self, *args, **options):
        service = get_timecard_service()

        if options["list"]:
            for period in service.list_periods():
                self.stdout.write(f"{period.key:<12} {period.label}")
            return

        try:
            summary = service.select_period(options.get("period"))
        except InvalidSelectionError as e:
            raise CommandError(e.message)

        self.stdout.write(self.style.MIGRATE_HEADING(summary["period_label"]))
        self.stdout.write(f"Entries:      {summary['entry_count']}")
        self.stdout.write(f"Hourly rate:  {summary['hourly_rate']}")
        for category in PayCategory:
            hours = summary["hours"][category.value]
            if hours:
                pay = summary["pay"][category.value]
                self.stdout.write(f"  {category.display_name:<24} {hours:>8} h  {pay:>12}")
        self.stdout.write(f"Overtime hrs: {summary['overtime_hours']}")
        self.stdout.write(f"Allowance:    {summary['allowance_pay']}")
        self.stdout.write(self.style.SUCCESS(f"Gross pay:    {summary['gross_pay']}"))
