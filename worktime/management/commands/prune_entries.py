from django.core.management.base import BaseCommand, CommandError

from core.exceptions import APIError
from payroll.services.contracts import PayPeriod
from payroll.services.factory import get_timecard_service
from worktime.utils import parse_iso_date
import logging

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Delete DTR entries of one pay period or dated before a cutoff'

    def add_arguments(self, parser):
        target = parser.add_mutually_exclusive_group(required=True)
        target.add_argument(
            '--before',
            type=str,
            help='Delete entries dated strictly before YYYY-MM-DD'
        )
        target.add_argument(
            '--period',
            type=str,
            help='Delete entries of a pay period such as 2025-06-H1'
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be deleted without actually deleting'
        )
        parser.add_argument(
            '--confirm',
            action='store_true',
            help='Actually perform the deletion (required for real deletion)'
        )

    def handle(self, *args, **options):
        service = get_timecard_service()

        try:
            if options['period']:
                matches = service.entries_in_period(options['period'])
                description = PayPeriod.parse(options['period']).label
            else:
                matches = service.entries_before(options['before'])
                description = f"before {parse_iso_date(options['before'], 'before').isoformat()}"
        except APIError as e:
            raise CommandError(e.message)

        if not matches:
            self.stdout.write(self.style.SUCCESS(f"No entries found {description}"))
            return

        self.stdout.write(f"Found {len(matches)} entries ({description}):")
        for entry in matches[:5]:
            self.stdout.write(f"  - {entry.date.isoformat()} {entry.time_in}-{entry.time_out}")
        if len(matches) > 5:
            self.stdout.write(f"  ... and {len(matches) - 5} more")

        if options['dry_run']:
            self.stdout.write(self.style.WARNING("DRY RUN - No entries were deleted"))
            return

        if not options['confirm']:
            self.stdout.write(self.style.ERROR("Add --confirm flag to actually delete entries"))
            return

        if options['period']:
            deleted = service.bulk_delete_by_period(options['period'])
        else:
            deleted = service.bulk_delete_before(options['before'])

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} entries"))
        logger.warning("Entries pruned", extra={"removed": deleted})
