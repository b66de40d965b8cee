"""
Timecard service - the single entry point used by views and commands.

Wires time arithmetic, the holiday registry, the hour classifier, the entry
store, pay settings and the period aggregator together. Input errors are
raised as APIError subclasses before anything is written.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from core.exceptions import EntryNotFoundError, InvalidSelectionError, NonPositiveDurationError
from core.logging_utils import err_tag, safe_log_entry
from core.storage import LocalStorage
from holiday_registry.registry import HolidayRecord, HolidayRegistry
from worktime.entries import DtrEntry, EntryStore
from worktime.utils import (
    MINUTES_PER_HOUR,
    format_minutes,
    net_duration_minutes,
    parse_break_minutes,
    parse_iso_date,
    to_minutes_of_day,
)

from . import aggregator
from .classifier import classify
from .contracts import EntryDetail, PayPeriod, PaySettings, Summary, round_money
from .pay_settings import PaySettingsStore, parse_amount

logger = logging.getLogger(__name__)


@dataclass
class TimecardContext:
    """Stateful collaborators built once from persisted state"""

    storage: LocalStorage
    holidays: HolidayRegistry
    entries: EntryStore
    settings: PaySettingsStore

    @classmethod
    def from_storage(cls, storage: LocalStorage) -> "TimecardContext":
        return cls(
            storage=storage,
            holidays=HolidayRegistry(storage),
            entries=EntryStore(storage),
            settings=PaySettingsStore(storage),
        )


class TimecardService:
    """
    Operations invoked by the UI collaborator.

    Stateless apart from its context; callers fetch a fresh summary with
    select_period after any mutation.
    """

    def __init__(self, context: TimecardContext):
        self.context = context

    # Entries

    def save_entry(
        self, entry_date, time_in, time_out, break_minutes=0, location=""
    ) -> Tuple[DtrEntry, bool]:
        """
        Classify and upsert the entry for one date.

        Returns:
            (entry, created), created is False when an existing entry for
            the same date was replaced

        Raises:
            MissingFieldError / InvalidFormatError: bad input
            NonPositiveDurationError: net time is zero or negative
        """
        day = parse_iso_date(entry_date)
        time_in = format_minutes(to_minutes_of_day(time_in, "time_in"))
        time_out = format_minutes(to_minutes_of_day(time_out, "time_out"))
        break_minutes = parse_break_minutes(break_minutes)
        location = str(location or "").strip()

        holiday_kind = self.context.holidays.resolve(day)
        try:
            buckets = classify(day, location, time_in, time_out, break_minutes, holiday_kind)
        except NonPositiveDurationError as e:
            logger.info(
                "Entry rejected",
                extra={"entry_date": day.isoformat(), "err": err_tag(e)},
            )
            raise

        entry = DtrEntry(
            date=day,
            time_in=time_in,
            time_out=time_out,
            break_minutes=break_minutes,
            location=location,
            buckets=buckets,
        )
        replaced = self.context.entries.upsert(entry)

        logger.info(
            "Entry updated" if replaced else "Entry created",
            extra=safe_log_entry(entry, "save_entry"),
        )
        return entry, not replaced

    def delete_entry(self, entry_date) -> None:
        day = parse_iso_date(entry_date)
        if not self.context.entries.delete_by_date(day):
            raise EntryNotFoundError(day.isoformat())
        logger.info("Entry deleted", extra={"entry_date": day.isoformat()})

    def bulk_delete_by_period(self, period_key) -> int:
        """
        Delete every entry of one half-month period.

        Raises:
            InvalidSelectionError: unknown key or the all-entries selection
        """
        period = PayPeriod.parse(period_key)
        removed = self.context.entries.delete_by_period(period)
        logger.info(
            "Period entries deleted",
            extra={"period": period.key, "removed": removed},
        )
        return removed

    def entries_in_period(self, period_key) -> List[DtrEntry]:
        """Entries that ``bulk_delete_by_period`` would remove"""
        return self.context.entries.in_period(PayPeriod.parse(period_key))

    def entries_before(self, cutoff) -> List[DtrEntry]:
        """Entries that ``bulk_delete_before`` would remove"""
        return self.context.entries.before(cutoff)

    def bulk_delete_before(self, cutoff) -> int:
        """Delete entries dated strictly before ``cutoff``"""
        cutoff = parse_iso_date(cutoff, "before")
        removed = self.context.entries.delete_before(cutoff)
        logger.info(
            "Entries before cutoff deleted",
            extra={"cutoff": cutoff.isoformat(), "removed": removed},
        )
        return removed

    def list_entries(self) -> List[DtrEntry]:
        return self.context.entries.all_entries()

    def get_entry(self, entry_date) -> DtrEntry:
        day = parse_iso_date(entry_date)
        entry = self.context.entries.get(day)
        if entry is None:
            raise EntryNotFoundError(day.isoformat())
        return entry

    def entry_details(self, entry_date) -> EntryDetail:
        """Time span, site and the non-zero hour buckets of one entry"""
        entry = self.get_entry(entry_date)
        category = entry.buckets.primary_category()
        return EntryDetail(
            date=entry.date.isoformat(),
            location=entry.location if entry.has_location else "N/A",
            time_in=entry.time_in,
            time_out=entry.time_out,
            break_minutes=entry.break_minutes,
            net_hours=entry.net_hours,
            category=category.value,
            category_label=category.display_name,
            buckets=[
                {"category": bucket.value, "label": bucket.display_name, "hours": hours}
                for bucket, hours in entry.buckets.non_zero()
            ],
        )

    # Holidays

    def save_holiday(self, holiday_date, name, kind) -> HolidayRecord:
        """Add or replace a custom holiday"""
        return self.context.holidays.upsert_custom(holiday_date, name, kind)

    def edit_statutory_holiday(self, holiday_date, name, kind) -> HolidayRecord:
        """
        Rename or reclassify an existing statutory holiday.

        Raises:
            InvalidSelectionError: the date is not a statutory holiday
        """
        day = parse_iso_date(holiday_date)
        if day not in self.context.holidays.statutory():
            raise InvalidSelectionError(
                f"{day.isoformat()} is not a statutory holiday.", day.isoformat()
            )
        return self.context.holidays.upsert_statutory(day, name, kind)

    def delete_custom_holiday(self, holiday_date) -> None:
        """
        Raises:
            InvalidSelectionError: no custom holiday on that date (statutory
                holidays can only be edited)
        """
        day = parse_iso_date(holiday_date)
        if not self.context.holidays.delete_custom(day):
            raise InvalidSelectionError(
                f"No custom holiday on {day.isoformat()}.", day.isoformat()
            )

    def list_holidays(self) -> List[HolidayRecord]:
        return self.context.holidays.list_holidays()

    # Settings

    def get_settings(self) -> PaySettings:
        return self.context.settings.load()

    def change_settings(self, monthly_salary=None, admin_allowance=None) -> PaySettings:
        return self.context.settings.change(monthly_salary, admin_allowance)

    # Periods and summaries

    def list_periods(self) -> list:
        return aggregator.list_periods(self.list_entries())

    def default_period(self):
        return aggregator.default_period(self.list_entries())

    def select_period(self, period_key: Optional[str] = None) -> Summary:
        """
        Summary for a period key; no key selects the newest period.

        Raises:
            InvalidSelectionError: unknown period key
        """
        entries = self.list_entries()
        if period_key is None or not str(period_key).strip():
            period = aggregator.default_period(entries)
        else:
            period = PayPeriod.parse(period_key)
        return aggregator.summarize(entries, self.get_settings(), period)

    # Maintenance

    def clear_all_data(self) -> None:
        """Remove entries, settings and both holiday sets"""
        with self.context.storage.transaction():
            self.context.entries.clear()
            self.context.settings.clear()
            self.context.holidays.clear()
        logger.warning("All timecard data cleared")

    @staticmethod
    def quick_daily_pay(hourly_rate, time_in, time_out, break_minutes=0) -> dict:
        """
        Stand-alone calculator: net hours times an hourly rate.

        Raises:
            NonPositiveDurationError: net time is zero or negative
        """
        rate = parse_amount(hourly_rate, "hourly_rate")
        net_minutes = net_duration_minutes(time_in, time_out, break_minutes)
        if net_minutes <= 0:
            raise NonPositiveDurationError(net_minutes)

        net_hours = Decimal(net_minutes) / MINUTES_PER_HOUR
        return {
            "net_hours": round_money(net_hours),
            "hourly_rate": round_money(rate),
            "daily_pay": round_money(net_hours * rate),
        }
