"""
Entry store: one classified DTR entry per calendar date.

The collection is kept sorted by date ascending. Every mutation is a single
read-modify-write of the whole ``entries`` document under the storage lock.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from core.exceptions import CorruptPersistedStateError, InvalidSelectionError
from core.storage import Collection, LocalStorage
from payroll.services.contracts import ALL_PERIODS, BucketSet

from .serializers import BUCKET_FIELDS, StoredEntrySerializer
from .utils import minutes_to_hours, net_duration_minutes, parse_iso_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DtrEntry:
    date: date
    time_in: str
    time_out: str
    break_minutes: int = 0
    location: str = ""
    buckets: BucketSet = field(default_factory=BucketSet)

    @property
    def net_minutes(self) -> int:
        return net_duration_minutes(self.time_in, self.time_out, self.break_minutes)

    @property
    def net_hours(self) -> Decimal:
        return minutes_to_hours(self.net_minutes)

    @property
    def has_location(self) -> bool:
        return bool(self.location.strip())

    def to_storage(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "location": self.location,
            "time_in": self.time_in,
            "time_out": self.time_out,
            "break_minutes": self.break_minutes,
            **self.buckets.as_dict(),
        }

    @classmethod
    def from_storage(cls, data: dict) -> "DtrEntry":
        serializer = StoredEntrySerializer(data=data)
        if not serializer.is_valid():
            raise CorruptPersistedStateError("entries", f"invalid entry {serializer.errors}")
        values = serializer.validated_data
        return cls(
            date=values["date"],
            time_in=values["time_in"],
            time_out=values["time_out"],
            break_minutes=values["break_minutes"],
            location=values.get("location", ""),
            buckets=BucketSet(**{name: values[name] for name in BUCKET_FIELDS}),
        )


def _decode_entries(data) -> List[DtrEntry]:
    if not isinstance(data, list):
        raise CorruptPersistedStateError("entries", "expected a list")
    by_date = {}
    for item in data:
        if not isinstance(item, dict):
            raise CorruptPersistedStateError("entries", "expected objects")
        entry = DtrEntry.from_storage(item)
        by_date[entry.date] = entry
    return [by_date[day] for day in sorted(by_date)]


def _encode_entries(entries: List[DtrEntry]) -> list:
    return [entry.to_storage() for entry in entries]


ENTRIES_COLLECTION = Collection(
    key="entries",
    default=list,
    decode=_decode_entries,
    encode=_encode_entries,
)


class EntryStore:
    """Persisted DTR entries keyed by date"""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def all_entries(self) -> List[DtrEntry]:
        return self.storage.load(ENTRIES_COLLECTION)

    def get(self, value) -> Optional[DtrEntry]:
        day = parse_iso_date(value)
        for entry in self.all_entries():
            if entry.date == day:
                return entry
        return None

    def upsert(self, entry: DtrEntry) -> bool:
        """
        Insert the entry or replace the one with the same date.

        Returns:
            True when an existing entry was replaced
        """
        with self.storage.transaction():
            entries = self.all_entries()
            kept = [existing for existing in entries if existing.date != entry.date]
            replaced = len(kept) != len(entries)
            kept.append(entry)
            kept.sort(key=lambda item: item.date)
            self.storage.save(ENTRIES_COLLECTION, kept)
        return replaced

    def delete_by_date(self, value) -> int:
        day = parse_iso_date(value)
        return self._remove_where(lambda entry: entry.date == day)

    def in_period(self, period) -> List[DtrEntry]:
        """
        Entries inside a half-month pay period.

        Raises:
            InvalidSelectionError: for the all-entries selection
        """
        return self._select_where(self._period_predicate(period))

    def before(self, cutoff) -> List[DtrEntry]:
        """Entries dated strictly before the cutoff"""
        return self._select_where(self._before_predicate(cutoff))

    def delete_by_period(self, period) -> int:
        """Remove exactly the entries ``in_period`` selects"""
        return self._remove_where(self._period_predicate(period))

    def delete_before(self, cutoff) -> int:
        """Remove exactly the entries ``before`` selects"""
        return self._remove_where(self._before_predicate(cutoff))

    def clear(self) -> None:
        with self.storage.transaction():
            self.storage.clear(ENTRIES_COLLECTION)

    @staticmethod
    def _period_predicate(period):
        if period is ALL_PERIODS or not hasattr(period, "contains"):
            raise InvalidSelectionError(
                "Select a specific pay period to delete.", getattr(period, "key", period)
            )
        return lambda entry: period.contains(entry.date)

    @staticmethod
    def _before_predicate(cutoff):
        cutoff = parse_iso_date(cutoff, "before")
        return lambda entry: entry.date < cutoff

    def _select_where(self, predicate) -> List[DtrEntry]:
        return [entry for entry in self.all_entries() if predicate(entry)]

    def _remove_where(self, predicate) -> int:
        with self.storage.transaction():
            entries = self.all_entries()
            kept = [entry for entry in entries if not predicate(entry)]
            removed = len(entries) - len(kept)
            if removed:
                self.storage.save(ENTRIES_COLLECTION, kept)

        if removed:
            logger.info("Entries removed", extra={"removed": removed})
        return removed
