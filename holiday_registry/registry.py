"""
Holiday Registry - resolves a calendar date to its holiday classification

Two record sets are kept in local storage:
- statutory holidays, seeded from the built-in table on first use and
  editable (never deletable) afterwards
- custom holidays added by the user

A date has at most one effective classification and the statutory record
always wins over a custom one.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from core.exceptions import CorruptPersistedStateError, MissingFieldError
from core.storage import Collection, LocalStorage
from worktime.utils import parse_iso_date

from .config.statutory_holidays import STATUTORY_HOLIDAYS
from .enums import HolidayKind, HolidaySource
from .serializers import StoredHolidaySerializer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HolidayRecord:
    date: date
    name: str
    kind: HolidayKind
    source: HolidaySource = HolidaySource.CUSTOM

    def as_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "name": self.name,
            "kind": self.kind.value,
            "source": self.source.value,
        }


def builtin_statutory_holidays() -> Dict[date, HolidayRecord]:
    """Fresh copy of the built-in statutory table"""
    return {
        date.fromisoformat(day): HolidayRecord(
            date=date.fromisoformat(day),
            name=name,
            kind=HolidayKind(kind),
            source=HolidaySource.STATUTORY,
        )
        for day, (name, kind) in STATUTORY_HOLIDAYS.items()
    }


def _validated_record(key: str, data: dict, source: HolidaySource) -> HolidayRecord:
    serializer = StoredHolidaySerializer(data=data)
    if not serializer.is_valid():
        raise CorruptPersistedStateError(key, f"invalid holiday {serializer.errors}")
    values = serializer.validated_data
    return HolidayRecord(
        date=values["date"],
        name=values["name"],
        kind=HolidayKind(values["kind"]),
        source=source,
    )


def _decode_statutory(data) -> Dict[date, HolidayRecord]:
    if not isinstance(data, dict):
        raise CorruptPersistedStateError("statutory_holidays", "expected a mapping")
    records = {}
    for day, value in data.items():
        if not isinstance(value, dict):
            raise CorruptPersistedStateError("statutory_holidays", f"bad record for {day}")
        record = _validated_record(
            "statutory_holidays", {"date": day, **value}, HolidaySource.STATUTORY
        )
        records[record.date] = record
    return records


def _encode_statutory(records: Dict[date, HolidayRecord]) -> dict:
    return {
        day.isoformat(): {"name": record.name, "kind": record.kind.value}
        for day, record in sorted(records.items())
    }


def _decode_custom(data) -> Dict[date, HolidayRecord]:
    if not isinstance(data, list):
        raise CorruptPersistedStateError("custom_holidays", "expected a list")
    records = {}
    for item in data:
        if not isinstance(item, dict):
            raise CorruptPersistedStateError("custom_holidays", "expected objects")
        record = _validated_record("custom_holidays", item, HolidaySource.CUSTOM)
        records[record.date] = record
    return records


def _encode_custom(records: Dict[date, HolidayRecord]) -> list:
    return [
        {"date": day.isoformat(), "name": record.name, "kind": record.kind.value}
        for day, record in sorted(records.items())
    ]


STATUTORY_HOLIDAYS_COLLECTION = Collection(
    key="statutory_holidays",
    default=builtin_statutory_holidays,
    decode=_decode_statutory,
    encode=_encode_statutory,
)

CUSTOM_HOLIDAYS_COLLECTION = Collection(
    key="custom_holidays",
    default=dict,
    decode=_decode_custom,
    encode=_encode_custom,
)


class HolidayRegistry:
    """
    Statutory and custom holidays over one LocalStorage.

    Every mutation is a single read-modify-write under the storage lock.
    """

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    # Loading

    def statutory(self) -> Dict[date, HolidayRecord]:
        """Stored statutory set, seeding it from the built-in table on first use"""
        with self.storage.transaction():
            if not self.storage.contains(STATUTORY_HOLIDAYS_COLLECTION):
                records = builtin_statutory_holidays()
                self.storage.save(STATUTORY_HOLIDAYS_COLLECTION, records)
                logger.info(
                    "Statutory holidays seeded from built-in table",
                    extra={"count": len(records)},
                )
                return records
            return self.storage.load(STATUTORY_HOLIDAYS_COLLECTION)

    def custom(self) -> Dict[date, HolidayRecord]:
        return self.storage.load(CUSTOM_HOLIDAYS_COLLECTION)

    # Queries

    def lookup(self, value) -> Optional[HolidayRecord]:
        """Effective holiday record for a date, statutory first"""
        day = parse_iso_date(value)
        record = self.statutory().get(day)
        if record is not None:
            return record
        return self.custom().get(day)

    def resolve(self, value) -> Optional[HolidayKind]:
        record = self.lookup(value)
        return record.kind if record else None

    def list_holidays(self) -> List[HolidayRecord]:
        """
        Effective holidays sorted by date.

        Custom records shadowed by a statutory record on the same date are
        left out.
        """
        merged = dict(self.custom())
        merged.update(self.statutory())
        return [merged[day] for day in sorted(merged)]

    # Mutations

    def upsert_statutory(self, value, name, kind) -> HolidayRecord:
        record = self._build_record(value, name, kind, HolidaySource.STATUTORY)
        with self.storage.transaction():
            records = self.statutory()
            records[record.date] = record
            self.storage.save(STATUTORY_HOLIDAYS_COLLECTION, records)

        logger.info(
            "Statutory holiday saved",
            extra={"date": record.date.isoformat(), "kind": record.kind.value},
        )
        return record

    def upsert_custom(self, value, name, kind) -> HolidayRecord:
        record = self._build_record(value, name, kind, HolidaySource.CUSTOM)
        with self.storage.transaction():
            records = self.custom()
            records[record.date] = record
            self.storage.save(CUSTOM_HOLIDAYS_COLLECTION, records)

        logger.info(
            "Custom holiday saved",
            extra={"date": record.date.isoformat(), "kind": record.kind.value},
        )
        return record

    def delete_custom(self, value) -> bool:
        """Remove a custom holiday; returns False when none existed for the date"""
        day = parse_iso_date(value)
        with self.storage.transaction():
            records = self.custom()
            if records.pop(day, None) is None:
                return False
            self.storage.save(CUSTOM_HOLIDAYS_COLLECTION, records)

        logger.info("Custom holiday deleted", extra={"date": day.isoformat()})
        return True

    def reset_statutory(self) -> int:
        """Overwrite the stored statutory set with the built-in table"""
        records = builtin_statutory_holidays()
        with self.storage.transaction():
            self.storage.save(STATUTORY_HOLIDAYS_COLLECTION, records)
        logger.info("Statutory holidays reset", extra={"count": len(records)})
        return len(records)

    def clear(self) -> None:
        """Drop both sets; the statutory set is reseeded on next use"""
        with self.storage.transaction():
            self.storage.clear(STATUTORY_HOLIDAYS_COLLECTION)
            self.storage.clear(CUSTOM_HOLIDAYS_COLLECTION)

    @staticmethod
    def _build_record(value, name, kind, source) -> HolidayRecord:
        day = parse_iso_date(value)
        name = str(name or "").strip()
        if not name:
            raise MissingFieldError("name")
        return HolidayRecord(
            date=day, name=name, kind=HolidayKind.parse(kind), source=source
        )
