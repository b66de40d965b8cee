"""
Tests for the holiday registry: seeding, precedence and corrupt data
"""

from datetime import date

import pytest

from core.exceptions import InvalidFormatError, MissingFieldError
from holiday_registry.enums import HolidayKind, HolidaySource
from holiday_registry.registry import (
    CUSTOM_HOLIDAYS_COLLECTION,
    STATUTORY_HOLIDAYS_COLLECTION,
    HolidayRegistry,
    builtin_statutory_holidays,
)


@pytest.fixture
def registry(storage):
    return HolidayRegistry(storage)


class TestBuiltinTable:
    def test_contains_known_holidays(self):
        records = builtin_statutory_holidays()

        assert records[date(2025, 6, 12)].kind is HolidayKind.REGULAR
        assert records[date(2025, 4, 9)].kind is HolidayKind.SPECIAL
        assert all(r.source is HolidaySource.STATUTORY for r in records.values())

    def test_returns_fresh_copy(self):
        first = builtin_statutory_holidays()
        first.clear()

        assert builtin_statutory_holidays()


class TestSeeding:
    def test_first_use_persists_builtin_table(self, registry, storage):
        assert not storage.contains(STATUTORY_HOLIDAYS_COLLECTION)

        records = registry.statutory()

        assert storage.contains(STATUTORY_HOLIDAYS_COLLECTION)
        assert records == builtin_statutory_holidays()

    def test_edits_survive_reload(self, registry, storage):
        registry.upsert_statutory("2025-06-12", "Araw ng Kalayaan", "special")

        reloaded = HolidayRegistry(storage).statutory()[date(2025, 6, 12)]

        assert reloaded.name == "Araw ng Kalayaan"
        assert reloaded.kind is HolidayKind.SPECIAL

    def test_reset_restores_builtin_table(self, registry):
        registry.upsert_statutory("2025-06-12", "Renamed", "SPECIAL")

        count = registry.reset_statutory()

        assert count == len(builtin_statutory_holidays())
        assert registry.lookup("2025-06-12").name == "Independence Day"


class TestResolution:
    def test_statutory_holiday(self, registry):
        assert registry.resolve("2025-12-25") is HolidayKind.REGULAR

    def test_plain_day(self, registry):
        assert registry.resolve("2025-06-03") is None
        assert registry.lookup(date(2025, 6, 3)) is None

    def test_custom_holiday(self, registry):
        registry.upsert_custom("2025-06-24", "City Foundation Day", "special")

        assert registry.resolve("2025-06-24") is HolidayKind.SPECIAL

    def test_statutory_wins_over_custom(self, registry):
        registry.upsert_custom("2025-12-25", "Company Party", "SPECIAL")

        record = registry.lookup("2025-12-25")

        assert record.kind is HolidayKind.REGULAR
        assert record.source is HolidaySource.STATUTORY

    def test_list_is_sorted_and_shadowed_custom_left_out(self, registry):
        registry.upsert_custom("2025-12-25", "Company Party", "SPECIAL")
        registry.upsert_custom("2025-06-24", "City Foundation Day", "SPECIAL")

        records = registry.list_holidays()
        dates = [record.date for record in records]

        assert dates == sorted(dates)
        assert dates.count(date(2025, 12, 25)) == 1
        assert date(2025, 6, 24) in dates
        assert len(records) == len(builtin_statutory_holidays()) + 1


class TestCustomHolidays:
    def test_upsert_replaces_same_date(self, registry):
        registry.upsert_custom("2025-06-24", "First", "SPECIAL")
        registry.upsert_custom("2025-06-24", "Second", "REGULAR")

        custom = registry.custom()

        assert len(custom) == 1
        assert custom[date(2025, 6, 24)].name == "Second"
        assert custom[date(2025, 6, 24)].kind is HolidayKind.REGULAR

    def test_delete(self, registry):
        registry.upsert_custom("2025-06-24", "City Foundation Day", "SPECIAL")

        assert registry.delete_custom("2025-06-24") is True
        assert registry.delete_custom("2025-06-24") is False
        assert registry.resolve("2025-06-24") is None

    def test_name_is_required(self, registry):
        with pytest.raises(MissingFieldError):
            registry.upsert_custom("2025-06-24", "   ", "SPECIAL")

    def test_kind_must_be_known(self, registry):
        with pytest.raises(InvalidFormatError):
            registry.upsert_custom("2025-06-24", "Party", "HALF")

    def test_clear_drops_both_sets(self, registry, storage):
        registry.upsert_custom("2025-06-24", "City Foundation Day", "SPECIAL")
        registry.upsert_statutory("2025-06-12", "Renamed", "SPECIAL")

        registry.clear()

        assert registry.custom() == {}
        assert registry.lookup("2025-06-12").name == "Independence Day"


class TestCorruptHolidays:
    def test_corrupt_statutory_falls_back_to_builtin(self, registry, storage):
        storage.backend.write(STATUTORY_HOLIDAYS_COLLECTION.key, "[not json")

        assert registry.resolve("2025-06-12") is HolidayKind.REGULAR

    def test_statutory_with_bad_kind_falls_back(self, registry, storage):
        storage.backend.write(
            STATUTORY_HOLIDAYS_COLLECTION.key,
            '{"2025-06-12": {"name": "Independence Day", "kind": "HALF"}}',
        )

        assert registry.statutory() == builtin_statutory_holidays()

    def test_corrupt_custom_falls_back_to_empty(self, registry, storage):
        storage.backend.write(CUSTOM_HOLIDAYS_COLLECTION.key, '{"date": "2025-06-24"}')

        assert registry.custom() == {}
        assert registry.resolve("2025-06-24") is None
