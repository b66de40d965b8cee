"""
Tests for the hour classifier.

Reference dates (2025): Jun 3 is a Tuesday, Jun 7 a Saturday, Jun 8 a
Sunday, Apr 19 a Saturday and Nov 30 a Sunday.
"""

from datetime import date
from decimal import Decimal

import pytest

from core.exceptions import NonPositiveDurationError
from holiday_registry.enums import HolidayKind
from payroll.services.classifier import (
    category_for,
    classify,
    day_type_for,
    regular_hours_limit,
)
from payroll.services.enums import DayType, PayCategory

TUESDAY = date(2025, 6, 3)
SATURDAY = date(2025, 6, 7)
SUNDAY = date(2025, 6, 8)


class TestDayType:
    def test_day_types(self):
        assert day_type_for(TUESDAY) is DayType.WEEKDAY
        assert day_type_for(SATURDAY) is DayType.SATURDAY
        assert day_type_for(SUNDAY) is DayType.SUNDAY

    def test_rest_days(self):
        assert DayType.SATURDAY.is_rest_day
        assert DayType.SUNDAY.is_rest_day
        assert not DayType.WEEKDAY.is_rest_day


class TestRegularHoursLimit:
    def test_site_limit(self):
        assert regular_hours_limit("Office") == Decimal("8")

    @pytest.mark.parametrize("location", ["", "   ", None])
    def test_no_site_limit(self, location):
        assert regular_hours_limit(location) == Decimal("9.5")


class TestCategoryFor:
    @pytest.mark.parametrize(
        "day_type,holiday_kind,expected",
        [
            (DayType.WEEKDAY, None, PayCategory.REGULAR),
            (DayType.SATURDAY, None, PayCategory.SATURDAY),
            (DayType.SUNDAY, None, PayCategory.SUNDAY),
            (DayType.WEEKDAY, HolidayKind.REGULAR, PayCategory.REGULAR_HOLIDAY),
            (DayType.SATURDAY, HolidayKind.REGULAR, PayCategory.REGULAR_HOLIDAY_REST_DAY),
            (DayType.SUNDAY, HolidayKind.REGULAR, PayCategory.REGULAR_HOLIDAY_REST_DAY),
            (DayType.WEEKDAY, HolidayKind.SPECIAL, PayCategory.SPECIAL_HOLIDAY),
            (DayType.SATURDAY, HolidayKind.SPECIAL, PayCategory.SPECIAL_HOLIDAY_REST_DAY),
            (DayType.SUNDAY, HolidayKind.SPECIAL, PayCategory.SPECIAL_HOLIDAY_REST_DAY),
        ],
    )
    def test_first_matching_rule(self, day_type, holiday_kind, expected):
        assert category_for(day_type, holiday_kind) is expected


class TestWeekdaySplit:
    def test_plain_day_at_site(self):
        buckets = classify(TUESDAY, "Office", "09:00", "18:00", 60)

        assert buckets.regular == Decimal("8.00")
        assert buckets.weekday_overtime == Decimal("0.00")

    def test_overtime_past_site_limit(self):
        buckets = classify(TUESDAY, "Office", "08:00", "19:00", 60)

        assert buckets.regular == Decimal("8.00")
        assert buckets.weekday_overtime == Decimal("2.00")

    def test_no_site_allows_longer_regular_day(self):
        buckets = classify(TUESDAY, "", "08:00", "18:00", 0)

        assert buckets.regular == Decimal("9.50")
        assert buckets.weekday_overtime == Decimal("0.50")

    def test_overnight_span(self):
        buckets = classify(TUESDAY, "Plant", "22:00", "07:00", 30)

        assert buckets.regular == Decimal("8.00")
        assert buckets.weekday_overtime == Decimal("0.50")

    def test_hours_rounded_to_two_places(self):
        buckets = classify(TUESDAY, "Office", "09:00", "09:20")

        assert buckets.regular == Decimal("0.33")

    def test_accepts_iso_date_string(self):
        assert classify("2025-06-03", "Office", "09:00", "10:00").regular == Decimal("1.00")


class TestRestDaysAndHolidays:
    def test_saturday_has_no_overtime_split(self):
        buckets = classify(SATURDAY, "Office", "08:00", "20:00", 60)

        assert buckets.saturday == Decimal("11.00")
        assert buckets.non_zero() == [(PayCategory.SATURDAY, Decimal("11.00"))]

    def test_sunday(self):
        buckets = classify(SUNDAY, "Office", "09:00", "13:00")

        assert buckets.non_zero() == [(PayCategory.SUNDAY, Decimal("4.00"))]

    def test_regular_holiday_on_weekday(self):
        buckets = classify(date(2025, 6, 12), "Office", "09:00", "20:00", 60, HolidayKind.REGULAR)

        assert buckets.non_zero() == [(PayCategory.REGULAR_HOLIDAY, Decimal("10.00"))]

    def test_regular_holiday_on_rest_day(self):
        buckets = classify(date(2025, 4, 19), "Office", "09:00", "17:00", 0, HolidayKind.REGULAR)

        assert buckets.non_zero() == [
            (PayCategory.REGULAR_HOLIDAY_REST_DAY, Decimal("8.00"))
        ]

    def test_special_holiday_on_weekday(self):
        buckets = classify(date(2025, 2, 25), "Office", "09:00", "17:00", 0, HolidayKind.SPECIAL)

        assert buckets.non_zero() == [(PayCategory.SPECIAL_HOLIDAY, Decimal("8.00"))]

    def test_special_holiday_on_rest_day(self):
        buckets = classify(date(2025, 11, 30), "", "09:00", "17:00", 0, HolidayKind.SPECIAL)

        assert buckets.non_zero() == [
            (PayCategory.SPECIAL_HOLIDAY_REST_DAY, Decimal("8.00"))
        ]


class TestBucketExclusivity:
    @pytest.mark.parametrize(
        "work_date,holiday_kind",
        [
            (TUESDAY, None),
            (SATURDAY, None),
            (SUNDAY, None),
            (TUESDAY, HolidayKind.REGULAR),
            (SUNDAY, HolidayKind.SPECIAL),
        ],
    )
    def test_one_category_or_weekday_pair(self, work_date, holiday_kind):
        buckets = classify(work_date, "Office", "07:00", "19:00", 0, holiday_kind)
        categories = {category for category, _ in buckets.non_zero()}

        assert buckets.total() == Decimal("12.00")
        if categories == {PayCategory.REGULAR, PayCategory.WEEKDAY_OVERTIME}:
            assert work_date == TUESDAY and holiday_kind is None
        else:
            assert len(categories) == 1


class TestNonPositiveDuration:
    def test_zero_span(self):
        with pytest.raises(NonPositiveDurationError) as exc_info:
            classify(TUESDAY, "Office", "09:00", "10:00", 60)

        assert exc_info.value.net_minutes == 0

    def test_break_longer_than_span(self):
        with pytest.raises(NonPositiveDurationError) as exc_info:
            classify(TUESDAY, "Office", "09:00", "10:00", 90)

        assert exc_info.value.net_minutes == -30
