"""
Tests for period grouping and gross pay aggregation
"""

from datetime import date
from decimal import Decimal

import pytest

from payroll.services import aggregator
from payroll.services.contracts import ALL_PERIODS, BucketSet, PayPeriod, PaySettings
from payroll.services.enums import PayCategory
from worktime.entries import DtrEntry


def make_entry(day, **buckets):
    return DtrEntry(
        date=day,
        time_in="09:00",
        time_out="18:00",
        break_minutes=60,
        location="Office",
        buckets=BucketSet(**{name: Decimal(value) for name, value in buckets.items()}),
    )


class TestRates:
    def test_hourly_rate(self):
        rate = aggregator.hourly_rate(Decimal("26000"))

        assert rate.quantize(Decimal("0.0001")) == Decimal("149.4253")

    def test_daily_allowance(self):
        allowance = aggregator.daily_allowance(Decimal("1000"))

        assert allowance.quantize(Decimal("0.01")) == Decimal("38.46")

    def test_zero_salary(self):
        assert aggregator.hourly_rate(Decimal("0")) == 0


class TestMultipliers:
    @pytest.mark.parametrize(
        "category,multiplier",
        [
            (PayCategory.REGULAR, "1.00"),
            (PayCategory.WEEKDAY_OVERTIME, "1.25"),
            (PayCategory.SATURDAY, "1.30"),
            (PayCategory.SUNDAY, "1.50"),
            (PayCategory.REGULAR_HOLIDAY, "2.00"),
            (PayCategory.SPECIAL_HOLIDAY, "1.30"),
            (PayCategory.REGULAR_HOLIDAY_REST_DAY, "2.60"),
            (PayCategory.SPECIAL_HOLIDAY_REST_DAY, "1.69"),
        ],
    )
    def test_multiplier(self, category, multiplier):
        assert category.multiplier == Decimal(multiplier)


class TestPeriods:
    def test_empty_history(self):
        assert aggregator.list_periods([]) == [ALL_PERIODS]
        assert aggregator.default_period([]) is ALL_PERIODS

    def test_all_first_then_newest(self):
        entries = [
            make_entry(date(2025, 6, 2), regular="8"),
            make_entry(date(2025, 5, 20), regular="8"),
            make_entry(date(2025, 6, 16), regular="8"),
            make_entry(date(2025, 6, 3), regular="8"),
        ]

        keys = [period.key for period in aggregator.list_periods(entries)]

        assert keys == ["all", "2025-06-H2", "2025-06-H1", "2025-05-H2"]
        assert aggregator.default_period(entries) == PayPeriod(2025, 6, 2)

    def test_period_options(self):
        options = aggregator.period_options([make_entry(date(2025, 6, 2), regular="8")])

        assert options == [
            {"key": "all", "label": "All Entries"},
            {"key": "2025-06-H1", "label": "Jun 1 - 15, 2025"},
        ]

    def test_filter_entries(self):
        entries = [
            make_entry(date(2025, 6, 15), regular="8"),
            make_entry(date(2025, 6, 16), regular="8"),
        ]

        selected = aggregator.filter_entries(entries, PayPeriod(2025, 6, 1))

        assert [entry.date for entry in selected] == [date(2025, 6, 15)]
        assert aggregator.filter_entries(entries, ALL_PERIODS) == entries


class TestSummarize:
    def test_single_plain_day(self, pay_settings):
        summary = aggregator.summarize([make_entry(date(2025, 6, 3), regular="8")], pay_settings)

        assert summary["period"] == "all"
        assert summary["period_label"] == "All Entries"
        assert summary["entry_count"] == 1
        assert summary["hourly_rate"] == Decimal("149.43")
        assert summary["pay"]["regular"] == Decimal("1195.40")
        assert summary["allowance_pay"] == Decimal("38.46")
        assert summary["gross_pay"] == Decimal("1233.86")
        assert summary["overtime_hours"] == Decimal("0.00")

    def test_premium_categories(self, pay_settings):
        entries = [
            make_entry(date(2025, 6, 3), regular="8"),
            make_entry(date(2025, 6, 7), saturday="8"),
        ]

        summary = aggregator.summarize(entries, pay_settings)

        assert summary["hours"]["saturday"] == Decimal("8.00")
        assert summary["pay"]["saturday"] == Decimal("1554.02")
        assert summary["total_hours"] == Decimal("16.00")
        assert summary["overtime_hours"] == Decimal("8.00")
        assert summary["gross_pay"] == Decimal("2826.35")

    def test_rounds_only_final_figures(self):
        settings = PaySettings(monthly_salary="26000")
        entries = [make_entry(date(2025, 6, day), regular="0.01") for day in range(2, 5)]

        summary = aggregator.summarize(entries, settings)

        # 0.03 h * 149.4253 = 4.4828; per-entry rounding would give 4.47
        assert summary["pay"]["regular"] == Decimal("4.48")

    def test_period_selection(self, pay_settings):
        entries = [
            make_entry(date(2025, 6, 3), regular="8"),
            make_entry(date(2025, 6, 17), sunday="4"),
        ]

        summary = aggregator.summarize(entries, pay_settings, PayPeriod(2025, 6, 2))

        assert summary["period"] == "2025-06-H2"
        assert summary["period_label"] == "Jun 16 - End, 2025"
        assert summary["entry_count"] == 1
        assert summary["hours"]["regular"] == Decimal("0.00")
        assert summary["hours"]["sunday"] == Decimal("4.00")

    def test_empty_selection(self, pay_settings):
        summary = aggregator.summarize([], pay_settings, PayPeriod(2025, 1, 1))

        assert summary["entry_count"] == 0
        assert summary["allowance_pay"] == Decimal("0.00")
        assert summary["gross_pay"] == Decimal("0.00")
        assert set(summary["hours"]) == {category.value for category in PayCategory}
