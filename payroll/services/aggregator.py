"""
Period aggregator.

Groups entries into semi-monthly pay periods and turns bucket totals into
gross pay:

    hourly_rate   = monthly_salary * 12 / 261 / 8
    bucket pay    = bucket hours * hourly_rate * category multiplier
    allowance pay = admin_allowance / 26 * number of entries
    gross pay     = sum(bucket pays) + allowance pay

Arithmetic keeps full Decimal precision; only the returned figures are
rounded (2 places, half up).
"""

import logging
from decimal import Decimal
from typing import Iterable, List

from .contracts import (
    ALL_PERIODS,
    PayPeriod,
    PaySettings,
    PeriodOption,
    Summary,
    ZERO,
    round_money,
)
from .enums import PayCategory

logger = logging.getLogger(__name__)

ANNUAL_WORKING_DAYS = Decimal("261")
HOURS_PER_DAY = Decimal("8")
MONTHS_PER_YEAR = Decimal("12")
ALLOWANCE_DAYS_PER_MONTH = Decimal("26")


def hourly_rate(monthly_salary) -> Decimal:
    """Unrounded hourly rate for a monthly salary"""
    return Decimal(monthly_salary) * MONTHS_PER_YEAR / ANNUAL_WORKING_DAYS / HOURS_PER_DAY


def daily_allowance(admin_allowance) -> Decimal:
    """Unrounded allowance per worked day"""
    return Decimal(admin_allowance) / ALLOWANCE_DAYS_PER_MONTH


def list_periods(entries: Iterable) -> List:
    """All-entries selection first, then distinct half-month periods, newest first"""
    periods = {PayPeriod.from_date(entry.date) for entry in entries}
    return [ALL_PERIODS] + sorted(periods, reverse=True)


def period_options(entries: Iterable) -> List[PeriodOption]:
    return [
        PeriodOption(key=period.key, label=period.label)
        for period in list_periods(entries)
    ]


def default_period(entries: Iterable):
    """Newest period with entries, or the all-entries selection when empty"""
    periods = list_periods(entries)
    return periods[1] if len(periods) > 1 else ALL_PERIODS


def filter_entries(entries: Iterable, period=ALL_PERIODS) -> list:
    return [entry for entry in entries if period.contains(entry.date)]


def summarize(entries: Iterable, settings: PaySettings, period=ALL_PERIODS) -> Summary:
    """
    Totals and gross pay for the entries that fall in ``period``.

    Args:
        entries: DtrEntry objects (any order)
        settings: Monthly salary and allowance
        period: PayPeriod or ALL_PERIODS

    Returns:
        Summary with every figure rounded to 2 decimal places
    """
    selected = filter_entries(entries, period)
    rate = hourly_rate(settings.monthly_salary)

    hours = {category: ZERO for category in PayCategory}
    for entry in selected:
        for category in PayCategory:
            hours[category] += entry.buckets.get(category)

    pay = {
        category: hours[category] * rate * category.multiplier
        for category in PayCategory
    }
    overtime_hours = sum(
        (hours[category] for category in PayCategory if category.is_premium), ZERO
    )
    allowance_pay = daily_allowance(settings.admin_allowance) * len(selected)
    gross_pay = sum(pay.values(), ZERO) + allowance_pay

    summary = Summary(
        period=period.key,
        period_label=period.label,
        entry_count=len(selected),
        hourly_rate=round_money(rate),
        hours={category.value: round_money(value) for category, value in hours.items()},
        pay={category.value: round_money(value) for category, value in pay.items()},
        total_hours=round_money(sum(hours.values(), ZERO)),
        overtime_hours=round_money(overtime_hours),
        allowance_pay=round_money(allowance_pay),
        gross_pay=round_money(gross_pay),
    )

    logger.debug(
        "Period summarized",
        extra={"period": period.key, "entry_count": len(selected)},
    )
    return summary
