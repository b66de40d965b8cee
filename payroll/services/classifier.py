"""
Hour classifier for DTR entries.

Splits one day's net worked time into exactly one pay category (or the
regular + weekday overtime pair). The first matching rule wins:

1. Regular holiday on a rest day -> regular_holiday_rest_day (260%)
2. Regular holiday               -> regular_holiday (200%)
3. Special holiday on a rest day -> special_holiday_rest_day (169%)
4. Special holiday               -> special_holiday (130%)
5. Saturday                      -> saturday (130%)
6. Sunday                        -> sunday (150%)
7. Weekday                       -> regular up to the daily limit, the rest
                                    as weekday_overtime (125%)

Pure functions only: holiday lookups happen before calling ``classify``.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from core.exceptions import NonPositiveDurationError
from holiday_registry.enums import HolidayKind
from worktime.utils import MINUTES_PER_HOUR, net_duration_minutes, parse_iso_date

from .contracts import BucketSet, round_money
from .enums import DayType, PayCategory

logger = logging.getLogger(__name__)

# Daily regular-hour limits
SITE_REGULAR_HOURS = Decimal("8")
NO_SITE_REGULAR_HOURS = Decimal("9.5")


def regular_hours_limit(location: Optional[str]) -> Decimal:
    """8 hours at a named site, 9.5 hours when no site is given"""
    if location and str(location).strip():
        return SITE_REGULAR_HOURS
    return NO_SITE_REGULAR_HOURS


def day_type_for(work_date: date) -> DayType:
    weekday = work_date.weekday()
    if weekday == 5:
        return DayType.SATURDAY
    if weekday == 6:
        return DayType.SUNDAY
    return DayType.WEEKDAY


def category_for(day_type: DayType, holiday_kind: Optional[HolidayKind]) -> PayCategory:
    """
    Single pay category for a whole day, ignoring the overtime split.

    Weekdays report REGULAR; the caller splits off weekday overtime.
    """
    if holiday_kind is HolidayKind.REGULAR:
        if day_type.is_rest_day:
            return PayCategory.REGULAR_HOLIDAY_REST_DAY
        return PayCategory.REGULAR_HOLIDAY

    if holiday_kind is HolidayKind.SPECIAL:
        if day_type.is_rest_day:
            return PayCategory.SPECIAL_HOLIDAY_REST_DAY
        return PayCategory.SPECIAL_HOLIDAY

    if day_type is DayType.SATURDAY:
        return PayCategory.SATURDAY
    if day_type is DayType.SUNDAY:
        return PayCategory.SUNDAY
    return PayCategory.REGULAR


def classify(
    work_date,
    location: Optional[str],
    time_in,
    time_out,
    break_minutes=0,
    holiday_kind: Optional[HolidayKind] = None,
) -> BucketSet:
    """
    Classify one worked day into pay-category buckets.

    Args:
        work_date: Calendar date of the entry (date or YYYY-MM-DD)
        location: Work site; blank means no fixed site
        time_in: "HH:MM"
        time_out: "HH:MM", earlier than time_in means the next day
        break_minutes: Unpaid break in whole minutes
        holiday_kind: Effective holiday classification of the date, if any

    Returns:
        BucketSet with hours rounded to 2 decimal places

    Raises:
        NonPositiveDurationError: net time after the break is zero or less
    """
    work_date = parse_iso_date(work_date)
    net_minutes = net_duration_minutes(time_in, time_out, break_minutes)
    if net_minutes <= 0:
        raise NonPositiveDurationError(net_minutes)

    net_hours = Decimal(net_minutes) / MINUTES_PER_HOUR
    day_type = day_type_for(work_date)
    category = category_for(day_type, holiday_kind)

    if category is not PayCategory.REGULAR:
        buckets = BucketSet.from_category(category, net_hours)
    else:
        limit = regular_hours_limit(location)
        regular = min(net_hours, limit)
        overtime = max(Decimal("0"), net_hours - limit)
        buckets = BucketSet(
            regular=round_money(regular),
            weekday_overtime=round_money(overtime),
        )

    logger.debug(
        "Entry classified",
        extra={
            "entry_date": work_date.isoformat(),
            "day_type": day_type.value,
            "category": buckets.primary_category().value,
            "net_minutes": net_minutes,
        },
    )
    return buckets
