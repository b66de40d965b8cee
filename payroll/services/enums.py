"""
Enumerations for payroll calculation system.

This module defines all enums used across the payroll calculation system,
ensuring type safety and preventing magic string errors.
"""

from decimal import Decimal
from enum import Enum


class DayType(Enum):
    """Calendar classification of a work date"""

    WEEKDAY = "weekday"
    """Monday to Friday"""

    SATURDAY = "saturday"
    """Rest day"""

    SUNDAY = "sunday"
    """Rest day"""

    @property
    def is_rest_day(self) -> bool:
        return self in (DayType.SATURDAY, DayType.SUNDAY)

    def __str__(self):
        return self.value


class PayCategory(Enum):
    """
    Mutually exclusive hour buckets of a DTR entry.

    The value doubles as the BucketSet field name and the key used in
    summaries and persisted entries.
    """

    REGULAR = "regular"
    WEEKDAY_OVERTIME = "weekday_overtime"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    REGULAR_HOLIDAY = "regular_holiday"
    SPECIAL_HOLIDAY = "special_holiday"
    REGULAR_HOLIDAY_REST_DAY = "regular_holiday_rest_day"
    SPECIAL_HOLIDAY_REST_DAY = "special_holiday_rest_day"

    def __str__(self):
        return self.value

    @property
    def multiplier(self) -> Decimal:
        """Premium factor applied to the hourly rate"""
        return PAY_MULTIPLIERS[self]

    @property
    def display_name(self) -> str:
        """Human-readable display name"""
        return DISPLAY_NAMES[self]

    @property
    def is_premium(self) -> bool:
        """Counted in the overtime-equivalent hours total"""
        return self is not PayCategory.REGULAR


PAY_MULTIPLIERS = {
    PayCategory.REGULAR: Decimal("1.00"),
    PayCategory.WEEKDAY_OVERTIME: Decimal("1.25"),
    PayCategory.SATURDAY: Decimal("1.30"),
    PayCategory.SUNDAY: Decimal("1.50"),
    PayCategory.REGULAR_HOLIDAY: Decimal("2.00"),
    PayCategory.SPECIAL_HOLIDAY: Decimal("1.30"),
    PayCategory.REGULAR_HOLIDAY_REST_DAY: Decimal("2.60"),  # 200% * 130%
    PayCategory.SPECIAL_HOLIDAY_REST_DAY: Decimal("1.69"),  # 130% * 130%
}

DISPLAY_NAMES = {
    PayCategory.REGULAR: "Regular Hours",
    PayCategory.WEEKDAY_OVERTIME: "Weekday OT",
    PayCategory.SATURDAY: "Saturday Pay",
    PayCategory.SUNDAY: "Sunday Pay",
    PayCategory.REGULAR_HOLIDAY: "Regular Holiday",
    PayCategory.SPECIAL_HOLIDAY: "Special Holiday",
    PayCategory.REGULAR_HOLIDAY_REST_DAY: "Reg Holiday + Rest Day",
    PayCategory.SPECIAL_HOLIDAY_REST_DAY: "Spec Holiday + Rest Day",
}
