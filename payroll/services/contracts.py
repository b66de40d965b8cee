"""
Data contracts for timecard calculations.

This module defines the value types that flow between the classifier, the
entry store and the period aggregator, ensuring consistency and type safety
across the system.
"""

import calendar
from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Tuple, TypedDict

from core.exceptions import InvalidSelectionError

from .enums import PayCategory

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")

# Month abbreviations used in period labels, independent of the process locale
MONTH_ABBR = ("", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Order in which a single entry is labelled in lists: holidays first, then
# rest days, then overtime
PRIMARY_CATEGORY_ORDER = (
    PayCategory.REGULAR_HOLIDAY_REST_DAY,
    PayCategory.REGULAR_HOLIDAY,
    PayCategory.SPECIAL_HOLIDAY_REST_DAY,
    PayCategory.SPECIAL_HOLIDAY,
    PayCategory.SUNDAY,
    PayCategory.SATURDAY,
    PayCategory.WEEKDAY_OVERTIME,
)


def round_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half up"""
    return Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class BucketSet:
    """
    Hours of one entry split across the eight pay categories.

    Field names match PayCategory values.
    """

    regular: Decimal = ZERO
    weekday_overtime: Decimal = ZERO
    saturday: Decimal = ZERO
    sunday: Decimal = ZERO
    regular_holiday: Decimal = ZERO
    special_holiday: Decimal = ZERO
    regular_holiday_rest_day: Decimal = ZERO
    special_holiday_rest_day: Decimal = ZERO

    def __post_init__(self):
        for field in fields(self):
            value = Decimal(str(getattr(self, field.name)))
            if not value.is_finite() or value < 0:
                raise ValueError(f"{field.name} hours must be a non-negative number")
            object.__setattr__(self, field.name, value)

    @classmethod
    def zero(cls) -> "BucketSet":
        return cls()

    @classmethod
    def from_category(cls, category: PayCategory, hours) -> "BucketSet":
        return cls(**{category.value: round_money(Decimal(str(hours)))})

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "BucketSet":
        return cls(**{
            category.value: Decimal(str(data.get(category.value, 0)))
            for category in PayCategory
        })

    def get(self, category: PayCategory) -> Decimal:
        return getattr(self, category.value)

    def total(self) -> Decimal:
        return sum((self.get(category) for category in PayCategory), ZERO)

    def non_zero(self) -> List[Tuple[PayCategory, Decimal]]:
        return [
            (category, self.get(category))
            for category in PayCategory
            if self.get(category) > 0
        ]

    def primary_category(self) -> PayCategory:
        for category in PRIMARY_CATEGORY_ORDER:
            if self.get(category) > 0:
                return category
        return PayCategory.REGULAR

    def as_dict(self) -> Dict[str, Decimal]:
        return {category.value: self.get(category) for category in PayCategory}


@dataclass(frozen=True, order=True)
class PayPeriod:
    """Semi-monthly pay period: half 1 is days 1-15, half 2 is days 16-end"""

    year: int
    month: int
    half: int

    def __post_init__(self):
        if self.year < 1 or not 1 <= self.month <= 12 or self.half not in (1, 2):
            raise InvalidSelectionError(
                "Pay period is out of range", f"{self.year}-{self.month}-H{self.half}"
            )

    @classmethod
    def from_date(cls, value: date) -> "PayPeriod":
        return cls(value.year, value.month, 1 if value.day <= 15 else 2)

    @classmethod
    def parse(cls, key: str):
        """
        Parse a period key (``YYYY-MM-H1`` / ``YYYY-MM-H2``) or ``all``.

        Raises:
            InvalidSelectionError: for anything else
        """
        text = (key or "").strip()
        if text.lower() == ALL_PERIODS.key:
            return ALL_PERIODS

        parts = text.split("-")
        if (
            len(parts) != 3
            or len(parts[0]) != 4
            or len(parts[1]) != 2
            or parts[2] not in ("H1", "H2")
            or not parts[0].isdigit()
            or not parts[1].isdigit()
        ):
            raise InvalidSelectionError(f"Unknown pay period: {text or '(blank)'}", text)

        return cls(int(parts[0]), int(parts[1]), int(parts[2][1]))

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-H{self.half}"

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1 if self.half == 1 else 16)

    @property
    def end(self) -> date:
        if self.half == 1:
            return date(self.year, self.month, 15)
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    @property
    def label(self) -> str:
        month = MONTH_ABBR[self.month]
        if self.half == 1:
            return f"{month} 1 - 15, {self.year}"
        return f"{month} 16 - End, {self.year}"

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end

    def __str__(self):
        return self.key


class AllEntriesPeriod:
    """Synthetic selection covering every stored entry"""

    key = "all"
    label = "All Entries"

    def contains(self, value: date) -> bool:
        return True

    def __str__(self):
        return self.key

    def __repr__(self):
        return "ALL_PERIODS"


ALL_PERIODS = AllEntriesPeriod()


@dataclass(frozen=True)
class PaySettings:
    """Monthly salary and administrative allowance, both non-negative"""

    monthly_salary: Decimal = ZERO
    admin_allowance: Decimal = ZERO

    def __post_init__(self):
        for field in fields(self):
            value = Decimal(str(getattr(self, field.name)))
            if not value.is_finite() or value < 0:
                raise ValueError(f"{field.name} must be a non-negative amount")
            object.__setattr__(self, field.name, value)

    def as_dict(self) -> Dict[str, Decimal]:
        return {
            "monthly_salary": self.monthly_salary,
            "admin_allowance": self.admin_allowance,
        }


class PeriodOption(TypedDict):
    """One selectable pay period"""
    key: str
    label: str


class Summary(TypedDict):
    """
    Aggregated pay for one period selection.

    Every amount is rounded to 2 decimal places; ``hours`` and ``pay`` are
    keyed by PayCategory value.
    """
    period: str
    period_label: str
    entry_count: int
    hourly_rate: Decimal
    hours: Dict[str, Decimal]
    pay: Dict[str, Decimal]
    total_hours: Decimal
    overtime_hours: Decimal
    allowance_pay: Decimal
    gross_pay: Decimal


class EntryDetail(TypedDict):
    """Read-only view of one stored entry"""
    date: str
    location: str
    time_in: str
    time_out: str
    break_minutes: int
    net_hours: Decimal
    category: str
    category_label: str
    buckets: List[Dict[str, object]]

