from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP

from core.exceptions import InvalidFormatError, MissingFieldError

MINUTES_PER_DAY = 24 * 60
MINUTES_PER_HOUR = Decimal("60")
HOURS_QUANTUM = Decimal("0.01")


def to_minutes_of_day(value, field: str = "time") -> int:
    """Convert a wall-clock "HH:MM" string into minutes since 00:00"""
    if value is None or not str(value).strip():
        raise MissingFieldError(field)

    text = str(value).strip()
    parts = text.split(":")
    if len(parts) != 2:
        raise InvalidFormatError(f"{field} must be in HH:MM format", field, text)

    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidFormatError(f"{field} must be in HH:MM format", field, text)

    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise InvalidFormatError(f"{field} is not a valid time of day", field, text)

    return hours * 60 + minutes


def net_duration_minutes(time_in, time_out, break_minutes=0) -> int:
    """
    Worked minutes between time-in and time-out minus the break.

    A time-out earlier than the time-in is taken to fall on the next day.
    The result is not clamped: zero or negative means the span is unusable.
    """
    start = to_minutes_of_day(time_in, "time_in")
    end = to_minutes_of_day(time_out, "time_out")
    break_minutes = parse_break_minutes(break_minutes)

    total = end - start
    if total < 0:
        total += MINUTES_PER_DAY

    return total - break_minutes


def parse_break_minutes(value) -> int:
    """Break length in whole minutes; blank means no break"""
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0

    try:
        minutes = Decimal(str(value).strip())
    except ArithmeticError:
        raise InvalidFormatError("break_minutes must be a number", "break_minutes", str(value))

    if not minutes.is_finite() or minutes != minutes.to_integral_value():
        raise InvalidFormatError(
            "break_minutes must be a whole number of minutes", "break_minutes", str(value)
        )
    if minutes < 0:
        raise InvalidFormatError(
            "break_minutes cannot be negative", "break_minutes", str(value)
        )
    return int(minutes)


def parse_iso_date(value, field: str = "date") -> date:
    """Parse a YYYY-MM-DD string (date objects pass through)"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or not str(value).strip():
        raise MissingFieldError(field)

    text = str(value).strip()
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidFormatError(f"{field} must be in YYYY-MM-DD format", field, text)


def minutes_to_hours(minutes: int) -> Decimal:
    """Minutes as hours, rounded to 2 decimal places"""
    return (Decimal(minutes) / MINUTES_PER_HOUR).quantize(
        HOURS_QUANTUM, rounding=ROUND_HALF_UP
    )


def format_minutes(value) -> str:
    """Minutes since midnight back to HH:MM"""
    hours, minutes = divmod(int(value) % MINUTES_PER_DAY, 60)
    return f"{hours:02d}:{minutes:02d}"
