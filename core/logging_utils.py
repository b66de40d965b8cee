"""
Utilities for safe logging with automatic masking of pay data
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Union


def mask_amount(amount: Optional[Union[Decimal, int, float, str]]) -> str:
    """
    Masks a money amount for safe logging

    Args:
        amount: Salary, allowance or pay figure

    Returns:
        Order of magnitude only (e.g., "5-digit")
    """
    if amount is None or amount == "":
        return "[no_amount]"

    try:
        value = abs(Decimal(str(amount)))
    except InvalidOperation:
        return "[invalid_amount]"

    if value == 0:
        return "zero"

    digits = len(str(int(value))) if value >= 1 else 0
    return f"{digits}-digit" if digits else "fraction"


def mask_location(location: Optional[str]) -> str:
    """
    Masks a work location for safe logging

    Args:
        location: Free-text site name

    Returns:
        First letter only (e.g., O***), or a marker when blank
    """
    if not location or not location.strip():
        return "[no_site]"

    return f"{location.strip()[0]}***"


def safe_log_entry(entry, action: str = "action") -> Dict[str, Any]:
    """
    Creates safe object for logging a DTR entry

    Args:
        entry: DtrEntry instance
        action: Action description

    Returns:
        Dictionary with safe data for logging
    """
    if entry is None:
        return {"action": action, "entry": "none"}

    return {
        "action": action,
        "entry_date": entry.date.isoformat(),
        "site": mask_location(entry.location),
        "category": entry.buckets.primary_category().value,
        "total_hours": str(entry.buckets.total()),
    }


def safe_log_settings(settings, action: str = "action") -> Dict[str, Any]:
    """
    Creates safe object for logging pay settings

    Args:
        settings: PaySettings instance
        action: Action description

    Returns:
        Dictionary with safe data for logging
    """
    if settings is None:
        return {"action": action, "settings": "none"}

    return {
        "action": action,
        "salary_masked": mask_amount(settings.monthly_salary),
        "allowance_masked": mask_amount(settings.admin_allowance),
    }


def err_tag(exc: BaseException) -> str:
    """
    Extract safe error tag from exception for logging

    Args:
        exc: Exception instance

    Returns:
        Safe error tag with sanitized message content
    """
    # Check if exception has safe message attributes
    for attr in ("safe_message", "public_message"):
        msg = getattr(exc, attr, None)
        if msg:
            return str(msg)[:120]

    # Get exception message and sanitize it
    text = str(exc)

    # Long numbers outside ISO dates are most likely pay figures
    text = re.sub(r"(?<![\d\-.])\d{4,}(?:\.\d+)?(?![\d\-])", "****", text)

    # Limit length
    return text[:120] if text.strip() else exc.__class__.__name__
