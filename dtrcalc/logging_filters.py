# dtrcalc/logging_filters.py
import logging
import re
from typing import Any, Mapping

REDACTION = "****"
SENSITIVE_KEYS = {
    "monthly_salary", "admin_allowance", "salary", "allowance",
    "hourly_rate", "gross_pay", "allowance_pay", "daily_pay", "pay",
}

# "salary=26000", "gross_pay: 1233.86" and similar inline amounts
_amount_re = re.compile(
    r"\b(" + "|".join(sorted(SENSITIVE_KEYS, key=len, reverse=True)) + r")(\s*[=:]\s*)[\d,]+(?:\.\d+)?",
    re.IGNORECASE,
)

# LogRecord attributes that are never user supplied
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _redact_text(text: str) -> str:
    return _amount_re.sub(lambda m: f"{m.group(1)}{m.group(2)}{REDACTION}", text)


def _redact_mapping(value: Mapping) -> dict:
    redacted = {}
    for key, item in value.items():
        if isinstance(key, str) and key.lower() in SENSITIVE_KEYS:
            redacted[key] = REDACTION
        elif isinstance(item, Mapping):
            redacted[key] = _redact_mapping(item)
        elif isinstance(item, str):
            redacted[key] = _redact_text(item)
        else:
            redacted[key] = item
    return redacted


class PayDataRedactorFilter(logging.Filter):
    """
    Redact salary and pay figures from log records.

    The message is rendered with its args first so "salary=%s" style calls
    are caught, then ``extra=`` attributes named after a pay field are
    replaced and nested mappings are scrubbed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            if record.args:
                record.msg = _redact_text(record.getMessage())
                record.args = ()
            elif isinstance(record.msg, str):
                record.msg = _redact_text(record.msg)

            for key in list(vars(record)):
                if key in _RESERVED_ATTRS:
                    continue
                value = getattr(record, key)
                if key.lower() in SENSITIVE_KEYS:
                    setattr(record, key, REDACTION)
                elif isinstance(value, Mapping):
                    setattr(record, key, _redact_mapping(value))
        except Exception:
            # never break logging
            pass
        return True
