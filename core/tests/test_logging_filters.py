# core/tests/test_logging_filters.py
import logging
from io import StringIO

from dtrcalc.logging_filters import PayDataRedactorFilter


def _isolated_logger(name, stream):
    handler = logging.StreamHandler(stream)
    handler.setLevel(logging.INFO)
    handler.addFilter(PayDataRedactorFilter())
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.handlers = []  # isolate from global handlers
    logger.propagate = False  # don't bubble to root
    logger.addHandler(handler)
    return logger


def test_inline_salary_amounts_are_redacted():
    stream = StringIO()
    logger = _isolated_logger("test.pay.inline", stream)

    logger.info("monthly_salary=%s gross_pay: %s", "26000", "1233.86")

    value = stream.getvalue()
    assert "26000" not in value
    assert "1233.86" not in value
    assert "monthly_salary=****" in value
    assert "gross_pay: ****" in value


def test_sensitive_extra_attributes_are_redacted():
    record = logging.makeLogRecord(
        {"msg": "Pay settings saved", "monthly_salary": "26000", "entry_date": "2025-06-03"}
    )

    assert PayDataRedactorFilter().filter(record) is True
    assert record.monthly_salary == "****"
    assert record.entry_date == "2025-06-03"


def test_nested_mapping_keys_are_redacted():
    record = logging.makeLogRecord(
        {"msg": "summary", "payload": {"gross_pay": "1233.86", "period": "2025-06-H1"}}
    )

    PayDataRedactorFilter().filter(record)

    assert record.payload == {"gross_pay": "****", "period": "2025-06-H1"}


def test_dates_and_plain_numbers_survive():
    stream = StringIO()
    logger = _isolated_logger("test.pay.plain", stream)

    logger.info("Entries removed: %s before %s", 3, "2025-06-01")

    assert stream.getvalue().strip() == "Entries removed: 3 before 2025-06-01"
