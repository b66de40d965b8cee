"""
Persisted pay settings (monthly salary and administrative allowance).
"""

import logging
from decimal import Decimal, InvalidOperation

from core.exceptions import CorruptPersistedStateError, InvalidFormatError
from core.logging_utils import safe_log_settings
from core.storage import Collection, LocalStorage

from .contracts import PaySettings

logger = logging.getLogger(__name__)

MAX_AMOUNT = Decimal("9999999999.99")


def parse_amount(value, field: str) -> Decimal:
    """
    Parse a money amount from user input.

    Blank means 0. Non-numeric, negative and out-of-range values are rejected.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Decimal("0")
    if isinstance(value, bool):
        raise InvalidFormatError(f"{field} must be a number", field, str(value))

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidFormatError(f"{field} must be a number", field, str(value))

    if not amount.is_finite():
        raise InvalidFormatError(f"{field} must be a number", field, str(value))
    if amount < 0:
        raise InvalidFormatError(f"{field} cannot be negative", field, str(value))
    if amount > MAX_AMOUNT:
        raise InvalidFormatError(f"{field} is too large", field, str(value))
    return amount


def _decode_settings(data) -> PaySettings:
    if not isinstance(data, dict):
        raise CorruptPersistedStateError("settings", "expected an object")
    try:
        return PaySettings(
            monthly_salary=parse_amount(data.get("monthly_salary", 0), "monthly_salary"),
            admin_allowance=parse_amount(data.get("admin_allowance", 0), "admin_allowance"),
        )
    except InvalidFormatError as e:
        raise CorruptPersistedStateError("settings", e.message) from e


def _encode_settings(settings: PaySettings) -> dict:
    return {key: str(value) for key, value in settings.as_dict().items()}


SETTINGS_COLLECTION = Collection(
    key="settings",
    default=PaySettings,
    decode=_decode_settings,
    encode=_encode_settings,
)


class PaySettingsStore:
    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def load(self) -> PaySettings:
        return self.storage.load(SETTINGS_COLLECTION)

    def change(self, monthly_salary=None, admin_allowance=None) -> PaySettings:
        """Validate, persist and return the new settings"""
        settings = PaySettings(
            monthly_salary=parse_amount(monthly_salary, "monthly_salary"),
            admin_allowance=parse_amount(admin_allowance, "admin_allowance"),
        )
        with self.storage.transaction():
            self.storage.save(SETTINGS_COLLECTION, settings)

        logger.info("Pay settings saved", extra=safe_log_settings(settings, "change_settings"))
        return settings

    def clear(self) -> None:
        with self.storage.transaction():
            self.storage.clear(SETTINGS_COLLECTION)
