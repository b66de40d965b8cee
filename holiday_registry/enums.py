"""
Holiday classifications.
"""

from enum import Enum

from core.exceptions import InvalidFormatError


class HolidayKind(Enum):
    """Pay treatment of a declared holiday"""

    REGULAR = "REGULAR"
    """Regular holiday, paid at 200%"""

    SPECIAL = "SPECIAL"
    """Special non-working day, paid at 130%"""

    @classmethod
    def parse(cls, value) -> "HolidayKind":
        """
        Accept a HolidayKind or its name in any letter case.

        Raises:
            InvalidFormatError: for any other value
        """
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().upper()
        try:
            return cls(text)
        except ValueError:
            raise InvalidFormatError(
                "kind must be REGULAR or SPECIAL", "kind", str(value)
            )

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def __str__(self):
        return self.value


class HolidaySource(Enum):
    """Where an effective holiday record comes from"""

    STATUTORY = "statutory"
    CUSTOM = "custom"

    def __str__(self):
        return self.value
