"""
Built-in statutory holidays.

Seeded into storage on first use; afterwards the stored copy is the source
of truth and may be edited (never deleted) by the user.
"""

# date -> (name, kind)
STATUTORY_HOLIDAYS = {
    # Regular holidays (200%)
    "2025-01-01": ("New Year's Day", "REGULAR"),
    "2025-04-18": ("Maundy Thursday", "REGULAR"),
    "2025-04-19": ("Good Friday", "REGULAR"),
    "2025-05-01": ("Labor Day", "REGULAR"),
    "2025-06-12": ("Independence Day", "REGULAR"),
    "2025-11-30": ("Bonifacio Day", "REGULAR"),
    "2025-12-25": ("Christmas Day", "REGULAR"),
    "2025-12-30": ("Rizal Day", "REGULAR"),
    # Special non-working days (130%)
    "2025-02-25": ("EDSA Revolution Anniversary", "SPECIAL"),
    "2025-04-09": ("Day of Valor", "SPECIAL"),
    "2025-04-20": ("Easter Sunday", "SPECIAL"),
    "2025-11-01": ("All Saints' Day", "SPECIAL"),
    "2025-12-08": ("Feast of the Immaculate Conception", "SPECIAL"),
    "2025-12-31": ("New Year's Eve", "SPECIAL"),
}
