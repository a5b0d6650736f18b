"""Weekday scheduling for habits.

Two weekday conventions live side by side and must not be mixed up:

    weekday     day_of_week_index()   mask bit   mask value
    Monday              1                 0           1
    Tuesday             2                 1           2
    Wednesday           3                 2           4
    Thursday            4                 3           8
    Friday              5                 4          16
    Saturday            6                 5          32
    Sunday              7                 6          64

Stored masks, presets and validation use the power-of-two values. The
streak walker works with the 1-based index and converts through
``1 << (index - 1)``.
"""

from __future__ import annotations

from datetime import date

from habitcore.dates import as_date

MONDAY = 1
TUESDAY = 2
WEDNESDAY = 4
THURSDAY = 8
FRIDAY = 16
SATURDAY = 32
SUNDAY = 64

FREQUENCY_DAYS = {
    "MONDAY": MONDAY,
    "TUESDAY": TUESDAY,
    "WEDNESDAY": WEDNESDAY,
    "THURSDAY": THURSDAY,
    "FRIDAY": FRIDAY,
    "SATURDAY": SATURDAY,
    "SUNDAY": SUNDAY,
}

DAILY = 127
WEEKDAYS = MONDAY | TUESDAY | WEDNESDAY | THURSDAY | FRIDAY
WEEKENDS = SATURDAY | SUNDAY

FREQUENCY_PRESETS = {
    "DAILY": DAILY,
    "WEEKDAYS": WEEKDAYS,
    "WEEKENDS": WEEKENDS,
}

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def day_of_week_index(d: date | str) -> int:
    """Monday=1 ... Sunday=7."""
    return as_date(d).isoweekday()


def is_day_included_in_frequency(frequency: int, day_index: int) -> bool:
    """Test the mask bit for a 1-based weekday index."""
    return (frequency & (1 << (day_index - 1))) != 0


def is_habit_due_on_date(habit, d: date | str) -> bool:
    """True when *d* is on or after the habit's start and its weekday bit is set.

    *habit* is anything with ``start_date`` and ``frequency`` attributes.
    """
    d = as_date(d)
    if d < as_date(habit.start_date):
        return False
    return is_day_included_in_frequency(habit.frequency, day_of_week_index(d))


def frequency_days(frequency: int) -> list[str]:
    """Short weekday names for every bit set in *frequency*, Monday first."""
    return [name for i, name in enumerate(DAY_NAMES) if frequency & (1 << i)]


def frequency_from_days(day_indexes: list[int]) -> int:
    """Build a mask from 1-based weekday indexes, e.g. [1, 3, 5] -> 21."""
    mask = 0
    for idx in day_indexes:
        mask |= 1 << (idx - 1)
    return mask
