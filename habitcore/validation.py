"""Input checks for habit records, used by the store and API layers.

The streak engine itself trusts its inputs.
"""

from __future__ import annotations

import re
from typing import Any

from habitcore.dates import parse_date

TITLE_MIN = 2
TITLE_MAX = 100
MAX_FREQUENCY = 127  # all seven weekday bits

_REMINDER_TIME = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def validate_habit_title(title: str) -> bool:
    return TITLE_MIN <= len((title or "").strip()) <= TITLE_MAX


def validate_frequency(frequency: int) -> bool:
    return 0 < frequency <= MAX_FREQUENCY


def validate_habit(habit: dict[str, Any]) -> list[str]:
    """Validate habit schema and return list of errors (empty if valid)."""
    errors = []
    if "id" not in habit or not str(habit["id"]).strip():
        errors.append("Missing required field: id")

    if "title" not in habit:
        errors.append("Missing required field: title")
    elif not validate_habit_title(str(habit["title"])):
        errors.append(f"title must be {TITLE_MIN}-{TITLE_MAX} characters")

    if "frequency" not in habit:
        errors.append("Missing required field: frequency")
    elif not isinstance(habit["frequency"], int) or isinstance(habit["frequency"], bool):
        errors.append("frequency must be an integer")
    elif not validate_frequency(habit["frequency"]):
        errors.append(f"frequency must be between 1 and {MAX_FREQUENCY}")

    if "start_date" not in habit:
        errors.append("Missing required field: start_date")
    else:
        try:
            parse_date(habit["start_date"])
        except ValueError:
            errors.append(f"Invalid start_date: {habit['start_date']}")

    if "is_active" in habit and not isinstance(habit["is_active"], bool):
        errors.append("is_active must be true or false")

    reminder = habit.get("reminder_time")
    if reminder and not _REMINDER_TIME.match(str(reminder)):
        errors.append(f"Invalid reminder_time: {reminder}")

    return errors
