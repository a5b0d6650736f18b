"""Tests for habitcore/frequency.py — weekday mask conventions."""

from datetime import date

from habitcore.frequency import (
    DAILY,
    FREQUENCY_DAYS,
    SATURDAY,
    SUNDAY,
    WEEKDAYS,
    WEEKENDS,
    day_of_week_index,
    frequency_days,
    frequency_from_days,
    is_day_included_in_frequency,
    is_habit_due_on_date,
)
from habitcore.models import Habit


def test_bit_values():
    assert list(FREQUENCY_DAYS.values()) == [1, 2, 4, 8, 16, 32, 64]
    assert DAILY == 127
    assert WEEKDAYS == 31
    assert WEEKENDS == 96
    assert SATURDAY == 32 and SUNDAY == 64


def test_day_of_week_index_monday_first():
    assert day_of_week_index(date(2024, 1, 1)) == 1  # Monday
    assert day_of_week_index("2024-01-06") == 6  # Saturday
    assert day_of_week_index("2024-01-07") == 7  # Sunday


def test_weekend_mask_bits():
    saturday = day_of_week_index(date(2024, 1, 6))
    wednesday = day_of_week_index(date(2024, 1, 3))
    assert is_day_included_in_frequency(WEEKENDS, saturday) is True
    assert is_day_included_in_frequency(WEEKENDS, wednesday) is False


def test_weekdays_mask_bits():
    for idx in range(1, 6):
        assert is_day_included_in_frequency(WEEKDAYS, idx)
    assert not is_day_included_in_frequency(WEEKDAYS, 6)
    assert not is_day_included_in_frequency(WEEKDAYS, 7)


def test_not_due_before_start_date():
    habit = Habit(id="h", frequency=DAILY, start_date="2024-01-10")
    assert is_habit_due_on_date(habit, date(2024, 1, 9)) is False
    assert is_habit_due_on_date(habit, date(2024, 1, 10)) is True
    # Wednesday bit set, but still before the start
    habit = Habit(id="h", frequency=4, start_date="2024-01-10")
    assert is_habit_due_on_date(habit, date(2024, 1, 3)) is False
    assert is_habit_due_on_date(habit, date(2024, 1, 10)) is True


def test_due_respects_mask():
    habit = Habit(id="h", frequency=WEEKDAYS, start_date="2024-01-01")
    assert is_habit_due_on_date(habit, "2024-01-05") is True  # Friday
    assert is_habit_due_on_date(habit, "2024-01-06") is False  # Saturday


def test_frequency_days():
    assert frequency_days(WEEKENDS) == ["Sat", "Sun"]
    assert frequency_days(21) == ["Mon", "Wed", "Fri"]
    assert len(frequency_days(DAILY)) == 7


def test_frequency_from_days():
    assert frequency_from_days([1, 3, 5]) == 21
    assert frequency_from_days([6, 7]) == WEEKENDS
    assert frequency_from_days([]) == 0
