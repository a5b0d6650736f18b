"""Streak and completion-rate engine for habitcore.

Pure functions over a Habit and its Completion list. Nothing here reads
the clock: every entry point takes the reference day as ``today``.
"""

from __future__ import annotations

import math
from datetime import date

from habitcore.dates import add_days, as_date, date_range, days_difference
from habitcore.frequency import is_habit_due_on_date
from habitcore.models import Completion, EnrichedHabit, Habit, StreakResult


def _sorted_newest_first(completions: list[Completion]) -> list[Completion]:
    return sorted(completions, key=lambda c: as_date(c.completed_on), reverse=True)


def _previous_due_date(habit: Habit, d: date) -> date:
    """Step back from *d* to the previous due date, stopping once before the start."""
    start = as_date(habit.start_date)
    d = add_days(d, -1)
    while not is_habit_due_on_date(habit, d) and d >= start:
        d = add_days(d, -1)
    return d


def current_streak(habit: Habit, completions: list[Completion], today: date) -> int:
    """Consecutive satisfied due dates, walking back from today (or yesterday).

    Non-due days are skipped, so a weekday-only habit keeps its streak
    across an empty weekend.
    """
    if not completions:
        return 0
    ordered = _sorted_newest_first(completions)

    if as_date(ordered[0].completed_on) == today:
        check = today
    else:
        check = add_days(today, -1)

    streak = 0
    for c in ordered:
        if as_date(c.completed_on) == check and is_habit_due_on_date(habit, check):
            streak += 1
            check = _previous_due_date(habit, check)
        else:
            break
    return streak


def longest_streak(completions: list[Completion]) -> int:
    """Longest run of completions with gaps of at most one calendar day.

    NOTE: unlike current_streak this ignores the schedule, so non-daily
    habits report shorter longest streaks. Existing clients depend on it.
    """
    if not completions:
        return 0
    ordered = _sorted_newest_first(completions)

    longest = 0
    temp = 0
    prev: Completion | None = None
    for c in ordered:
        if prev is None or days_difference(prev.completed_on, c.completed_on) <= 1:
            temp += 1
            longest = max(longest, temp)
        else:
            temp = 1
        prev = c
    return longest


def calculate_streak(habit: Habit, completions: list[Completion], today: date) -> StreakResult:
    if not completions:
        return StreakResult(0, 0)
    return StreakResult(
        current_streak=current_streak(habit, completions, today),
        longest_streak=longest_streak(completions),
    )


def round_half_up(x: float) -> int:
    """Round halves up, as the web dashboard does."""
    return int(math.floor(x + 0.5))


def calculate_completion_rate(habit: Habit, completions: list[Completion], today: date) -> int:
    """Percentage (0-100) of due days since the start that have a completion."""
    if not completions:
        return 0
    start = as_date(habit.start_date)

    total_due = sum(1 for d in date_range(start, today) if is_habit_due_on_date(habit, d))
    if total_due == 0:
        return 0

    done = sum(1 for c in completions if start <= as_date(c.completed_on) <= today)
    return min(100, round_half_up(done / total_due * 100))


def enrich_habit(habit: Habit, completions: list[Completion], today: date) -> EnrichedHabit:
    """Combine a habit with its completions and every computed field.

    *completions* may hold other habits' events; only those whose
    ``habit_id`` matches are used. Inputs are not modified.
    """
    own = [c for c in completions if c.habit_id == habit.id]
    streaks = calculate_streak(habit, own, today)

    last = None
    if own:
        last = max(as_date(c.completed_on) for c in own).isoformat()

    return EnrichedHabit(
        habit=habit,
        completions=own,
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
        completion_rate=calculate_completion_rate(habit, own, today),
        last_completed_on=last,
        is_due_today=is_habit_due_on_date(habit, today),
        is_completed_today=any(as_date(c.completed_on) == today for c in own),
    )


def enrich_habits(habits: list[Habit], completions: list[Completion], today: date) -> list[EnrichedHabit]:
    return [enrich_habit(h, completions, today) for h in habits]
