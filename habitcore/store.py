"""Habit and completion storage, CRUD and completion toggling.

Habits live in data/habits.yaml, completions in data/completions.json.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date
from pathlib import Path
from typing import Any

from habitcore.dates import as_date, format_date
from habitcore.fileio import read_json, read_yaml, write_json_atomic, write_yaml_atomic
from habitcore.models import Completion, EnrichedHabit, Habit
from habitcore.streaks import enrich_habits
from habitcore.validation import validate_habit
from habitcore.workspace import completions_path, habits_path, today_date

logger = logging.getLogger(__name__)


# ── Load / save ───────────────────────────────────────────────


def load_habits(root: Path | None = None) -> list[Habit]:
    data = read_yaml(habits_path(root))
    return [Habit.from_dict(h) for h in (data.get("habits") or []) if isinstance(h, dict)]


def save_habits(habits: list[Habit], root: Path | None = None) -> None:
    write_yaml_atomic(habits_path(root), {"habits": [h.to_dict() for h in habits]})


def load_completions(root: Path | None = None) -> list[Completion]:
    data = read_json(completions_path(root))
    items = data.get("completions", []) if isinstance(data, dict) else data
    return [Completion.from_dict(c) for c in (items or []) if isinstance(c, dict)]


def save_completions(completions: list[Completion], root: Path | None = None) -> None:
    write_json_atomic(completions_path(root), {"completions": [c.to_dict() for c in completions]})


def load_enriched_habits(
    root: Path | None = None,
    today: date | None = None,
    include_inactive: bool = False,
) -> list[EnrichedHabit]:
    """Load everything from disk and run it through the streak engine."""
    if today is None:
        today = today_date(root)
    habits = load_habits(root)
    if not include_inactive:
        habits = [h for h in habits if h.is_active]
    return enrich_habits(habits, load_completions(root), today)


# ── CRUD ──────────────────────────────────────────────────────


def find_habit(habits: list[Habit], habit_id: str) -> Habit | None:
    for h in habits:
        if h.id == habit_id:
            return h
    return None


def create_habit(habits: list[Habit], habit_data: dict[str, Any]) -> tuple[Habit, list[str]]:
    """Create and add a new habit. Returns (habit, errors)."""
    errors = validate_habit(habit_data)
    if errors:
        logger.info("Rejected habit %r: %s", habit_data.get("id"), "; ".join(errors))
        return Habit(), errors

    habit_id = str(habit_data["id"])
    if find_habit(habits, habit_id):
        return Habit(), [f"Habit ID already exists: {habit_id}"]

    habit = Habit.from_dict(habit_data)
    habits.append(habit)
    return habit, []


def update_habit(habits: list[Habit], habit_id: str, updates: dict[str, Any]) -> tuple[Habit | None, list[str]]:
    """Update a habit by ID. Returns (updated_habit, errors)."""
    habit = find_habit(habits, habit_id)
    if not habit:
        return None, [f"Habit not found: {habit_id}"]

    habit_dict = habit.to_dict()
    habit_dict.update(updates)
    habit_dict["id"] = habit_id

    errors = validate_habit(habit_dict)
    if errors:
        return None, errors

    updated = Habit.from_dict(habit_dict)
    for i, h in enumerate(habits):
        if h.id == habit_id:
            habits[i] = updated
            break
    return updated, []


def delete_habit(
    habits: list[Habit],
    completions: list[Completion],
    habit_id: str,
    archive: bool = True,
) -> bool:
    """Archive a habit (is_active = False) or remove it with its completions."""
    for i, h in enumerate(habits):
        if h.id != habit_id:
            continue
        if archive:
            h.is_active = False
        else:
            habits.pop(i)
            completions[:] = [c for c in completions if c.habit_id != habit_id]
        return True
    return False


def toggle_completion(
    completions: list[Completion],
    habit_id: str,
    day: date | str,
) -> bool:
    """Mark *habit_id* done on *day*, or undo it if already done.

    Returns True if the habit is now completed on that day.
    """
    day_str = format_date(as_date(day))
    existing = [c for c in completions if c.habit_id == habit_id and c.completed_on == day_str]
    if existing:
        completions[:] = [c for c in completions if c not in existing]
        return False
    completions.append(Completion(habit_id=habit_id, completed_on=day_str, id=uuid.uuid4().hex))
    return True


def toggle_and_save(habit_id: str, day: date | str, root: Path | None = None) -> tuple[bool | None, list[str]]:
    """Toggle a completion on disk. Returns (done, errors)."""
    if not find_habit(load_habits(root), habit_id):
        return None, [f"Habit not found: {habit_id}"]
    completions = load_completions(root)
    done = toggle_completion(completions, habit_id, day)
    save_completions(completions, root)
    logger.info("Habit %s %s on %s", habit_id, "completed" if done else "uncompleted", format_date(as_date(day)))
    return done, []
