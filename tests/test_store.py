"""Tests for habitcore/store.py — load/save, CRUD, completion toggling."""

from datetime import date

from habitcore.fileio import read_json, read_yaml
from habitcore.models import Completion, Habit
from habitcore.store import (
    create_habit,
    delete_habit,
    find_habit,
    load_completions,
    load_enriched_habits,
    load_habits,
    save_habits,
    toggle_and_save,
    toggle_completion,
    update_habit,
)


def test_load_habits(workspace):
    habits = load_habits(workspace)
    assert [h.id for h in habits] == ["read", "gym", "old"]
    assert habits[2].is_active is False


def test_load_missing_files(tmp_path):
    assert load_habits(tmp_path) == []
    assert load_completions(tmp_path) == []


def test_save_habits_round_trip(workspace):
    habits = load_habits(workspace)
    habits[0].title = "Read 30 pages"
    save_habits(habits, workspace)
    data = read_yaml(workspace / "data" / "habits.yaml")
    assert data["habits"][0]["title"] == "Read 30 pages"
    assert load_habits(workspace)[0].title == "Read 30 pages"


def test_load_enriched_habits_skips_inactive(workspace):
    habits = load_enriched_habits(workspace, date(2024, 1, 5))
    assert [h.id for h in habits] == ["read", "gym"]
    read = habits[0]
    assert read.current_streak == 3
    assert read.is_completed_today is True
    all_habits = load_enriched_habits(workspace, date(2024, 1, 5), include_inactive=True)
    assert len(all_habits) == 3


def test_find_habit():
    habits = [Habit(id="a", title="A"), Habit(id="b", title="B")]
    assert find_habit(habits, "a").title == "A"
    assert find_habit(habits, "c") is None


def test_create_habit():
    habits: list[Habit] = []
    habit, errors = create_habit(habits, {"id": "new", "title": "New", "frequency": 31, "start_date": "2024-01-01"})
    assert errors == []
    assert habit.frequency == 31
    assert len(habits) == 1


def test_create_habit_invalid():
    habits: list[Habit] = []
    _, errors = create_habit(habits, {"id": "new", "title": "N", "frequency": 0, "start_date": "2024-01-01"})
    assert len(errors) == 2
    assert habits == []


def test_create_habit_duplicate():
    habits = [Habit(id="a", title="A", start_date="2024-01-01")]
    _, errors = create_habit(habits, {"id": "a", "title": "Again", "frequency": 1, "start_date": "2024-01-01"})
    assert any("already exists" in e for e in errors)


def test_update_habit():
    habits = [Habit(id="a", title="A habit", frequency=127, start_date="2024-01-01")]
    updated, errors = update_habit(habits, "a", {"frequency": 96, "id": "ignored"})
    assert errors == []
    assert updated.id == "a"
    assert habits[0].frequency == 96


def test_update_habit_errors():
    habits = [Habit(id="a", title="A habit", frequency=127, start_date="2024-01-01")]
    _, errors = update_habit(habits, "missing", {"title": "X"})
    assert any("not found" in e for e in errors)
    _, errors = update_habit(habits, "a", {"frequency": 200})
    assert any("frequency" in e for e in errors)
    assert habits[0].frequency == 127


def test_delete_habit_archives():
    habits = [Habit(id="a", title="A")]
    completions = [Completion(habit_id="a", completed_on="2024-01-01")]
    assert delete_habit(habits, completions, "a") is True
    assert habits[0].is_active is False
    assert len(completions) == 1


def test_delete_habit_hard():
    habits = [Habit(id="a", title="A"), Habit(id="b", title="B")]
    completions = [
        Completion(habit_id="a", completed_on="2024-01-01"),
        Completion(habit_id="b", completed_on="2024-01-01"),
    ]
    assert delete_habit(habits, completions, "a", archive=False) is True
    assert [h.id for h in habits] == ["b"]
    assert [c.habit_id for c in completions] == ["b"]
    assert delete_habit(habits, completions, "zzz") is False


def test_toggle_completion():
    completions: list[Completion] = []
    assert toggle_completion(completions, "a", date(2024, 1, 1)) is True
    assert completions[0].completed_on == "2024-01-01"
    assert completions[0].id
    assert toggle_completion(completions, "a", "2024-01-01") is False
    assert completions == []


def test_toggle_completion_removes_duplicates():
    completions = [
        Completion(habit_id="a", completed_on="2024-01-01", id="1"),
        Completion(habit_id="a", completed_on="2024-01-01", id="2"),
        Completion(habit_id="b", completed_on="2024-01-01", id="3"),
    ]
    assert toggle_completion(completions, "a", "2024-01-01") is False
    assert [c.id for c in completions] == ["3"]


def test_toggle_and_save(workspace):
    done, errors = toggle_and_save("gym", "2024-01-08", workspace)
    assert errors == []
    assert done is True
    data = read_json(workspace / "data" / "completions.json")
    assert {"habit_id": "gym", "completed_on": "2024-01-08"}.items() <= data["completions"][-1].items()

    done, _ = toggle_and_save("gym", "2024-01-08", workspace)
    assert done is False
    assert len(load_completions(workspace)) == 4


def test_toggle_and_save_unknown_habit(workspace):
    done, errors = toggle_and_save("nope", "2024-01-08", workspace)
    assert done is None
    assert errors
