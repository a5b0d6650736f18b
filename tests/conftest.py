"""Shared test fixtures for habitcore tests."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
import yaml

from habitcore.models import Habit


@pytest.fixture
def daily_habit() -> Habit:
    """A daily habit starting Monday 2024-01-01."""
    return Habit(id="read", title="Read 20 pages", frequency=127, start_date="2024-01-01")


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with settings, habits and completions."""
    root = tmp_path / "workspace"
    (root / "data").mkdir(parents=True)

    settings = {"timezone": "UTC", "export_format": "csv"}
    (root / "settings.yaml").write_text(
        yaml.dump(settings, default_flow_style=False), encoding="utf-8"
    )

    habits = {
        "habits": [
            {
                "id": "read",
                "title": "Read 20 pages",
                "frequency": 127,
                "start_date": "2024-01-01",
                "icon": "book",
            },
            {
                "id": "gym",
                "title": "Gym",
                "frequency": 31,
                "start_date": "2024-01-01",
                "description": 'Lift "heavy"',
            },
            {
                "id": "old",
                "title": "Old habit",
                "frequency": 96,
                "start_date": "2023-06-01",
                "is_active": False,
            },
        ],
    }
    (root / "data" / "habits.yaml").write_text(
        yaml.dump(habits, default_flow_style=False, sort_keys=False), encoding="utf-8"
    )

    completions = {
        "completions": [
            {"id": "c1", "habit_id": "read", "completed_on": "2024-01-03"},
            {"id": "c2", "habit_id": "read", "completed_on": "2024-01-04"},
            {"id": "c3", "habit_id": "read", "completed_on": "2024-01-05"},
            {"id": "c4", "habit_id": "gym", "completed_on": "2024-01-05"},
        ],
    }
    (root / "data" / "completions.json").write_text(
        json.dumps(completions, indent=2), encoding="utf-8"
    )

    os.environ["HABITS_ROOT"] = str(root)
    yield root
    if "HABITS_ROOT" in os.environ:
        del os.environ["HABITS_ROOT"]
