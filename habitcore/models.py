"""Typed dataclasses for the habitcore data model.

All models use from_dict/to_dict for JSON/YAML serialization.
Keys are snake_case, matching the stored habit records; camelCase
aliases are accepted on input. Unknown keys are ignored; missing keys
use defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _pick(d: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for k in keys:
        if k in d and d[k] is not None:
            return d[k]
    return default


# ── Habits ────────────────────────────────────────────────────


@dataclass
class Habit:
    id: str = ""
    title: str = ""
    frequency: int = 127  # weekday bitmask, see habitcore.frequency
    start_date: str = ""  # ISO date
    user_id: str = ""
    description: str = ""
    color: str = ""
    icon: str = ""
    reminder_time: str = ""  # HH:MM
    is_active: bool = True
    created_at: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Habit:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(
            id=str(_pick(d, "id", default="")),
            title=str(_pick(d, "title", default="")),
            frequency=int(_pick(d, "frequency", "frequencyMask", "frequency_mask", default=127)),
            start_date=str(_pick(d, "start_date", "startDate", default="")),
            user_id=str(_pick(d, "user_id", "userId", default="")),
            description=str(_pick(d, "description", default="")),
            color=str(_pick(d, "color", default="")),
            icon=str(_pick(d, "icon", default="")),
            reminder_time=str(_pick(d, "reminder_time", "reminderTime", default="")),
            is_active=bool(_pick(d, "is_active", "isActive", default=True)),
            created_at=str(_pick(d, "created_at", "createdAt", default="")),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "frequency": self.frequency,
            "start_date": self.start_date,
            "is_active": self.is_active,
        }
        for key in ("user_id", "description", "color", "icon", "reminder_time", "created_at"):
            value = getattr(self, key)
            if value:
                d[key] = value
        return d


@dataclass
class Completion:
    habit_id: str = ""
    completed_on: str = ""  # ISO date
    id: str = ""
    user_id: str = ""
    created_at: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Completion:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(
            habit_id=str(_pick(d, "habit_id", "habitId", default="")),
            completed_on=str(_pick(d, "completed_on", "completedOn", "completed_at", default="")),
            id=str(_pick(d, "id", default="")),
            user_id=str(_pick(d, "user_id", "userId", default="")),
            created_at=str(_pick(d, "created_at", "createdAt", default="")),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"habit_id": self.habit_id, "completed_on": self.completed_on}
        if self.id:
            d["id"] = self.id
        if self.user_id:
            d["user_id"] = self.user_id
        if self.created_at:
            d["created_at"] = self.created_at
        return d


# ── Computed views ────────────────────────────────────────────


@dataclass(frozen=True)
class StreakResult:
    current_streak: int = 0
    longest_streak: int = 0


@dataclass
class EnrichedHabit:
    """A habit together with its completions and computed streak fields."""

    habit: Habit
    completions: list[Completion] = field(default_factory=list)
    current_streak: int = 0
    longest_streak: int = 0
    completion_rate: int = 0
    last_completed_on: str | None = None
    is_due_today: bool = False
    is_completed_today: bool = False

    @property
    def id(self) -> str:
        return self.habit.id

    @property
    def title(self) -> str:
        return self.habit.title

    def to_dict(self) -> dict[str, Any]:
        d = self.habit.to_dict()
        d.update({
            "completions": [c.to_dict() for c in self.completions],
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "completion_rate": self.completion_rate,
            "last_completed_on": self.last_completed_on,
            "is_due_today": self.is_due_today,
            "is_completed_today": self.is_completed_today,
        })
        return d


@dataclass
class DashboardStats:
    total_habits: int = 0
    completed_today: int = 0
    active_streaks: int = 0
    total_completions: int = 0
    completion_rate: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_habits": self.total_habits,
            "completed_today": self.completed_today,
            "active_streaks": self.active_streaks,
            "total_completions": self.total_completions,
            "completion_rate": self.completion_rate,
        }


# ── Settings ──────────────────────────────────────────────────


@dataclass
class Settings:
    timezone: str = "UTC"
    export_format: str = "csv"  # csv, json

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        fmt = str(d.get("export_format", "csv")).strip().lower()
        return cls(
            timezone=str(d.get("timezone", "UTC")),
            export_format=fmt if fmt in ("csv", "json") else "csv",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"timezone": self.timezone, "export_format": self.export_format}
