"""CSV and JSON export of enriched habits."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

from habitcore.fileio import write_text_atomic
from habitcore.frequency import frequency_days
from habitcore.models import EnrichedHabit
from habitcore.store import load_enriched_habits
from habitcore.workspace import exports_dir, load_settings, today_date

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "Title",
    "Description",
    "Frequency Days",
    "Start Date",
    "Current Streak",
    "Longest Streak",
    "Completion Rate",
    "Total Completions",
    "Last Completed",
]

EXPORT_FORMATS = ("csv", "json")


def _csv_cell(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def export_habits_to_csv(habits: list[EnrichedHabit]) -> str:
    """One quoted row per habit under a fixed header, newline-separated."""
    rows = [CSV_HEADERS]
    for h in habits:
        rows.append([
            h.habit.title,
            h.habit.description or "",
            ", ".join(frequency_days(h.habit.frequency)),
            h.habit.start_date,
            str(h.current_streak),
            str(h.longest_streak),
            f"{h.completion_rate}%",
            str(len(h.completions)),
            h.last_completed_on or "",
        ])
    return "\n".join(",".join(_csv_cell(cell) for cell in row) for row in rows)


def export_habits_to_json(habits: list[EnrichedHabit]) -> str:
    return json.dumps([h.to_dict() for h in habits], indent=2, ensure_ascii=False)


def write_export(
    habits: list[EnrichedHabit],
    fmt: str,
    today: date,
    root: Path | None = None,
) -> Path:
    """Write an export file named after *today* and return its path."""
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt!r}")
    content = export_habits_to_csv(habits) if fmt == "csv" else export_habits_to_json(habits)
    path = exports_dir(root) / f"habits-{today.isoformat()}.{fmt}"
    write_text_atomic(path, content)
    logger.info("Exported %d habits to %s", len(habits), path)
    return path


def export_workspace(root: Path | None = None, fmt: str | None = None, today: date | None = None) -> Path:
    """Export every habit in the workspace, archived ones included.

    *fmt* defaults to ``export_format`` from settings.yaml.
    """
    if today is None:
        today = today_date(root)
    if not fmt:
        fmt = load_settings(root).export_format
    habits = load_enriched_habits(root, today, include_inactive=True)
    return write_export(habits, fmt, today, root)
