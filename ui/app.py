from __future__ import annotations

import logging
import os
import secrets
from datetime import date as date_type
from pathlib import Path
from typing import Any

from habitcore import (
    workspace_root as _workspace_root,
    today_date as _today_date,
    load_settings,
    parse_date,
    load_habits,
    save_habits,
    load_completions,
    save_completions,
    load_enriched_habits,
    find_habit,
    create_habit,
    update_habit,
    delete_habit,
    toggle_and_save,
    enrich_habit,
    compute_dashboard_stats,
    crossed_milestones,
    milestone_message,
    export_habits_to_csv,
    export_habits_to_json,
    frequency_days,
    streak_color,
)

from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi import Body
from fastapi.security import HTTPBasic, HTTPBasicCredentials

logger = logging.getLogger(__name__)


# ── HTML helpers ──────────────────────────────────────────────

def _escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


# ── Auth ──────────────────────────────────────────────────────

app = FastAPI(title="Habit Tracker API", version="0.1.0")

security = HTTPBasic(auto_error=False)


def get_current_user(credentials: HTTPBasicCredentials | None = Depends(security)) -> str:
    expected_username = os.environ.get("HABITS_USERNAME", "")
    expected_password = os.environ.get("HABITS_PASSWORD", "")

    if credentials is None:
        if not expected_username or not expected_password:
            return "guest"
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Basic"},
        )

    if not expected_username or not expected_password:
        return "guest"

    correct_username = secrets.compare_digest(credentials.username.encode("utf-8"), expected_username.encode("utf-8"))
    correct_password = secrets.compare_digest(credentials.password.encode("utf-8"), expected_password.encode("utf-8"))

    if not (correct_username and correct_password):
        logger.warning("Rejected credentials for %r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    return credentials.username


def _resolve_day(value: str | None, root: Path) -> date_type:
    """Parse an optional ?date= value; default to today in the user's timezone."""
    if not value:
        return _today_date(root)
    try:
        return parse_date(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid date: {value}")


# ── Pages ─────────────────────────────────────────────────────

@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index(username: str = Depends(get_current_user)) -> HTMLResponse:
    root = _workspace_root()
    today = _today_date(root)
    habits = load_enriched_habits(root, today)

    rows = []
    for h in habits:
        done = "done" if h.is_completed_today else ("due" if h.is_due_today else "")
        rows.append(
            "<tr>"
            f"<td>{_escape(h.habit.icon)} {_escape(h.habit.title)}</td>"
            f"<td>{_escape(', '.join(frequency_days(h.habit.frequency)))}</td>"
            f'<td class="streak-{streak_color(h.current_streak)}">{h.current_streak}</td>'
            f"<td>{h.longest_streak}</td>"
            f"<td>{h.completion_rate}%</td>"
            f"<td>{done}</td>"
            "</tr>"
        )
    body = "".join(rows) or '<tr><td colspan="6">(no habits yet)</td></tr>'
    stats = compute_dashboard_stats(habits, today)
    html = (
        "<!doctype html><html><head><meta charset='utf-8'><title>Habits</title></head><body>"
        f"<h1>Habits for {today.isoformat()}</h1>"
        f"<p>{stats.completed_today}/{stats.total_habits} done today, "
        f"{stats.active_streaks} active streaks, {stats.completion_rate}% overall</p>"
        "<table><thead><tr><th>Habit</th><th>Days</th><th>Streak</th><th>Best</th>"
        "<th>Rate</th><th>Today</th></tr></thead>"
        f"<tbody>{body}</tbody></table></body></html>"
    )
    return HTMLResponse(html)


# ── Habits API ────────────────────────────────────────────────

@app.get("/api/habits")
def api_list_habits(
    date: str | None = None,
    include_inactive: bool = False,
    username: str = Depends(get_current_user),
) -> dict[str, Any]:
    """All habits enriched with streaks as of ?date= (default today)."""
    root = _workspace_root()
    day = _resolve_day(date, root)
    habits = load_enriched_habits(root, day, include_inactive=include_inactive)
    return {"date": day.isoformat(), "habits": [h.to_dict() for h in habits]}


@app.get("/api/habits/{habit_id}")
def api_get_habit(habit_id: str, date: str | None = None, username: str = Depends(get_current_user)) -> dict[str, Any]:
    root = _workspace_root()
    day = _resolve_day(date, root)
    habit = find_habit(load_habits(root), habit_id)
    if not habit:
        raise HTTPException(status_code=404, detail=f"Habit not found: {habit_id}")
    return enrich_habit(habit, load_completions(root), day).to_dict()


@app.post("/api/habits")
def api_create_habit(payload: dict[str, Any] = Body(...), username: str = Depends(get_current_user)) -> dict[str, Any]:
    root = _workspace_root()
    habits = load_habits(root)
    habit, errors = create_habit(habits, payload)
    if errors:
        raise HTTPException(status_code=400, detail=errors)
    save_habits(habits, root)
    logger.info("Created habit %s", habit.id)
    return {"ok": True, "habit": habit.to_dict()}


@app.put("/api/habits/{habit_id}")
def api_update_habit(habit_id: str, payload: dict[str, Any] = Body(...), username: str = Depends(get_current_user)) -> dict[str, Any]:
    root = _workspace_root()
    habits = load_habits(root)
    habit, errors = update_habit(habits, habit_id, payload)
    if habit is None and errors and errors[0].startswith("Habit not found"):
        raise HTTPException(status_code=404, detail=errors[0])
    if errors:
        raise HTTPException(status_code=400, detail=errors)
    save_habits(habits, root)
    return {"ok": True, "habit": habit.to_dict()}


@app.delete("/api/habits/{habit_id}")
def api_delete_habit(habit_id: str, archive: bool = True, username: str = Depends(get_current_user)) -> dict[str, Any]:
    root = _workspace_root()
    habits = load_habits(root)
    completions = load_completions(root)
    if not delete_habit(habits, completions, habit_id, archive=archive):
        raise HTTPException(status_code=404, detail=f"Habit not found: {habit_id}")
    save_habits(habits, root)
    if not archive:
        save_completions(completions, root)
    logger.info("%s habit %s", "Archived" if archive else "Deleted", habit_id)
    return {"ok": True}


@app.post("/api/habits/{habit_id}/toggle")
def api_toggle_completion(
    habit_id: str,
    payload: dict[str, Any] = Body(default={}),
    username: str = Depends(get_current_user),
) -> dict[str, Any]:
    """Mark a habit done (or undone) for a day and report any milestones crossed."""
    root = _workspace_root()
    today = _today_date(root)
    day = _resolve_day(payload.get("date"), root)

    habit = find_habit(load_habits(root), habit_id)
    if not habit:
        raise HTTPException(status_code=404, detail=f"Habit not found: {habit_id}")

    before = enrich_habit(habit, load_completions(root), today).current_streak
    done, errors = toggle_and_save(habit_id, day, root)
    if errors:
        raise HTTPException(status_code=404, detail=errors[0])
    enriched = enrich_habit(habit, load_completions(root), today)

    milestones = crossed_milestones(before, enriched.current_streak)
    return {
        "ok": True,
        "completed": done,
        "date": day.isoformat(),
        "habit": enriched.to_dict(),
        "milestones": [
            {"days": m, "message": milestone_message(habit.title, m)} for m in milestones
        ],
    }


# ── Stats & export ────────────────────────────────────────────

@app.get("/api/stats")
def api_stats(date: str | None = None, username: str = Depends(get_current_user)) -> dict[str, Any]:
    root = _workspace_root()
    day = _resolve_day(date, root)
    habits = load_enriched_habits(root, day)
    return compute_dashboard_stats(habits, day).to_dict()


@app.get("/api/export")
def api_export(format: str | None = None, username: str = Depends(get_current_user)) -> PlainTextResponse:
    """Export every habit, active or archived, as CSV or JSON (default from settings.yaml)."""
    root = _workspace_root()
    if not format:
        format = load_settings(root).export_format
    habits = load_enriched_habits(root, _today_date(root), include_inactive=True)
    if format == "csv":
        return PlainTextResponse(export_habits_to_csv(habits), media_type="text/csv")
    if format == "json":
        return PlainTextResponse(export_habits_to_json(habits), media_type="application/json")
    raise HTTPException(status_code=400, detail=f"Unsupported export format: {format}")
