"""Workspace root, settings, timezone and path helpers for habitcore."""

from __future__ import annotations

import logging
import os
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from habitcore.fileio import read_yaml
from habitcore.models import Settings

logger = logging.getLogger(__name__)


def workspace_root() -> Path:
    """Get the workspace root directory (contains data/ and settings.yaml)."""
    return Path(
        os.environ.get("HABITS_ROOT", str(Path.home() / "habits"))
    ).expanduser().resolve()


def settings_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "settings.yaml"


def load_settings(root: Path | None = None) -> Settings:
    return Settings.from_dict(read_yaml(settings_path(root)))


def get_user_timezone(root: Path | None = None) -> ZoneInfo:
    """Get the timezone from settings.yaml, defaulting to UTC."""
    name = load_settings(root).timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r in settings, using UTC", name)
        return ZoneInfo("UTC")


def today_date(root: Path | None = None) -> date:
    """Today's calendar date in the user's timezone.

    This is the one place the wall clock is read; pass the result down.
    """
    return datetime.now(get_user_timezone(root)).date()


def today_str(root: Path | None = None) -> str:
    return today_date(root).isoformat()


# ── Path helpers ──────────────────────────────────────────────

def habits_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "data" / "habits.yaml"


def completions_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "data" / "completions.json"


def exports_dir(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "exports"
