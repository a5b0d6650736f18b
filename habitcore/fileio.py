"""Reading and atomically replacing the habit data files.

Every write goes to a locked temp file in the target's directory and is
then renamed over the target, so readers never see a half-written
habits.yaml or completions.json.
"""

from __future__ import annotations

import fcntl
import json
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, TextIO

import yaml

logger = logging.getLogger(__name__)


def _read_nonblank(path: Path) -> str | None:
    if not path.exists():
        return None
    text = path.read_text(encoding="utf-8")
    return text if text.strip() else None


def read_json(path: Path) -> Any:
    """Parsed JSON (a dict or a list), or ``{}`` when the file is missing or blank."""
    text = _read_nonblank(path)
    if text is None:
        return {}
    return json.loads(text)


def read_yaml(path: Path) -> dict[str, Any]:
    """Top-level YAML mapping, or ``{}`` for a missing, blank or non-mapping file."""
    text = _read_nonblank(path)
    if text is None:
        return {}
    result = yaml.safe_load(text)
    return result if isinstance(result, dict) else {}


@contextmanager
def _replacing(path: Path, suffix: str) -> Iterator[TextIO]:
    """Yield a locked temp file that replaces *path* on a clean exit."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=suffix)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                yield f
                f.flush()
                os.fsync(f.fileno())
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        os.replace(temp_name, path)
    except BaseException:
        logger.warning("Could not replace %s; keeping the previous file", path)
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise


def write_text_atomic(path: Path, content: str) -> None:
    with _replacing(path, path.suffix or ".txt") as f:
        f.write(content)


def write_json_atomic(path: Path, data: Any) -> None:
    with _replacing(path, ".json") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def write_yaml_atomic(path: Path, data: dict[str, Any]) -> None:
    with _replacing(path, ".yaml") as f:
        yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
