"""Date helpers for habitcore.

Every habit date is a plain calendar day serialized as YYYY-MM-DD and
anchored to midnight UTC, so comparisons never depend on the caller's
local timezone. "Today" is always passed in by the caller.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta, timezone

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def format_date(d: date | datetime) -> str:
    """Return the canonical YYYY-MM-DD form of *d*.

    Aware datetimes are converted to UTC before the time is dropped.
    """
    if isinstance(d, datetime):
        if d.tzinfo is not None:
            d = d.astimezone(timezone.utc)
        d = d.date()
    return d.isoformat()


def parse_date(s: str) -> date:
    """Parse 'YYYY-MM-DD' into a date. Raises ValueError on anything else."""
    if not isinstance(s, str) or not _ISO_DATE.match(s.strip()):
        raise ValueError(f"Invalid date: {s!r}")
    try:
        return date.fromisoformat(s.strip())
    except ValueError:
        raise ValueError(f"Invalid date: {s!r}") from None


def as_date(d: date | str) -> date:
    """Accept either a date or an ISO string."""
    if isinstance(d, datetime):
        return parse_date(format_date(d))
    if isinstance(d, date):
        return d
    return parse_date(d)


def _utc_midnight(d: date) -> datetime:
    return datetime.combine(d, time.min, tzinfo=timezone.utc)


def is_today(s: date | str, today: date) -> bool:
    return format_date(as_date(s)) == format_date(today)


def is_yesterday(s: date | str, today: date) -> bool:
    return format_date(as_date(s)) == format_date(add_days(today, -1))


def days_difference(a: date | str, b: date | str) -> int:
    """Absolute number of days between *a* and *b*, rounded up.

    Any partial day counts as a whole one. Streak results stored by older
    clients were computed this way.
    """
    delta = _utc_midnight(as_date(b)) - _utc_midnight(as_date(a))
    return math.ceil(abs(delta.total_seconds()) / 86400)


def add_days(d: date | str, n: int) -> date:
    """Calendar addition; *n* may be negative."""
    return as_date(d) + timedelta(days=n)


def date_range(start: date, end: date):
    """Yield every day from *start* to *end* inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
