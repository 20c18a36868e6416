"""
Opening hours helpers.

A sauna's schedule is a mapping from lowercase English weekday names to
either ``"closed"`` or an interval such as ``"09:00-21:00"``.  The
helpers here format a schedule for display and decide whether a sauna
is open at a given instant.  They never raise: anything that cannot be
understood is treated as closed.
"""

import re
from datetime import datetime
from typing import Mapping, Optional

import pendulum

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
DAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

CLOSED = "closed"

_INTERVAL_RE = re.compile(r"(\d{2}):(\d{2})-(\d{2}):(\d{2})", re.ASCII)


def _now(timezone: Optional[str]) -> datetime:
    # pendulum.DateTime is a datetime subclass; local zone when none is given.
    return pendulum.now(timezone) if timezone else pendulum.now()


def get_current_day(now: Optional[datetime] = None, timezone: Optional[str] = None) -> str:
    """Return the lowercase weekday name for ``now`` (default: current time)."""
    now = now or _now(timezone)
    # datetime.weekday() counts from Monday = 0, matching WEEKDAYS.
    return WEEKDAYS[now.weekday()]


def format_opening_hours(opening_hours: Mapping[str, str]) -> str:
    """Format a schedule as one ``Mon: 09:00-21:00`` line per day."""
    lines = []
    for day, abbreviation in zip(WEEKDAYS, DAY_ABBREVIATIONS):
        hours = opening_hours.get(day) or "Closed"
        lines.append(f"{abbreviation}: {hours}")
    return "\n".join(lines)


def is_sauna_open(
    opening_hours: Mapping[str, str],
    now: Optional[datetime] = None,
    timezone: Optional[str] = None,
) -> bool:
    """Return whether the schedule is open at ``now``.

    ``now`` defaults to the current wall-clock time, in ``timezone`` if
    given.  Both interval bounds are inclusive and intervals crossing
    midnight are not supported.
    """
    now = now or _now(timezone)
    today_hours = opening_hours.get(get_current_day(now))

    if not today_hours or today_hours.lower() == CLOSED:
        return False

    match = _INTERVAL_RE.search(today_hours)
    if not match:
        return False

    open_hour, open_minute, close_hour, close_minute = (int(part) for part in match.groups())
    open_time = open_hour * 100 + open_minute
    close_time = close_hour * 100 + close_minute
    current_time = now.hour * 100 + now.minute

    return open_time <= current_time <= close_time
