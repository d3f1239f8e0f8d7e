from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    """Return the current moment as a timezone-aware datetime in the host's local zone."""
    return datetime.now().astimezone()


def format_clock(dt: datetime, include_date: bool = False, use_24_hour: bool = False) -> str:
    """Format a datetime for display.

    - "2:44 PM"               (default)
    - "14:44"                 (use_24_hour)
    - "Mon, Oct 19, 2:44 PM"  (include_date)
    """
    if use_24_hour:
        clock = f"{dt.hour:02d}:{dt.minute:02d}"
    else:
        hour = dt.hour % 12 or 12
        suffix = "AM" if dt.hour < 12 else "PM"
        clock = f"{hour}:{dt.minute:02d} {suffix}"
    if include_date:
        return f"{dt.strftime('%a, %b')} {dt.day}, {clock}"
    return clock
