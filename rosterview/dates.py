"""Week and calendar helpers.

Weeks start on Monday and the schedule grid covers Monday..Saturday.
Dates cross the storage boundary as ``YYYY-MM-DD`` strings and are
``datetime.date`` everywhere else.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence

import pandas as pd

WEEK_DAYS = 6
DISPLAY_FORMAT = "%Y.%m.%d"


def parse_date(value) -> date:
    """Convert a ``date``, ``datetime`` or ISO string into a ``date``."""
    if value is None or value == "":
        raise ValueError("Date value is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Invalid date: {value!r}")
    return ts.date()


def to_iso(d: date) -> str:
    return parse_date(d).strftime("%Y-%m-%d")


def week_start(d: Optional[date] = None) -> date:
    """Return the Monday of the week containing ``d`` (today if omitted)."""
    d = date.today() if d is None else parse_date(d)
    return d - timedelta(days=d.weekday())


def week_dates(monday: date) -> List[date]:
    """Monday..Saturday of the week starting at ``monday``."""
    monday = parse_date(monday)
    return [monday + timedelta(days=i) for i in range(WEEK_DAYS)]


def iso_week_number(d: date) -> int:
    return parse_date(d).isocalendar()[1]


def is_even_week(d: date) -> bool:
    return iso_week_number(d) % 2 == 0


def day_name(d: date) -> str:
    return pd.Timestamp(parse_date(d)).day_name()


def format_date(d: date, fmt: str = DISPLAY_FORMAT) -> str:
    return parse_date(d).strftime(fmt)


def week_range_string(dates: Sequence[date], fmt: str = DISPLAY_FORMAT) -> str:
    if not dates:
        return ""
    return f"{format_date(dates[0], fmt)} - {format_date(dates[-1], fmt)}"


def week_label(monday: date, fmt: str = DISPLAY_FORMAT) -> str:
    """E.g. ``2024 W24 (2024.06.10 - 2024.06.15)``."""
    monday = week_start(monday)
    iso_year, iso_week, _ = monday.isocalendar()
    return f"{iso_year} W{iso_week:02d} ({week_range_string(week_dates(monday), fmt)})"
