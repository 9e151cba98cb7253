"""CSV export of the weekly view and the roster."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Sequence

import pandas as pd

from rosterview.dates import to_iso
from rosterview.domain.entities import Settings
from rosterview.engine.merge import StaffView, iter_entries

VIEW_COLUMNS = ["unit", "staff_id", "employee_number", "name", "group", "job_title"]
ROSTER_COLUMNS = [
    "id",
    "name",
    "employee_number",
    "default_unit",
    "default_group",
    "default_job_title",
    "is_active",
    "sort_order",
]


def view_to_frame(view: StaffView, dates: Sequence[date]) -> pd.DataFrame:
    """
    One row per staff entry in display order, one column per day.

    Category columns hold the display strings, so deleted categories keep
    their ``(deleted)`` marker.
    """
    day_columns = [to_iso(d) for d in dates]
    rows = []
    for _, entry in iter_entries(view):
        row = {
            "unit": entry.display_unit,
            "staff_id": entry.staff_id,
            "employee_number": entry.employee_number,
            "name": entry.name,
            "group": entry.display_group,
            "job_title": entry.display_job_title,
        }
        for day, column in zip(dates, day_columns):
            row[column] = entry.shifts.get(day, "")
        rows.append(row)
    return pd.DataFrame(rows, columns=VIEW_COLUMNS + day_columns)


def export_week_csv(view: StaffView, dates: Sequence[date], csv_path: str | Path) -> int:
    """Write the week view to CSV. Returns number of rows written."""
    df = view_to_frame(view, dates)
    df.to_csv(csv_path, index=False)
    print(f"[INFO] Exported {len(df)} rows to {csv_path}")
    return len(df)


def export_roster_csv(settings: Settings, csv_path: str | Path) -> int:
    """Write the roster in the format accepted by import_roster_csv."""
    rows = [
        {
            "id": m.id,
            "name": m.name,
            "employee_number": m.employee_number,
            "default_unit": m.default_unit,
            "default_group": m.default_group,
            "default_job_title": m.default_job_title,
            "is_active": m.is_active,
            "sort_order": m.sort_order,
        }
        for m in settings.staff_list
    ]
    df = pd.DataFrame(rows, columns=ROSTER_COLUMNS)
    df.to_csv(csv_path, index=False)
    print(f"[INFO] Exported {len(df)} staff members to {csv_path}")
    return len(df)
