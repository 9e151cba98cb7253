"""CSV import utilities to load a staff roster into settings."""

from __future__ import annotations

import secrets
import time
from dataclasses import replace
from pathlib import Path

import pandas as pd

from rosterview.domain.entities import Settings, StaffMember
from rosterview.errors import Result, ValidationError
from rosterview.services import roster


def generate_staff_id() -> str:
    """New opaque id, e.g. ``staff_1718000000000_a1b2c``."""
    return f"staff_{int(time.time() * 1000)}_{secrets.token_hex(3)[:5]}"


def _parse_bool(value: str, default: bool = True) -> bool:
    value = str(value).strip().upper()
    if not value:
        return default
    return value in ["TRUE", "T", "1", "YES", "Y"]


def import_roster_csv(csv_path: str | Path, settings: Settings) -> Result[Settings]:
    """
    Append staff members from a CSV to the roster.

    Expected columns: name (required), id, employee_number, default_unit,
    default_group, default_job_title, is_active, sort_order. Rows without an
    id get a generated one.

    Args:
        csv_path: Path to roster CSV
        settings: Current settings

    Returns:
        Result with the updated settings, or the first row's error
    """
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)

    # Normalize column names
    df.columns = df.columns.str.lower().str.strip()
    if "name" not in df.columns:
        return Result.failure(ValidationError(f"{csv_path}: missing 'name' column"))

    staff = settings.staff_list
    for line, row in enumerate(df.to_dict("records"), start=2):
        sort_order = str(row.get("sort_order", "")).strip()
        if sort_order and not sort_order.lstrip("-").isdigit():
            return Result.failure(ValidationError(f"{csv_path} line {line}: bad sort_order {sort_order!r}"))
        member = StaffMember(
            id=str(row.get("id", "")).strip() or generate_staff_id(),
            name=str(row["name"]).strip(),
            employee_number=str(row.get("employee_number", "")).strip(),
            default_unit=str(row.get("default_unit", "")).strip(),
            default_group=str(row.get("default_group", "")).strip(),
            default_job_title=str(row.get("default_job_title", "")).strip(),
            is_active=_parse_bool(row.get("is_active", "")),
            sort_order=int(sort_order) if sort_order else None,
        )
        result = roster.add_member(staff, member)
        if not result.ok:
            return Result.failure(type(result.error)(f"{csv_path} line {line}: {result.error}"))
        staff = result.value

    print(f"[INFO] Imported {len(df)} staff members from {csv_path}")
    return Result.success(replace(settings, staff_list=staff))
