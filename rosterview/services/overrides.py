"""Weekly override store: per-week records keyed by staff id."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Dict, Optional

from rosterview.dates import parse_date, week_dates, week_start
from rosterview.domain.entities import WeeklyOverrideRecord, WeeklySchedule
from rosterview.errors import Result, ValidationError


def get_week(schedule: Optional[WeeklySchedule], week: date) -> WeeklySchedule:
    """Return the saved schedule, or an empty shell for a week with no data."""
    if schedule is not None:
        return schedule
    return WeeklySchedule.empty(week_start(week))


def upsert_member(
    schedule: WeeklySchedule,
    staff_id: str,
    name: Optional[str] = None,
    unit: Optional[str] = None,
    group: Optional[str] = None,
    job_title: Optional[str] = None,
    shifts: Optional[Dict[date, str]] = None,
) -> Result[WeeklySchedule]:
    """
    Insert or wholesale-replace the record for ``staff_id``.

    Fields left as None are not overridden for the week. The replaced
    record's shifts are dropped, not merged. A new record is appended; an
    existing one keeps its position.
    """
    if not staff_id:
        return Result.failure(ValidationError("staffId is required"))
    record = WeeklyOverrideRecord(
        staff_id=staff_id,
        name=name,
        unit=unit,
        group=group,
        job_title=job_title,
        shifts={parse_date(day): (code or "").strip().upper() for day, code in (shifts or {}).items()},
    )
    if schedule.record_for(staff_id) is None:
        staff = schedule.staff + (record,)
    else:
        staff = tuple(record if r.staff_id == staff_id else r for r in schedule.staff)
    return Result.success(replace(schedule, staff=staff))


def remove_member(schedule: WeeklySchedule, staff_id: str) -> WeeklySchedule:
    """Drop the staff member's record for the week; no-op if absent."""
    if schedule.record_for(staff_id) is None:
        return schedule
    return replace(schedule, staff=tuple(r for r in schedule.staff if r.staff_id != staff_id))


def set_shift(schedule: WeeklySchedule, staff_id: str, day: date, code: str) -> Result[WeeklySchedule]:
    """Set one day's shift code, keeping the rest of the record."""
    day = parse_date(day)
    if day not in week_dates(week_start(schedule.week_start)):
        return Result.failure(ValidationError(f"{day} is outside the week of {schedule.week_start}"))
    existing = schedule.record_for(staff_id) or WeeklyOverrideRecord(staff_id=staff_id)
    shifts = dict(existing.shifts)
    shifts[day] = code
    return upsert_member(
        schedule,
        staff_id,
        name=existing.name,
        unit=existing.unit,
        group=existing.group,
        job_title=existing.job_title,
        shifts=shifts,
    )
