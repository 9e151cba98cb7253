"""Project one week's overrides onto another week's days."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from rosterview.dates import week_dates, week_start
from rosterview.domain.entities import StaffMember, WeeklyOverrideRecord, WeeklySchedule
from rosterview.errors import Result, SourceNotFoundError


def _resolve(override: Optional[str], default: str) -> str:
    return default if override is None else override


def copy_schedule(
    source: Optional[WeeklySchedule],
    target_week: date,
    roster: Sequence[StaffMember],
) -> Result[WeeklySchedule]:
    """
    Build the target week's schedule from a source week.

    Day ``i`` of the source week (Monday = 0) becomes day ``i`` of the target
    week for all six days; a source day without a shift becomes ``""`` so
    the target day is cleared. Records for staff who are missing from the
    roster or inactive are dropped. Name and category fields are resolved
    against the current roster and written as explicit values.

    Args:
        source: Saved source schedule, or None when the source week has no data
        target_week: Any date in the target week
        roster: Current staff list

    Returns:
        Result with a schedule that replaces the target week entirely, or
        SourceNotFoundError
    """
    if source is None:
        return Result.failure(SourceNotFoundError("Source week has no saved schedule"))

    target_monday = week_start(target_week)
    source_days = week_dates(week_start(source.week_start))
    target_days = week_dates(target_monday)
    members = {m.id: m for m in roster}

    records = []
    for record in source.staff:
        member = members.get(record.staff_id)
        if member is None or not member.is_active:
            continue
        shifts = {
            target_day: record.shifts.get(source_day) or ""
            for source_day, target_day in zip(source_days, target_days)
        }
        records.append(
            WeeklyOverrideRecord(
                staff_id=record.staff_id,
                name=_resolve(record.name, member.name),
                unit=_resolve(record.unit, member.default_unit),
                group=_resolve(record.group, member.default_group),
                job_title=_resolve(record.job_title, member.default_job_title),
                shifts=shifts,
            )
        )
    return Result.success(WeeklySchedule(week_start=target_monday, staff=tuple(records)))
