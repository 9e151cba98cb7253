"""Merge roster defaults with weekly overrides into a grouped, sorted view.

The view maps a unit name to the staff shown under it. Unit keys and the
entries within each unit are ordered as follows:

- units present in the settings come first, in settings order;
- unknown (deleted) unit names follow, alphabetically;
- the ``""`` bucket (no unit) is always last.

Within a unit entries are ordered by group, then job title (each by
settings order, unknown values after known ones and alphabetical), then by
roster sort order and finally by name.
"""

from __future__ import annotations

import math
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from rosterview.domain.entities import (
    EffectiveStaffEntry,
    Settings,
    StaffMember,
    WeeklyOverrideRecord,
    WeeklySchedule,
    index_by_staff,
    sort_order_key,
)
from rosterview.services.categories import order_index_of

DELETED_SUFFIX = " (deleted)"
NO_UNIT = ""

StaffView = Dict[str, List[EffectiveStaffEntry]]


def _resolve(override: Optional[str], default: str) -> str:
    return default if override is None else override


def _is_orphaned(override: Optional[str], valid: Sequence[str]) -> bool:
    # Only week overrides are checked; roster defaults are never flagged.
    return bool(override) and override not in valid


def _display(value: str, orphaned: bool) -> str:
    return f"{value}{DELETED_SUFFIX}" if orphaned else value


def effective_entry(
    member: StaffMember,
    record: Optional[WeeklyOverrideRecord],
    settings: Settings,
) -> EffectiveStaffEntry:
    """Combine one roster member with their override record (if any)."""
    unit_override = record.unit if record else None
    group_override = record.group if record else None
    job_override = record.job_title if record else None

    unit = _resolve(unit_override, member.default_unit)
    group = _resolve(group_override, member.default_group)
    job_title = _resolve(job_override, member.default_job_title)

    orphaned_unit = _is_orphaned(unit_override, settings.units)
    orphaned_group = _is_orphaned(group_override, settings.groups)
    orphaned_job = _is_orphaned(job_override, settings.job_titles)

    return EffectiveStaffEntry(
        staff_id=member.id,
        name=record.name if record and record.name else member.name,
        unit=unit,
        group=group,
        job_title=job_title,
        display_unit=_display(unit, orphaned_unit),
        display_group=_display(group, orphaned_group),
        display_job_title=_display(job_title, orphaned_job),
        is_orphaned_unit=orphaned_unit,
        is_orphaned_group=orphaned_group,
        is_orphaned_job_title=orphaned_job,
        shifts=dict(record.shifts) if record else {},
        sort_order=member.sort_order,
        employee_number=member.employee_number,
    )


def category_sort_key(categories: Sequence[str], value: str, orphaned: bool = True) -> Tuple[float, str]:
    """
    Known values by position, unknown ones after them.

    Unknown values are alphabetical only when ``orphaned`` (a week override);
    a stale roster default ties with its peers and falls through to the next key.
    """
    index = order_index_of(categories, value)
    if index != math.inf:
        return (index, "")
    return (math.inf, value if orphaned else "")


def unit_sort_key(units: Sequence[str], unit: str) -> Tuple[int, float, str]:
    if unit == NO_UNIT:
        return (2, 0, "")
    index, name = category_sort_key(units, unit)
    return (0, index, "") if index != math.inf else (1, 0, name)


def entry_sort_key(settings: Settings, entry: EffectiveStaffEntry) -> tuple:
    return (
        category_sort_key(settings.groups, entry.group, entry.is_orphaned_group),
        category_sort_key(settings.job_titles, entry.job_title, entry.is_orphaned_job_title),
        sort_order_key(entry.sort_order),
        entry.name,
    )


def build_staff_by_unit(settings: Settings, schedule: Optional[WeeklySchedule] = None) -> StaffView:
    """
    Build the grouped and sorted view of active staff for one week.

    Args:
        settings: Categories and roster
        schedule: The week's overrides (None or empty when nothing is saved)

    Returns:
        Ordered dict of unit name -> entries. Empty when no staff is active.
    """
    # 1. Active staff only
    active = [m for m in settings.staff_list if m.is_active]
    if not active:
        return {}

    # 2. Overrides by staff id
    records = index_by_staff(schedule.staff) if schedule is not None else {}

    # 3. Merge and bucket by effective unit
    buckets: Dict[str, List[EffectiveStaffEntry]] = {}
    for member in active:
        entry = effective_entry(member, records.get(member.id), settings)
        buckets.setdefault(entry.unit or NO_UNIT, []).append(entry)

    # 4. Order units, then entries within each unit
    view: StaffView = {}
    for unit in sorted(buckets, key=lambda u: unit_sort_key(settings.units, u)):
        view[unit] = sorted(buckets[unit], key=lambda e: entry_sort_key(settings, e))
    return view


def iter_entries(view: StaffView) -> Iterator[Tuple[str, EffectiveStaffEntry]]:
    """Yield ``(unit, entry)`` pairs in display order."""
    for unit, entries in view.items():
        for entry in entries:
            yield unit, entry
