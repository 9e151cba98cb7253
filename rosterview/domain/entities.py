"""Value types for settings, roster entries and weekly overrides.

All types are immutable; mutations elsewhere build new instances with
``dataclasses.replace``. ``to_dict``/``from_dict`` convert to and from the
stored document shapes (camelCase keys, ``YYYY-MM-DD`` dates).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from rosterview.dates import parse_date, to_iso

CATEGORY_FIELDS = ("units", "groups", "job_titles")


def _opt_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    # Missing key or null means "no override"; an empty string is kept.
    value = data.get(key)
    return None if value is None else str(value)


def _parse_shifts(raw: Any) -> Dict[date, str]:
    if not raw:
        return {}
    return {parse_date(day): str(code or "") for day, code in dict(raw).items()}


def sort_order_key(value: Optional[int]) -> float:
    """Missing sort orders sort after every assigned one."""
    return math.inf if value is None else value


@dataclass(frozen=True)
class StaffMember:
    """Roster entry with default category assignments."""

    id: str
    name: str
    employee_number: str = ""
    default_unit: str = ""
    default_group: str = ""
    default_job_title: str = ""
    is_active: bool = True
    sort_order: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "employeeNumber": self.employee_number,
            "defaultUnit": self.default_unit,
            "defaultGroup": self.default_group,
            "defaultJobTitle": self.default_job_title,
            "isActive": self.is_active,
        }
        if self.sort_order is not None:
            data["sortOrder"] = self.sort_order
        return data

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "StaffMember":
        sort_order = data.get("sortOrder")
        return StaffMember(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            employee_number=str(data.get("employeeNumber") or ""),
            default_unit=str(data.get("defaultUnit") or ""),
            default_group=str(data.get("defaultGroup") or ""),
            default_job_title=str(data.get("defaultJobTitle") or ""),
            is_active=bool(data.get("isActive", True)),
            sort_order=None if sort_order is None else int(sort_order),
        )


@dataclass(frozen=True)
class ShiftType:
    code: str
    name: str
    color: str = "#ffffff"

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "name": self.name, "color": self.color}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "ShiftType":
        return ShiftType(
            code=str(data["code"]).strip().upper(),
            name=str(data.get("name") or ""),
            color=str(data.get("color") or "#ffffff"),
        )


@dataclass(frozen=True)
class WeeklyOverrideRecord:
    """
    Week-specific data for one staff member.

    ``None`` on name/unit/group/job_title means the roster default applies;
    any string, including ``""``, is an override. ``shifts`` maps a day to a
    shift code and only holds days that have an entry.
    """

    staff_id: str
    name: Optional[str] = None
    unit: Optional[str] = None
    group: Optional[str] = None
    job_title: Optional[str] = None
    shifts: Dict[date, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"staffId": self.staff_id}
        for key, value in (
            ("name", self.name),
            ("unit", self.unit),
            ("group", self.group),
            ("jobTitle", self.job_title),
        ):
            if value is not None:
                data[key] = value
        data["shifts"] = {to_iso(day): code for day, code in sorted(self.shifts.items())}
        return data

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "WeeklyOverrideRecord":
        return WeeklyOverrideRecord(
            staff_id=str(data["staffId"]),
            name=_opt_str(data, "name"),
            unit=_opt_str(data, "unit"),
            group=_opt_str(data, "group"),
            job_title=_opt_str(data, "jobTitle"),
            shifts=_parse_shifts(data.get("shifts")),
        )


@dataclass(frozen=True)
class WeeklySchedule:
    """Overrides for the week starting on ``week_start`` (a Monday)."""

    week_start: date
    staff: Tuple[WeeklyOverrideRecord, ...] = ()

    @staticmethod
    def empty(week_start: date) -> "WeeklySchedule":
        return WeeklySchedule(week_start=parse_date(week_start))

    def record_for(self, staff_id: str) -> Optional[WeeklyOverrideRecord]:
        for record in self.staff:
            if record.staff_id == staff_id:
                return record
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weekStartDate": to_iso(self.week_start),
            "staff": [record.to_dict() for record in self.staff],
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "WeeklySchedule":
        return WeeklySchedule(
            week_start=parse_date(data["weekStartDate"]),
            staff=tuple(WeeklyOverrideRecord.from_dict(item) for item in data.get("staff") or []),
        )


@dataclass(frozen=True)
class Settings:
    """Per-tenant global settings: categories, shift types and the roster."""

    units: Tuple[str, ...] = ()
    groups: Tuple[str, ...] = ()
    job_titles: Tuple[str, ...] = ()
    shift_types: Tuple[ShiftType, ...] = ()
    time_slots: Dict[str, str] = field(default_factory=dict)
    staff_list: Tuple[StaffMember, ...] = ()

    def categories(self, kind: str) -> Tuple[str, ...]:
        if kind not in CATEGORY_FIELDS:
            raise ValueError(f"Unknown category kind: {kind}")
        return getattr(self, kind)

    def member(self, staff_id: str) -> Optional[StaffMember]:
        for member in self.staff_list:
            if member.id == staff_id:
                return member
        return None

    def is_empty(self) -> bool:
        return not (
            self.units
            or self.groups
            or self.job_titles
            or self.shift_types
            or self.time_slots
            or self.staff_list
        )

    def to_dict(self) -> Dict[str, Any]:
        staff = sorted(self.staff_list, key=lambda m: sort_order_key(m.sort_order))
        return {
            "units": list(self.units),
            "groups": list(self.groups),
            "jobTitles": list(self.job_titles),
            "shiftTypes": [st.to_dict() for st in self.shift_types],
            "timeSlots": dict(self.time_slots),
            "staffList": [m.to_dict() for m in staff],
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Settings":
        staff = [StaffMember.from_dict(item) for item in data.get("staffList") or []]
        staff.sort(key=lambda m: sort_order_key(m.sort_order))
        return Settings(
            units=tuple(data.get("units") or ()),
            groups=tuple(data.get("groups") or ()),
            job_titles=tuple(data.get("jobTitles") or ()),
            shift_types=tuple(ShiftType.from_dict(st) for st in data.get("shiftTypes") or []),
            time_slots={str(k).upper(): str(v) for k, v in (data.get("timeSlots") or {}).items()},
            staff_list=tuple(staff),
        )


@dataclass(frozen=True)
class EffectiveStaffEntry:
    """Roster defaults merged with one week's override, ready for display."""

    staff_id: str
    name: str
    unit: str
    group: str
    job_title: str
    display_unit: str
    display_group: str
    display_job_title: str
    is_orphaned_unit: bool = False
    is_orphaned_group: bool = False
    is_orphaned_job_title: bool = False
    shifts: Dict[date, str] = field(default_factory=dict)
    sort_order: Optional[int] = None
    employee_number: str = ""


def index_by_staff(records: Iterable[WeeklyOverrideRecord]) -> Dict[str, WeeklyOverrideRecord]:
    """Map staff id to record; a later duplicate wins."""
    return {record.staff_id: record for record in records}
