"""Domain types and data access layer."""

from .entities import (
    EffectiveStaffEntry,
    Settings,
    ShiftType,
    StaffMember,
    WeeklyOverrideRecord,
    WeeklySchedule,
)
from .models import Base, SettingsDocument, WeeklyScheduleDocument
from .repositories import SettingsRepository, WeeklyScheduleRepository

__all__ = [
    "EffectiveStaffEntry",
    "Settings",
    "ShiftType",
    "StaffMember",
    "WeeklyOverrideRecord",
    "WeeklySchedule",
    "Base",
    "SettingsDocument",
    "WeeklyScheduleDocument",
    "SettingsRepository",
    "WeeklyScheduleRepository",
]
