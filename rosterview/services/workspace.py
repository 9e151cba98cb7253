"""Workspace: one tenant's settings and open week, kept in sync with storage.

Mutations run the pure service function, update the in-memory state
optimistically and then persist. A failed save leaves the in-memory state
as is and returns the PersistenceFailure to the caller.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from rosterview.dates import parse_date, to_iso, week_dates, week_start
from rosterview.domain.entities import Settings, ShiftType, StaffMember, WeeklySchedule, sort_order_key
from rosterview.domain.repositories import SettingsRepository, WeeklyScheduleRepository
from rosterview.engine.copy import copy_schedule
from rosterview.engine.merge import StaffView, build_staff_by_unit
from rosterview.errors import NotFoundError, Result, RosterError
from rosterview.services import categories, integrity, overrides, roster, shift_types
from rosterview.services.demo import BLANK_SETTINGS, DEMO_SETTINGS

Listener = Callable[[str, object], None]


class ScheduleWorkspace:
    """
    Settings and the currently open week for one tenant.

    The tenant id scopes every load and save, so different actors never
    see each other's data.
    """

    def __init__(self, session: Session, tenant_id: str = "default", seed_demo: bool = False):
        """
        Args:
            session: Database session used for all reads and writes
            tenant_id: Identity of the current actor
            seed_demo: Initialise a tenant without settings with demo data
        """
        self.session = session
        self.tenant_id = tenant_id
        self.seed_demo = seed_demo
        self.settings: Optional[Settings] = None
        self.week: Optional[WeeklySchedule] = None
        self.save_error: Optional[RosterError] = None
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Loading and subscriptions
    # ------------------------------------------------------------------

    def load(self) -> Settings:
        """Load settings, initialising and saving them for a new tenant."""
        settings = SettingsRepository.load(self.session, self.tenant_id)
        if settings is None:
            initial = DEMO_SETTINGS if self.seed_demo else BLANK_SETTINGS
            print(f"[INFO] No settings for tenant {self.tenant_id}, initialising")
            self.settings = initial
            self._persist_settings(initial)
        else:
            self.settings = settings
        return self.settings

    def open_week(self, day: Optional[date] = None) -> WeeklySchedule:
        """Open the week containing ``day``. Unsaved weeks start empty and stay unsaved."""
        monday = week_start(day)
        saved = WeeklyScheduleRepository.load(self.session, self.tenant_id, monday)
        self.week = overrides.get_week(saved, monday)
        return self.week

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(kind, snapshot)`` after every successful save."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, kind: str, snapshot) -> None:
        for listener in list(self._listeners):
            listener(kind, snapshot)

    def _current_settings(self) -> Settings:
        if self.settings is None:
            self.load()
        return self.settings

    def _current_week(self) -> WeeklySchedule:
        if self.week is None:
            self.open_week()
        return self.week

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------

    def _persist_settings(self, settings: Settings) -> Result[Settings]:
        result = SettingsRepository.save(self.session, self.tenant_id, settings)
        if result.ok:
            self.save_error = None
            self._notify("settings", settings)
        else:
            self.save_error = result.error
        return result

    def save_settings(self, new_settings: Settings, bypass_checks: bool = False) -> Result[Settings]:
        """Guard, apply and persist a whole settings object."""
        guard = integrity.check_settings_save(self.settings, new_settings, bypass=bypass_checks)
        if not guard.ok:
            print(f"[WARN] {guard.error}")
            self.save_error = guard.error
            return guard
        staff = sorted(new_settings.staff_list, key=lambda m: sort_order_key(m.sort_order))
        new_settings = replace(new_settings, staff_list=roster.compact(staff))
        self.settings = new_settings
        return self._persist_settings(new_settings)

    def save_week(self, schedule: WeeklySchedule) -> Result[WeeklySchedule]:
        """Persist a week, updating the open week when it is the same one."""
        if self.week is not None and week_start(self.week.week_start) == week_start(schedule.week_start):
            self.week = schedule
        result = WeeklyScheduleRepository.save(self.session, self.tenant_id, schedule)
        if result.ok:
            self.save_error = None
            self._notify("week", schedule)
        else:
            self.save_error = result.error
        return result

    def _apply(self, result: Result[Settings]) -> Result[Settings]:
        if not result.ok:
            self.save_error = result.error
            return result
        return self.save_settings(result.value)

    def _noop_removal(self, result: Result[Settings]) -> Result[Settings]:
        # Removing something that is not there leaves settings unchanged.
        if isinstance(result.error, NotFoundError):
            print(f"[WARN] {result.error}")
            return Result.success(self.settings)
        return self._apply(result)

    def load_demo(self) -> Result[Settings]:
        """Replace settings with the demo data, skipping the wipe guard."""
        return self.save_settings(DEMO_SETTINGS, bypass_checks=True)

    # ------------------------------------------------------------------
    # Categories and shift types
    # ------------------------------------------------------------------

    def add_category(self, kind: str, name: str) -> Result[Settings]:
        return self._apply(categories.add_to_settings(self._current_settings(), kind, name))

    def remove_category(self, kind: str, name: str) -> Result[Settings]:
        return self._noop_removal(categories.remove_from_settings(self._current_settings(), kind, name))

    def update_shift_types(self, types: Sequence[ShiftType], time_slots: Dict[str, str]) -> Result[Settings]:
        return self._apply(shift_types.update_settings(self._current_settings(), types, time_slots))

    def upsert_shift_type(self, code: str, name: str, color: str = shift_types.DEFAULT_COLOR,
                          time_slot: str = "", replacing: Optional[str] = None) -> Result[Settings]:
        settings = self._current_settings()
        result = shift_types.upsert_shift_type(
            settings.shift_types, settings.time_slots, code, name, color, time_slot, replacing
        )
        if not result.ok:
            self.save_error = result.error
            return Result.failure(result.error)
        types, slots = result.value
        return self.save_settings(replace(settings, shift_types=types, time_slots=slots))

    def remove_shift_type(self, code: str) -> Result[Settings]:
        settings = self._current_settings()
        types, slots = shift_types.remove_shift_type(settings.shift_types, settings.time_slots, code)
        return self.save_settings(replace(settings, shift_types=types, time_slots=slots))

    def shift_color(self, code: str) -> str:
        return shift_types.shift_color(self._current_settings().shift_types, code)

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def add_staff(self, member: StaffMember) -> Result[Settings]:
        return self._apply(roster.add_to_settings(self._current_settings(), member))

    def update_staff(self, staff_id: str, **patch) -> Result[Settings]:
        return self._apply(roster.update_in_settings(self._current_settings(), staff_id, **patch))

    def delete_staff(self, staff_id: str) -> Result[Settings]:
        """Remove from the roster and from the open week's overrides."""
        result = self._noop_removal(roster.remove_from_settings(self._current_settings(), staff_id))
        if result.ok and self.week is not None and self.week.record_for(staff_id) is not None:
            self.save_week(overrides.remove_member(self.week, staff_id))
        return result

    def reorder_staff(self, ids_in_new_order: Sequence[str]) -> Result[Settings]:
        return self.save_settings(roster.reorder_settings(self._current_settings(), ids_in_new_order))

    # ------------------------------------------------------------------
    # Weekly overrides
    # ------------------------------------------------------------------

    def upsert_week_member(self, staff_id: str, **fields) -> Result[WeeklySchedule]:
        result = overrides.upsert_member(self._current_week(), staff_id, **fields)
        if not result.ok:
            self.save_error = result.error
            return result
        return self.save_week(result.value)

    def set_shift(self, staff_id: str, day: date, code: str) -> Result[WeeklySchedule]:
        result = overrides.set_shift(self._current_week(), staff_id, day, code)
        if not result.ok:
            self.save_error = result.error
            return result
        return self.save_week(result.value)

    def remove_week_member(self, staff_id: str) -> Result[WeeklySchedule]:
        week = self._current_week()
        if week.record_for(staff_id) is None:
            return Result.success(week)
        return self.save_week(overrides.remove_member(week, staff_id))

    def copy_week(self, source_week: date, target_week: date) -> Result[WeeklySchedule]:
        """
        Overwrite the target week with a copy of the source week.

        Callers confirm the overwrite before calling this.
        """
        source_monday = week_start(parse_date(source_week))
        target_monday = week_start(parse_date(target_week))
        source = WeeklyScheduleRepository.load(self.session, self.tenant_id, source_monday)
        result = copy_schedule(source, target_monday, self._current_settings().staff_list)
        if not result.ok:
            print(f"[WARN] No saved schedule for {to_iso(source_monday)}, nothing to copy")
            self.save_error = result.error
            return result
        saved = self.save_week(result.value)
        if saved.ok:
            print(f"[OK] Copied {to_iso(source_monday)} to {to_iso(target_monday)} "
                  f"({len(result.value.staff)} staff)")
        return saved

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def week_dates(self) -> List[date]:
        return week_dates(self._current_week().week_start)

    def staff_by_unit(self) -> StaffView:
        """Grouped, sorted view of the open week."""
        return build_staff_by_unit(self._current_settings(), self._current_week())
