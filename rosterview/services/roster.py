"""Staff roster mutations.

Every function takes the current roster and returns a new one. After each
mutation ``sort_order`` is dense (0..N-1) and follows list order.
"""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Iterable, Sequence, Tuple

from rosterview.domain.entities import Settings, StaffMember, sort_order_key
from rosterview.errors import DuplicateIdError, NotFoundError, Result, ValidationError

Roster = Tuple[StaffMember, ...]

_PATCHABLE = {f.name for f in fields(StaffMember)} - {"id"}


def compact(staff: Iterable[StaffMember]) -> Roster:
    """Reassign sort orders by position, keeping list order."""
    return tuple(
        member if member.sort_order == i else replace(member, sort_order=i)
        for i, member in enumerate(staff)
    )


def _sorted(staff: Iterable[StaffMember]) -> Roster:
    return compact(sorted(staff, key=lambda m: sort_order_key(m.sort_order)))


def add_member(staff: Sequence[StaffMember], member: StaffMember) -> Result[Roster]:
    """
    Add a member to the roster.

    A missing ``sort_order`` puts the member at the end. On a tie with an
    explicit ``sort_order`` the existing member stays first.
    """
    if not member.id:
        return Result.failure(ValidationError("Staff id is required"))
    if not (member.name or "").strip():
        return Result.failure(ValidationError("Staff name is required"))
    if any(existing.id == member.id for existing in staff):
        return Result.failure(DuplicateIdError(f"Staff member with id {member.id} already exists"))
    if member.sort_order is None:
        member = replace(member, sort_order=len(staff))
    return Result.success(_sorted(list(staff) + [member]))


def update_member(staff: Sequence[StaffMember], staff_id: str, **patch) -> Result[Roster]:
    """Merge ``patch`` fields into the member with ``staff_id``."""
    unknown = set(patch) - _PATCHABLE
    if unknown:
        return Result.failure(ValidationError(f"Cannot update field(s): {', '.join(sorted(unknown))}"))
    if "name" in patch and not (patch["name"] or "").strip():
        return Result.failure(ValidationError("Staff name is required"))
    if not any(member.id == staff_id for member in staff):
        return Result.failure(NotFoundError(f"Staff member {staff_id} not found"))
    updated = [replace(m, **patch) if m.id == staff_id else m for m in staff]
    return Result.success(_sorted(updated))


def remove_member(staff: Sequence[StaffMember], staff_id: str) -> Result[Roster]:
    if not any(member.id == staff_id for member in staff):
        return Result.failure(NotFoundError(f"Staff member {staff_id} not found"))
    return Result.success(compact(m for m in staff if m.id != staff_id))


def reorder(staff: Sequence[StaffMember], ids_in_new_order: Sequence[str]) -> Roster:
    """
    Assign sort orders by position in ``ids_in_new_order``.

    Unknown ids are ignored; members missing from the sequence keep their
    relative order after the listed ones.
    """
    by_id = {member.id: member for member in staff}
    ordered = []
    seen = set()
    for staff_id in ids_in_new_order:
        if staff_id in by_id and staff_id not in seen:
            ordered.append(by_id[staff_id])
            seen.add(staff_id)
    ordered.extend(m for m in staff if m.id not in seen)
    return compact(ordered)


def active_members(staff: Iterable[StaffMember]) -> Roster:
    return tuple(m for m in staff if m.is_active)


def _with_staff(settings: Settings, result: Result[Roster]) -> Result[Settings]:
    if not result.ok:
        return Result.failure(result.error)
    return Result.success(replace(settings, staff_list=result.value))


def add_to_settings(settings: Settings, member: StaffMember) -> Result[Settings]:
    return _with_staff(settings, add_member(settings.staff_list, member))


def update_in_settings(settings: Settings, staff_id: str, **patch) -> Result[Settings]:
    return _with_staff(settings, update_member(settings.staff_list, staff_id, **patch))


def remove_from_settings(settings: Settings, staff_id: str) -> Result[Settings]:
    return _with_staff(settings, remove_member(settings.staff_list, staff_id))


def reorder_settings(settings: Settings, ids_in_new_order: Sequence[str]) -> Settings:
    return replace(settings, staff_list=reorder(settings.staff_list, ids_in_new_order))
