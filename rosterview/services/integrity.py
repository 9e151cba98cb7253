"""Guard against settings saves that look like an accidental wipe of the categories."""

from __future__ import annotations

from typing import Optional

from rosterview.domain.entities import Settings
from rosterview.errors import Result, SuspiciousDeletionError


def check_settings_save(
    current: Optional[Settings],
    proposed: Settings,
    bypass: bool = False,
) -> Result[Settings]:
    """
    Refuse to persist settings that drop every category while staff or
    shift types remain.

    Args:
        current: Last loaded settings (None if nothing loaded yet)
        proposed: Settings about to be saved
        bypass: Skip the check (bulk reset, demo data load)

    Returns:
        Result with ``proposed``, or SuspiciousDeletionError
    """
    if bypass or current is None or current.is_empty():
        return Result.success(proposed)

    had_categories = bool(current.units or current.groups or current.job_titles)
    no_categories = not (proposed.units or proposed.groups or proposed.job_titles)
    if had_categories and no_categories and (proposed.staff_list or proposed.shift_types):
        return Result.failure(
            SuspiciousDeletionError(
                "Save blocked: all units, groups and job titles would be deleted "
                "while staff or shift types remain"
            )
        )
    return Result.success(proposed)
