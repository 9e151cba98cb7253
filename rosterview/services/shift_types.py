"""Shift type catalogue, time slots and display colours."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional, Sequence, Tuple

from rosterview.domain.entities import Settings, ShiftType
from rosterview.errors import DuplicateError, Result, ValidationError

DEFAULT_COLOR = "#ffffff"

Catalogue = Tuple[Tuple[ShiftType, ...], Dict[str, str]]


def normalize_code(code: str) -> str:
    return (code or "").strip().upper()


def upsert_shift_type(
    shift_types: Sequence[ShiftType],
    time_slots: Dict[str, str],
    code: str,
    name: str,
    color: str = DEFAULT_COLOR,
    time_slot: str = "",
    replacing: Optional[str] = None,
) -> Result[Catalogue]:
    """
    Add a shift type, or replace the one with code ``replacing``.

    When the code changes, the old code's time slot is dropped. An empty
    ``time_slot`` removes the mapping for ``code``.
    """
    code = normalize_code(code)
    name = (name or "").strip()
    if not code:
        return Result.failure(ValidationError("Shift code is required"))
    if not name:
        return Result.failure(ValidationError("Shift name is required"))
    replacing = normalize_code(replacing) if replacing else None
    if any(st.code == code and st.code != replacing for st in shift_types):
        return Result.failure(DuplicateError(f"Shift code {code} already exists"))

    new_type = ShiftType(code=code, name=name, color=color or DEFAULT_COLOR)
    slots = dict(time_slots)
    if replacing is not None and any(st.code == replacing for st in shift_types):
        types = tuple(new_type if st.code == replacing else st for st in shift_types)
        if replacing != code:
            slots.pop(replacing, None)
    else:
        types = tuple(shift_types) + (new_type,)

    time_slot = (time_slot or "").strip()
    if time_slot:
        slots[code] = time_slot
    else:
        slots.pop(code, None)
    return Result.success((types, slots))


def remove_shift_type(
    shift_types: Sequence[ShiftType],
    time_slots: Dict[str, str],
    code: str,
) -> Catalogue:
    code = normalize_code(code)
    slots = {k: v for k, v in time_slots.items() if k != code}
    return tuple(st for st in shift_types if st.code != code), slots


def update_settings(
    settings: Settings,
    shift_types: Sequence[ShiftType],
    time_slots: Dict[str, str],
) -> Result[Settings]:
    """Replace the whole catalogue after checking codes are unique."""
    seen = set()
    normalized = []
    for st in shift_types:
        code = normalize_code(st.code)
        if not code or not (st.name or "").strip():
            return Result.failure(ValidationError("Shift types need a code and a name"))
        if code in seen:
            return Result.failure(DuplicateError(f"Shift code {code} already exists"))
        seen.add(code)
        normalized.append(replace(st, code=code))
    slots = {normalize_code(k): v for k, v in (time_slots or {}).items() if (v or "").strip()}
    return Result.success(replace(settings, shift_types=tuple(normalized), time_slots=slots))


def shift_color(shift_types: Sequence[ShiftType], code: str) -> str:
    for st in shift_types:
        if st.code == code:
            return st.color or DEFAULT_COLOR
    return DEFAULT_COLOR


def contrasting_text_color(bg_color: str) -> str:
    """Black or white text for a hex background, by WCAG relative luma."""
    if not isinstance(bg_color, str) or len(bg_color) < 4 or not bg_color.startswith("#"):
        return "#000000"
    if len(bg_color) == 4:
        bg_color = "#" + "".join(ch * 2 for ch in bg_color[1:])
    try:
        rgb = int(bg_color[1:7], 16)
    except ValueError:
        return "#000000"
    r, g, b = (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF
    luma = 0.2126 * r + 0.7152 * g + 0.0722 * b
    return "#ffffff" if luma < 128 else "#000000"
