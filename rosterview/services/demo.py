"""Blank and demo settings used to initialise a tenant."""

from __future__ import annotations

from rosterview.domain.entities import Settings, ShiftType, StaffMember

BLANK_SETTINGS = Settings()


def _staff(n, name, number, unit, group, job, active=True):
    return StaffMember(
        id=f"staff_demo_{n}",
        name=name,
        employee_number=number,
        default_unit=unit,
        default_group=group,
        default_job_title=job,
        is_active=active,
        sort_order=n - 1,
    )


DEMO_SETTINGS = Settings(
    units=("I.", "II.", "III.", "IV.", "V.", "Kitchen", "Technical", "Office"),
    groups=(
        "Hedgehog (A)",
        "Bear (B)",
        "Chick (A)",
        "Bee (B)",
        "Butterfly (A)",
        "Fawn (B)",
        "Squirrel (A)",
        "Ladybird (B)",
        "Snail (A)",
        "Bunny (B)",
        "floating",
    ),
    job_titles=(
        "educator",
        "assistant",
        "catering lead",
        "cook",
        "laundry",
        "maintenance",
        "administrator",
        "deputy head",
        "head",
    ),
    shift_types=(
        ShiftType("DE", "Morning", "#cce6ff"),
        ShiftType("DU", "Afternoon", "#ffcc99"),
        ShiftType("K", "Middle", "#ccffcc"),
        ShiftType("H", "Cover", "#e6ccff"),
        ShiftType("FSZ", "Paid leave", "#99ff99"),
        ShiftType("TP", "Sick leave", "#ff9999"),
        ShiftType("TK", "Training", "#ffff99"),
        ShiftType("K1", "Kitchen 1", "#d2b48c"),
        ShiftType("K2", "Kitchen 2", "#d2b48c"),
    ),
    time_slots={
        "DE": "6:30-13:50",
        "DU": "9:40-17:00",
        "K": "8:00-15:20",
        "H": "7:40-16:00",
        "K1": "6:30-14:50",
        "K2": "7:40-16:00",
    },
    staff_list=(
        _staff(1, "Maria Nagy", "1", "I.", "Hedgehog (A)", "educator"),
        _staff(2, "Jozsefne Kiss", "2", "I.", "Hedgehog (A)", "assistant"),
        _staff(3, "Istvan Kovacs", "K1", "Kitchen", "", "cook"),
        _staff(4, "Eva Toth", "4", "II.", "Chick (A)", "educator", active=False),
        _staff(5, "Katalin Varga", "5", "II.", "Chick (A)", "assistant"),
        _staff(6, "Peter Molnar", "6", "II.", "Bee (B)", "educator"),
        _staff(7, "Anna Horvath", "7", "II.", "Bee (B)", "assistant"),
        _staff(8, "Zsuzsanna Szabo", "8", "III.", "Butterfly (A)", "educator"),
        _staff(9, "Gabor Feher", "9", "III.", "Butterfly (A)", "assistant"),
        _staff(10, "Erzsebet Pinter", "10", "III.", "Fawn (B)", "educator"),
        _staff(11, "Judit Balogh", "11", "IV.", "Squirrel (A)", "educator"),
        _staff(12, "Laszlo Fekete", "E1", "Kitchen", "", "catering lead"),
        _staff(13, "Imre Takacs", "T1", "Technical", "", "maintenance"),
        _staff(14, "Monika Pap", "14", "Technical", "", "laundry"),
        _staff(15, "Andrea Simon", "A1", "Office", "", "administrator"),
        _staff(16, "Janos Igazgato", "IV1", "Office", "", "head"),
    ),
)
