"""View and copy engines over already-loaded settings and schedules."""

from .copy import copy_schedule
from .merge import DELETED_SUFFIX, build_staff_by_unit, effective_entry, iter_entries

__all__ = [
    "DELETED_SUFFIX",
    "build_staff_by_unit",
    "copy_schedule",
    "effective_entry",
    "iter_entries",
]
