"""I/O utilities for CSV import/export."""

from .export_csv import export_roster_csv, export_week_csv, view_to_frame
from .import_csv import import_roster_csv

__all__ = [
    "import_roster_csv",
    "export_roster_csv",
    "export_week_csv",
    "view_to_frame",
]
