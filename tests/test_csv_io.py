"""Tests for CSV import/export functionality."""

import re
from datetime import date

import pandas as pd

from rosterview.dates import week_dates
from rosterview.domain.entities import Settings, WeeklyOverrideRecord, WeeklySchedule
from rosterview.engine.merge import build_staff_by_unit
from rosterview.errors import DuplicateIdError, ValidationError
from rosterview.io.export_csv import ROSTER_COLUMNS, export_roster_csv, export_week_csv, view_to_frame
from rosterview.io.import_csv import generate_staff_id, import_roster_csv


def test_import_roster_csv(tmp_path, capsys):
    """Test importing staff members from CSV."""
    # Create temporary CSV
    csv_content = """Name,ID,Employee_Number,Default_Unit,Default_Group,Default_Job_Title,Is_Active,Sort_Order
Anna,s1,1,I,Red,educator,yes,
Bela,,2,II,,assistant,no,
"""
    csv_file = tmp_path / "roster.csv"
    csv_file.write_text(csv_content)

    # Import
    settings = import_roster_csv(csv_file, Settings(units=("I", "II"))).unwrap()

    assert settings.units == ("I", "II")
    anna, bela = settings.staff_list
    assert anna.id == "s1"
    assert anna.default_group == "Red"
    assert anna.is_active is True
    assert anna.sort_order == 0

    assert re.fullmatch(r"staff_\d+_[0-9a-f]{5}", bela.id)
    assert bela.default_group == ""
    assert bela.is_active is False
    assert bela.sort_order == 1
    assert "[INFO] Imported 2 staff members" in capsys.readouterr().out


def test_import_appends_to_existing_roster(tmp_path, settings):
    """Imported rows go after the current staff."""
    csv_file = tmp_path / "roster.csv"
    csv_file.write_text("name\nEmma\n")

    updated = import_roster_csv(csv_file, settings).unwrap()
    assert [m.name for m in updated.staff_list] == ["Anna", "Bela", "Cili", "Dora", "Emma"]
    assert updated.staff_list[-1].is_active is True


def test_import_missing_name_column(tmp_path):
    csv_file = tmp_path / "roster.csv"
    csv_file.write_text("id,unit\ns1,I\n")

    result = import_roster_csv(csv_file, Settings())
    assert isinstance(result.error, ValidationError)


def test_import_reports_line_of_bad_row(tmp_path, settings):
    csv_file = tmp_path / "roster.csv"
    csv_file.write_text("id,name\nnew1,Emma\ns1,Again\n")

    result = import_roster_csv(csv_file, settings)
    assert isinstance(result.error, DuplicateIdError)
    assert "line 3" in str(result.error)


def test_import_bad_sort_order(tmp_path):
    csv_file = tmp_path / "roster.csv"
    csv_file.write_text("name,sort_order\nEmma,first\n")

    result = import_roster_csv(csv_file, Settings())
    assert isinstance(result.error, ValidationError)
    assert "line 2" in str(result.error)


def test_generated_ids_are_unique():
    ids = {generate_staff_id() for _ in range(50)}
    assert len(ids) == 50


def test_roster_export_can_be_reimported(tmp_path, settings):
    """Test exporting the roster and importing it into empty settings."""
    csv_file = tmp_path / "roster_out.csv"

    count = export_roster_csv(settings, csv_file)
    assert count == 4

    df = pd.read_csv(csv_file)
    assert list(df.columns) == ROSTER_COLUMNS

    reimported = import_roster_csv(csv_file, Settings()).unwrap()
    assert reimported.staff_list == settings.staff_list


def test_view_to_frame(settings, monday):
    week = WeeklySchedule(
        monday,
        (WeeklyOverrideRecord("s1", group="Gone", shifts={monday: "DE"}),),
    )
    dates = week_dates(monday)
    df = view_to_frame(build_staff_by_unit(settings, week), dates)

    assert list(df.columns[:6]) == ["unit", "staff_id", "employee_number", "name", "group", "job_title"]
    assert list(df.columns[6:]) == [d.isoformat() for d in dates]
    assert list(df["staff_id"]) == ["s2", "s1", "s3"]

    anna = df[df["staff_id"] == "s1"].iloc[0]
    assert anna["group"] == "Gone (deleted)"
    assert anna["2024-06-10"] == "DE"
    assert anna["2024-06-11"] == ""


def test_export_week_csv(tmp_path, settings, monday):
    csv_file = tmp_path / "week.csv"
    count = export_week_csv(build_staff_by_unit(settings, None), week_dates(monday), csv_file)

    assert count == 3
    df = pd.read_csv(csv_file, dtype=str, keep_default_na=False)
    assert list(df["unit"]) == ["I", "I", "II"]


def test_export_empty_view(tmp_path):
    csv_file = tmp_path / "week.csv"
    assert export_week_csv({}, week_dates(date(2024, 6, 10)), csv_file) == 0
