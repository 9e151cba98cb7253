"""Tests for the merge and view engine."""

from dataclasses import replace
from datetime import date

from rosterview.domain.entities import Settings, StaffMember, WeeklyOverrideRecord, WeeklySchedule
from rosterview.engine.merge import build_staff_by_unit


def _week(monday, *records):
    return WeeklySchedule(week_start=monday, staff=tuple(records))


def test_scenario_a_no_override():
    """Roster default is used when the week has no record."""
    settings = Settings(
        units=("I", "II"),
        staff_list=(StaffMember("s1", "X", default_unit="I", sort_order=0, is_active=True),),
    )
    view = build_staff_by_unit(settings, _week(date(2024, 6, 10)))

    assert list(view) == ["I"]
    [entry] = view["I"]
    assert entry.staff_id == "s1"
    assert entry.display_unit == "I"
    assert entry.is_orphaned_unit is False
    assert entry.shifts == {}


def test_scenario_b_override_to_deleted_unit():
    settings = Settings(
        units=("I", "II"),
        staff_list=(StaffMember("s1", "X", default_unit="I", sort_order=0),),
    )
    week = _week(date(2024, 6, 10), WeeklyOverrideRecord("s1", unit="Deleted"))
    view = build_staff_by_unit(settings, week)

    assert list(view) == ["Deleted"]
    [entry] = view["Deleted"]
    assert entry.display_unit == "Deleted (deleted)"
    assert entry.is_orphaned_unit is True


def test_scenario_c_no_unit_bucket_last():
    settings = Settings(
        units=("I",),
        staff_list=(
            StaffMember("a", "A", default_unit="", sort_order=0),
            StaffMember("b", "B", default_unit="", sort_order=1),
            StaffMember("c", "C", default_unit="I", sort_order=2),
        ),
    )
    view = build_staff_by_unit(settings, None)

    assert list(view) == ["I", ""]
    assert [e.staff_id for e in view[""]] == ["a", "b"]


def test_unit_order_valid_then_orphaned_then_empty():
    settings = Settings(
        units=("A", "B"),
        staff_list=(
            StaffMember("1", "One", default_unit="", sort_order=0),
            StaffMember("2", "Two", default_unit="Zulu", sort_order=1),
            StaffMember("3", "Three", default_unit="B", sort_order=2),
            StaffMember("4", "Four", default_unit="Alpha", sort_order=3),
            StaffMember("5", "Five", default_unit="A", sort_order=4),
        ),
    )
    view = build_staff_by_unit(settings, None)
    assert list(view) == ["A", "B", "Alpha", "Zulu", ""]


def test_inactive_staff_never_shown(settings, monday):
    week = _week(monday, WeeklyOverrideRecord("s4", unit="I", shifts={monday: "DE"}))
    view = build_staff_by_unit(settings, week)
    ids = [e.staff_id for entries in view.values() for e in entries]
    assert "s4" not in ids
    assert sorted(ids) == ["s1", "s2", "s3"]


def test_no_active_staff_returns_empty(settings):
    inactive = tuple(replace(m, is_active=False) for m in settings.staff_list)
    assert build_staff_by_unit(replace(settings, staff_list=inactive), None) == {}
    assert build_staff_by_unit(Settings(), None) == {}


def test_recompute_is_idempotent(settings, monday):
    week = _week(
        monday,
        WeeklyOverrideRecord("s1", group="Gone", shifts={monday: "DE"}),
        WeeklyOverrideRecord("s3", unit="I"),
    )
    first = build_staff_by_unit(settings, week)
    second = build_staff_by_unit(settings, week)
    assert first == second
    assert list(first) == list(second)


def test_orphan_flags_only_for_overrides(monday):
    settings = Settings(
        units=("I",),
        groups=("Red",),
        job_titles=("educator",),
        staff_list=(
            # Roster default references a deleted group: not flagged.
            StaffMember("s1", "Anna", default_unit="I", default_group="OldGroup", default_job_title="educator", sort_order=0),
            StaffMember("s2", "Bela", default_unit="I", default_group="Red", default_job_title="educator", sort_order=1),
        ),
    )
    week = _week(monday, WeeklyOverrideRecord("s2", group="Gone", job_title="educator"))
    view = build_staff_by_unit(settings, week)
    by_id = {e.staff_id: e for e in view["I"]}

    assert by_id["s1"].is_orphaned_group is False
    assert by_id["s1"].display_group == "OldGroup"

    assert by_id["s2"].is_orphaned_group is True
    assert by_id["s2"].display_group == "Gone (deleted)"
    assert by_id["s2"].is_orphaned_job_title is False
    assert by_id["s2"].display_job_title == "educator"


def test_explicit_empty_override_is_used(settings, monday):
    """An empty-string override differs from no override."""
    week = _week(monday, WeeklyOverrideRecord("s1", unit="", group=""))
    view = build_staff_by_unit(settings, week)

    assert list(view) == ["I", "II", ""]
    [entry] = view[""]
    assert entry.staff_id == "s1"
    assert entry.group == ""
    assert entry.is_orphaned_unit is False
    assert entry.display_unit == ""


def test_name_override_and_fallback(settings, monday):
    week = _week(
        monday,
        WeeklyOverrideRecord("s1", name="Anna (sub)"),
        WeeklyOverrideRecord("s2", name=""),
    )
    view = build_staff_by_unit(settings, week)
    names = {e.staff_id: e.name for e in view["I"]}
    assert names == {"s1": "Anna (sub)", "s2": "Bela"}


def test_shifts_come_from_override(settings, monday):
    week = _week(monday, WeeklyOverrideRecord("s1", shifts={monday: "DE"}))
    view = build_staff_by_unit(settings, week)
    by_id = {e.staff_id: e for e in view["I"]}
    assert by_id["s1"].shifts == {monday: "DE"}
    assert by_id["s2"].shifts == {}


def test_sort_within_unit_group_then_job_then_sort_order_then_name():
    settings = Settings(
        units=("I",),
        groups=("Red", "Blue"),
        job_titles=("educator", "assistant"),
        staff_list=(
            StaffMember("a", "Zed", default_unit="I", default_group="Blue", default_job_title="educator", sort_order=0),
            StaffMember("b", "Amy", default_unit="I", default_group="Red", default_job_title="assistant", sort_order=1),
            StaffMember("c", "Bob", default_unit="I", default_group="Red", default_job_title="educator", sort_order=3),
            StaffMember("d", "Cat", default_unit="I", default_group="Red", default_job_title="educator", sort_order=2),
            StaffMember("e", "Ann", default_unit="I", default_group="Red", default_job_title="educator", sort_order=3),
        ),
    )
    view = build_staff_by_unit(settings, None)
    assert [e.staff_id for e in view["I"]] == ["d", "e", "c", "b", "a"]


def test_orphaned_groups_sort_after_valid_and_alphabetically(monday):
    settings = Settings(
        units=("I",),
        groups=("Red", "Blue"),
        staff_list=(
            StaffMember("a", "A", default_unit="I", default_group="Red", sort_order=0),
            StaffMember("b", "B", default_unit="I", default_group="Blue", sort_order=1),
            StaffMember("c", "C", default_unit="I", default_group="Red", sort_order=2),
            StaffMember("d", "D", default_unit="I", default_group="Red", sort_order=3),
        ),
    )
    week = _week(
        monday,
        WeeklyOverrideRecord("a", group="Zebra"),
        WeeklyOverrideRecord("c", group="Moose"),
    )
    view = build_staff_by_unit(settings, week)
    assert [e.staff_id for e in view["I"]] == ["d", "b", "c", "a"]


def test_orphaned_job_titles_sort_after_valid(monday):
    settings = Settings(
        units=("I",),
        job_titles=("educator",),
        staff_list=(
            StaffMember("a", "A", default_unit="I", default_job_title="educator", sort_order=0),
            StaffMember("b", "B", default_unit="I", default_job_title="educator", sort_order=1),
        ),
    )
    week = _week(monday, WeeklyOverrideRecord("a", job_title="janitor"))
    view = build_staff_by_unit(settings, week)
    assert [e.staff_id for e in view["I"]] == ["b", "a"]
    assert view["I"][1].display_job_title == "janitor (deleted)"


def test_stale_roster_default_groups_fall_back_to_sort_order(monday):
    """Defaults naming removed groups are not flagged and keep roster order."""
    settings = Settings(
        units=("I",),
        groups=("Red",),
        job_titles=("educator",),
        staff_list=(
            StaffMember("a", "A", default_unit="I", default_group="Zoo", sort_order=0),
            StaffMember("b", "B", default_unit="I", default_group="Ape", sort_order=1),
            StaffMember("c", "C", default_unit="I", default_job_title="zookeeper", sort_order=2),
            StaffMember("d", "D", default_unit="I", default_job_title="archivist", sort_order=3),
        ),
    )
    view = build_staff_by_unit(settings, _week(monday))
    assert [e.staff_id for e in view["I"]] == ["a", "b", "c", "d"]
    assert view["I"][0].is_orphaned_group is False


def test_override_moves_staff_between_units(settings, monday):
    week = _week(monday, WeeklyOverrideRecord("s3", unit="I"))
    view = build_staff_by_unit(settings, week)
    assert [e.staff_id for e in view["I"]] == ["s1", "s2", "s3"]
    assert "II" not in view
