"""Tests for value types, document shapes and Result."""

import pytest

from rosterview.domain.entities import Settings, ShiftType, StaffMember
from rosterview.errors import NotFoundError, Result


def test_settings_round_trip(settings):
    data = settings.to_dict()
    assert data["jobTitles"] == ["educator", "assistant"]
    assert data["staffList"][0]["sortOrder"] == 0
    assert Settings.from_dict(data) == settings


def test_settings_from_sparse_document():
    """Missing collections, isActive and sortOrder take defaults."""
    settings = Settings.from_dict(
        {
            "units": ["I"],
            "shiftTypes": [{"code": "de", "name": "Morning"}],
            "timeSlots": {"de": "6-14"},
            "staffList": [
                {"id": "b", "name": "B"},
                {"id": "a", "name": "A", "sortOrder": 0},
            ],
        }
    )
    assert settings.groups == ()
    assert settings.shift_types == (ShiftType("DE", "Morning", "#ffffff"),)
    assert settings.time_slots == {"DE": "6-14"}
    assert [m.id for m in settings.staff_list] == ["a", "b"]
    assert settings.member("b").is_active is True
    assert settings.member("b").sort_order is None


def test_staff_member_without_sort_order_omits_key():
    assert "sortOrder" not in StaffMember("a", "A").to_dict()


def test_is_empty():
    assert Settings().is_empty()
    assert not Settings(time_slots={"DE": "6-14"}).is_empty()


class TestResult:
    def test_success(self):
        result = Result.success(3)
        assert result.ok and bool(result)
        assert result.unwrap() == 3

    def test_failure_unwrap_raises(self):
        result = Result.failure(NotFoundError("missing"))
        assert not result
        with pytest.raises(NotFoundError, match="missing"):
            result.unwrap()
