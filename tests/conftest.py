"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from rosterview.domain.entities import Settings, ShiftType, StaffMember
from rosterview.domain.models import Base


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def db_session():
    """Create in-memory database session for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def monday():
    return date(2024, 6, 10)


@pytest.fixture
def settings():
    """Two units, two groups, two job titles and four staff (one inactive)."""
    return Settings(
        units=("I", "II"),
        groups=("Red", "Blue"),
        job_titles=("educator", "assistant"),
        shift_types=(ShiftType("DE", "Morning", "#cce6ff"), ShiftType("DU", "Afternoon", "#ffcc99")),
        time_slots={"DE": "6:30-13:50"},
        staff_list=(
            StaffMember("s1", "Anna", "1", "I", "Red", "educator", True, 0),
            StaffMember("s2", "Bela", "2", "I", "Red", "assistant", True, 1),
            StaffMember("s3", "Cili", "3", "II", "Blue", "educator", True, 2),
            StaffMember("s4", "Dora", "4", "II", "Blue", "educator", False, 3),
        ),
    )
