"""SQLAlchemy models storing settings and weekly schedules as JSON documents."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, Date, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class SettingsDocument(Base):
    """One global settings document per tenant."""

    __tablename__ = "settings"

    tenant_id = Column(String(128), primary_key=True)
    payload = Column(JSON, nullable=False)  # {units, groups, jobTitles, shiftTypes, timeSlots, staffList}
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        staff = len((self.payload or {}).get("staffList", []))
        return f"<SettingsDocument(tenant='{self.tenant_id}', staff={staff})>"


class WeeklyScheduleDocument(Base):
    """Overrides for one tenant and one week, keyed by the week's Monday."""

    __tablename__ = "weekly_schedules"
    __table_args__ = (UniqueConstraint("tenant_id", "week_start", name="uq_tenant_week"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    tenant_id = Column(String(128), nullable=False, index=True)
    week_start = Column(Date, nullable=False)
    payload = Column(JSON, nullable=False)  # {weekStartDate, staff: [...]}
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<WeeklyScheduleDocument(tenant='{self.tenant_id}', week={self.week_start})>"
