"""Repository classes for data access."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rosterview.dates import parse_date, week_start
from rosterview.errors import PersistenceFailure, Result

from .entities import Settings, WeeklySchedule
from .models import SettingsDocument, WeeklyScheduleDocument


def _commit(session: Session, what: str) -> Optional[PersistenceFailure]:
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        print(f"[ERROR] Saving {what} failed: {e}")
        return PersistenceFailure(f"Saving {what} failed: {e}")
    return None


class SettingsRepository:
    """Repository for per-tenant global settings."""

    @staticmethod
    def load(session: Session, tenant_id: str) -> Optional[Settings]:
        """Load settings for a tenant, or None if nothing was saved yet."""
        doc = session.get(SettingsDocument, tenant_id)
        if doc is None:
            return None
        return Settings.from_dict(doc.payload or {})

    @staticmethod
    def save(session: Session, tenant_id: str, settings: Settings) -> Result[Settings]:
        """Replace the tenant's settings document."""
        payload = settings.to_dict()
        try:
            doc = session.get(SettingsDocument, tenant_id)
            if doc is None:
                session.add(SettingsDocument(tenant_id=tenant_id, payload=payload))
            else:
                doc.payload = payload
        except SQLAlchemyError as e:
            session.rollback()
            return Result.failure(PersistenceFailure(f"Saving settings failed: {e}"))
        failure = _commit(session, f"settings for {tenant_id}")
        if failure is not None:
            return Result.failure(failure)
        return Result.success(settings)


class WeeklyScheduleRepository:
    """Repository for weekly override documents."""

    @staticmethod
    def _get_doc(session: Session, tenant_id: str, week: date) -> Optional[WeeklyScheduleDocument]:
        stmt = select(WeeklyScheduleDocument).where(
            WeeklyScheduleDocument.tenant_id == tenant_id,
            WeeklyScheduleDocument.week_start == week_start(week),
        )
        return session.scalars(stmt).first()

    @staticmethod
    def load(session: Session, tenant_id: str, week: date) -> Optional[WeeklySchedule]:
        """Load the schedule for the week containing ``week``, or None."""
        doc = WeeklyScheduleRepository._get_doc(session, tenant_id, parse_date(week))
        if doc is None:
            return None
        return WeeklySchedule.from_dict(doc.payload)

    @staticmethod
    def save(session: Session, tenant_id: str, schedule: WeeklySchedule) -> Result[WeeklySchedule]:
        """Replace the whole document for the schedule's week."""
        monday = week_start(schedule.week_start)
        payload = schedule.to_dict()
        try:
            doc = WeeklyScheduleRepository._get_doc(session, tenant_id, monday)
            if doc is None:
                session.add(WeeklyScheduleDocument(tenant_id=tenant_id, week_start=monday, payload=payload))
            else:
                doc.payload = payload
        except SQLAlchemyError as e:
            session.rollback()
            return Result.failure(PersistenceFailure(f"Saving week {monday} failed: {e}"))
        failure = _commit(session, f"week {monday}")
        if failure is not None:
            return Result.failure(failure)
        return Result.success(schedule)

    @staticmethod
    def list_weeks(session: Session, tenant_id: str) -> List[date]:
        """Mondays of every saved week for a tenant, oldest first."""
        stmt = (
            select(WeeklyScheduleDocument.week_start)
            .where(WeeklyScheduleDocument.tenant_id == tenant_id)
            .order_by(WeeklyScheduleDocument.week_start)
        )
        return list(session.scalars(stmt).all())

    @staticmethod
    def delete(session: Session, tenant_id: str, week: date) -> Result[bool]:
        """Delete a saved week. The value is False if there was nothing to delete."""
        monday = week_start(week)
        doc = WeeklyScheduleRepository._get_doc(session, tenant_id, monday)
        if doc is None:
            return Result.success(False)
        session.delete(doc)
        failure = _commit(session, f"week {monday} deletion")
        if failure is not None:
            return Result.failure(failure)
        return Result.success(True)
