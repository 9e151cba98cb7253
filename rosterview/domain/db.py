"""Engine and session helpers for the roster database."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base

DEFAULT_DB_URL = "sqlite:///rosterview.db"


def create_db_engine(db_url: str = DEFAULT_DB_URL, echo: bool = False) -> Engine:
    """Engine for ``db_url`` with the settings and weekly_schedules tables in place."""
    engine = create_engine(db_url, echo=echo)
    Base.metadata.create_all(engine)
    return engine


def init_database(db_url: str = DEFAULT_DB_URL) -> Engine:
    engine = create_db_engine(db_url)
    print(f"[INFO] Database initialized: {db_url}")
    return engine


def get_session(db_url: str = DEFAULT_DB_URL) -> Session:
    """Open a session; missing tables are created on first use."""
    return sessionmaker(bind=create_db_engine(db_url))()
