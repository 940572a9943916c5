"""Unit tests for src/db/database.py"""

from sqlalchemy import inspect
from sqlalchemy.orm import Session, sessionmaker

from src.db.database import get_db


def test_build_session_factory_creates_tables(session_factory: sessionmaker[Session]) -> None:
    with session_factory() as db:
        assert "game_records" in inspect(db.get_bind()).get_table_names()


def test_get_db_yields_session(session_factory: sessionmaker[Session]) -> None:
    sessions = get_db(session_factory)
    db = next(sessions)
    assert isinstance(db, Session)
    sessions.close()
