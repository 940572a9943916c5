"""Generate database sessions"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base


def build_session_factory(settings: Settings) -> sessionmaker[Session]:
    """Engine + session factory for the configured database. Ensures all tables are created."""
    engine = create_engine(settings.database_url, echo=settings.echo_sql)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)


def get_db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
