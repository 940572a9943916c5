"""Wiring of settings, logging, database and service for a hosting UI process."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings, load_settings
from src.core.logging_config import configure_logging
from src.db.database import build_session_factory, get_db
from src.db.sql_repository import SQLGameRecordRepository
from src.services.gameroom_service import GameroomService
from src.services.identity import IdentityProvider

logger = logging.getLogger(__name__)


def startup(settings: Optional[Settings] = None) -> sessionmaker[Session]:
    """Configure logging and connect to the game record store."""
    settings = settings or load_settings()
    configure_logging(settings)
    logger.info("Connecting to game record store (echo_sql=%s)", settings.echo_sql)
    return build_session_factory(settings)


@contextmanager
def open_service(
    session_factory: sessionmaker[Session], identity: IdentityProvider
) -> Iterator[GameroomService]:
    """Service bound to a fresh session, closed again on exit."""
    with contextmanager(get_db)(session_factory) as db:
        yield GameroomService(SQLGameRecordRepository(db), identity)
