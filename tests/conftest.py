"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.database import build_session_factory, get_db

# Every test gets its own in-memory SQLite database, built the same way the application builds its own
TEST_SETTINGS = Settings(database_url="sqlite:///:memory:")


@pytest.fixture
def session_factory() -> sessionmaker[Session]:
    """Fresh database with the game_records table already created."""
    return build_session_factory(TEST_SETTINGS)


@pytest.fixture
def db_session_repo(
    session_factory: sessionmaker[Session],
) -> Generator[Session, None, None]:
    """Session on the test database, closed at teardown. Stands in for the synchronization layer's store."""
    yield from get_db(session_factory)
