"""Implementation of GameRecordRepository using SQLAlchemy"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameRecord
from src.db.schema import DBGameRecord


class SQLGameRecordRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_record(self, game_name: str) -> GameRecord | None:
        """Get game record by name, if record exists."""
        record_db = self._fetch_record(game_name)
        if record_db:
            return self._to_model(record_db)
        return None

    def list_records(self) -> list[GameRecord]:
        """All game records, oldest game first."""
        query = select(DBGameRecord).order_by(
            DBGameRecord.created_time, DBGameRecord.game_name
        )
        return [self._to_model(record_db) for record_db in self.db.scalars(query)]

    def _fetch_record(self, game_name: str) -> DBGameRecord | None:
        query = select(DBGameRecord).where(DBGameRecord.game_name == game_name)
        return self.db.scalar(query)

    def _to_model(self, record_db: DBGameRecord) -> GameRecord:
        """Convert SQLAlchemy model to data transfer model."""
        return GameRecord(
            game_name=record_db.game_name,
            game_type=record_db.game_type,
            player_one=record_db.player_one,
            player_two=record_db.player_two,
            status=record_db.status,
            created_time=record_db.created_time,
            updated_time=record_db.updated_time,
        )
