"""Protocol repository for the (read-only) snapshots of gameroom games."""

from typing import Protocol

from src.core.models import GameRecord


class GameRecordRepository(Protocol):
    """Source of the latest synchronized game records. Writing records is the synchronization layer's job."""

    def get_record(self, game_name: str) -> GameRecord | None:
        """Get game record by name, if record exists."""
        ...

    def list_records(self) -> list[GameRecord]:
        """All game records, oldest game first."""
        ...
