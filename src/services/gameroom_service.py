"""Orchestration of communication from API layer to the status projector and persistence layer (and the reverse direction)."""

import logging
import time
from typing import Callable

from src.api.models import GameStatusResponse, GetGameStatusRequest
from src.core.exceptions import InvalidRecordError, RepositoryError
from src.core.models import GameRecord, UnixTimestamp
from src.db.repository import GameRecordRepository
from src.gameroom.projector import DisplayFacts, project, short_name, viewer_role
from src.services.identity import IdentityProvider

logger = logging.getLogger(__name__)


def _unix_now() -> UnixTimestamp:
    return int(time.time())


class GameroomService:
    """Orchestration of layers for the gameroom status display."""

    def __init__(
        self,
        repository: GameRecordRepository,
        identity: IdentityProvider,
        clock: Callable[[], UnixTimestamp] = _unix_now,
    ) -> None:
        self.repo = repository
        self.identity = identity
        self.clock = clock

    # -- API routes logic ---
    def get_game_status(self, request: GetGameStatusRequest) -> GameStatusResponse:
        """
        Status of a single game, as seen by the current viewer.
        ----
        Called on every render, e.g. whenever a new snapshot of the game was synchronized.
        """
        record = self._fetch_record(request.game_name)
        return self._create_status_response(record, self.clock())

    def list_game_statuses(self) -> list[GameStatusResponse]:
        """Status of every game in the gameroom, oldest game first."""
        now = self.clock()
        return [
            self._create_status_response(record, now)
            for record in self.repo.list_records()
        ]

    # -- Internal helpers --
    def _create_status_response(
        self, record: GameRecord, now: UnixTimestamp
    ) -> GameStatusResponse:
        """Project the record for the current viewer and convert the result into a GameStatusResponse."""
        facts = self._project_or_unknown(record, now)
        return GameStatusResponse(
            game_name=record.game_name,
            player_one=short_name(record.player_one) if record.player_one else None,
            player_two=short_name(record.player_two) if record.player_two else None,
            status_text=facts.status_text,
            player_one_active=facts.player_one_active,
            player_two_active=facts.player_two_active,
            player_one_icon=facts.player_one_icon,
            player_two_icon=facts.player_two_icon,
            viewer_role=facts.viewer_role,
            created_label=facts.created_label,
            last_move_label=facts.last_move_label,
        )

    def _project_or_unknown(self, record: GameRecord, now: UnixTimestamp) -> DisplayFacts:
        """Invalid records are rendered with an 'Unknown status' placeholder."""
        viewer = self.identity.get_public_key()
        try:
            return project(record, viewer, now)
        except InvalidRecordError as error:
            logger.warning(
                "Cannot display status of game %r: %s", record.game_name, error
            )
            return DisplayFacts.unknown(viewer_role(record, viewer))

    def _fetch_record(self, game_name: str) -> GameRecord:
        """Attempt to find the game record in the repository and raise error if it fails."""
        logger.debug("Fetching record of game %r", game_name)
        record = self.repo.get_record(game_name)
        if record is None:
            raise RepositoryError(f"Game with {game_name=} not found.")
        return record
