"""
Viewer-relative projection of a gameroom game record.
----

The same GameRecord is shared by player one, player two and any observer. The projector derives
what each of them should see: the status sentence, which player is highlighted, and time labels.

NOTE this module never changes the record: turns and outcomes are decided by the move validator upstream.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import InvalidRecordError
from src.core.models import GameRecord, PublicKey, UnixTimestamp
from src.core.shared_types import GameStatus, GameType, Icon, ViewerRole
from src.gameroom.relative_time import RelativeTimeFn, format_relative_time

SHORT_NAME_LENGTH = 6

JOIN_AS_X = "Take a space to join the game as X"
JOIN_AS_O = "Take a space to join the game as O"
WAITING_FOR_OPPONENT = "Waiting for another player"
YOUR_TURN = "Your turn"
YOU_WON = "You won"
DRAW = "Game resulted in a draw"
UNKNOWN_STATUS = "Unknown status"

PLAYER_ONE_STATUSES = {GameStatus.PLAYER_ONE_NEXT, GameStatus.PLAYER_ONE_WIN}
PLAYER_TWO_STATUSES = {GameStatus.PLAYER_TWO_NEXT, GameStatus.PLAYER_TWO_WIN}


@dataclass(frozen=True)
class DisplayFacts:
    """Everything the presentation layer needs to render the status bar of one game for one viewer."""

    status_text: str
    player_one_active: bool
    player_two_active: bool
    player_one_icon: Icon
    player_two_icon: Icon
    viewer_role: ViewerRole
    created_label: Optional[str]
    last_move_label: Optional[str]

    @classmethod
    def unknown(cls, viewer_role: ViewerRole = ViewerRole.OBSERVER) -> "DisplayFacts":
        """Renderable placeholder for a record that could not be projected. Only the viewer role is kept."""
        return cls(
            status_text=UNKNOWN_STATUS,
            player_one_active=False,
            player_two_active=False,
            player_one_icon=Icon.INACTIVE,
            player_two_icon=Icon.INACTIVE,
            viewer_role=viewer_role,
            created_label=None,
            last_move_label=None,
        )


def short_name(identity: PublicKey) -> str:
    """First few characters of a public key. Keys shorter than that are shown in full."""
    return identity[:SHORT_NAME_LENGTH]


def viewer_role(record: GameRecord, viewer: PublicKey) -> ViewerRole:
    """Seat of the viewer, from identity only. Safe to call on records that fail validation."""
    if _is_seated(record.player_one) and viewer == record.player_one:
        return ViewerRole.PLAYER_ONE
    if _is_seated(record.player_two) and viewer == record.player_two:
        return ViewerRole.PLAYER_TWO
    return ViewerRole.OBSERVER


def project(
    record: GameRecord,
    viewer: PublicKey,
    now: UnixTimestamp,
    relative_time: RelativeTimeFn = format_relative_time,
) -> DisplayFacts:
    """
    Derive the display facts of `record` as seen by `viewer` at instant `now`.
    ----

    Raises InvalidRecordError if the record breaks one of its invariants.
    """
    status = _validate(record)
    seated = _is_seated(record.player_one) and _is_seated(record.player_two)

    player_one_active = seated and status in PLAYER_ONE_STATUSES
    player_two_active = seated and status in PLAYER_TWO_STATUSES

    # the join counts as the first move, so the time of last move exists as soon as player one does
    last_move_label = None
    if _is_seated(record.player_one):
        last_move_label = relative_time(record.updated_time, now)

    return DisplayFacts(
        status_text=_status_text(record, status, viewer),
        player_one_active=player_one_active,
        player_two_active=player_two_active,
        player_one_icon=_icon(player_one_active),
        player_two_icon=_icon(player_two_active),
        viewer_role=viewer_role(record, viewer),
        created_label=relative_time(record.created_time, now),
        last_move_label=last_move_label,
    )


# -- PRIVATE HELPERS ---
def _is_seated(player: Optional[PublicKey]) -> bool:
    """Empty string and None both mean nobody claimed the seat yet."""
    return bool(player)


def _validate(record: GameRecord) -> GameStatus:
    """Check the record invariants and return its parsed status."""
    if record.game_type not in GameType.__members__.values():
        raise InvalidRecordError(
            f"Unsupported game type: {record.game_type!r}. Supported: {','.join(GameType)}"
        )

    if _is_seated(record.player_two) and not _is_seated(record.player_one):
        raise InvalidRecordError(
            f"Game {record.game_name!r} has a second player but no first player."
        )

    if record.status not in GameStatus.__members__.values():
        raise InvalidRecordError(
            f"Invalid status code: {record.status!r}. \nPick one from {','.join(GameStatus)}"
        )

    if record.created_time is None:
        raise InvalidRecordError(f"Game {record.game_name!r} has no creation time.")

    if _is_seated(record.player_one) and record.updated_time is None:
        raise InvalidRecordError(
            f"Game {record.game_name!r} has a player but no time of last move."
        )

    return GameStatus(record.status)


def _status_text(record: GameRecord, status: GameStatus, viewer: PublicKey) -> str:
    """Status sentence. Seating is checked before the status, which only matters once both seats are taken."""
    player_one, player_two = record.player_one, record.player_two
    if not player_one:
        return JOIN_AS_X

    if not player_two:
        return WAITING_FOR_OPPONENT if viewer == player_one else JOIN_AS_O

    match status:
        case GameStatus.PLAYER_ONE_NEXT:
            return _turn_text(player_one, viewer)
        case GameStatus.PLAYER_TWO_NEXT:
            return _turn_text(player_two, viewer)
        case GameStatus.PLAYER_ONE_WIN:
            return _win_text(player_one, viewer)
        case GameStatus.PLAYER_TWO_WIN:
            return _win_text(player_two, viewer)
        case GameStatus.TIE:
            return DRAW
        case _:
            raise InvalidRecordError(f"No status text for status: {status!r}")


def _turn_text(player: PublicKey, viewer: PublicKey) -> str:
    return YOUR_TURN if viewer == player else f"{short_name(player)}'s turn"


def _win_text(player: PublicKey, viewer: PublicKey) -> str:
    return YOU_WON if viewer == player else f"{short_name(player)} won"


def _icon(active: bool) -> Icon:
    return Icon.ACTIVE if active else Icon.INACTIVE