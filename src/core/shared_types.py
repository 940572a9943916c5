"""
Type definitions used across layers
"""

from enum import StrEnum


class GameStatus(StrEnum):
    """Outcome / turn state of a game, as written to the game record by the move validator."""

    PLAYER_ONE_NEXT = "P1-NEXT"
    PLAYER_TWO_NEXT = "P2-NEXT"
    PLAYER_ONE_WIN = "P1-WIN"
    PLAYER_TWO_WIN = "P2-WIN"
    TIE = "TIE"


class GameType(StrEnum):
    # --- NOTE only 3x3 tic-tac-toe is played in a gameroom for now
    XO = "xo"


class ViewerRole(StrEnum):
    PLAYER_ONE = "player_one"
    PLAYER_TWO = "player_two"
    OBSERVER = "observer"


class Icon(StrEnum):
    ACTIVE = "person"
    INACTIVE = "person_outline"
