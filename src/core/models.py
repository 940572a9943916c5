"""
Boundary layer data model(s).

The game record is owned by the synchronization layer. Everything below it (db) produces it,
everything above it (projector, service) only reads it.
(Decouples the data model specific to the DB layer or the API layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameRecord easier to read
PublicKey = str
UnixTimestamp = int


@dataclass(frozen=True)
class GameRecord:
    """Transport-safe snapshot of a gameroom game, shared by both players and any observer."""

    game_name: str
    game_type: str
    player_one: Optional[PublicKey]
    player_two: Optional[PublicKey]
    status: str
    created_time: UnixTimestamp
    updated_time: Optional[UnixTimestamp]
