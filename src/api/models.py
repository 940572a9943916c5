"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Icon, ViewerRole


# --- REQUEST MODELS ---
class GetGameStatusRequest(BaseModel):
    game_name: str

    @field_validator("game_name")
    @classmethod
    def validate_game_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise InvalidRequestError("Game name must not be empty.")
        return name


# --- RESPONSE MODELS ---
class GameStatusResponse(BaseModel):
    game_name: str
    player_one: Optional[str]
    player_two: Optional[str]
    status_text: str
    player_one_active: bool
    player_two_active: bool
    player_one_icon: Icon
    player_two_icon: Icon
    viewer_role: ViewerRole
    created_label: Optional[str]
    last_move_label: Optional[str]
