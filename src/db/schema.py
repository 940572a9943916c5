"""Database tables / schema"""

from typing import Optional

from sqlalchemy import BigInteger
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.core.shared_types import GameType


class Base(DeclarativeBase):
    pass


class DBGameRecord(Base):
    __tablename__ = "game_records"
    game_name: Mapped[str] = mapped_column(primary_key=True)
    game_type: Mapped[str] = mapped_column(default=GameType.XO.value)
    player_one: Mapped[Optional[str]]
    player_two: Mapped[Optional[str]]
    status: Mapped[str]
    # seconds since epoch, as written by the synchronization layer
    created_time: Mapped[int] = mapped_column(BigInteger)
    updated_time: Mapped[Optional[int]] = mapped_column(BigInteger)
