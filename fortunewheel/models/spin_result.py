"""Append-only record of completed spins."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from .base import Base
from ..db.utils import as_utc, dt_iso


class SpinResult(Base):
    """A prize won by a user on a single spin."""

    __tablename__ = "spin_results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    """Primary key."""

    username: Mapped[str] = mapped_column(String(100), nullable=False)
    """Name the player entered before spinning."""

    prize: Mapped[str] = mapped_column(String(255), nullable=False)
    """Text of the prize that was won."""

    won_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    """When the wheel stopped on the prize."""

    __table_args__ = (Index("ix_spin_results_won_at", "won_at"),)

    def __init__(
        self,
        *,
        username: str,
        prize: str,
        won_at: Optional[datetime] = None,
    ) -> None:
        self.username = username
        self.prize = prize
        if won_at is not None:
            self.won_at = won_at

    @validates("username")
    def _normalize_username(self, _key: str, value: str) -> str:
        if value is None:
            raise ValueError("username must not be None")
        normalized = value.strip()
        if not normalized:
            raise ValueError("username must not be empty")
        return normalized

    @property
    def timestamp(self) -> int:
        """Epoch milliseconds of :attr:`won_at`."""
        return int(as_utc(self.won_at).timestamp() * 1000)

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "prize": self.prize,
            "won_at": dt_iso(self.won_at),
            "timestamp": self.timestamp,
        }

    def to_json_str(self) -> str:
        return json.dumps(self.to_json(), ensure_ascii=False)

    def __repr__(self) -> str:  # pragma: no cover - repr is trivial
        return "<SpinResult(id={id}, username={user}, prize={prize})>".format(
            id=self.id,
            user=self.username,
            prize=self.prize,
        )
