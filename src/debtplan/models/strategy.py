"""Saved payoff strategies."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, ClassVar, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class PayoffStrategy(SQLModel, table=True):
    """A named policy + extra payment the user chose to keep."""

    __tablename__: ClassVar[str] = "debt_payoff_strategy"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    name: str = Field(nullable=False, max_length=80)
    method: str = Field(default="snowball", nullable=False, max_length=32)
    extra_payment: float = Field(default=0.0, nullable=False)
    # Debt ids in the target order computed when the strategy was saved.
    debt_order: list[Any] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
