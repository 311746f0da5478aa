"""Debt records loaded into payoff simulations."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlmodel import Field, SQLModel

if TYPE_CHECKING:
    from ..services.payoff import Debt


class DebtRecord(SQLModel, table=True):
    """Credit card or loan balance tracked for a user."""

    __tablename__: ClassVar[str] = "debt"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    name: str = Field(nullable=False, max_length=80, index=True)
    current_balance: float = Field(default=0.0, nullable=False)
    interest_rate: float = Field(default=0.0, nullable=False)
    minimum_payment: float = Field(default=0.0, nullable=False)
    active: bool = Field(default=True, nullable=False, index=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def to_debt(self) -> "Debt":
        """Snapshot this row as an immutable simulator input."""
        from ..services.payoff import Debt

        return Debt(
            id=self.id,
            name=self.name,
            balance=self.current_balance,
            annual_rate_percent=self.interest_rate,
            minimum_payment=self.minimum_payment,
        )
