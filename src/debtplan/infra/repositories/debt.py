"""SQLModel implementation of the debt repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.debt import DebtRecord


class SQLModelDebtRepository:
    """SQLModel-based debt repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, debt_id: int, *, user_id: str) -> Optional[DebtRecord]:
        """Retrieve a debt by ID."""
        with self.session_factory() as session:
            return session.exec(
                select(DebtRecord).where(DebtRecord.id == debt_id, DebtRecord.user_id == user_id)
            ).first()

    def list_all(self, *, user_id: str) -> list[DebtRecord]:
        """List all debts."""
        with self.session_factory() as session:
            statement = (
                select(DebtRecord)
                .where(DebtRecord.user_id == user_id)
                .order_by(DebtRecord.name)  # type: ignore
            )
            return list(session.exec(statement).all())

    def list_active(self, *, user_id: str) -> list[DebtRecord]:
        """List active debts ordered by balance, smallest first."""
        with self.session_factory() as session:
            statement = (
                select(DebtRecord)
                .where(DebtRecord.user_id == user_id)
                .where(DebtRecord.active == True)  # noqa: E712
                .order_by(DebtRecord.current_balance, DebtRecord.id)  # type: ignore
            )
            return list(session.exec(statement).all())

    def create(self, debt: DebtRecord, *, user_id: str) -> DebtRecord:
        """Create a new debt."""
        with self.session_factory() as session:
            debt.user_id = user_id
            session.add(debt)
            session.commit()
            session.refresh(debt)
            return debt

    def update(self, debt: DebtRecord, *, user_id: str) -> DebtRecord:
        """Update an existing debt."""
        with self.session_factory() as session:
            debt.user_id = user_id
            debt = session.merge(debt)
            session.commit()
            session.refresh(debt)
            return debt

    def delete(self, debt_id: int, *, user_id: str) -> None:
        """Delete a debt by ID."""
        with self.session_factory() as session:
            debt = session.exec(
                select(DebtRecord).where(DebtRecord.id == debt_id, DebtRecord.user_id == user_id)
            ).first()
            if debt:
                session.delete(debt)
                session.commit()

    def get_total_debt(self, *, user_id: str) -> float:
        """Calculate total outstanding balance across active debts."""
        return sum(debt.current_balance for debt in self.list_active(user_id=user_id))
