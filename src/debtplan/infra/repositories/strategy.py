"""SQLModel implementation of the payoff strategy repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.strategy import PayoffStrategy


class SQLModelStrategyRepository:
    """SQLModel-based strategy repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_by_id(self, strategy_id: int, *, user_id: str) -> Optional[PayoffStrategy]:
        with self.session_factory() as session:
            return session.exec(
                select(PayoffStrategy).where(
                    PayoffStrategy.id == strategy_id, PayoffStrategy.user_id == user_id
                )
            ).first()

    def list_all(self, *, user_id: str) -> list[PayoffStrategy]:
        """List saved strategies, newest first."""
        with self.session_factory() as session:
            statement = (
                select(PayoffStrategy)
                .where(PayoffStrategy.user_id == user_id)
                .order_by(PayoffStrategy.created_at.desc(), PayoffStrategy.id.desc())  # type: ignore
            )
            return list(session.exec(statement).all())

    def create(self, strategy: PayoffStrategy, *, user_id: str) -> PayoffStrategy:
        with self.session_factory() as session:
            strategy.user_id = user_id
            session.add(strategy)
            session.commit()
            session.refresh(strategy)
            return strategy

    def delete(self, strategy_id: int, *, user_id: str) -> None:
        with self.session_factory() as session:
            strategy = session.exec(
                select(PayoffStrategy).where(
                    PayoffStrategy.id == strategy_id, PayoffStrategy.user_id == user_id
                )
            ).first()
            if strategy:
                session.delete(strategy)
                session.commit()
