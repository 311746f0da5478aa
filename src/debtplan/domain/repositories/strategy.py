"""Payoff strategy repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.strategy import PayoffStrategy


class StrategyRepository(Protocol):
    """Repository for saved payoff strategies."""

    def get_by_id(self, strategy_id: int, *, user_id: str) -> Optional[PayoffStrategy]:
        ...

    def list_all(self, *, user_id: str) -> list[PayoffStrategy]:
        """List saved strategies, newest first."""
        ...

    def create(self, strategy: PayoffStrategy, *, user_id: str) -> PayoffStrategy:
        ...

    def delete(self, strategy_id: int, *, user_id: str) -> None:
        ...
