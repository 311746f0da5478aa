"""Debt repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.debt import DebtRecord


class DebtRepository(Protocol):
    """Repository for managing a user's debts."""

    def get_by_id(self, debt_id: int, *, user_id: str) -> Optional[DebtRecord]:
        """Retrieve a debt by ID."""
        ...

    def list_all(self, *, user_id: str) -> list[DebtRecord]:
        """List all debts, active or not."""
        ...

    def list_active(self, *, user_id: str) -> list[DebtRecord]:
        """List active debts, smallest balance first."""
        ...

    def create(self, debt: DebtRecord, *, user_id: str) -> DebtRecord:
        """Create a new debt."""
        ...

    def update(self, debt: DebtRecord, *, user_id: str) -> DebtRecord:
        """Update an existing debt."""
        ...

    def delete(self, debt_id: int, *, user_id: str) -> None:
        """Delete a debt by ID."""
        ...

    def get_total_debt(self, *, user_id: str) -> float:
        """Sum of active balances."""
        ...
