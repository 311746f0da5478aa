"""Concrete repository implementations using SQLModel."""

from .debt import SQLModelDebtRepository
from .strategy import SQLModelStrategyRepository

__all__ = [
    "SQLModelDebtRepository",
    "SQLModelStrategyRepository",
]
