"""Repository protocol definitions for domain layer."""

from .debt import DebtRepository
from .strategy import StrategyRepository

__all__ = [
    "DebtRepository",
    "StrategyRepository",
]
