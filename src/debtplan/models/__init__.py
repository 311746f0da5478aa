"""SQLModel table exports."""

from .debt import DebtRecord
from .strategy import PayoffStrategy

__all__ = [
    "DebtRecord",
    "PayoffStrategy",
]
