"""Service module exports."""

from . import export_csv, payoff, strategies, validation

__all__ = [
    "export_csv",
    "payoff",
    "strategies",
    "validation",
]
