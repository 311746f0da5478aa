"""debtplan: snowball and avalanche debt payoff planning."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .services.payoff import Debt, SimulationPolicy, compare, simulate

__all__ = ["BaseConfig", "DevConfig", "Debt", "SimulationPolicy", "compare", "simulate"]
