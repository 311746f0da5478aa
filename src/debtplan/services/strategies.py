"""Loading debts for planning and saving chosen strategies."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from ..domain.repositories.debt import DebtRepository
from ..domain.repositories.strategy import StrategyRepository
from ..logging_config import get_logger
from ..models.strategy import PayoffStrategy
from .payoff import (
    MAX_MONTHS,
    Debt,
    SimulationPolicy,
    StrategyComparison,
    compare,
    order_debts,
)
from .validation import InvalidDebtInput, validate_debts, validate_extra_payment

logger = get_logger("services.strategies")


def load_active_debts(repository: DebtRepository, *, user_id: str) -> list[Debt]:
    """Return the user's active debts as simulator inputs."""

    return [record.to_debt() for record in repository.list_active(user_id=user_id)]


def plan_for_user(
    repository: DebtRepository,
    *,
    user_id: str,
    extra_payment: float,
    start: date | None = None,
    max_months: int = MAX_MONTHS,
) -> StrategyComparison:
    """Load, validate and compare both payoff policies for *user_id*."""

    extra = validate_extra_payment(extra_payment)
    debts = validate_debts(load_active_debts(repository, user_id=user_id))
    comparison = compare(debts, extra, start=start, max_months=max_months)
    logger.info(
        "Compared payoff strategies",
        extra={
            "user_id": user_id,
            "debts": len(debts),
            "extra_payment": extra,
            "snowball_months": comparison.snowball.months,
            "avalanche_months": comparison.avalanche.months,
        },
    )
    return comparison


def save_strategy(
    repository: StrategyRepository,
    *,
    user_id: str,
    name: str,
    policy: SimulationPolicy | str,
    extra_payment: float,
    debts: Sequence[Debt],
) -> PayoffStrategy:
    """Persist a named strategy with the debt order *policy* produces."""

    if not name or not name.strip():
        raise InvalidDebtInput("Strategy name is required.")
    policy = SimulationPolicy.parse(policy)
    extra = validate_extra_payment(extra_payment)
    ordered = order_debts(validate_debts(debts), policy)

    strategy = repository.create(
        PayoffStrategy(
            user_id=user_id,
            name=name.strip(),
            method=policy.value,
            extra_payment=extra,
            debt_order=[debt.id for debt in ordered],
        ),
        user_id=user_id,
    )
    logger.info(
        "Saved payoff strategy",
        extra={"user_id": user_id, "strategy_id": strategy.id, "method": policy.value},
    )
    return strategy


__all__ = ["load_active_debts", "plan_for_user", "save_strategy"]
