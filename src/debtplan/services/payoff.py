"""Debt payoff simulation (snowball and avalanche)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Iterable, Sequence

from ..logging_config import get_logger

logger = get_logger("services.payoff")

# 100 years of simulated months.
MAX_MONTHS = 1200


class SimulationPolicy(str, Enum):
    """Order in which the extra payment is applied across debts."""

    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"

    @property
    def label(self) -> str:
        return "Debt Snowball" if self is SimulationPolicy.SNOWBALL else "Debt Avalanche"

    @classmethod
    def parse(cls, value: "str | SimulationPolicy") -> "SimulationPolicy":
        """Return the policy named by *value* or raise ``ValueError``."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError("Invalid debt payoff strategy.") from exc


@dataclass(frozen=True, slots=True)
class Debt:
    """A single debt fed into a payoff simulation."""

    id: int | str
    name: str
    balance: float
    annual_rate_percent: float
    minimum_payment: float


@dataclass(frozen=True, slots=True)
class TimelinePoint:
    """Aggregate balance at the end of one simulated month."""

    date: date
    aggregate_balance: float


@dataclass(frozen=True, slots=True)
class DebtPayoff:
    """Per-debt outcome of a run."""

    debt_id: Any
    name: str
    starting_balance: float
    minimum_payment: float
    total_interest: float
    months_to_payoff: int | None = None

    @property
    def paid_off(self) -> bool:
        return self.months_to_payoff is not None


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """Outcome of a single policy run."""

    policy: SimulationPolicy
    total_interest_paid: float
    payoff_date: date
    monthly_payment: float
    timeline: tuple[TimelinePoint, ...]
    debt_order: tuple[Any, ...] = ()
    payoff_order: tuple[Any, ...] = ()
    debt_payoffs: tuple[DebtPayoff, ...] = ()
    converged: bool = True

    @property
    def policy_name(self) -> str:
        return self.policy.label

    @property
    def months(self) -> int:
        """Number of simulated months (the initial point is month 0)."""
        return len(self.timeline) - 1

    def payoff_for(self, debt_id: Any) -> DebtPayoff:
        for payoff in self.debt_payoffs:
            if payoff.debt_id == debt_id:
                return payoff
        raise KeyError(debt_id)


@dataclass(frozen=True, slots=True)
class StrategyComparison:
    """Snowball and avalanche results for the same debts."""

    snowball: SimulationResult
    avalanche: SimulationResult

    @property
    def interest_savings(self) -> float:
        """Interest avoided by choosing avalanche over snowball (may be negative)."""
        return self.snowball.total_interest_paid - self.avalanche.total_interest_paid

    def results(self) -> list[SimulationResult]:
        return [self.snowball, self.avalanche]


def _next_month(value: date) -> date:
    month = value.month + 1
    year = value.year + (month - 1) // 12
    month = ((month - 1) % 12) + 1
    return value.replace(year=year, month=month, day=1)


def _start_month(start: date | None) -> date:
    return (start or date.today()).replace(day=1)


def order_debts(debts: Iterable[Debt], policy: SimulationPolicy | str) -> list[Debt]:
    """Return *debts* in the target order for *policy*.

    Snowball sorts ascending by balance, avalanche descending by rate. Both
    sorts are stable so ties keep their input order.
    """

    policy = SimulationPolicy.parse(policy)
    if policy is SimulationPolicy.SNOWBALL:
        return sorted(debts, key=lambda d: d.balance)
    return sorted(debts, key=lambda d: d.annual_rate_percent, reverse=True)


def simulate(
    debts: Sequence[Debt],
    extra_payment: float,
    policy: SimulationPolicy | str,
    *,
    start: date | None = None,
    max_months: int = MAX_MONTHS,
) -> SimulationResult:
    """Simulate month-by-month payoff of *debts* under *policy*.

    Each month every open debt accrues interest, then its minimum payment is
    applied, then whatever is left of *extra_payment* goes to it in policy
    order. The target order is fixed at the start of the run. The loop stops
    once the aggregate balance reaches zero or after *max_months* simulated
    months; in the latter case ``converged`` is ``False``.
    Inputs are not validated here and are never mutated.
    """

    policy = SimulationPolicy.parse(policy)
    current_date = _start_month(start)
    ordered = order_debts(debts, policy)
    # Working copy: [debt, remaining balance, interest accrued, payoff month]
    working: list[list[Any]] = [
        [debt, float(debt.balance), 0.0, 0 if debt.balance <= 0 else None] for debt in ordered
    ]

    monthly_payment = sum(debt.minimum_payment for debt in ordered) + extra_payment
    total_balance = sum((entry[1] for entry in working), 0.0)
    total_interest = 0.0
    timeline: list[TimelinePoint] = [TimelinePoint(current_date, total_balance)]
    payoff_order: list[Any] = []
    month = 0

    logger.debug(
        "Starting payoff simulation",
        extra={"policy": policy.value, "debts": len(working), "extra_payment": extra_payment},
    )

    while total_balance > 0 and month < max_months:
        month += 1
        remaining_extra = extra_payment

        for entry in working:
            debt, balance = entry[0], entry[1]
            if balance <= 0:
                continue

            monthly_interest = balance * (debt.annual_rate_percent / 100) / 12
            total_interest += monthly_interest
            entry[2] += monthly_interest
            balance += monthly_interest

            balance -= min(balance, debt.minimum_payment)

            if remaining_extra > 0 and balance > 0:
                extra_applied = min(balance, remaining_extra)
                balance -= extra_applied
                remaining_extra -= extra_applied

            if balance <= 0:
                payoff_order.append(debt.id)
                entry[3] = month
            entry[1] = balance

        total_balance = sum(max(0.0, entry[1]) for entry in working)
        current_date = _next_month(current_date)
        timeline.append(TimelinePoint(current_date, total_balance))

    converged = total_balance <= 0
    if not converged:
        logger.warning(
            "Payoff simulation hit iteration cap",
            extra={
                "policy": policy.value,
                "max_months": max_months,
                "remaining_balance": total_balance,
            },
        )

    return SimulationResult(
        policy=policy,
        total_interest_paid=total_interest,
        payoff_date=timeline[-1].date,
        monthly_payment=monthly_payment,
        timeline=tuple(timeline),
        debt_order=tuple(debt.id for debt in ordered),
        payoff_order=tuple(payoff_order),
        debt_payoffs=tuple(
            DebtPayoff(
                debt_id=debt.id,
                name=debt.name,
                starting_balance=debt.balance,
                minimum_payment=debt.minimum_payment,
                total_interest=interest,
                months_to_payoff=paid_month,
            )
            for debt, _, interest, paid_month in working
        ),
        converged=converged,
    )


def compare(
    debts: Sequence[Debt],
    extra_payment: float,
    *,
    start: date | None = None,
    max_months: int = MAX_MONTHS,
) -> StrategyComparison:
    """Run both policies over the same debts."""

    return StrategyComparison(
        snowball=simulate(
            list(debts), extra_payment, SimulationPolicy.SNOWBALL, start=start, max_months=max_months
        ),
        avalanche=simulate(
            list(debts), extra_payment, SimulationPolicy.AVALANCHE, start=start, max_months=max_months
        ),
    )


def format_duration(months: int) -> str:
    """Render a month count as ``"X years, Y months"``."""

    if months <= 0:
        return "N/A"
    return f"{months // 12} years, {months % 12} months"


def result_summary(result: SimulationResult) -> dict[str, Any]:
    """Return presentation-ready figures for *result*, rounded to cents."""

    return {
        "policy": result.policy.value,
        "policy_name": result.policy_name,
        "payoff_date": result.payoff_date.isoformat(),
        "months": result.months,
        "duration": format_duration(result.months) if result.converged else "N/A",
        "total_interest_paid": round(result.total_interest_paid, 2),
        "monthly_payment": round(result.monthly_payment, 2),
        "converged": result.converged,
        "debts": [
            {
                "id": payoff.debt_id,
                "name": payoff.name,
                "months_to_payoff": payoff.months_to_payoff,
                "total_interest": round(payoff.total_interest, 2),
            }
            for payoff in result.debt_payoffs
        ],
    }


__all__ = [
    "MAX_MONTHS",
    "Debt",
    "DebtPayoff",
    "SimulationPolicy",
    "SimulationResult",
    "StrategyComparison",
    "TimelinePoint",
    "compare",
    "format_duration",
    "order_debts",
    "result_summary",
    "simulate",
]
