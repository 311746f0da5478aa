"""Input checks run before a payoff simulation.

The simulator assumes well-formed, non-negative input. Callers validate with
these helpers first and surface :class:`InvalidDebtInput` to the user.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .payoff import Debt, SimulationResult


class InvalidDebtInput(ValueError):
    """Raised when debts or payment amounts cannot be simulated."""


def _check_amount(value: object, label: str) -> float:
    try:
        amount = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidDebtInput(f"{label} must be a number.") from exc
    if math.isnan(amount) or math.isinf(amount):
        raise InvalidDebtInput(f"{label} must be a finite number.")
    if amount < 0:
        raise InvalidDebtInput(f"{label} cannot be negative.")
    return amount


def validate_debts(debts: Iterable[Debt]) -> list[Debt]:
    """Return *debts* as a list or raise :class:`InvalidDebtInput`."""

    checked: list[Debt] = []
    seen: set = set()
    for debt in debts:
        if not str(debt.name or "").strip():
            raise InvalidDebtInput("Debt name is required.")
        label = f"'{debt.name}'"
        _check_amount(debt.balance, f"Balance for {label}")
        _check_amount(debt.annual_rate_percent, f"Interest rate for {label}")
        _check_amount(debt.minimum_payment, f"Minimum payment for {label}")
        if debt.id in seen:
            raise InvalidDebtInput(f"Duplicate debt id: {debt.id}.")
        seen.add(debt.id)
        checked.append(debt)
    return checked


def validate_extra_payment(amount: object) -> float:
    """Return the extra monthly payment as a float or raise."""

    return _check_amount(amount, "Extra payment")


def minimum_payment_total(debts: Iterable[Debt]) -> float:
    return sum((debt.minimum_payment for debt in debts), 0.0)


def validate_monthly_payment(debts: Sequence[Debt], monthly_payment: object) -> float:
    """Check a total monthly budget against the debts' minimum payments.

    Returns the extra payment implied by *monthly_payment*.
    """

    amount = _check_amount(monthly_payment, "Monthly payment")
    required = minimum_payment_total(debts)
    if amount < required:
        raise InvalidDebtInput(
            f"Payment must be at least {required:,.2f} to cover minimum payments."
        )
    return amount - required


def non_convergence_message(result: SimulationResult) -> str | None:
    """Return the user-facing warning for a plan that never pays off."""

    if result.converged:
        return None
    if result.months < 12:
        return f"This payment plan will not pay off your debt within {result.months} months."
    return f"This payment plan will not pay off your debt within {result.months // 12} years."
