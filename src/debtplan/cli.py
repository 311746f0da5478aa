"""Command-line interface for debtplan."""

from __future__ import annotations

from pathlib import Path

import click

from .config import BaseConfig
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelDebtRepository, SQLModelStrategyRepository
from .logging_config import setup_logging
from .models.debt import DebtRecord
from .services.export_csv import export_comparison_csv
from .services.payoff import SimulationPolicy, SimulationResult, result_summary
from .services.strategies import load_active_debts, plan_for_user, save_strategy
from .services.validation import (
    InvalidDebtInput,
    non_convergence_message,
    validate_debts,
    validate_monthly_payment,
)


class AppContext:
    """Config and repositories shared by every command."""

    def __init__(self, config: BaseConfig) -> None:
        self.config = config
        _, session_factory = bootstrap_database(config)
        self.debts = SQLModelDebtRepository(session_factory)
        self.strategies = SQLModelStrategyRepository(session_factory)


pass_app = click.make_pass_decorator(AppContext)

user_option = click.option(
    "--user", "user_id", default=None, help="User the debts belong to (defaults to DEBTPLAN_DEFAULT_USER)."
)


def _user(app: AppContext, user_id: str | None) -> str:
    return user_id or app.config.DEFAULT_USER


def _echo_result(result: SimulationResult) -> None:
    summary = result_summary(result)
    click.echo(f"{summary['policy_name']}:")
    click.echo(f"  Monthly payment:  {summary['monthly_payment']:,.2f}")
    click.echo(f"  Total interest:   {summary['total_interest_paid']:,.2f}")
    click.echo(f"  Payoff date:      {summary['payoff_date']}")
    click.echo(f"  Time to debt free: {summary['duration']}")
    for debt in summary["debts"]:
        months = debt["months_to_payoff"]
        status = "not paid off" if months is None else f"paid off after {months} months"
        click.echo(f"    {debt['name']}: {status}, interest {debt['total_interest']:,.2f}")
    message = non_convergence_message(result)
    if message:
        click.echo(f"  {message}")


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Plan debt payoff with the snowball and avalanche methods."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = AppContext(config)


@main.command("add-debt")
@click.argument("name")
@click.option("--balance", type=float, required=True)
@click.option("--rate", type=float, default=0.0, show_default=True, help="Annual rate in percent.")
@click.option("--minimum", type=float, default=0.0, show_default=True, help="Minimum monthly payment.")
@user_option
@pass_app
def add_debt(app: AppContext, name: str, balance: float, rate: float, minimum: float, user_id: str | None) -> None:
    """Record a debt."""

    record = DebtRecord(
        user_id=_user(app, user_id),
        name=name,
        current_balance=balance,
        interest_rate=rate,
        minimum_payment=minimum,
    )
    try:
        validate_debts([record.to_debt()])
    except InvalidDebtInput as exc:
        raise click.BadParameter(str(exc)) from exc
    record = app.debts.create(record, user_id=_user(app, user_id))
    click.echo(f"Added debt #{record.id}: {record.name}")


@main.command("list-debts")
@user_option
@pass_app
def list_debts(app: AppContext, user_id: str | None) -> None:
    """Show active debts, smallest balance first."""

    records = app.debts.list_active(user_id=_user(app, user_id))
    if not records:
        click.echo("No active debts.")
        return
    for record in records:
        click.echo(
            f"#{record.id} {record.name}: balance {record.current_balance:,.2f}, "
            f"rate {record.interest_rate:g}%, minimum {record.minimum_payment:,.2f}"
        )
    click.echo(f"Total debt: {app.debts.get_total_debt(user_id=_user(app, user_id)):,.2f}")


@main.command("compare")
@click.option("--extra", type=float, default=None, help="Extra monthly payment on top of the minimums.")
@click.option(
    "--payment", type=float, default=None, help="Total monthly budget; must cover every minimum payment."
)
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False, path_type=Path), default=None)
@user_option
@pass_app
def compare_cmd(
    app: AppContext,
    extra: float | None,
    payment: float | None,
    csv_path: Path | None,
    user_id: str | None,
) -> None:
    """Compare snowball and avalanche payoff for the active debts."""

    if extra is not None and payment is not None:
        raise click.UsageError("Use either --extra or --payment, not both.")
    user = _user(app, user_id)
    if payment is not None:
        try:
            extra = validate_monthly_payment(load_active_debts(app.debts, user_id=user), payment)
        except InvalidDebtInput as exc:
            raise click.BadParameter(str(exc), param_hint="'--payment'") from exc

    try:
        comparison = plan_for_user(
            app.debts,
            user_id=user,
            extra_payment=extra or 0.0,
            max_months=app.config.MAX_MONTHS,
        )
    except InvalidDebtInput as exc:
        raise click.ClickException(str(exc)) from exc

    for result in comparison.results():
        _echo_result(result)
    click.echo(f"Avalanche saves {comparison.interest_savings:,.2f} in interest over snowball.")

    if csv_path is not None:
        export_comparison_csv(comparison=comparison, output_path=csv_path)
        click.echo(f"Timeline written: {csv_path}")


@main.command("save-strategy")
@click.argument("name")
@click.option(
    "--method",
    type=click.Choice([policy.value for policy in SimulationPolicy]),
    default=SimulationPolicy.SNOWBALL.value,
    show_default=True,
)
@click.option("--extra", type=float, default=0.0, show_default=True)
@user_option
@pass_app
def save_strategy_cmd(app: AppContext, name: str, method: str, extra: float, user_id: str | None) -> None:
    """Save a named payoff strategy for the active debts."""

    user = _user(app, user_id)
    try:
        strategy = save_strategy(
            app.strategies,
            user_id=user,
            name=name,
            policy=method,
            extra_payment=extra,
            debts=load_active_debts(app.debts, user_id=user),
        )
    except InvalidDebtInput as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Saved strategy #{strategy.id}: {strategy.name} ({strategy.method})")


@main.command("strategies")
@user_option
@pass_app
def list_strategies(app: AppContext, user_id: str | None) -> None:
    """List saved strategies."""

    saved = app.strategies.list_all(user_id=_user(app, user_id))
    if not saved:
        click.echo("No saved strategies.")
        return
    for strategy in saved:
        order = ", ".join(str(debt_id) for debt_id in strategy.debt_order)
        click.echo(
            f"#{strategy.id} {strategy.name}: {strategy.method}, "
            f"extra {strategy.extra_payment:,.2f}, order [{order}]"
        )
