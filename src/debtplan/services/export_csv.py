"""CSV export helpers for payoff timelines."""

from __future__ import annotations

import csv
from itertools import zip_longest
from pathlib import Path

from .payoff import SimulationResult, StrategyComparison


def _serialize_balance(value: float | None) -> str:
    if value is None:
        return ""
    return f"{value:.2f}"


def export_timeline_csv(*, result: SimulationResult, output_path: Path) -> Path:
    """Write one policy's timeline to CSV at `output_path`.

    Columns are deterministic: date, aggregate_balance.
    Returns the path written.
    """

    headers = ["date", "aggregate_balance"]
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=headers, quoting=csv.QUOTE_MINIMAL)
        writer.writeheader()
        for point in result.timeline:
            writer.writerow(
                {
                    "date": point.date.isoformat(),
                    "aggregate_balance": _serialize_balance(point.aggregate_balance),
                }
            )

    return output_path


def export_comparison_csv(*, comparison: StrategyComparison, output_path: Path) -> Path:
    """Write both policies' timelines side by side.

    Columns: month, snowball_date, snowball_balance, avalanche_date,
    avalanche_balance. Cells are blank once a policy has finished.
    """

    headers = ["month", "snowball_date", "snowball_balance", "avalanche_date", "avalanche_balance"]
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=headers, quoting=csv.QUOTE_MINIMAL)
        writer.writeheader()
        pairs = zip_longest(comparison.snowball.timeline, comparison.avalanche.timeline)
        for month, (snow, aval) in enumerate(pairs):
            writer.writerow(
                {
                    "month": month,
                    "snowball_date": snow.date.isoformat() if snow else "",
                    "snowball_balance": _serialize_balance(snow.aggregate_balance if snow else None),
                    "avalanche_date": aval.date.isoformat() if aval else "",
                    "avalanche_balance": _serialize_balance(aval.aggregate_balance if aval else None),
                }
            )

    return output_path
