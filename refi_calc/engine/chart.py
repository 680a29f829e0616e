"""Cumulative payment trajectories for the savings chart."""

import math

from refi_calc.models.inputs import MortgageInputs
from refi_calc.models.results import CalculationResult, ChartPoint, ChartSeries


def _sample_months(horizon: int, step_months: int) -> list[int]:
    """0, step, 2*step, ... with the horizon itself always last."""
    months = list(range(0, horizon, step_months))
    months.append(horizon)
    return months


def savings_chart_series(
    inputs: MortgageInputs,
    result: CalculationResult,
    step_months: int = 12,
) -> ChartSeries:
    """Cumulative cash paid on each path, month by month.

    Current path: the existing payment until the original loan is paid off.
    Refinance path: closing costs up front, then the new payment for the new term.
    """
    if step_months < 1:
        raise ValueError(f"step_months must be at least 1, got {step_months}")

    remaining = max(0, math.ceil(inputs.remaining_months))
    new_term = max(0, math.ceil(inputs.new_term_months))
    months = _sample_months(max(remaining, new_term), step_months)

    current = [
        ChartPoint(month=m, cumulative_amount=result.original_monthly_payment * min(m, remaining))
        for m in months
    ]
    refinance = [
        ChartPoint(
            month=m,
            cumulative_amount=result.refi_cost + result.new_monthly_payment * min(m, new_term),
        )
        for m in months
    ]

    return ChartSeries(
        current=current,
        refinance=refinance,
        is_savings=current[-1].cumulative_amount > refinance[-1].cumulative_amount,
    )
