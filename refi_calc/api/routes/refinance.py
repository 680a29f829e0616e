"""Refinance comparison routes."""

import logging
import math

from fastapi import APIRouter, HTTPException

from refi_calc.api.schemas import (
    RefinanceRequest,
    RefinanceFormRequest,
    ChartRequest,
    RefinanceResponse,
    FormattedResult,
    ChartPointResponse,
    ChartResponse,
)
from refi_calc.display.formatting import (
    format_currency,
    format_currency_short,
    parse_currency,
    parse_number,
    parse_percent,
)
from refi_calc.engine.chart import savings_chart_series
from refi_calc.engine.refinance import calculate
from refi_calc.models.inputs import MortgageInputs
from refi_calc.models.results import CalculationResult, ChartPoint

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/refinance", tags=["refinance"])


def _finite(value: float) -> float | None:
    """JSON has no inf/nan."""
    return value if math.isfinite(value) else None


def _build_inputs(req: RefinanceRequest) -> MortgageInputs:
    return MortgageInputs(
        original_loan_size=req.original_loan_size,
        original_loan_term=req.original_loan_term,
        rate=req.rate,
        months_paid=req.months_paid,
        down_payment=req.down_payment,
        new_rate=req.new_rate,
        new_term=req.new_term,
        refi_cost_rate=req.refi_cost_rate,
    )


def _parse_form(form: RefinanceFormRequest) -> MortgageInputs:
    """Parse raw field text fail-soft; blank fields fall back to the defaults."""
    defaults = MortgageInputs.default()

    def pick(text: str, parser, default: float) -> float:
        return parser(text) if text.strip() else default

    return MortgageInputs(
        original_loan_size=pick(form.original_loan_size, parse_currency, defaults.original_loan_size),
        original_loan_term=pick(form.original_loan_term, parse_number, defaults.original_loan_term),
        rate=pick(form.rate, parse_percent, defaults.rate),
        months_paid=pick(form.months_paid, parse_number, defaults.months_paid),
        down_payment=pick(form.down_payment, parse_currency, defaults.down_payment),
        new_rate=pick(form.new_rate, parse_percent, defaults.new_rate),
        new_term=pick(form.new_term, parse_number, defaults.new_term),
        refi_cost_rate=pick(form.refi_cost_rate, parse_percent, defaults.refi_cost_rate),
    )


def _validate(inputs: MortgageInputs) -> None:
    """Range checks the engine leaves to its callers."""
    if inputs.original_loan_term <= 0:
        raise ValueError("Original loan term must be greater than 0 years")
    if inputs.new_term <= 0:
        raise ValueError("New loan term must be greater than 0 years")
    if inputs.months_paid >= inputs.original_term_months:
        raise ValueError(
            f"Months paid ({inputs.months_paid:g}) must be less than the original term "
            f"({inputs.original_term_months:g} months)"
        )


def _result_to_response(inputs: MortgageInputs, result: CalculationResult) -> RefinanceResponse:
    """Convert engine CalculationResult to API response."""
    return RefinanceResponse(
        original_monthly_payment=_finite(result.original_monthly_payment),
        current_mortgage_balance=_finite(result.current_mortgage_balance),
        current_equity=_finite(result.current_equity),
        new_loan_size=_finite(result.new_loan_size),
        refi_cost=_finite(result.refi_cost),
        new_monthly_payment=_finite(result.new_monthly_payment),
        monthly_savings=_finite(result.monthly_savings),
        total_savings=_finite(result.total_savings),
        months_to_breakeven=_finite(result.months_to_breakeven) if result.has_savings else None,
        has_savings=result.has_savings,
        loan_to_value=inputs.loan_to_value,
        formatted=FormattedResult(
            original_monthly_payment=format_currency(result.original_monthly_payment),
            current_mortgage_balance=format_currency(result.current_mortgage_balance),
            current_equity=format_currency(result.current_equity),
            new_loan_size=format_currency(result.new_loan_size),
            refi_cost=format_currency(result.refi_cost),
            new_monthly_payment=format_currency(result.new_monthly_payment),
            monthly_savings=format_currency(result.monthly_savings),
            total_savings=format_currency(result.total_savings),
        ),
    )


def _points(points: list[ChartPoint]) -> list[ChartPointResponse]:
    return [
        ChartPointResponse(
            month=p.month,
            cumulative_amount=_finite(p.cumulative_amount),
            label=format_currency_short(p.cumulative_amount),
        )
        for p in points
    ]


def _run(inputs: MortgageInputs) -> RefinanceResponse:
    try:
        _validate(inputs)
    except ValueError as e:
        logger.warning("Rejected refinance inputs: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    result = calculate(inputs)
    logger.info(
        "Refinance %.0f at %.3f%% -> %.3f%%: savings %.2f/mo",
        inputs.original_loan_size, inputs.rate * 100, inputs.new_rate * 100, result.monthly_savings,
    )
    return _result_to_response(inputs, result)


@router.get("/defaults", response_model=RefinanceRequest)
async def defaults():
    """Default scenario used to seed forms."""
    return RefinanceRequest()


@router.post("", response_model=RefinanceResponse)
async def refinance(req: RefinanceRequest):
    """Numeric inputs → current vs. refinance comparison."""
    return _run(_build_inputs(req))


@router.post("/form", response_model=RefinanceResponse)
async def refinance_form(form: RefinanceFormRequest):
    """Raw form text → comparison. Malformed numbers parse to 0."""
    return _run(_parse_form(form))


@router.post("/chart", response_model=ChartResponse)
async def refinance_chart(req: ChartRequest):
    """Cumulative cost series for the current and refinance paths."""
    inputs = _build_inputs(req)
    try:
        _validate(inputs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    series = savings_chart_series(inputs, calculate(inputs), step_months=req.step_months)
    return ChartResponse(
        current=_points(series.current),
        refinance=_points(series.refinance),
        is_savings=series.is_savings,
    )
