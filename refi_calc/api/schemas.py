"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field

from refi_calc.config import settings


# ---- Request schemas ----

class RefinanceRequest(BaseModel):
    original_loan_size: float = Field(settings.default_original_loan_size, ge=0)
    original_loan_term: float = Field(settings.default_original_loan_term, gt=0, description="Years")
    rate: float = Field(settings.default_rate, description="Annual rate as a fraction, e.g. 0.065")
    months_paid: float = Field(settings.default_months_paid, ge=0)
    down_payment: float = Field(settings.default_down_payment, ge=0)
    new_rate: float = Field(settings.default_new_rate, description="Annual rate as a fraction")
    new_term: float = Field(settings.default_new_term, gt=0, description="Years")
    refi_cost_rate: float = Field(settings.default_refi_cost_rate, ge=0)


class RefinanceFormRequest(BaseModel):
    """Raw field text as typed into a form ("500,000", "6.5%")."""
    original_loan_size: str = ""
    original_loan_term: str = ""
    rate: str = ""
    months_paid: str = ""
    down_payment: str = ""
    new_rate: str = ""
    new_term: str = ""
    refi_cost_rate: str = ""


class ChartRequest(RefinanceRequest):
    step_months: int = Field(settings.chart_step_months, ge=1, le=120)


# ---- Response schemas ----

class FormattedResult(BaseModel):
    original_monthly_payment: str
    current_mortgage_balance: str
    current_equity: str
    new_loan_size: str
    refi_cost: str
    new_monthly_payment: str
    monthly_savings: str
    total_savings: str


class RefinanceResponse(BaseModel):
    original_monthly_payment: float | None
    current_mortgage_balance: float | None
    current_equity: float | None
    new_loan_size: float | None
    refi_cost: float | None
    new_monthly_payment: float | None
    monthly_savings: float | None
    total_savings: float | None
    months_to_breakeven: float | None = Field(
        None, description="Null when there are no savings to recover the closing cost"
    )
    has_savings: bool
    loan_to_value: float
    formatted: FormattedResult


class ChartPointResponse(BaseModel):
    month: int
    cumulative_amount: float | None
    label: str


class ChartResponse(BaseModel):
    current: list[ChartPointResponse]
    refinance: list[ChartPointResponse]
    is_savings: bool
