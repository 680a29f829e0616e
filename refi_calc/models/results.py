import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CalculationResult:
    # Current loan
    original_monthly_payment: float
    current_mortgage_balance: float
    current_equity: float

    # Refinance
    new_loan_size: float  # Always equal to current_mortgage_balance (no cash-out)
    refi_cost: float
    new_monthly_payment: float

    # Comparison
    monthly_savings: float
    total_savings: float  # Over the remaining life of the original loan
    months_to_breakeven: float  # Raw quotient; may be negative, inf or nan

    @property
    def has_savings(self) -> bool:
        return self.monthly_savings > 0

    @property
    def breakeven_is_finite(self) -> bool:
        return math.isfinite(self.months_to_breakeven)


@dataclass(frozen=True)
class ChartPoint:
    month: int
    cumulative_amount: float


@dataclass(frozen=True)
class ChartSeries:
    """Cumulative cost of keeping the current loan vs. refinancing."""
    current: list[ChartPoint] = field(default_factory=list)
    refinance: list[ChartPoint] = field(default_factory=list)
    is_savings: bool = False
