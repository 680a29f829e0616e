from dataclasses import dataclass

from refi_calc.config import settings


@dataclass(frozen=True)
class MortgageInputs:
    # Existing loan
    original_loan_size: float
    original_loan_term: float  # Years
    rate: float  # Annual, e.g. 0.065 for 6.5%
    months_paid: float = 0
    down_payment: float = 0  # Equity display only, not amortized

    # Refinance offer
    new_rate: float = 0.0  # Annual
    new_term: float = 30  # Years
    refi_cost_rate: float = 0.0  # Closing cost as a fraction of the new principal

    @classmethod
    def default(cls) -> "MortgageInputs":
        """Scenario configured in settings (500K at 6.5% refinanced to 5%)."""
        return cls(
            original_loan_size=settings.default_original_loan_size,
            original_loan_term=settings.default_original_loan_term,
            rate=settings.default_rate,
            months_paid=settings.default_months_paid,
            down_payment=settings.default_down_payment,
            new_rate=settings.default_new_rate,
            new_term=settings.default_new_term,
            refi_cost_rate=settings.default_refi_cost_rate,
        )

    @property
    def original_term_months(self) -> float:
        return self.original_loan_term * 12

    @property
    def remaining_months(self) -> float:
        return self.original_term_months - self.months_paid

    @property
    def new_term_months(self) -> float:
        return self.new_term * 12

    @property
    def loan_to_value(self) -> float:
        """Original LTV = loan / (loan + down payment). 0 when both are 0."""
        purchase_price = self.original_loan_size + self.down_payment
        if purchase_price == 0:
            return 0.0
        return self.original_loan_size / purchase_price
