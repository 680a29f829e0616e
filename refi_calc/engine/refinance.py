"""Current loan vs. refinance offer comparison.

Pure function of MortgageInputs. No rounding, no clamping: degenerate inputs
come back as negative, inf or nan figures for the caller to present.
"""

from refi_calc.engine.debt import ieee_divide, monthly_payment, present_value
from refi_calc.models.inputs import MortgageInputs
from refi_calc.models.results import CalculationResult


def calculate(inputs: MortgageInputs) -> CalculationResult:
    """Run the full comparison. Steps are order dependent."""
    original_rate = inputs.rate / 12
    original_monthly_payment = monthly_payment(
        original_rate, inputs.original_term_months, -inputs.original_loan_size
    )
    current_mortgage_balance = present_value(
        original_rate, inputs.remaining_months, -original_monthly_payment
    )
    current_equity = inputs.original_loan_size - current_mortgage_balance + inputs.down_payment

    # Refinance pays off the remaining balance in full
    new_loan_size = current_mortgage_balance
    refi_cost = inputs.refi_cost_rate * new_loan_size
    new_monthly_payment = monthly_payment(
        inputs.new_rate / 12, inputs.new_term_months, -new_loan_size
    )

    monthly_savings = original_monthly_payment - new_monthly_payment
    # Horizon is what is left of the original loan, not the new term
    total_savings = monthly_savings * inputs.remaining_months
    months_to_breakeven = ieee_divide(refi_cost, monthly_savings)

    return CalculationResult(
        original_monthly_payment=original_monthly_payment,
        current_mortgage_balance=current_mortgage_balance,
        current_equity=current_equity,
        new_loan_size=new_loan_size,
        refi_cost=refi_cost,
        new_monthly_payment=new_monthly_payment,
        monthly_savings=monthly_savings,
        total_savings=total_savings,
        months_to_breakeven=months_to_breakeven,
    )
