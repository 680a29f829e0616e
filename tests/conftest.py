"""Canonical test fixtures used across all tests.

Fixture: $500K 30yr loan at 6.5%, nothing paid yet, $100K down,
refinanced to 30yr at 5% with 1% closing costs.
"""

import pytest

from refi_calc.models.inputs import MortgageInputs


@pytest.fixture
def canonical_inputs() -> MortgageInputs:
    return MortgageInputs(
        original_loan_size=500000,
        original_loan_term=30,
        rate=0.065,
        months_paid=0,
        down_payment=100000,
        new_rate=0.05,
        new_term=30,
        refi_cost_rate=0.01,
    )


@pytest.fixture
def seasoned_inputs() -> MortgageInputs:
    """Five years into a 7% loan, offered 6% over the 25 years left."""
    return MortgageInputs(
        original_loan_size=400000,
        original_loan_term=30,
        rate=0.07,
        months_paid=60,
        down_payment=80000,
        new_rate=0.06,
        new_term=25,
        refi_cost_rate=0.02,
    )


@pytest.fixture
def zero_rate_inputs() -> MortgageInputs:
    """$360K at 0% on both sides: payments of exactly $1,000."""
    return MortgageInputs(
        original_loan_size=360000,
        original_loan_term=30,
        rate=0.0,
        months_paid=0,
        down_payment=0,
        new_rate=0.0,
        new_term=30,
        refi_cost_rate=0.01,
    )
