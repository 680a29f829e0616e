"""Terminal report for a single refinance scenario.

Usage:
    python -m refi_calc.cli --loan 500,000 --term 30 --rate 6.5 --new-rate 5 --cost 1
    python -m refi_calc.cli --loan 350000 --rate 7.25% --months-paid 48 --new-term 15
"""

import argparse
import logging
import sys

from refi_calc.config import settings
from refi_calc.display.formatting import (
    format_currency,
    format_currency_input,
    format_percent,
    parse_currency,
    parse_number,
    parse_percent,
)
from refi_calc.engine.refinance import calculate
from refi_calc.models.inputs import MortgageInputs
from refi_calc.models.results import CalculationResult


def _header(title: str) -> None:
    print(f"\n{'=' * 56}")
    print(f"  {title}")
    print(f"{'=' * 56}")


def print_report(inputs: MortgageInputs, result: CalculationResult) -> None:
    _header("Current Loan")
    print(f"  Original loan:        ${format_currency_input(inputs.original_loan_size)}")
    print(f"  Term / rate:          {inputs.original_loan_term:g} yr @ {format_percent(inputs.rate)}%")
    print(f"  Months paid:          {inputs.months_paid:g}")
    print(f"  Monthly payment:      {format_currency(result.original_monthly_payment)}")
    print(f"  Remaining balance:    {format_currency(result.current_mortgage_balance)}")
    print(f"  Equity:               {format_currency(result.current_equity)}")

    _header("Refinance Offer")
    print(f"  New loan:             {format_currency(result.new_loan_size)}")
    print(f"  Term / rate:          {inputs.new_term:g} yr @ {format_percent(inputs.new_rate)}%")
    print(f"  Closing cost:         {format_currency(result.refi_cost)}")
    print(f"  New monthly payment:  {format_currency(result.new_monthly_payment)}")

    _header("Verdict")
    print(f"  Monthly savings:      {format_currency(result.monthly_savings)}")
    print(f"  Total savings:        {format_currency(result.total_savings)}")
    if result.has_savings and result.breakeven_is_finite:
        print(f"  Breakeven:            {result.months_to_breakeven:.1f} months")
    else:
        print("  Breakeven:            N/A (refinancing does not lower the payment)")
    print()


def build_parser() -> argparse.ArgumentParser:
    defaults = MortgageInputs.default()
    parser = argparse.ArgumentParser(description="Compare a mortgage against a refinance offer")
    parser.add_argument("--loan", default=format_currency_input(defaults.original_loan_size),
                        help="Original loan size, e.g. 500,000")
    parser.add_argument("--term", default=f"{defaults.original_loan_term:g}", help="Original term in years")
    parser.add_argument("--rate", default=format_percent(defaults.rate), help="Original rate in percent")
    parser.add_argument("--months-paid", default=f"{defaults.months_paid:g}", help="Payments already made")
    parser.add_argument("--down", default=format_currency_input(defaults.down_payment), help="Down payment")
    parser.add_argument("--new-rate", default=format_percent(defaults.new_rate), help="New rate in percent")
    parser.add_argument("--new-term", default=f"{defaults.new_term:g}", help="New term in years")
    parser.add_argument("--cost", default=format_percent(defaults.refi_cost_rate),
                        help="Closing cost in percent of the new loan")
    return parser


def inputs_from_args(args: argparse.Namespace) -> MortgageInputs:
    return MortgageInputs(
        original_loan_size=parse_currency(args.loan),
        original_loan_term=parse_number(args.term),
        rate=parse_percent(args.rate),
        months_paid=parse_number(args.months_paid),
        down_payment=parse_currency(args.down),
        new_rate=parse_percent(args.new_rate),
        new_term=parse_number(args.new_term),
        refi_cost_rate=parse_percent(args.cost),
    )


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.log_level)
    parser = build_parser()
    args = parser.parse_args(argv)
    inputs = inputs_from_args(args)

    if inputs.original_loan_term <= 0 or inputs.new_term <= 0:
        print("Error: loan terms must be greater than 0 years", file=sys.stderr)
        return 1

    print_report(inputs, calculate(inputs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
