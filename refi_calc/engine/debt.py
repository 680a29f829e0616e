"""Annuity payment and present-value math.

Pure functions: float in, float out. No I/O.

Sign convention follows the spreadsheet PMT/PV family: a loan is a negative
present value, so a negative present value yields a positive payment and a
negative payment yields a positive balance.
"""

import math


def ieee_divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: a zero denominator gives +/-inf or nan instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def compound(monthly_rate: float, num_periods: float) -> float:
    """(1 + r) ** n as a float: overflow and 0 ** -n give inf, a complex power gives nan."""
    try:
        factor = (1 + monthly_rate) ** num_periods
    except (OverflowError, ZeroDivisionError):
        return math.inf
    if isinstance(factor, complex):
        return math.nan
    return factor


def monthly_payment(monthly_rate: float, num_periods: float, present_value: float) -> float:
    """Level payment that amortizes ``present_value`` over ``num_periods``.

    Zero rate degenerates to straight-line repayment. ``num_periods == 0`` is
    not guarded and returns inf/nan. When (1+r)^n overflows the payment is its
    limit, interest only: -r * PV.
    """
    if monthly_rate == 0:
        return ieee_divide(-present_value, num_periods)

    # PMT = -r * PV * (1+r)^n / ((1+r)^n - 1)
    factor = compound(monthly_rate, num_periods)
    if factor == math.inf:
        return -monthly_rate * present_value
    return ieee_divide(-monthly_rate * present_value * factor, factor - 1)


def present_value(monthly_rate: float, num_periods: float, payment: float) -> float:
    """Balance still owed when ``num_periods`` payments of ``payment`` remain."""
    if monthly_rate == 0:
        return -(payment * num_periods)

    discount = compound(monthly_rate, -num_periods)
    return -(payment * (1 - discount)) / monthly_rate


def remaining_balance(
    principal: float,
    monthly_rate: float,
    payment: float,
    months_paid: int,
) -> float:
    """Balance after ``months_paid`` payments, month by month.

    Unlike present_value this takes the positive principal and positive payment
    a borrower would quote. Agrees with the closed form to floating-point
    tolerance.
    """
    balance = principal
    for _ in range(months_paid):
        balance = balance * (1 + monthly_rate) - payment
    return balance
