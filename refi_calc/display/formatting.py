"""Currency and percentage display strings.

Formatting rounds the exact binary value half-up at display time only, the way
a browser's toLocaleString/toFixed does. Parsing is fail-soft: text that is
not a number parses to 0 so partial keystrokes never raise.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext

ZERO_PLACES = Decimal("1")
ONE_PLACE = Decimal("0.1")
TWO_PLACES = Decimal("0.01")

# Leading decimal number, the way a browser's parseFloat reads it
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_SHORT_UNITS = (
    (Decimal("1000000000"), "b", ONE_PLACE),
    (Decimal("1000000"), "m", ONE_PLACE),
    (Decimal("1000"), "k", ZERO_PLACES),
)


def _round(amount: Decimal, places: Decimal) -> Decimal:
    """quantize with enough precision for any finite float (1e308 has 309 digits)."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() - places.adjusted() + 2)
        return amount.quantize(places, ROUND_HALF_UP)


# ---- Formatting ----

def format_currency(value: float) -> str:
    """Read-only result display: "$1,234.50". Non-finite values show "N/A"."""
    if not math.isfinite(value):
        return "N/A"
    amount = _round(Decimal(value), TWO_PLACES)
    return f"${amount:,.2f}"


def format_currency_input(value: float) -> str:
    """Editable field display: "500,000" (grouped, no decimals)."""
    if not math.isfinite(value):
        return "0"
    amount = _round(Decimal(value), ZERO_PLACES)
    if amount == 0:
        amount = abs(amount)  # no "-0"
    return f"{amount:,.0f}"


def format_currency_short(value: float) -> str:
    """Chart-axis label: "$1.5b", "$2.3m", "-$2k", "$999"."""
    if not math.isfinite(value):
        return "N/A"
    sign = "-" if value < 0 else ""
    magnitude = abs(Decimal(value))

    for threshold, suffix, places in _SHORT_UNITS:
        if magnitude >= threshold:
            return f"{sign}${_round(magnitude.scaleb(-threshold.adjusted()), places)}{suffix}"
    return f"{sign}${_round(magnitude, ZERO_PLACES)}"


def format_percent(value: float) -> str:
    """Decimal fraction as a human percentage without the sign: 0.065 -> "6.5"."""
    if not math.isfinite(value):
        return "0"
    # Shortest repr, so 0.065 reads "6.5" rather than its binary expansion
    pct = (Decimal(repr(value)) * 100).normalize()
    if pct == 0:
        return "0"
    return f"{pct:f}"


# ---- Parsing ----

def parse_number(text: str) -> float:
    """Leading number in ``text`` ("6." -> 6.0, "12abc" -> 12.0), else 0.0."""
    match = _NUMBER_PREFIX.match(text or "")
    if match is None:
        return 0.0
    return float(match.group(1))


def parse_currency(text: str) -> float:
    """Strip grouping commas and parse: "1,500,000" -> 1500000.0."""
    return parse_number((text or "").replace(",", ""))


def parse_percent(text: str) -> float:
    """Strip "%" and convert to a fraction: "6.5%" -> 0.065."""
    return parse_number((text or "").replace("%", "")) / 100
