"""Dashboard form handling on top of RefinanceSession.

Dash callbacks are stateless, so each one replays the raw field text through a
fresh session. Dash owns the caret, so only the display text is reconciled.
"""

from refi_calc.display.fields import edit_currency, edit_percent
from refi_calc.display.session import CURRENCY_FIELDS, PERCENT_FIELDS, RefinanceSession

# Order of the inputs on the page
FIELD_NAMES = (
    "original_loan_size",
    "original_loan_term",
    "rate",
    "months_paid",
    "down_payment",
    "new_rate",
    "new_term",
    "refi_cost_rate",
)


def regroup(name: str, raw: str | None) -> str:
    """Display text for a field after a keystroke: "5000000" -> "5,000,000", "6.5%" -> "6.5"."""
    raw = raw or ""
    if name in CURRENCY_FIELDS:
        return edit_currency(raw).field.display
    if name in PERCENT_FIELDS:
        return edit_percent(raw).field.display
    return raw


def session_from_form(raw_values) -> RefinanceSession:
    """Apply the raw text of every input, in FIELD_NAMES order, to a new session."""
    session = RefinanceSession()
    for name, raw in zip(FIELD_NAMES, raw_values):
        session.edit(name, raw or "")
    return session


def breakeven_text(result) -> str:
    """Breakeven label such as "10.5 months"; "Never" when nothing is saved."""
    if not result.has_savings or not result.breakeven_is_finite:
        return "Never"
    months = result.months_to_breakeven
    unit = "month" if round(months, 1) == 1 else "months"
    return f"{months:.1f} {unit}"
