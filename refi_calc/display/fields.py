"""Paired numeric/display values for editable currency and percent fields.

The numeric value is what the engine sees. The display string is what the user
is typing, which may not be a valid number yet ("1,50", "6.").
"""

from dataclasses import dataclass

from refi_calc.display.formatting import (
    format_currency_input,
    format_percent,
    parse_currency,
    parse_percent,
)


@dataclass(frozen=True)
class FieldValue:
    numeric: float
    display: str


@dataclass(frozen=True)
class FieldEdit:
    field: FieldValue
    cursor: int


def currency_field(value: float) -> FieldValue:
    return FieldValue(numeric=value, display=format_currency_input(value))


def percent_field(value: float) -> FieldValue:
    return FieldValue(numeric=value, display=format_percent(value))


def _shift_cursor(cursor: int, raw: str, display: str) -> int:
    """Move the caret by however much the display grew or shrank."""
    shifted = cursor + len(display) - len(raw)
    return max(0, min(len(display), shifted))


def edit_currency(raw: str, cursor: int | None = None) -> FieldEdit:
    """Parse, store, then reformat on every keystroke."""
    if cursor is None:
        cursor = len(raw)
    numeric = parse_currency(raw)
    display = format_currency_input(numeric)
    return FieldEdit(
        field=FieldValue(numeric=numeric, display=display),
        cursor=_shift_cursor(cursor, raw, display),
    )


def edit_percent(raw: str, cursor: int | None = None) -> FieldEdit:
    """Store the fraction but keep the typed text, minus any "%".

    No reformatting here, otherwise typing "6." would snap back to "6".
    """
    if cursor is None:
        cursor = len(raw)
    display = raw.replace("%", "")
    removed_before_cursor = raw[:cursor].count("%")
    return FieldEdit(
        field=FieldValue(numeric=parse_percent(display), display=display),
        cursor=max(0, min(len(display), cursor - removed_before_cursor)),
    )
