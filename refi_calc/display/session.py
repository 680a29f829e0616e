"""Interactive calculator state: eight edited fields, one fresh result per edit."""

import logging
from dataclasses import replace
from typing import Callable

from refi_calc.display.fields import (
    FieldValue,
    currency_field,
    edit_currency,
    edit_percent,
    percent_field,
)
from refi_calc.display.formatting import parse_number
from refi_calc.engine.refinance import calculate
from refi_calc.models.inputs import MortgageInputs
from refi_calc.models.results import CalculationResult

logger = logging.getLogger(__name__)

CURRENCY_FIELDS = ("original_loan_size", "down_payment")
PERCENT_FIELDS = ("rate", "new_rate", "refi_cost_rate")
NUMBER_FIELDS = ("original_loan_term", "months_paid", "new_term")

Observer = Callable[[CalculationResult], None]


class RefinanceSession:
    """Owns the input fields and recomputes on every change.

    Observers are called synchronously with each new CalculationResult.
    """

    def __init__(self, inputs: MortgageInputs | None = None):
        self._inputs = inputs or MortgageInputs.default()
        self._fields: dict[str, FieldValue] = {}
        for name in CURRENCY_FIELDS:
            self._fields[name] = currency_field(getattr(self._inputs, name))
        for name in PERCENT_FIELDS:
            self._fields[name] = percent_field(getattr(self._inputs, name))
        for name in NUMBER_FIELDS:
            value = getattr(self._inputs, name)
            self._fields[name] = FieldValue(numeric=value, display=f"{value:g}")
        self._observers: list[Observer] = []
        self._result = calculate(self._inputs)

    @property
    def inputs(self) -> MortgageInputs:
        return self._inputs

    @property
    def result(self) -> CalculationResult:
        return self._result

    def field(self, name: str) -> FieldValue:
        self._check_name(name)
        return self._fields[name]

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def edit(self, name: str, raw: str, cursor: int | None = None) -> int:
        """Apply a keystroke-level edit. Returns the reconciled cursor position."""
        self._check_name(name)
        if name in CURRENCY_FIELDS:
            edit = edit_currency(raw, cursor)
            value, new_cursor = edit.field, edit.cursor
        elif name in PERCENT_FIELDS:
            edit = edit_percent(raw, cursor)
            value, new_cursor = edit.field, edit.cursor
        else:
            value = FieldValue(numeric=parse_number(raw), display=raw)
            new_cursor = len(raw) if cursor is None else cursor

        self._update(name, value)
        return new_cursor

    def set_value(self, name: str, numeric: float) -> None:
        """Set a field programmatically; the display string is rebuilt from it."""
        self._check_name(name)
        if name in CURRENCY_FIELDS:
            value = currency_field(numeric)
        elif name in PERCENT_FIELDS:
            value = percent_field(numeric)
        else:
            value = FieldValue(numeric=numeric, display=f"{numeric:g}")
        self._update(name, value)

    def _update(self, name: str, value: FieldValue) -> None:
        self._fields[name] = value
        self._inputs = replace(self._inputs, **{name: value.numeric})
        self._result = calculate(self._inputs)
        logger.debug("Recomputed after %s=%r: savings %.2f/mo", name, value.numeric, self._result.monthly_savings)
        for observer in list(self._observers):
            observer(self._result)

    def _check_name(self, name: str) -> None:
        if name not in self._fields:
            raise ValueError(f"Unknown field: {name}")
