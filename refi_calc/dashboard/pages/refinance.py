"""Refinance page: eight inputs, live results, cumulative-cost chart."""

import dash
from dash import html, dcc, callback, Input, Output

from refi_calc.config import settings
from refi_calc.dashboard.charts import build_savings_figure
from refi_calc.dashboard.forms import FIELD_NAMES, breakeven_text, regroup, session_from_form
from refi_calc.display.formatting import format_currency
from refi_calc.display.session import CURRENCY_FIELDS, PERCENT_FIELDS, RefinanceSession
from refi_calc.engine.chart import savings_chart_series

dash.register_page(__name__, path="/", name="Refinance")

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}
CARD_STYLE = {"flex": "1", "padding": "1rem", "border": "1px solid #ddd", "borderRadius": "6px"}
POSITIVE = "#2ecc71"
NEGATIVE = "#e94560"

LABELS = {
    "original_loan_size": "Original Loan ($)",
    "original_loan_term": "Original Term (years)",
    "rate": "Original Rate (%)",
    "months_paid": "Months Paid",
    "down_payment": "Down Payment ($)",
    "new_rate": "New Rate (%)",
    "new_term": "New Term (years)",
    "refi_cost_rate": "Closing Cost (% of loan)",
}

_initial = RefinanceSession()


def _input_id(name):
    return name.replace("_", "-")


def _field(name):
    return html.Div([
        html.Label(LABELS[name], style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        dcc.Input(
            id=_input_id(name),
            type="text",
            value=_initial.field(name).display,
            debounce=False,
            style=FIELD_STYLE,
        ),
    ], style={"flex": "1", "minWidth": "160px"})


def _stat(label, value, color=None):
    return html.Div([
        html.Div(label, style={"fontSize": "0.8rem", "color": "#666"}),
        html.Div(value, style={"fontSize": "1.2rem", "fontWeight": "bold", "color": color}),
    ], style={"marginBottom": "0.5rem"})


layout = html.Div([
    html.H2("Should I Refinance?"),
    html.Div(
        [_field(name) for name in FIELD_NAMES[:4]],
        style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"},
    ),
    html.Div(
        [_field(name) for name in FIELD_NAMES[4:]],
        style={"display": "flex", "gap": "1rem", "marginBottom": "1.5rem"},
    ),
    html.Div(id="refi-results", style={"display": "flex", "gap": "1rem", "marginBottom": "1.5rem"}),
    dcc.Graph(id="refi-chart"),
])


def _register_regroup(name):
    @callback(
        Output(_input_id(name), "value"),
        Input(_input_id(name), "value"),
        prevent_initial_call=True,
    )
    def _regroup(raw):
        return regroup(name, raw)


for _name in CURRENCY_FIELDS + PERCENT_FIELDS:
    _register_regroup(_name)


@callback(
    Output("refi-results", "children"),
    Output("refi-chart", "figure"),
    *[Input(_input_id(name), "value") for name in FIELD_NAMES],
)
def update_results(*raw_values):
    session = session_from_form(raw_values)
    inputs, result = session.inputs, session.result
    savings_color = POSITIVE if result.has_savings else NEGATIVE

    cards = [
        html.Div([
            html.H4("Current Loan"),
            _stat("Monthly Payment", format_currency(result.original_monthly_payment)),
            _stat("Remaining Balance", format_currency(result.current_mortgage_balance)),
            _stat("Equity", format_currency(result.current_equity)),
        ], style=CARD_STYLE),
        html.Div([
            html.H4("Refinance"),
            _stat("New Monthly Payment", format_currency(result.new_monthly_payment)),
            _stat("Closing Cost", format_currency(result.refi_cost)),
            _stat("New Loan", format_currency(result.new_loan_size)),
        ], style=CARD_STYLE),
        html.Div([
            html.H4("Savings"),
            _stat("Monthly", format_currency(result.monthly_savings), savings_color),
            _stat("Total (remaining term)", format_currency(result.total_savings), savings_color),
            _stat("Breakeven", breakeven_text(result)),
        ], style=CARD_STYLE),
    ]

    if inputs.original_loan_term <= 0 or inputs.new_term <= 0:
        return cards, {}

    series = savings_chart_series(inputs, result, step_months=settings.chart_step_months)
    return cards, build_savings_figure(series)
