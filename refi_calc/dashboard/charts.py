"""Plotly figure for the cumulative-cost chart."""

import plotly.graph_objects as go

from refi_calc.display.formatting import format_currency_short
from refi_calc.models.results import ChartSeries

CURRENT_COLOR = "#e94560"
REFINANCE_COLOR = "#2ecc71"
AXIS_TICKS = 6


def _axis_ticks(max_value: float, count: int = AXIS_TICKS) -> list[float]:
    if max_value <= 0:
        return [0.0]
    step = max_value / (count - 1)
    return [step * i for i in range(count)]


def build_savings_figure(series: ChartSeries) -> go.Figure:
    """Two cumulative-payment lines; y-axis labels in $k/$m shorthand."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[p.month for p in series.current],
        y=[p.cumulative_amount for p in series.current],
        mode="lines",
        name="Keep current loan",
        line={"color": CURRENT_COLOR, "width": 2},
    ))
    fig.add_trace(go.Scatter(
        x=[p.month for p in series.refinance],
        y=[p.cumulative_amount for p in series.refinance],
        mode="lines",
        name="Refinance",
        line={"color": REFINANCE_COLOR, "width": 2},
    ))

    top = max(
        [p.cumulative_amount for p in series.current + series.refinance],
        default=0.0,
    )
    ticks = _axis_ticks(top)
    title = "Refinancing saves money" if series.is_savings else "Refinancing costs more"
    fig.update_layout(
        title=title,
        xaxis_title="Month",
        yaxis={
            "title": "Cumulative paid",
            "tickvals": ticks,
            "ticktext": [format_currency_short(t) for t in ticks],
        },
        height=380,
        margin={"t": 50, "b": 40},
        legend={"orientation": "h", "y": -0.2},
    )
    return fig
