from refi_calc.dashboard.charts import build_savings_figure
from refi_calc.engine.chart import savings_chart_series
from refi_calc.engine.refinance import calculate
from refi_calc.models.results import ChartSeries


class TestSavingsFigure:
    def test_two_traces(self, canonical_inputs):
        series = savings_chart_series(canonical_inputs, calculate(canonical_inputs))
        fig = build_savings_figure(series)
        assert len(fig.data) == 2
        assert fig.data[0].name == "Keep current loan"
        assert len(fig.data[1].x) == len(series.refinance)

    def test_short_axis_labels(self, canonical_inputs):
        series = savings_chart_series(canonical_inputs, calculate(canonical_inputs))
        fig = build_savings_figure(series)
        labels = list(fig.layout.yaxis.ticktext)
        assert labels[0] == "$0"
        assert labels[-1].endswith("m")

    def test_title_reflects_outcome(self, canonical_inputs):
        series = savings_chart_series(canonical_inputs, calculate(canonical_inputs))
        assert build_savings_figure(series).layout.title.text == "Refinancing saves money"

    def test_empty_series(self):
        fig = build_savings_figure(ChartSeries())
        assert list(fig.layout.yaxis.ticktext) == ["$0"]
