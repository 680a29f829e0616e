from dataclasses import replace

import pytest

from refi_calc.engine.chart import savings_chart_series
from refi_calc.engine.refinance import calculate


class TestSavingsChartSeries:
    def test_yearly_points(self, canonical_inputs):
        series = savings_chart_series(canonical_inputs, calculate(canonical_inputs))
        months = [p.month for p in series.current]
        assert months == list(range(0, 361, 12))
        assert [p.month for p in series.refinance] == months

    def test_starting_points(self, canonical_inputs):
        result = calculate(canonical_inputs)
        series = savings_chart_series(canonical_inputs, result)
        assert series.current[0].cumulative_amount == 0
        assert series.refinance[0].cumulative_amount == pytest.approx(result.refi_cost)

    def test_end_points(self, canonical_inputs):
        result = calculate(canonical_inputs)
        series = savings_chart_series(canonical_inputs, result)
        assert series.current[-1].cumulative_amount == pytest.approx(result.original_monthly_payment * 360)
        assert series.refinance[-1].cumulative_amount == pytest.approx(
            result.refi_cost + result.new_monthly_payment * 360
        )
        assert series.is_savings

    def test_cumulative_is_non_decreasing(self, seasoned_inputs):
        series = savings_chart_series(seasoned_inputs, calculate(seasoned_inputs))
        for line in (series.current, series.refinance):
            for i in range(1, len(line)):
                assert line[i].cumulative_amount >= line[i - 1].cumulative_amount

    def test_shorter_new_term_goes_flat(self, seasoned_inputs):
        inputs = replace(seasoned_inputs, new_term=15)
        series = savings_chart_series(inputs, calculate(inputs))
        by_month = {p.month: p.cumulative_amount for p in series.refinance}
        assert series.current[-1].month == 300
        assert by_month[180] == pytest.approx(by_month[300])

    def test_horizon_always_included(self, canonical_inputs):
        series = savings_chart_series(canonical_inputs, calculate(canonical_inputs), step_months=7)
        assert series.current[-2].month == 357
        assert series.current[-1].month == 360

    def test_not_savings_when_rate_rises(self, canonical_inputs):
        inputs = replace(canonical_inputs, new_rate=0.08)
        series = savings_chart_series(inputs, calculate(inputs))
        assert not series.is_savings

    def test_invalid_step(self, canonical_inputs):
        with pytest.raises(ValueError):
            savings_chart_series(canonical_inputs, calculate(canonical_inputs), step_months=0)
