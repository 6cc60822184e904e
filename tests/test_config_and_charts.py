import numpy as np

from charts import create_sensitivity_chart, create_tax_comparison_chart
from config import HOLDING_YEARS, INDEXATION_RATE, PRICE_MULTIPLIER, Parameters
from tax_calculator import compute_series, find_crossover, series_to_frame


# --- config ---

def test_default_parameters_match_slider_defaults():
    params = Parameters()
    assert params.price_multiplier == PRICE_MULTIPLIER.default == 3.0
    assert params.indexation_rate == INDEXATION_RATE.default == 5.0
    assert params.holding_years == HOLDING_YEARS.default == 70
    assert params.errors() == []


def test_bounds_are_inclusive():
    assert Parameters(0.5, 0.0, 1).errors() == []
    assert Parameters(50.0, 20.0, 100).errors() == []


def test_out_of_range_inputs_are_reported_individually():
    assert len(Parameters(0.4, 5.0, 10).errors()) == 1
    assert len(Parameters(3.0, 20.5, 10).errors()) == 1
    assert len(Parameters(3.0, 5.0, 0).errors()) == 1
    assert len(Parameters(60.0, -1.0, 101).errors()) == 3


def test_fractional_or_nan_holding_period_is_rejected():
    assert len(Parameters(3.0, 5.0, 10.5).errors()) == 1
    assert len(Parameters(3.0, 5.0, float("nan")).errors()) == 1


# --- charts ---

def test_tax_chart_has_three_lines_and_crossover_marker():
    series = compute_series(3.0, 5.0, 70)
    crossover = find_crossover(series)
    fig = create_tax_comparison_chart(series_to_frame(series), crossover)

    assert [trace.name for trace in fig.data] == [
        "Old Tax (20% with indexation)", "New Tax (12.5% flat)", "Indexed Cost",
    ]
    assert len(fig.data[0].x) == 71
    assert len(fig.layout.shapes) == 1
    assert fig.layout.shapes[0].x0 == crossover.year


def test_tax_chart_without_crossover_has_no_marker():
    series = compute_series(50.0, 0.0, 10)
    fig = create_tax_comparison_chart(series_to_frame(series), find_crossover(series))
    assert len(fig.layout.shapes) == 0


def test_sensitivity_chart_marks_current_rate():
    rates = np.array([0.0, 5.0, 10.0])
    years = np.array([np.nan, 12.0, 7.0])
    fig = create_sensitivity_chart(rates, years, current_rate=5.0)

    assert len(fig.data) == 1
    assert fig.layout.shapes[0].x0 == 5.0
