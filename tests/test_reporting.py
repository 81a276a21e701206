"""
Tests for forecast metrics, comparison tables and plots.
"""
import pytest
import numpy as np
import matplotlib.pyplot as plt

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pso_forecast.evaluation import ForecastMetrics, compute_all_metrics
from pso_forecast.optimization import PSO
from pso_forecast.reporting import (
    select_forecast_points, plot_actual_vs_forecast, plot_optimization_history,
    format_comparison_table, render_comparison_table
)


class TestMetrics:
    """Tests for forecast metrics."""

    def test_known_values(self):
        actual = np.array([10.0, 20.0, 30.0])
        predicted = np.array([12.0, 18.0, 30.0])

        metrics = compute_all_metrics(actual, predicted)

        assert metrics.mae == pytest.approx(4.0 / 3.0)
        assert metrics.mse == pytest.approx(8.0 / 3.0)
        assert metrics.rmse == pytest.approx(np.sqrt(8.0 / 3.0))
        assert metrics.bias == pytest.approx(0.0)
        assert metrics.n_samples == 3

    def test_empty(self):
        assert compute_all_metrics([], []) == ForecastMetrics()

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            compute_all_metrics([1.0, 2.0], [1.0])

    def test_to_dict_keys(self):
        keys = compute_all_metrics([1.0], [2.0]).to_dict().keys()
        assert set(keys) == {'mae', 'rmse', 'mape', 'mse', 'bias', 'n_samples'}


class TestComparisonTable:
    """Tests for predicted-vs-actual tables."""

    def test_dataframe(self):
        df = format_comparison_table([1.0, 2.0], [1.5, 1.0])

        assert list(df.columns) == ['Predicted', 'Actual', 'Error']
        np.testing.assert_allclose(df['Error'], [0.5, -1.0])

    def test_rendered_text(self):
        text = render_comparison_table([101.23456], [99.5])
        lines = text.splitlines()

        assert lines[0].split() == ['Predicted', 'Actual']
        assert set(lines[1]) == {'-'}
        assert lines[2].split() == ['101.2346', '99.5000']

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            format_comparison_table([1.0], [1.0, 2.0])


class TestSelectForecastPoints:
    """Tests for the chart's forecast point selection."""

    def test_offsets_from_start(self):
        xs, ys = select_forecast_points([1.0, 2.0, 3.0], start=600)

        np.testing.assert_array_equal(xs, [600, 601, 602])
        np.testing.assert_array_equal(ys, [1.0, 2.0, 3.0])

    def test_threshold_keeps_index_gaps(self):
        xs, ys = select_forecast_points([140.0, 120.0, 135.0, 130.0], start=620, min_value=130)

        np.testing.assert_array_equal(xs, [620, 622])
        np.testing.assert_array_equal(ys, [140.0, 135.0])

    def test_max_points(self):
        xs, _ = select_forecast_points(np.arange(30, dtype=float), start=0, max_points=10)
        np.testing.assert_array_equal(xs, np.arange(10))

    def test_unlimited(self):
        xs, _ = select_forecast_points(np.arange(30, dtype=float), start=0, max_points=None)
        assert len(xs) == 30


class TestPlots:
    """Smoke tests for figure generation."""

    def test_actual_vs_forecast_saved(self, tmp_path):
        output = tmp_path / 'chart.png'
        fig = plot_actual_vs_forecast(
            np.linspace(100, 140, 50), np.full(10, 135.0),
            forecast_start=40, output_path=output, dpi=50
        )

        assert output.exists()
        assert len(fig.axes[0].lines) == 2
        plt.close(fig)

    def test_no_forecast_points_drawn(self):
        fig = plot_actual_vs_forecast(np.ones(20), np.ones(5), min_value=10.0)
        assert len(fig.axes[0].lines) == 1
        plt.close(fig)

    def test_optimization_history(self, tmp_path):
        _, _, history = PSO(n_particles=4, n_iterations=5, random_state=0).optimize(
            np.linspace(0, 1, 20)
        )
        output = tmp_path / 'history.png'
        fig = plot_optimization_history(history, output_path=output, dpi=50)

        assert output.exists()
        plt.close(fig)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
