"""
Tests for the optimize() entry point and forecast extraction.
"""
import pytest
import numpy as np

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pso_forecast import optimize, extract_forecast, InvalidInputError
from pso_forecast.forecasting import SwarmForecaster, ForecastResult
from pso_forecast.core import OptimizationConfig


class TestExtractForecast:
    """Tests for periodic tiling of the best position."""

    def test_tiles_periodically(self):
        bp = np.array([1.5, 2.5, 3.5])
        forecast = extract_forecast(bp, 10)

        expected = [bp[0], bp[1], bp[2], bp[0], bp[1], bp[2], bp[0], bp[1], bp[2], bp[0]]
        np.testing.assert_array_equal(forecast, expected)

    def test_shorter_than_position(self):
        forecast = extract_forecast(np.array([4.0, 5.0, 6.0, 7.0]), 2)
        np.testing.assert_array_equal(forecast, [4.0, 5.0])

    def test_forecast_is_independent_copy(self):
        bp = np.array([1.0, 2.0])
        forecast = extract_forecast(bp, 4)
        forecast[0] = 99.0
        assert bp[0] == 1.0

    @pytest.mark.parametrize('length', [0, -1])
    def test_non_positive_length(self, length):
        with pytest.raises(InvalidInputError):
            extract_forecast(np.array([1.0]), length)

    def test_empty_position(self):
        with pytest.raises(InvalidInputError):
            extract_forecast(np.array([]), 3)

    def test_non_integer_length(self):
        with pytest.raises(InvalidInputError):
            extract_forecast(np.array([1.0, 2.0]), 2.5)


class TestOptimize:
    """Tests for the end-to-end optimize() call."""

    @pytest.fixture
    def series(self):
        t = np.arange(60)
        return 100 + 5 * np.sin(t / 4.0)

    def test_shapes(self, series):
        best_position, best_fitness, forecast = optimize(
            series, 25, particle_count=6, iterations=10, random_state=0
        )

        assert len(best_position) == len(series)
        assert len(forecast) == 25
        assert best_fitness >= 0

    def test_forecast_periodicity(self, series):
        best_position, _, forecast = optimize(
            series, 150, particle_count=5, iterations=5, random_state=1
        )

        n = len(best_position)
        for i in range(len(forecast)):
            assert forecast[i] == best_position[i % n]

    def test_seeded_runs_are_identical(self, series):
        first = optimize(series, 12, particle_count=8, iterations=20, random_state=2024)
        second = optimize(series, 12, particle_count=8, iterations=20, random_state=2024)

        np.testing.assert_array_equal(first[0], second[0])
        assert first[1] == second[1]
        np.testing.assert_array_equal(first[2], second[2])

    def test_zero_iterations_scenario(self):
        best_position, best_fitness, forecast = optimize(
            [1.0, 2.0, 3.0], 10, particle_count=5, iterations=0, random_state=7
        )

        assert np.isfinite(best_fitness)
        assert best_fitness >= 0
        assert len(best_position) == 3
        np.testing.assert_array_equal(forecast, best_position[np.arange(10) % 3])

    def test_constant_series_converges(self):
        _, best_fitness, forecast = optimize([5.0] * 600, 30, iterations=100, random_state=99)

        assert best_fitness < 0.01
        assert abs(np.mean(forecast) - 5.0) < 0.1

    def test_custom_coefficients_are_used(self, series):
        frozen = optimize(series, 5, particle_count=3, iterations=10,
                          inertia=0.0, cognitive=0.0, social=0.0, random_state=5)
        initial = optimize(series, 5, particle_count=3, iterations=0, random_state=5)

        # With all coefficients zero nothing moves after the first step.
        assert frozen[1] == initial[1]

    def test_list_input_is_not_mutated(self):
        training = [1.0, 2.0, 3.0, 4.0]
        optimize(training, 3, particle_count=4, iterations=5, random_state=0)
        assert training == [1.0, 2.0, 3.0, 4.0]


class TestOptimizeInvalidInput:
    """Tests for InvalidInputError handling."""

    def test_empty_training_sequence(self):
        rng = np.random.default_rng(3)
        before = rng.bit_generator.state

        with pytest.raises(InvalidInputError):
            optimize([], 5, random_state=rng)

        assert rng.bit_generator.state == before

    @pytest.mark.parametrize('forecast_length', [0, -5])
    def test_non_positive_forecast_length(self, forecast_length):
        with pytest.raises(InvalidInputError):
            optimize([1.0, 2.0], forecast_length)

    @pytest.mark.parametrize('particle_count', [0, -1])
    def test_non_positive_particle_count(self, particle_count):
        with pytest.raises(InvalidInputError):
            optimize([1.0, 2.0], 3, particle_count=particle_count)

    def test_negative_iterations(self):
        with pytest.raises(InvalidInputError):
            optimize([1.0, 2.0], 3, iterations=-1)

    @pytest.mark.parametrize('forecast_length', [2.5, np.float64(3.0), True])
    def test_non_integer_forecast_length(self, forecast_length):
        with pytest.raises(InvalidInputError):
            optimize([1.0, 2.0], forecast_length)

    @pytest.mark.parametrize('particle_count', [2.5, 4.0])
    def test_non_integer_particle_count(self, particle_count):
        with pytest.raises(InvalidInputError):
            optimize([1.0, 2.0], 3, particle_count=particle_count)

    def test_non_integer_iterations(self):
        with pytest.raises(InvalidInputError):
            optimize([1.0, 2.0], 3, iterations=1.5)

    def test_scalar_training_sequence(self):
        with pytest.raises(InvalidInputError):
            optimize(5.0, 3)

    def test_two_dimensional_training_sequence(self):
        with pytest.raises(InvalidInputError):
            optimize([[1.0, 2.0], [3.0, 4.0]], 3)

    def test_non_numeric_training_sequence(self):
        with pytest.raises(InvalidInputError):
            optimize(['a', 'b'], 3)

    def test_numpy_integer_arguments_accepted(self):
        _, _, forecast = optimize(
            [1.0, 2.0], np.int64(5), particle_count=np.int64(3),
            iterations=np.int64(2), random_state=0
        )
        assert len(forecast) == 5


class TestSwarmForecaster:
    """Tests for the config-driven fit/predict wrapper."""

    @pytest.fixture
    def config(self):
        return OptimizationConfig(n_particles=5, n_iterations=8, seed=17)

    def test_predict_before_fit(self, config):
        with pytest.raises(ValueError):
            SwarmForecaster(config).predict(3)

    def test_fit_predict(self, config):
        training = np.linspace(10, 20, 30)
        result = SwarmForecaster(config).fit_predict(training, horizon=12)

        assert isinstance(result, ForecastResult)
        assert len(result.forecast) == 12
        assert len(result.best_position) == 30
        assert len(result.history['best_fitness']) == 9

    def test_matches_optimize_with_same_seed(self, config):
        training = np.linspace(10, 20, 30)
        result = SwarmForecaster(config).fit_predict(training, horizon=7)
        best_position, best_fitness, forecast = optimize(
            training, 7, particle_count=5, iterations=8, random_state=17
        )

        np.testing.assert_array_equal(result.best_position, best_position)
        assert result.best_fitness == best_fitness
        np.testing.assert_array_equal(result.forecast, forecast)

    def test_result_to_dict(self, config):
        result = SwarmForecaster(config).fit_predict([1.0, 2.0, 3.0], horizon=4)
        summary = result.to_dict()

        assert summary['n_dimensions'] == 3
        assert summary['forecast_length'] == 4

    def test_invalid_horizon(self, config):
        with pytest.raises(InvalidInputError):
            SwarmForecaster(config).fit_predict([1.0, 2.0], horizon=0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
