"""
Forecast extraction from a fitted swarm.
"""
import numpy as np
from typing import Any, Callable, Dict, Tuple
from dataclasses import dataclass, field

from ..core.config import OptimizationConfig
from ..core.logging_utils import get_logger
from ..core.utils import InvalidInputError, RandomState, is_count
from ..optimization.pso import PSO


def extract_forecast(best_position: np.ndarray, length: int) -> np.ndarray:
    """
    Tile the fitted vector periodically: forecast[i] = best_position[i % n].

    This repeats the fitted window rather than extrapolating from it.
    """
    best_position = np.asarray(best_position, dtype=float)
    if best_position.ndim != 1 or len(best_position) == 0:
        raise InvalidInputError("Cannot extract a forecast from an empty or non 1-D position")
    if not is_count(length) or length <= 0:
        raise InvalidInputError(f"Forecast length must be a positive integer, got {length!r}")

    return best_position[np.arange(length) % len(best_position)]


def _as_training_array(training_sequence) -> np.ndarray:
    try:
        training = np.asarray(training_sequence, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Training sequence is not numeric: {e}") from e
    if training.ndim != 1:
        raise InvalidInputError(
            f"Training sequence must be 1-D, got {training.ndim} dimension(s)"
        )
    return training


def _validate(training_sequence: np.ndarray, forecast_length, particle_count, iterations):
    if len(training_sequence) == 0:
        raise InvalidInputError("Training sequence is empty")
    if not is_count(forecast_length) or forecast_length <= 0:
        raise InvalidInputError(
            f"forecast_length must be a positive integer, got {forecast_length!r}"
        )
    if not is_count(particle_count) or particle_count <= 0:
        raise InvalidInputError(
            f"particle_count must be a positive integer, got {particle_count!r}"
        )
    if not is_count(iterations) or iterations < 0:
        raise InvalidInputError(
            f"iterations must be a non-negative integer, got {iterations!r}"
        )


def optimize(
    training_sequence,
    forecast_length: int,
    particle_count: int = 30,
    iterations: int = 100,
    inertia: float = 0.7,
    cognitive: float = 1.5,
    social: float = 1.5,
    random_state: RandomState = None,
    callback: Callable = None
) -> Tuple[np.ndarray, float, np.ndarray]:
    """
    Fit a swarm to the training sequence and forecast by tiling the best fit.

    Args:
        training_sequence: Historical observations
        forecast_length: Number of values to forecast
        particle_count: Swarm size
        iterations: Update/evaluate rounds after the initial evaluation
        inertia: Inertia weight (w)
        cognitive: Cognitive coefficient (c1)
        social: Social coefficient (c2)
        random_state: None (unseeded), an int seed or a numpy Generator
        callback: Optional callback function(iteration, best_fitness)

    Returns:
        Tuple of (best_position, best_fitness, forecast)

    Raises:
        InvalidInputError: On a non-numeric, non 1-D or empty sequence, a
            forecast length or particle count that is not a positive integer,
            or an iteration count that is not a non-negative integer.
    """
    training = _as_training_array(training_sequence)
    _validate(training, forecast_length, particle_count, iterations)

    pso = PSO(
        n_particles=particle_count,
        n_iterations=iterations,
        w=inertia,
        c1=cognitive,
        c2=social,
        random_state=random_state
    )
    best_position, best_fitness, _ = pso.optimize(training, callback=callback)

    return best_position, best_fitness, extract_forecast(best_position, forecast_length)


@dataclass
class ForecastResult:
    """Outcome of a fitted forecast run."""
    best_position: np.ndarray
    best_fitness: float
    forecast: np.ndarray
    history: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'best_fitness': self.best_fitness,
            'forecast': self.forecast,
            'n_dimensions': len(self.best_position),
            'forecast_length': len(self.forecast)
        }


class SwarmForecaster:
    """Fit/predict wrapper driven by an OptimizationConfig."""

    def __init__(self, config: OptimizationConfig = None, random_state: RandomState = None):
        self.config = config or OptimizationConfig()
        self.random_state = random_state if random_state is not None else self.config.seed
        self.best_position = None
        self.best_fitness = float('inf')
        self.history = {}
        self.is_fitted = False

    def fit(self, training_sequence) -> 'SwarmForecaster':
        logger = get_logger()
        training = _as_training_array(training_sequence)
        if len(training) == 0:
            raise InvalidInputError("Training sequence is empty")

        pso = PSO(
            n_particles=self.config.n_particles,
            n_iterations=self.config.n_iterations,
            w=self.config.w,
            c1=self.config.c1,
            c2=self.config.c2,
            random_state=self.random_state
        )
        self.best_position, self.best_fitness, self.history = pso.optimize(training)
        self.is_fitted = True

        logger.info(f"Fitted swarm on {len(training)} observations (MSE={self.best_fitness:.6f})")
        return self

    def predict(self, horizon: int) -> np.ndarray:
        if not self.is_fitted:
            raise ValueError("Model must be fitted before making predictions. Call fit() first.")
        return extract_forecast(self.best_position, horizon)

    def fit_predict(self, training_sequence, horizon: int) -> ForecastResult:
        if not is_count(horizon) or horizon <= 0:
            raise InvalidInputError(f"Forecast horizon must be a positive integer, got {horizon!r}")
        self.fit(training_sequence)
        return ForecastResult(
            best_position=self.best_position,
            best_fitness=self.best_fitness,
            forecast=self.predict(horizon),
            history=self.history
        )

    def __repr__(self):
        return (f"{self.__class__.__name__}(n_particles={self.config.n_particles}, "
                f"n_iterations={self.config.n_iterations})")
