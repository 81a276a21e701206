"""
Particle Swarm Optimization (PSO) for fitting a candidate series to training data.

Each particle carries a full-length reconstruction of the training sequence.
Fitness is the mean squared error against that sequence, and the swarm
follows the standard inertia-weight update with cognitive and social pulls.
Positions and velocities are left unbounded.
"""
import numpy as np
from typing import Dict, Any, List, Tuple, Callable
from dataclasses import dataclass

from ..core.logging_utils import get_logger
from ..core.utils import InvalidInputError, RandomState, is_count, make_rng

POSITION_JITTER = 0.05
VELOCITY_RANGE = 0.1


def mean_squared_error(position: np.ndarray, target: np.ndarray) -> float:
    """Fitness of a candidate position: MSE against the target sequence."""
    with np.errstate(over='ignore', invalid='ignore'):
        return float(np.mean((position - target) ** 2))


@dataclass
class Particle:
    """Represents a particle in PSO."""
    position: np.ndarray
    velocity: np.ndarray
    best_position: np.ndarray = None
    best_fitness: float = float('inf')
    current_fitness: float = float('inf')

    def __post_init__(self):
        if len(self.position) != len(self.velocity):
            raise ValueError("position and velocity must have the same length")
        if self.best_position is None:
            self.best_position = self.position.copy()

    def record(self, fitness: float) -> bool:
        """Store the latest fitness; keep the position as best if it strictly improves."""
        self.current_fitness = fitness
        if fitness < self.best_fitness:
            self.best_fitness = fitness
            self.best_position = self.position.copy()
            return True
        return False

    def update(
        self,
        global_best_position: np.ndarray,
        w: float,
        c1: float,
        c2: float,
        rng: np.random.Generator
    ):
        """Move the particle one step, mutating its buffers in place."""
        n_dims = len(self.position)
        r1 = rng.random(n_dims)
        r2 = rng.random(n_dims)

        with np.errstate(over='ignore', invalid='ignore'):
            cognitive = c1 * r1 * (self.best_position - self.position)
            social = c2 * r2 * (global_best_position - self.position)
            self.velocity[:] = w * self.velocity + cognitive + social
            self.position += self.velocity


@dataclass
class OptimizationState:
    """Global best of a run. Only the optimizer writes to it."""
    best_position: np.ndarray
    best_fitness: float = float('inf')

    def offer(self, position: np.ndarray, fitness: float) -> bool:
        if fitness < self.best_fitness:
            self.best_fitness = fitness
            self.best_position = position.copy()
            return True
        return False


def initialize_swarm(
    target: np.ndarray,
    n_particles: int,
    rng: np.random.Generator
) -> List[Particle]:
    """
    Build the initial swarm around the target sequence.

    Each position is the target jittered by U(-0.05, 0.05) per dimension and
    each velocity is drawn from U(-0.1, 0.1).
    """
    n_dims = len(target)
    particles = []

    for _ in range(n_particles):
        position = target + rng.uniform(-POSITION_JITTER, POSITION_JITTER, n_dims)
        velocity = rng.uniform(-VELOCITY_RANGE, VELOCITY_RANGE, n_dims)
        particles.append(Particle(position=position, velocity=velocity))

    return particles


class PSO:
    """
    Particle Swarm Optimization over full-length series reconstructions.

    Standard global-best PSO with constant inertia weight and
    cognitive/social parameters, run for a fixed number of iterations.
    """

    def __init__(
        self,
        n_particles: int = 30,
        n_iterations: int = 100,
        w: float = 0.7,
        c1: float = 1.5,
        c2: float = 1.5,
        random_state: RandomState = None,
        log_every: int = 10
    ):
        """
        Initialize PSO optimizer.

        Args:
            n_particles: Number of particles
            n_iterations: Number of update/evaluate rounds after the initial evaluation
            w: Inertia weight
            c1: Cognitive parameter
            c2: Social parameter
            random_state: None (unseeded), an int seed or a numpy Generator
            log_every: Log progress every this many iterations
        """
        if not is_count(n_particles) or n_particles <= 0:
            raise InvalidInputError(f"n_particles must be a positive integer, got {n_particles!r}")
        if not is_count(n_iterations) or n_iterations < 0:
            raise InvalidInputError(
                f"n_iterations must be a non-negative integer, got {n_iterations!r}"
            )

        self.n_particles = n_particles
        self.n_iterations = n_iterations
        self.w = w
        self.c1 = c1
        self.c2 = c2
        self.rng = make_rng(random_state)
        self.log_every = log_every

    def _evaluate(
        self,
        particles: List[Particle],
        target: np.ndarray,
        state: OptimizationState
    ) -> List[float]:
        """Score every particle in swarm order and fold results into the bests."""
        fitness_values = []
        for particle in particles:
            fitness = mean_squared_error(particle.position, target)
            fitness_values.append(fitness)

            particle.record(fitness)
            state.offer(particle.position, fitness)

        return fitness_values

    def optimize(
        self,
        target,
        callback: Callable = None
    ) -> Tuple[np.ndarray, float, Dict[str, Any]]:
        """
        Run PSO against a training sequence.

        Args:
            target: Training sequence the particles try to reproduce
            callback: Optional callback function(iteration, best_fitness)

        Returns:
            Tuple of (best_position, best_fitness, history)
        """
        try:
            target = np.asarray(target, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Training sequence is not numeric: {e}") from e
        if target.ndim != 1 or len(target) == 0:
            raise InvalidInputError("Training sequence must be a non-empty 1-D sequence")

        logger = get_logger()
        logger.info(
            f"Starting PSO: {self.n_particles} particles, {self.n_iterations} iterations, "
            f"{len(target)} dimensions"
        )

        particles = initialize_swarm(target, self.n_particles, self.rng)
        state = OptimizationState(best_position=particles[0].position.copy())

        history = {
            'iterations': [],
            'best_fitness': [],
            'mean_fitness': [],
            'personal_best_fitness': []
        }

        for iteration in range(self.n_iterations + 1):
            # Round 0 scores the initial swarm; every later round moves first.
            if iteration > 0:
                for particle in particles:
                    particle.update(state.best_position, self.w, self.c1, self.c2, self.rng)

            self._evaluate(particles, target, state)

            finite = [p.current_fitness for p in particles if np.isfinite(p.current_fitness)]
            with np.errstate(over='ignore'):
                mean_fitness = float(np.mean(finite)) if finite else float('inf')
            history['iterations'].append(iteration)
            history['best_fitness'].append(state.best_fitness)
            history['mean_fitness'].append(mean_fitness)
            history['personal_best_fitness'].append(
                np.array([p.best_fitness for p in particles])
            )

            if callback is not None:
                callback(iteration, state.best_fitness)

            if iteration % self.log_every == 0 or iteration == self.n_iterations:
                logger.info(f"  Iteration {iteration}: Best fitness = {state.best_fitness:.6f}")

        logger.info(f"PSO complete. Best fitness: {state.best_fitness:.6f}")

        return state.best_position, state.best_fitness, history
