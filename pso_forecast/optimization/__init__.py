"""
Optimization module for the PSO forecasting framework.
"""
from .pso import (
    PSO,
    Particle,
    OptimizationState,
    initialize_swarm,
    mean_squared_error
)

__all__ = [
    'PSO', 'Particle', 'OptimizationState', 'initialize_swarm',
    'mean_squared_error'
]
