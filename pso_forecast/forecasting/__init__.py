"""
Forecasting module: run the swarm and tile its best fit forward.
"""
from .forecast import (
    optimize,
    extract_forecast,
    ForecastResult,
    SwarmForecaster
)

__all__ = ['optimize', 'extract_forecast', 'ForecastResult', 'SwarmForecaster']
