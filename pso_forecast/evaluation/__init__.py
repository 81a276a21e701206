"""
Evaluation module for the PSO forecasting framework.
"""
from .metrics import (
    ForecastMetrics,
    calculate_mae,
    calculate_mse,
    calculate_rmse,
    calculate_mape,
    calculate_bias,
    compute_all_metrics
)

__all__ = [
    'ForecastMetrics',
    'calculate_mae', 'calculate_mse', 'calculate_rmse', 'calculate_mape',
    'calculate_bias', 'compute_all_metrics'
]
