"""
Evaluation metrics for comparing a forecast against held-out actual values.
"""
import numpy as np
from typing import Dict
from dataclasses import dataclass


@dataclass
class ForecastMetrics:
    """Container for forecast evaluation metrics."""
    mae: float = 0.0
    rmse: float = 0.0
    mape: float = 0.0
    mse: float = 0.0
    bias: float = 0.0
    n_samples: int = 0

    def to_dict(self) -> Dict[str, float]:
        return {
            'mae': self.mae,
            'rmse': self.rmse,
            'mape': self.mape,
            'mse': self.mse,
            'bias': self.bias,
            'n_samples': self.n_samples
        }


def calculate_mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Mean Absolute Error."""
    return float(np.mean(np.abs(y_true - y_pred)))


def calculate_mse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Mean Squared Error."""
    return float(np.mean((y_true - y_pred) ** 2))


def calculate_rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Root Mean Squared Error."""
    return float(np.sqrt(calculate_mse(y_true, y_pred)))


def calculate_mape(y_true: np.ndarray, y_pred: np.ndarray, epsilon: float = 1e-10) -> float:
    """Mean Absolute Percentage Error."""
    return float(np.mean(np.abs((y_true - y_pred) / (y_true + epsilon))) * 100)


def calculate_bias(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Mean Bias (systematic error)."""
    return float(np.mean(y_pred - y_true))


def compute_all_metrics(
    y_true: np.ndarray,
    y_pred: np.ndarray
) -> ForecastMetrics:
    """
    Compute all forecast metrics.

    Args:
        y_true: Actual values
        y_pred: Forecast values

    Returns:
        ForecastMetrics object
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)

    if len(y_true) != len(y_pred):
        raise ValueError("Arrays must have same length")

    if len(y_true) == 0:
        return ForecastMetrics()

    return ForecastMetrics(
        mae=calculate_mae(y_true, y_pred),
        rmse=calculate_rmse(y_true, y_pred),
        mape=calculate_mape(y_true, y_pred),
        mse=calculate_mse(y_true, y_pred),
        bias=calculate_bias(y_true, y_pred),
        n_samples=len(y_true)
    )
