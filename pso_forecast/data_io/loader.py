"""
Data loading utilities for the PSO forecasting framework.
"""
import pandas as pd
import numpy as np
from pathlib import Path
from typing import Tuple, Dict, Any, Union

from ..core.config import DataConfig
from ..core.logging_utils import get_logger


def load_csv_series(
    path: Union[str, Path],
    value_column: Union[int, str] = 1
) -> np.ndarray:
    """
    Load one numeric column of a headered CSV file as a float array.

    Args:
        path: CSV file path
        value_column: Column position (int) or header name (str)

    Returns:
        Values in row order, header excluded
    """
    logger = get_logger()
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    logger.info(f"Loading data from: {path}")

    df = pd.read_csv(path, header=0)

    if isinstance(value_column, str):
        series = df[value_column]
    else:
        series = df.iloc[:, value_column]

    values = series.to_numpy(dtype=float)

    logger.info(f"Loaded {len(values)} rows from column '{series.name}'")

    return values


def split_series(
    values: np.ndarray,
    train_size: int,
    holdout_size: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split a series into a leading training window and the holdout that follows it.

    Args:
        values: Full series
        train_size: Number of leading values used for fitting
        holdout_size: Number of values right after the training window

    Returns:
        Tuple of (training, actual)
    """
    values = np.asarray(values, dtype=float)
    needed = train_size + holdout_size
    if train_size <= 0 or holdout_size < 0:
        raise ValueError(
            f"Invalid window sizes: train_size={train_size}, holdout_size={holdout_size}"
        )
    if len(values) < needed:
        raise ValueError(
            f"Series has {len(values)} values; {needed} needed "
            f"({train_size} training + {holdout_size} holdout)"
        )

    training = values[:train_size].copy()
    actual = values[train_size:needed].copy()
    return training, actual


def load_and_split(config: DataConfig) -> Tuple[np.ndarray, np.ndarray, Dict[str, Any]]:
    """
    Main function to load the series and cut the training/holdout windows.

    Args:
        config: Data configuration

    Returns:
        Tuple of (training, actual, metadata dict)
    """
    logger = get_logger()

    values = load_csv_series(config.input_path, config.value_column)
    training, actual = split_series(values, config.train_size, config.holdout_size)

    metadata = {
        'input_path': str(config.input_path),
        'n_rows': len(values),
        'train_size': len(training),
        'holdout_size': len(actual),
        'unused_rows': len(values) - len(training) - len(actual)
    }

    logger.info(
        f"Data prepared: {metadata['train_size']} training values, "
        f"{metadata['holdout_size']} holdout values"
    )

    return training, actual, metadata
