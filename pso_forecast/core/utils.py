"""
General utilities for the PSO forecasting framework.
"""
import numpy as np
import pandas as pd
import json
import numbers
from pathlib import Path
from typing import Any, Optional, Union

RandomState = Optional[Union[int, np.random.Generator]]


class InvalidInputError(ValueError):
    """Raised when the optimizer is called with unusable arguments."""


def is_count(value) -> bool:
    """True for int-like values (numpy integers included), False for bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def make_rng(random_state: RandomState = None) -> np.random.Generator:
    """
    Resolve a random source.

    None gives a fresh unseeded generator, an int seeds a new generator and an
    existing Generator is returned as-is so callers can share one stream.
    """
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, pd.DataFrame):
            return obj.to_dict(orient='records')
        elif isinstance(obj, pd.Series):
            return obj.tolist()
        return super().default(obj)


def save_json_numpy(data: Any, path: Union[str, Path], indent: int = 2):
    """Save data to JSON file with numpy support."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, cls=NumpyEncoder)
