"""
PSO Series Forecaster
=====================

Fits a particle swarm to a historical series and forecasts by tiling the
best-fit vector forward.

Modules:
    core: Configuration, logging and utilities
    data_io: CSV loading and train/holdout splitting
    optimization: Particle swarm optimizer
    forecasting: optimize() entry point and forecast extraction
    evaluation: Forecast metrics
    reporting: Charts and comparison tables
"""

__version__ = "1.0.0"

from . import core
from . import data_io
from . import optimization
from . import forecasting
from . import evaluation
from . import reporting

from .core.utils import InvalidInputError
from .forecasting import optimize, extract_forecast
