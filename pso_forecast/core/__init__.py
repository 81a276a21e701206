"""
Core module for the PSO forecasting framework.
"""
from .config import (
    Config,
    DataConfig,
    OptimizationConfig,
    ReportConfig,
    OutputConfig,
    create_run_directories,
    get_default_config,
    load_config,
    DEFAULT_CONFIG_PATH
)
from .logging_utils import setup_logging, get_logger, LogContext
from .utils import (
    InvalidInputError,
    make_rng,
    save_json_numpy
)

__all__ = [
    'Config', 'DataConfig', 'OptimizationConfig', 'ReportConfig', 'OutputConfig',
    'create_run_directories', 'get_default_config', 'load_config', 'DEFAULT_CONFIG_PATH',
    'setup_logging', 'get_logger', 'LogContext',
    'InvalidInputError', 'make_rng', 'save_json_numpy'
]
