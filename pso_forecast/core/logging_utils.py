"""
Logging utilities for the PSO forecasting framework.

Log files live in the run's ``logs`` directory and are named after the run id,
so every artefact of one run sits under ``outputs/runs/<run_id>/``.
"""
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from .config import Config, create_run_directories

LOGGER_NAME = 'pso_forecast'
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def setup_logging(
    config: Optional[Config] = None,
    level: int = logging.INFO,
    console: bool = True
) -> logging.Logger:
    """
    Configure the package logger for a run.

    Args:
        config: Run configuration; when given, a ``<run_id>.log`` file is
            written to the run's logs directory
        level: Logging level
        console: Whether to log to stdout

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    handlers = []

    if console:
        handlers.append(logging.StreamHandler(sys.stdout))

    log_file = None
    if config is not None:
        log_file = Path(create_run_directories(config)['logs']) / f"{config.run_id}.log"
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if config is not None:
        opt = config.optimization
        logger.info(f"Run {config.run_id} logging to: {log_file}")
        logger.info(
            f"Swarm: {opt.n_particles} particles, {opt.n_iterations} iterations, "
            f"w={opt.w}, c1={opt.c1}, c2={opt.c2}, "
            f"seed={'unseeded' if opt.seed is None else opt.seed}"
        )

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get the package logger."""
    return logging.getLogger(name)


class LogContext:
    """Logs start and end of a pipeline step and keeps its duration in ``elapsed``."""

    def __init__(self, logger: logging.Logger, section: str):
        self.logger = logger
        self.section = section
        self.elapsed = None
        self._start = None

    def __enter__(self):
        self._start = time.perf_counter()
        self.logger.info(f"Starting: {self.section}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self._start
        if exc_type is None:
            self.logger.info(f"Completed: {self.section} ({self.elapsed:.2f}s)")
        else:
            self.logger.error(f"Failed: {self.section} after {self.elapsed:.2f}s - {exc_val}")
        return False
