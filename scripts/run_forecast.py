#!/usr/bin/env python
"""
Run Forecast
============
Load a CSV series, fit the particle swarm on the training window, forecast
the holdout window and report predicted vs actual values.

Usage:
    python scripts/run_forecast.py [--config CONFIG_PATH] [--input CSV_PATH]

    Settings are read from configs/default.yaml unless --config points
    elsewhere; command-line flags override the file.

Examples:
    # Default configuration
    python scripts/run_forecast.py --input data/raw/stock_prices.csv

    # Reproducible run with a smaller swarm
    python scripts/run_forecast.py --input prices.csv --seed 7 --particles 10

Outputs:
    - outputs/runs/<run_id>/tables/predicted_vs_actual.csv
    - outputs/runs/<run_id>/metrics/forecast_metrics.json
    - outputs/runs/<run_id>/predictions/forecast.json
    - outputs/runs/<run_id>/figures/actual_vs_forecast.<fmt>
    - outputs/runs/<run_id>/figures/optimization_history.<fmt>
    - outputs/runs/<run_id>/configs_snapshot/config.yaml
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import matplotlib.pyplot as plt

from pso_forecast.core import (
    Config, load_config, create_run_directories, setup_logging, LogContext,
    save_json_numpy
)
from pso_forecast.data_io import load_and_split
from pso_forecast.forecasting import SwarmForecaster
from pso_forecast.evaluation import compute_all_metrics
from pso_forecast.reporting import (
    set_plot_style, plot_actual_vs_forecast, plot_optimization_history,
    format_comparison_table, render_comparison_table
)


def parse_args():
    parser = argparse.ArgumentParser(description='PSO series forecast')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to configuration file (default: configs/default.yaml)')
    parser.add_argument('--input', type=str, default=None,
                        help='Path to input CSV file')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (default: unseeded)')
    parser.add_argument('--iterations', type=int, default=None,
                        help='Number of PSO iterations')
    parser.add_argument('--particles', type=int, default=None,
                        help='Number of particles')
    parser.add_argument('--run-id', type=str, default=None,
                        help='Run ID to use')
    parser.add_argument('--no-plot', action='store_true',
                        help='Skip figure generation')
    return parser.parse_args()


def apply_overrides(config: Config, args) -> Config:
    if args.input:
        config.data.input_path = args.input
    if args.seed is not None:
        config.optimization.seed = args.seed
    if args.iterations is not None:
        config.optimization.n_iterations = args.iterations
    if args.particles is not None:
        config.optimization.n_particles = args.particles
    if args.run_id:
        config.run_id = args.run_id
    return config


def main():
    args = parse_args()

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    config = apply_overrides(config, args)

    dirs = create_run_directories(config)
    logger = setup_logging(config)
    config.save(dirs['configs_snapshot'] / 'config.yaml')

    with LogContext(logger, "Load data") as load_step:
        training, actual, metadata = load_and_split(config.data)

    with LogContext(logger, "Fit swarm and forecast") as fit_step:
        forecaster = SwarmForecaster(config.optimization)
        result = forecaster.fit_predict(training, horizon=len(actual))

    metrics = compute_all_metrics(actual, result.forecast)
    logger.info(f"Holdout MAE: {metrics.mae:.4f}, RMSE: {metrics.rmse:.4f}")

    print(render_comparison_table(result.forecast, actual))

    table = format_comparison_table(result.forecast, actual)
    table.to_csv(dirs['tables'] / 'predicted_vs_actual.csv', index_label='step')
    save_json_numpy(
        {
            'metrics': metrics.to_dict(),
            'data': metadata,
            'best_fitness': result.best_fitness,
            'timings': {'load_seconds': load_step.elapsed, 'fit_seconds': fit_step.elapsed}
        },
        dirs['metrics'] / 'forecast_metrics.json'
    )
    if config.output.save_predictions:
        save_json_numpy(result.to_dict(), dirs['predictions'] / 'forecast.json')

    if not args.no_plot:
        set_plot_style()
        fmt = config.output.figure_format
        report = config.report

        fig = plot_actual_vs_forecast(
            np.concatenate([training, actual]),
            result.forecast,
            forecast_start=report.forecast_start if report.forecast_start is not None else len(training),
            min_value=report.min_value,
            max_points=report.max_points,
            title=report.title,
            x_label=report.x_label,
            y_label=report.y_label,
            output_path=dirs['figures'] / f'actual_vs_forecast.{fmt}',
            dpi=config.output.figure_dpi
        )
        plt.close(fig)

        fig = plot_optimization_history(
            result.history,
            output_path=dirs['figures'] / f'optimization_history.{fmt}',
            dpi=config.output.figure_dpi
        )
        plt.close(fig)

    logger.info(f"Outputs written to: {dirs['root']}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
