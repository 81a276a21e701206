"""
Plotting for the PSO forecasting framework.
"""
import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, List, Optional, Tuple
from pathlib import Path

plt.rcParams['font.size'] = 12
plt.rcParams['axes.labelsize'] = 13
plt.rcParams['axes.titlesize'] = 15
plt.rcParams['axes.titleweight'] = 'bold'
plt.rcParams['legend.fontsize'] = 11
plt.rcParams['axes.grid'] = True
plt.rcParams['grid.alpha'] = 0.3


def set_plot_style(style: str = 'seaborn-v0_8-whitegrid'):
    """Set matplotlib style."""
    try:
        plt.style.use(style)
    except OSError:
        plt.style.use('default')


def select_forecast_points(
    forecast: np.ndarray,
    start: int,
    min_value: Optional[float] = None,
    max_points: Optional[int] = 10
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Pick the forecast points drawn on the chart.

    Point i sits at x = start + i. Values not strictly above ``min_value`` are
    skipped (their x slot stays empty) and drawing stops after ``max_points``.

    Returns:
        Tuple of (x, y) arrays
    """
    xs, ys = [], []
    for i, value in enumerate(np.asarray(forecast, dtype=float)):
        if max_points is not None and len(xs) >= max_points:
            break
        if min_value is not None and not value > min_value:
            continue
        xs.append(start + i)
        ys.append(value)

    return np.array(xs, dtype=int), np.array(ys, dtype=float)


def plot_actual_vs_forecast(
    all_values: np.ndarray,
    forecast: np.ndarray,
    forecast_start: Optional[int] = None,
    min_value: Optional[float] = None,
    max_points: Optional[int] = 10,
    title: str = "Actual vs Predicted",
    x_label: str = "Index",
    y_label: str = "Value",
    output_path: Optional[Path] = None,
    figsize: Tuple[int, int] = (12, 7),
    dpi: int = 300
) -> plt.Figure:
    """
    Plot the observed series with the forecast overlaid.

    Args:
        all_values: Observed series (training window followed by actual values)
        forecast: Forecast values
        forecast_start: x position of the first forecast value; defaults to
            the end of the observed series minus the forecast length
        min_value: Skip forecast values not above this threshold
        max_points: Maximum number of forecast points to draw
        title: Plot title
        x_label: X-axis label
        y_label: Y-axis label
        output_path: Path to save figure
        figsize: Figure size
        dpi: Resolution of the saved figure

    Returns:
        Matplotlib figure
    """
    all_values = np.asarray(all_values, dtype=float)
    if forecast_start is None:
        forecast_start = max(len(all_values) - len(forecast), 0)

    fig, ax = plt.subplots(figsize=figsize)

    ax.plot(np.arange(len(all_values)), all_values, 'b-', linewidth=1.5,
            alpha=0.8, label='Actual')

    xs, ys = select_forecast_points(forecast, forecast_start, min_value, max_points)
    if len(xs) > 0:
        ax.plot(xs, ys, 'r--', marker='o', markersize=4, linewidth=1.5,
                label='Predicted')

    ax.set_xlabel(x_label)
    ax.set_ylabel(y_label)
    ax.set_title(title)
    ax.legend(loc='upper left')

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=dpi, bbox_inches='tight', facecolor='white')

    return fig


def plot_optimization_history(
    history: Dict[str, List],
    title: str = "Optimization History",
    output_path: Optional[Path] = None,
    figsize: Tuple[int, int] = (12, 6),
    dpi: int = 300
) -> plt.Figure:
    """
    Plot optimization convergence history.

    Args:
        history: History dict returned by PSO.optimize
        title: Plot title
        output_path: Path to save figure
        figsize: Figure size
        dpi: Resolution of the saved figure

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    iterations = history['iterations']
    best_fitness = history['best_fitness']

    ax.plot(iterations, best_fitness, 'b-', linewidth=2, marker='o',
            markersize=3, label='Best Fitness')

    if 'mean_fitness' in history:
        ax.plot(iterations, history['mean_fitness'], 'g--', linewidth=1.5,
                alpha=0.7, label='Mean Fitness')

    ax.set_xlabel('Iteration')
    ax.set_ylabel('Fitness (MSE)')
    ax.set_yscale('log')
    ax.set_title(title)
    ax.legend()

    best_idx = int(np.argmin(best_fitness))
    ax.annotate(f'Best: {best_fitness[best_idx]:.6f}',
                xy=(iterations[best_idx], best_fitness[best_idx]),
                xytext=(0.6, 0.85), textcoords='axes fraction',
                arrowprops=dict(arrowstyle='->', color='red'),
                fontsize=10, color='red')

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=dpi, bbox_inches='tight', facecolor='white')

    return fig
