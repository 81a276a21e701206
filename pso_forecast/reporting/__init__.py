"""
Reporting module for the PSO forecasting framework.
"""
from .plots import (
    set_plot_style,
    select_forecast_points,
    plot_actual_vs_forecast,
    plot_optimization_history
)
from .tables import format_comparison_table, render_comparison_table

__all__ = [
    'set_plot_style',
    'select_forecast_points',
    'plot_actual_vs_forecast',
    'plot_optimization_history',
    'format_comparison_table',
    'render_comparison_table'
]
