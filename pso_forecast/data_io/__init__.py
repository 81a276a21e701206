"""
Data I/O module for the PSO forecasting framework.
"""
from .loader import load_csv_series, split_series, load_and_split

__all__ = ['load_csv_series', 'split_series', 'load_and_split']
