"""
Tabular predicted-vs-actual output.
"""
import numpy as np
import pandas as pd


def format_comparison_table(predicted, actual) -> pd.DataFrame:
    """Pair forecast values with the actual values they predict."""
    predicted = np.asarray(predicted, dtype=float)
    actual = np.asarray(actual, dtype=float)
    if len(predicted) != len(actual):
        raise ValueError(
            f"Length mismatch: {len(predicted)} predicted vs {len(actual)} actual"
        )

    df = pd.DataFrame({'Predicted': predicted, 'Actual': actual})
    df['Error'] = df['Actual'] - df['Predicted']
    return df


def render_comparison_table(predicted, actual, width: int = 15) -> str:
    """Fixed-width text table with four decimals per value."""
    df = format_comparison_table(predicted, actual)

    lines = [f"{'Predicted':<{width}} {'Actual':<{width}}", "-" * (2 * width + 2)]
    for row in df.itertuples(index=False):
        lines.append(f"{row.Predicted:<{width}.4f} {row.Actual:<{width}.4f}")
    return "\n".join(lines)
