"""
Error metrics for comparing predicted and observed values.
"""

from typing import Sequence

import numpy as np

from .handlers.base import LengthMismatchError


def mean_absolute_error(predictions: Sequence[float], actuals: Sequence[float]) -> float:
    """
    Mean of |prediction - actual| over paired values.

    Raises:
        LengthMismatchError: If the sequences differ in length
        ValueError: If both sequences are empty
    """
    if len(predictions) != len(actuals):
        raise LengthMismatchError(
            f"Predictions and actuals must have the same length "
            f"({len(predictions)} != {len(actuals)})"
        )
    if len(predictions) == 0:
        raise ValueError("Cannot compute mean absolute error of empty sequences")

    diff = np.asarray(predictions, dtype=float) - np.asarray(actuals, dtype=float)
    return float(np.mean(np.abs(diff)))
