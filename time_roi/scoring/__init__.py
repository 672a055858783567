"""Time ROI scoring engine."""

from time_roi.scoring.engine import (
    InvalidInputError,
    calculate_time_roi,
    calculate_time_roi_simple,
    interpret_time_roi,
    validate_inputs,
)
from time_roi.scoring.weights import DEFAULT_WEIGHTS, Weights

__all__ = [
    "InvalidInputError",
    "calculate_time_roi",
    "calculate_time_roi_simple",
    "interpret_time_roi",
    "validate_inputs",
    "Weights",
    "DEFAULT_WEIGHTS",
]
