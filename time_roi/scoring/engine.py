"""Time ROI scoring engine. Pure code, no I/O, no state."""

import math

from time_roi.scoring.weights import DEFAULT_WEIGHTS, Weights

WEIGHT_SUM_TOLERANCE = 0.001
MIN_LEVEL = 0
MAX_LEVEL = 10

# (upper bound inclusive, category, description); scores above the last bound are Exceptional
INTERPRETATION_BANDS = [
    (30, "Low", "Consider if activity is worth continuing"),
    (60, "Moderate", "Decent returns, room for improvement"),
    (80, "Good", "Strong returns relative to time invested"),
    (100, "Excellent", "Highly efficient use of time"),
]


class InvalidInputError(ValueError):
    """Raised when a score input or weight breaks a validation rule."""


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite_number(value) -> bool:
    """A number that stays finite as a float; ints past float range do not."""
    if not _is_number(value):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _check_level(name: str, value) -> None:
    if not _is_number(value) or (isinstance(value, float) and not math.isfinite(value)):
        raise InvalidInputError(f"{name} must be a valid number")
    # ints compare exactly, so a huge int fails here rather than in float conversion
    if value < MIN_LEVEL or value > MAX_LEVEL:
        raise InvalidInputError(f"{name} must be between {MIN_LEVEL} and {MAX_LEVEL}")


def _round2(value: float) -> float:
    """Round half-up to 2 decimal places. Values too large to scale come back unchanged."""
    scaled = value * 100
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / 100


def validate_inputs(
    time_spent: float,
    effort: float,
    skill_growth: float,
    perceived_value: float,
    weights: Weights | None = None,
) -> None:
    """
    Validate score inputs, stopping at the first broken rule.
    Order: time spent, effort, skill growth, perceived value, then weights
    (numeric, sum to 1.0 within tolerance, non-negative) when supplied.
    Raises InvalidInputError.
    """
    if not _is_finite_number(time_spent):
        raise InvalidInputError("Time spent must be a valid number")
    if time_spent <= 0:
        raise InvalidInputError("Time spent must be greater than 0")

    _check_level("Effort", effort)
    _check_level("Skill growth", skill_growth)
    _check_level("Perceived value", perceived_value)

    if weights is None:
        return

    values = weights.as_tuple()
    if not all(_is_number(w) for w in values):
        raise InvalidInputError("All weights must be valid numbers")
    if not all(_is_finite_number(w) for w in values):
        raise InvalidInputError("Weights must be finite numbers")

    total = sum(values)
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        raise InvalidInputError(f"Weights must sum to 1.0 (current sum: {total})")

    if any(w < 0 for w in values):
        raise InvalidInputError("Weights cannot be negative")


def calculate_time_roi(
    time_spent: float,
    effort: float,
    skill_growth: float,
    perceived_value: float,
    weights: Weights | None = None,
) -> float:
    """
    Weighted Time ROI: ((E*w1 + S*w2 + V*w3) / T) * 100, rounded to 2 places.
    Uses DEFAULT_WEIGHTS (0.2, 0.3, 0.5) when weights is None.
    No upper bound; short, valuable activities score above 100.
    """
    final_weights = weights or DEFAULT_WEIGHTS
    validate_inputs(time_spent, effort, skill_growth, perceived_value, final_weights)

    composite = (
        effort * final_weights.effort
        + skill_growth * final_weights.skill_growth
        + perceived_value * final_weights.perceived_value
    )
    return _round2(composite / time_spent * 100)


def calculate_time_roi_simple(
    time_spent: float, effort: float, skill_growth: float, perceived_value: float
) -> float:
    """Equal-weight Time ROI: ((E + S + V) / 3 / T) * 100. Weight checks do not apply."""
    validate_inputs(time_spent, effort, skill_growth, perceived_value, None)

    average = (effort + skill_growth + perceived_value) / 3
    return _round2(average / time_spent * 100)


def interpret_time_roi(score: float) -> dict:
    """Map a score to {category, description}. Total over all floats."""
    if score < 0:
        return {"category": "Invalid", "description": "Score cannot be negative"}
    for upper, category, description in INTERPRETATION_BANDS:
        if score <= upper:
            return {"category": category, "description": description}
    return {"category": "Exceptional", "description": "Extremely high value per hour"}
