"""Web app service layer: JSON payloads in, engine calls, JSON-ready dicts out."""

from time_roi.scoring import (
    DEFAULT_WEIGHTS,
    Weights,
    calculate_time_roi,
    calculate_time_roi_simple,
    interpret_time_roi,
    validate_inputs,
)
from time_roi.utils import finite_or_none
from time_roi.validation import validate_interpret_request, validate_score_request

# Browser UI sends camelCase; the API speaks snake_case
_FIELD_ALIASES = {
    "timeSpent": "time_spent",
    "skillGrowth": "skill_growth",
    "perceivedValue": "perceived_value",
}


def normalize_score_payload(data: dict) -> dict:
    """Rename camelCase keys (top level and weights) to snake_case. Snake_case wins on conflict."""
    out = {}
    for key, value in data.items():
        out.setdefault(_FIELD_ALIASES.get(key, key), value)
        if key in _FIELD_ALIASES.values():
            out[key] = value
    weights = out.get("weights")
    if isinstance(weights, dict):
        out["weights"] = Weights.from_dict(weights).to_dict()
    return out


def _parse_score_payload(data: dict) -> tuple[dict, Weights | None, str]:
    payload = normalize_score_payload(data)
    validate_score_request(payload)
    inputs = {
        "time_spent": payload["time_spent"],
        "effort": payload["effort"],
        "skill_growth": payload["skill_growth"],
        "perceived_value": payload["perceived_value"],
    }
    weights = payload.get("weights")
    return inputs, Weights.from_dict(weights) if weights else None, payload.get("mode", "weighted")


def score_payload(data: dict) -> dict:
    """
    Score a request payload and interpret the result.
    mode="simple" uses equal weights and ignores any supplied weights.
    Raises jsonschema.ValidationError (bad shape) or InvalidInputError (bad values).
    """
    inputs, weights, mode = _parse_score_payload(data)
    if mode == "simple":
        score = calculate_time_roi_simple(**inputs)
        effective_weights = None
    else:
        score = calculate_time_roi(**inputs, weights=weights)
        effective_weights = (weights or DEFAULT_WEIGHTS).to_dict()

    return {
        "score": finite_or_none(score),
        **interpret_time_roi(score),
        "mode": mode,
        "inputs": inputs,
        "weights": effective_weights,
    }


def validate_payload(data: dict) -> None:
    """Run the same checks as score_payload without computing. Raises on the first failure."""
    inputs, weights, mode = _parse_score_payload(data)
    validate_inputs(**inputs, weights=None if mode == "simple" else weights)


def interpret_payload(data: dict) -> dict:
    """Interpret {score}. Raises jsonschema.ValidationError if score is missing or not a number."""
    validate_interpret_request(data)
    return interpret_time_roi(data["score"])


def default_weights() -> dict:
    return DEFAULT_WEIGHTS.to_dict()
