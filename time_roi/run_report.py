"""Generate score_report.json for a scoring run."""

import json
from pathlib import Path

from time_roi.utils import finite_or_none, hash_inputs, iso_now
from time_roi.validation import validate_score_report


def write_score_report(
    output_path: Path,
    run_id: str,
    inputs: dict,
    weights: dict | None,
    mode: str,
    score: float,
    interpretation: dict,
) -> dict:
    """
    Write a score report with inputs, fingerprint, effective weights and result.
    Validated against the score_report schema before anything is written.
    Returns the report dict.
    """
    report = {
        "run_id": run_id,
        "timestamp": iso_now(),
        "input_hash": hash_inputs(inputs),
        "mode": mode,
        "inputs": inputs,
        "weights": weights,
        "score": finite_or_none(score),
        "category": interpretation["category"],
        "description": interpretation["description"],
    }
    validate_score_report(report)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    return report
