#!/usr/bin/env python3
"""Example runner for the Time ROI calculator."""

import argparse
import json

from time_roi.scoring import (
    InvalidInputError,
    Weights,
    calculate_time_roi,
    calculate_time_roi_simple,
    interpret_time_roi,
)

EXAMPLES = [
    {
        "title": "Learning a new programming language",
        "inputs": (10, 7, 8, 9),
        "weights": None,
        "weights_label": "Default (effort: 0.2, skill_growth: 0.3, perceived_value: 0.5)",
    },
    {
        "title": "Career training (custom weights)",
        "inputs": (20, 8, 9, 7),
        "weights": Weights(effort=0.2, skill_growth=0.5, perceived_value=0.3),
        "weights_label": "Career-focused (effort: 0.2, skill_growth: 0.5, perceived_value: 0.3)",
    },
    {
        "title": "Simplified calculation (equal weights)",
        "inputs": (5, 6, 7, 8),
        "simple": True,
    },
    {
        "title": "Low ROI activity",
        "inputs": (15, 3, 2, 4),
        "weights": None,
    },
    {
        "title": "Exceptional ROI activity",
        "inputs": (2, 9, 10, 10),
        "weights": None,
    },
]

ERROR_EXAMPLES = [
    {"title": "Time must be greater than 0", "inputs": (0, 5, 5, 5), "weights": None},
    {"title": "Effort above 10", "inputs": (10, 15, 5, 5), "weights": None},
    {
        "title": "Weights do not sum to 1.0",
        "inputs": (10, 5, 5, 5),
        "weights": Weights(effort=0.3, skill_growth=0.3, perceived_value=0.3),
    },
]


def _score(example: dict) -> float:
    if example.get("simple"):
        return calculate_time_roi_simple(*example["inputs"])
    return calculate_time_roi(*example["inputs"], weights=example.get("weights"))


def run_examples() -> dict:
    """Run every example; error examples report the message they were rejected with."""
    results = []
    for ex in EXAMPLES:
        score = _score(ex)
        results.append({"title": ex["title"], "inputs": list(ex["inputs"]), "score": score, **interpret_time_roi(score)})

    errors = []
    for ex in ERROR_EXAMPLES:
        try:
            _score(ex)
        except InvalidInputError as e:
            errors.append({"title": ex["title"], "inputs": list(ex["inputs"]), "error": str(e)})
        else:
            errors.append({"title": ex["title"], "inputs": list(ex["inputs"]), "error": None})
    return {"examples": results, "errors": errors}


def _print_report(report: dict) -> None:
    print("=== Time ROI Calculator Examples ===\n")
    for i, (ex, result) in enumerate(zip(EXAMPLES, report["examples"]), start=1):
        time_spent, effort, skill_growth, perceived_value = ex["inputs"]
        print(f"Example {i}: {ex['title']}")
        print(f"- Time Spent: {time_spent} hours")
        print(f"- Effort: {effort}/10")
        print(f"- Skill Growth: {skill_growth}/10")
        print(f"- Perceived Value: {perceived_value}/10")
        if ex.get("weights_label"):
            print(f"- Weights: {ex['weights_label']}")
        print()
        print(f"Time ROI Score: {result['score']}")
        print(f"Category: {result['category']}")
        print(f"Description: {result['description']}\n")

    print("=== Error Handling Examples ===\n")
    for err in report["errors"]:
        if err["error"]:
            print(f"Error caught: {err['error']}")
        else:
            print(f"No error raised for: {err['title']}")


def main():
    parser = argparse.ArgumentParser(description="Run the Time ROI calculator examples.")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    args = parser.parse_args()

    report = run_examples()
    if args.json:
        print(json.dumps(report, indent=2))
    else:
        _print_report(report)


if __name__ == "__main__":
    main()
