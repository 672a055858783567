#!/usr/bin/env python3
"""
Repeatability harness: score a grid of inputs N times; assert identical results.
Also checks that scores strictly fall as time spent grows, for every (E, S, V)
level set with a positive composite. Rounding to 2 places can tie scores when
custom weights make the composite tiny; such ties are reported, not excused.
Exits 0 if stable, 1 if not. Prints a variance report on failure.

Usage: python scripts/repeatability_check.py [--runs 10] [--weights 0.2 0.3 0.5]
"""

import argparse
import itertools
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from time_roi.scoring import (
    DEFAULT_WEIGHTS,
    InvalidInputError,
    Weights,
    calculate_time_roi,
    calculate_time_roi_simple,
)
from time_roi.utils import hash_inputs

DEFAULT_RUNS = 10
TIMES = [0.25, 0.5, 1, 2, 5, 10, 40]
LEVELS = [0, 2.5, 5, 7, 10]


def _score_grid(weights: Weights) -> dict:
    results = {}
    for t, e, s, v in itertools.product(TIMES, LEVELS, LEVELS, LEVELS):
        results[(t, e, s, v)] = (
            calculate_time_roi(t, e, s, v, weights),
            calculate_time_roi_simple(t, e, s, v),
        )
    return results


def _monotonic_violations(results: dict, weights: Weights) -> list[str]:
    """Strict check: for a positive composite, each longer time must score lower."""
    violations = []
    for e, s, v in itertools.product(LEVELS, LEVELS, LEVELS):
        composite = e * weights.effort + s * weights.skill_growth + v * weights.perceived_value
        for index, label, positive in ((0, "weighted", composite > 0), (1, "simple", e + s + v > 0)):
            if not positive:
                continue
            scores = [results[(t, e, s, v)][index] for t in TIMES]
            for (t1, a), (t2, b) in zip(zip(TIMES, scores), zip(TIMES[1:], scores[1:])):
                if b >= a:
                    violations.append(f"{label} E={e} S={s} V={v}: score({t2}h)={b} >= score({t1}h)={a}")
    return violations


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--weights", type=float, nargs=3, default=None, metavar=("EFFORT", "SKILL_GROWTH", "PERCEIVED_VALUE"))
    args = parser.parse_args()

    weights = Weights(*args.weights) if args.weights else DEFAULT_WEIGHTS
    print(f"Scoring {len(TIMES) * len(LEVELS) ** 3} inputs {args.runs} times (weights={weights.to_dict()})...")

    try:
        runs = [_score_grid(weights) for _ in range(args.runs)]
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    first = runs[0]
    variances = []
    for i, r in enumerate(runs[1:], start=2):
        for key, value in r.items():
            if value != first[key]:
                variances.append(("score", i, f"{key}: {value} != {first[key]}"))

    for detail in _monotonic_violations(first, weights):
        variances.append(("monotonic", 1, detail))

    if variances:
        print("\n=== VARIANCE REPORT ===\n")
        for stage, run, detail in variances[:50]:
            print(f"  Run {run} - {stage}: {detail}")
        if len(variances) > 50:
            print(f"  ... {len(variances) - 50} more")
        print("\nRepeatability check FAILED.")
        sys.exit(1)

    sample_key = (10, 5, 7, 10)
    print("\nPASS: Repeatability check passed.")
    print(f"  runs: {args.runs}")
    print(f"  inputs: {len(first)}")
    print(f"  grid_hash: {hash_inputs({str(k): v for k, v in first.items()})}")
    print(f"  sample {sample_key}: weighted={first[sample_key][0]} simple={first[sample_key][1]}")
    sys.exit(0)


if __name__ == "__main__":
    main()
