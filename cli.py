#!/usr/bin/env python3
"""CLI for Time ROI scoring: score, interpret, validate."""

import argparse
import json
import sys
import uuid
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from time_roi.scoring import (
    DEFAULT_WEIGHTS,
    InvalidInputError,
    Weights,
    calculate_time_roi,
    calculate_time_roi_simple,
    interpret_time_roi,
    validate_inputs,
)
from time_roi.run_report import write_score_report
from time_roi.utils import finite_or_none
from timeworth.audit import audit_log


def _inputs(args: argparse.Namespace) -> dict:
    return {
        "time_spent": args.time_spent,
        "effort": args.effort,
        "skill_growth": args.skill_growth,
        "perceived_value": args.perceived_value,
    }


def _weights(args: argparse.Namespace) -> Weights | None:
    if not args.weights:
        return None
    effort, skill_growth, perceived_value = args.weights
    return Weights(effort=effort, skill_growth=skill_growth, perceived_value=perceived_value)


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def cmd_score(args: argparse.Namespace) -> None:
    """Compute a Time ROI score, interpret it, optionally write a score report."""
    inputs = _inputs(args)
    weights = _weights(args)
    if args.simple and weights:
        _fail("--weights cannot be combined with --simple")

    try:
        if args.simple:
            score = calculate_time_roi_simple(**inputs)
            mode, effective_weights = "simple", None
        else:
            score = calculate_time_roi(**inputs, weights=weights)
            mode, effective_weights = "weighted", (weights or DEFAULT_WEIGHTS).to_dict()
    except InvalidInputError as e:
        audit_log(action="score", status="invalid", source="cli", error=str(e))
        _fail(str(e))

    interpretation = interpret_time_roi(score)
    audit_log(
        action="score",
        status="success",
        source="cli",
        score=finite_or_none(score),
        category=interpretation["category"],
        mode=mode,
    )

    if args.report_dir:
        run_id = str(uuid.uuid4())[:8]
        report_path = Path(args.report_dir) / f"score_report_{run_id}.json"
        write_score_report(
            report_path,
            run_id=run_id,
            inputs=inputs,
            weights=effective_weights,
            mode=mode,
            score=score,
            interpretation=interpretation,
        )
        print(f"Score report: {report_path}", file=sys.stderr)

    if args.json:
        out = {"score": finite_or_none(score), **interpretation, "mode": mode, "inputs": inputs, "weights": effective_weights}
        print(json.dumps(out, indent=2))
    else:
        print("=== Time ROI ===")
        print(f"Score: {score}")
        print(f"Category: {interpretation['category']}")
        print(f"Description: {interpretation['description']}")
        if effective_weights:
            w = effective_weights
            print(f"Weights: effort={w['effort']} skill_growth={w['skill_growth']} perceived_value={w['perceived_value']}")
        else:
            print("Weights: equal")


def cmd_interpret(args: argparse.Namespace) -> None:
    """Map a score to its category."""
    interpretation = interpret_time_roi(args.score)
    if args.json:
        print(json.dumps({"score": finite_or_none(args.score), **interpretation}, indent=2))
    else:
        print(f"{interpretation['category']}: {interpretation['description']}")


def cmd_validate(args: argparse.Namespace) -> None:
    """Check inputs (and weights, if given) without scoring."""
    try:
        validate_inputs(**_inputs(args), weights=_weights(args))
    except InvalidInputError as e:
        _fail(str(e))
    print("OK")


def _add_measure_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("time_spent", type=float, help="Time spent in hours (> 0)")
    p.add_argument("effort", type=float, help="Effort level (0-10)")
    p.add_argument("skill_growth", type=float, help="Skill growth level (0-10)")
    p.add_argument("perceived_value", type=float, help="Perceived value level (0-10)")
    p.add_argument(
        "--weights",
        type=float,
        nargs=3,
        metavar=("EFFORT", "SKILL_GROWTH", "PERCEIVED_VALUE"),
        help="Custom weights summing to 1.0 (default: 0.2 0.3 0.5)",
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Time ROI scoring")
    sub = parser.add_subparsers(dest="command", required=True)

    # score
    p_score = sub.add_parser("score", help="Compute and interpret a Time ROI score")
    _add_measure_args(p_score)
    p_score.add_argument("--simple", action="store_true", help="Use equal weights for all components")
    p_score.add_argument("--report-dir", type=Path, help="Directory for score_report_<run_id>.json")
    p_score.add_argument("--json", action="store_true", help="Output JSON")
    p_score.set_defaults(func=cmd_score)

    # interpret
    p_interp = sub.add_parser("interpret", help="Interpret an existing score")
    p_interp.add_argument("score", type=float, help="Time ROI score")
    p_interp.add_argument("--json", action="store_true", help="Output JSON")
    p_interp.set_defaults(func=cmd_interpret)

    # validate
    p_val = sub.add_parser("validate", help="Validate inputs without scoring")
    _add_measure_args(p_val)
    p_val.set_defaults(func=cmd_validate)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
