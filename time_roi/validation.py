"""Schema validation for request payloads and score reports."""

import json
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_score_request(data: dict) -> None:
    """Validate a /api/score payload (snake_case keys). Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("score_request")
    jsonschema.validate(data, schema)


def validate_interpret_request(data: dict) -> None:
    """Validate a /api/interpret payload. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("interpret_request")
    jsonschema.validate(data, schema)


def validate_score_report(data: dict) -> None:
    """Validate a score report against schema. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("score_report")
    jsonschema.validate(data, schema)
