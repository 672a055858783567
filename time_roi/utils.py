"""Utilities for hashing and report metadata."""

import hashlib
import json
import math
from datetime import datetime, timezone


def hash_text(text: str) -> str:
    """Compute SHA256 hash of text. Deterministic."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def hash_inputs(inputs: dict) -> str:
    """SHA256 fingerprint of score inputs; key order does not matter."""
    return hash_text(json.dumps(inputs, sort_keys=True))


def iso_now() -> str:
    """Current UTC timestamp as ISO string."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def finite_or_none(value: float) -> float | None:
    """JSON has no Infinity/NaN; overflowed scores are emitted as null."""
    return value if math.isfinite(value) else None
