"""Audit trail for scoring operations, and application logging setup."""

import json
import logging
import os
from pathlib import Path

from time_roi.utils import iso_now

AUDIT_DIR = Path(os.environ.get("TIMEWORTH_LOG_DIR") or Path(__file__).resolve().parent.parent / "logs")
AUDIT_FILE = AUDIT_DIR / "audit.log"
APP_LOG_FILE = AUDIT_DIR / "app.log"


def _ensure_log_dir():
    AUDIT_DIR.mkdir(parents=True, exist_ok=True)


def audit_log(
    action: str,
    status: str,
    *,
    source: str = "web",
    score: float | None = None,
    category: str | None = None,
    mode: str | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """Append a structured audit entry to the audit log (JSONL)."""
    _ensure_log_dir()
    entry = {
        "timestamp": iso_now(),
        "action": action,
        "status": status,
        "source": source,
    }
    if score is not None:
        entry["score"] = score
    if category:
        entry["category"] = category
    if mode:
        entry["mode"] = mode
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    with open(AUDIT_FILE, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")


def setup_app_logging():
    """Configure application logging to console and file."""
    _ensure_log_dir()
    logger = logging.getLogger("timeworth")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    fh = logging.FileHandler(APP_LOG_FILE, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    return logger
