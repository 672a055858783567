#!/usr/bin/env python3
"""Flask web app for TimeWorth: static UI plus a JSON scoring API."""

import os
from pathlib import Path

from flask import Flask, request, jsonify, send_from_directory
from dotenv import load_dotenv
from jsonschema import ValidationError
from werkzeug.exceptions import HTTPException

load_dotenv()

from time_roi.scoring import InvalidInputError
from timeworth.web_service import default_weights, interpret_payload, score_payload, validate_payload
from timeworth.audit import audit_log, setup_app_logging

log = setup_app_logging()

PORT = int(os.environ.get("PORT", 3000))
HOST = os.environ.get("HOST", "0.0.0.0")
WEB_DIR = Path(os.environ.get("TIMEWORTH_WEB_DIR") or Path(__file__).resolve().parent / "timeworth" / "web")

CONTENT_TYPES = {
    ".js": "application/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".md": "text/markdown",
}

app = Flask(__name__, static_folder=None)
app.config["MAX_CONTENT_LENGTH"] = 1024 * 1024  # 1MB


def content_type_for(filename: str) -> str:
    """Content type by extension; anything unknown is served as HTML."""
    return CONTENT_TYPES.get(Path(filename).suffix.lower(), "text/html")


def _error_message(e: Exception) -> str:
    if isinstance(e, ValidationError):
        path = ".".join(str(p) for p in e.absolute_path)
        return f"{path}: {e.message}" if path else e.message
    return str(e)


def _json_body() -> dict | None:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


@app.errorhandler(404)
def not_found(e):
    return "File not found", 404, {"Content-Type": "text/plain; charset=utf-8"}


@app.errorhandler(Exception)
def internal_error(e):
    if isinstance(e, HTTPException):
        return e
    log.exception("Unhandled error on %s %s", request.method, request.path)
    return f"Error: {e}", 500, {"Content-Type": "text/plain; charset=utf-8"}


@app.route("/")
def index():
    return send_from_directory(WEB_DIR, "index.html", mimetype="text/html")


@app.route("/<path:filename>")
def static_asset(filename):
    """Serve a UI asset from WEB_DIR. Missing files and paths outside WEB_DIR are 404."""
    return send_from_directory(WEB_DIR, filename, mimetype=content_type_for(filename))


@app.route("/api/defaults", methods=["GET"])
def api_defaults():
    """Default weights used when a score request carries none."""
    return jsonify({"weights": default_weights()})


@app.route("/api/score", methods=["POST"])
def api_score():
    """Score an activity: weighted (default) or equal-weight with mode=simple."""
    data = _json_body()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object", "code": "INVALID_INPUT"}), 400

    try:
        result = score_payload(data)
    except (InvalidInputError, ValidationError) as e:
        err_msg = _error_message(e)
        audit_log(action="score", status="invalid", error=err_msg)
        log.warning("Score rejected: %s", err_msg)
        return jsonify({"error": err_msg, "code": "INVALID_INPUT"}), 400

    audit_log(
        action="score",
        status="success",
        score=result["score"],
        category=result["category"],
        mode=result["mode"],
        extra={"weights": result["weights"]},
    )
    log.info("Score computed: score=%s category=%s mode=%s", result["score"], result["category"], result["mode"])
    return jsonify(result)


@app.route("/api/validate", methods=["POST"])
def api_validate():
    """Check a score request without computing it."""
    data = _json_body()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object", "code": "INVALID_INPUT"}), 400

    try:
        validate_payload(data)
    except (InvalidInputError, ValidationError) as e:
        err_msg = _error_message(e)
        log.info("Validation failed: %s", err_msg)
        return jsonify({"valid": False, "error": err_msg, "code": "INVALID_INPUT"}), 400
    return jsonify({"valid": True})


@app.route("/api/interpret", methods=["POST"])
def api_interpret():
    """Map a score to its category and description."""
    data = _json_body()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object", "code": "INVALID_INPUT"}), 400

    try:
        result = interpret_payload(data)
    except ValidationError as e:
        err_msg = _error_message(e)
        log.warning("Interpret rejected: %s", err_msg)
        return jsonify({"error": err_msg, "code": "INVALID_INPUT"}), 400

    audit_log(action="interpret", status="success", score=data["score"], category=result["category"])
    return jsonify(result)


if __name__ == "__main__":
    log.info("TimeWorth starting on http://localhost:%d | Assets: %s | Logs: logs/app.log | Audit: logs/audit.log", PORT, WEB_DIR)
    if not (WEB_DIR / "index.html").exists():
        log.warning("index.html not found in %s - the UI will return 404", WEB_DIR)
    app.run(host=HOST, port=PORT, debug=os.environ.get("FLASK_DEBUG") == "1")
