"""Flask app: static UI serving and the JSON scoring API."""

import json

import pytest

import app as web_app
from timeworth import audit


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(audit, "AUDIT_FILE", tmp_path / "audit.log")
    web_app.app.config["TESTING"] = True
    with web_app.app.test_client() as c:
        yield c


def _audit_entries(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_index_served_as_html(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.mimetype == "text/html"
    assert b"TimeWorth" in resp.data


@pytest.mark.parametrize(
    "path, mimetype",
    [
        ("/app.js", "application/javascript"),
        ("/style.css", "text/css"),
        ("/index.html", "text/html"),
    ],
)
def test_assets_served_with_content_type(client, path, mimetype):
    resp = client.get(path)
    assert resp.status_code == 200
    assert resp.mimetype == mimetype


def test_content_type_mapping():
    assert web_app.content_type_for("notes.md") == "text/markdown"
    assert web_app.content_type_for("data.JSON") == "application/json"
    assert web_app.content_type_for("page.htm") == "text/html"
    assert web_app.content_type_for("README") == "text/html"


def test_missing_asset_404(client):
    resp = client.get("/does-not-exist.js")
    assert resp.status_code == 404
    assert resp.data == b"File not found"


def test_path_traversal_404(client):
    resp = client.get("/../app.py")
    assert resp.status_code == 404


def test_internal_error_500(client, monkeypatch):
    def boom(data):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(web_app, "score_payload", boom)
    resp = client.post("/api/score", json={"time_spent": 10, "effort": 7, "skill_growth": 8, "perceived_value": 9})
    assert resp.status_code == 500
    assert resp.data == b"Error: disk on fire"


def test_defaults(client):
    resp = client.get("/api/defaults")
    assert resp.get_json() == {"weights": {"effort": 0.2, "skill_growth": 0.3, "perceived_value": 0.5}}


def test_score_default_weights(client, tmp_path):
    resp = client.post("/api/score", json={"time_spent": 10, "effort": 7, "skill_growth": 8, "perceived_value": 9})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["score"] == 83.0
    assert body["category"] == "Excellent"
    assert body["description"] == "Highly efficient use of time"
    assert body["mode"] == "weighted"
    assert body["weights"] == {"effort": 0.2, "skill_growth": 0.3, "perceived_value": 0.5}

    entries = _audit_entries(tmp_path / "audit.log")
    assert entries[-1]["action"] == "score"
    assert entries[-1]["status"] == "success"
    assert entries[-1]["score"] == 83.0


def test_score_camel_case_payload_with_weights(client):
    payload = {
        "timeSpent": 20,
        "effort": 8,
        "skillGrowth": 9,
        "perceivedValue": 7,
        "weights": {"effort": 0.2, "skillGrowth": 0.5, "perceivedValue": 0.3},
    }
    body = client.post("/api/score", json=payload).get_json()
    assert body["score"] == 41.0
    assert body["category"] == "Moderate"
    assert body["inputs"] == {"time_spent": 20, "effort": 8, "skill_growth": 9, "perceived_value": 7}


def test_score_simple_mode_ignores_weights(client):
    payload = {
        "time_spent": 10,
        "effort": 7,
        "skill_growth": 8,
        "perceived_value": 9,
        "mode": "simple",
        "weights": {"effort": 0.3, "skill_growth": 0.3, "perceived_value": 0.3},
    }
    body = client.post("/api/score", json=payload).get_json()
    assert body["score"] == 80.0
    assert body["mode"] == "simple"
    assert body["weights"] is None


def test_score_invalid_input_400(client, tmp_path):
    resp = client.post("/api/score", json={"time_spent": 0, "effort": 5, "skill_growth": 5, "perceived_value": 5})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Time spent must be greater than 0", "code": "INVALID_INPUT"}
    assert _audit_entries(tmp_path / "audit.log")[-1]["status"] == "invalid"


def test_score_bad_weight_sum_400(client):
    payload = {
        "time_spent": 10,
        "effort": 5,
        "skill_growth": 5,
        "perceived_value": 5,
        "weights": {"effort": 0.2, "skill_growth": 0.3, "perceived_value": 0.4},
    }
    resp = client.post("/api/score", json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Weights must sum to 1.0 (current sum: 0.9)"


def test_score_missing_field_400(client):
    resp = client.post("/api/score", json={"time_spent": 10, "effort": 5, "skill_growth": 5})
    assert resp.status_code == 400
    assert "perceived_value" in resp.get_json()["error"]


def test_score_string_field_400(client):
    resp = client.post("/api/score", json={"time_spent": "ten", "effort": 5, "skill_growth": 5, "perceived_value": 5})
    assert resp.status_code == 400
    assert resp.get_json()["error"].startswith("time_spent:")


def test_score_non_object_body_400(client):
    resp = client.post("/api/score", json=[10, 5, 5, 5])
    assert resp.status_code == 400
    assert resp.get_json()["code"] == "INVALID_INPUT"


def test_validate_ok(client):
    resp = client.post("/api/validate", json={"time_spent": 1, "effort": 0, "skill_growth": 10, "perceived_value": 5})
    assert resp.status_code == 200
    assert resp.get_json() == {"valid": True}


def test_validate_reports_first_failure(client):
    resp = client.post("/api/validate", json={"time_spent": 1, "effort": 11, "skill_growth": 11, "perceived_value": 5})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["valid"] is False
    assert body["error"] == "Effort must be between 0 and 10"


def test_interpret(client):
    resp = client.post("/api/interpret", json={"score": 80})
    assert resp.get_json() == {"category": "Good", "description": "Strong returns relative to time invested"}
    assert client.post("/api/interpret", json={"score": -1}).get_json()["category"] == "Invalid"


def test_interpret_missing_score_400(client):
    resp = client.post("/api/interpret", json={})
    assert resp.status_code == 400
    assert "score" in resp.get_json()["error"]


def test_score_overflow_returned_as_null(client, tmp_path):
    resp = client.post("/api/score", json={"time_spent": 1e-308, "effort": 10, "skill_growth": 10, "perceived_value": 10})
    assert resp.status_code == 200
    body = json.loads(resp.data)
    assert body["score"] is None
    assert body["category"] == "Exceptional"
    assert b"Infinity" not in resp.data
    assert "score" not in _audit_entries(tmp_path / "audit.log")[-1]


def test_score_huge_int_level_400(client):
    resp = client.post("/api/score", json={"time_spent": 10, "effort": 10**400, "skill_growth": 5, "perceived_value": 5})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Effort must be between 0 and 10", "code": "INVALID_INPUT"}


def test_audit_entry_timestamp_is_utc_iso(client, tmp_path):
    audit.audit_log(action="interpret", status="success", score=42.0)
    entry = _audit_entries(tmp_path / "audit.log")[-1]
    assert entry["timestamp"].endswith("Z")
    assert len(entry["timestamp"]) == len("2025-01-01T00:00:00.000Z")
