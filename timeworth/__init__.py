"""TimeWorth - web service and audit layer around the Time ROI engine."""

from timeworth.web_service import interpret_payload, score_payload, validate_payload

__all__ = ["score_payload", "interpret_payload", "validate_payload"]
