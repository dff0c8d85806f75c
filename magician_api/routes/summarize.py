"""Summarize route: POST /api/summarize

Accepts any truthy ``data`` value (object, list, string) and returns the
canned feedback summary with three recommended actions.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, jsonify

from magician_api.errors import guarded
from magician_api.services.mock_reports import build_summary
from magician_api.utils.payloads import json_body, require_fields


summarize_bp = Blueprint("summarize", __name__)


@summarize_bp.route("/api/summarize", methods=["POST"])
@guarded("/api/summarize")
def summarize():
    payload: Dict[str, Any] = json_body()
    require_fields(payload, "data", message="Missing 'data' in request body")
    return jsonify(build_summary(payload["data"]))
