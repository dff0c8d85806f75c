"""Analyze route: POST /api/analyze

Validates that the body names a ``url`` and returns the canned audit
report for it: { url, summary, report: { seo, performance, accessibility, issues } }.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, jsonify

from magician_api.errors import guarded
from magician_api.services.mock_reports import build_analysis
from magician_api.utils.payloads import json_body, require_fields


analyze_bp = Blueprint("analyze", __name__)


@analyze_bp.route("/api/analyze", methods=["POST"])
@guarded("/api/analyze")
def analyze():
    payload: Dict[str, Any] = json_body()
    require_fields(payload, "url", message="Missing 'url' in request body")
    return jsonify(build_analysis(payload["url"]))
