"""Layout route: POST /api/layout"""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, jsonify

from magician_api.errors import guarded
from magician_api.services.mock_reports import build_layout
from magician_api.utils.payloads import json_body, require_fields


layout_bp = Blueprint("layout", __name__)


@layout_bp.route("/api/layout", methods=["POST"])
@guarded("/api/layout")
def layout():
    payload: Dict[str, Any] = json_body()
    require_fields(payload, "site_type", "goal", message="Missing 'site_type' or 'goal'")
    return jsonify(build_layout(payload["site_type"], payload["goal"]))
