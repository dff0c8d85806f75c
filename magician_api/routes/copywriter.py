"""Copywriter route: POST /api/copywriter

Requires ``audience`` and ``goal``; ``tone`` is optional and falls back
to "neutral". Returns { headline, subheadline, tone, cta }.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, jsonify

from magician_api.errors import guarded
from magician_api.services.mock_reports import build_copy
from magician_api.utils.payloads import json_body, require_fields


copywriter_bp = Blueprint("copywriter", __name__)


@copywriter_bp.route("/api/copywriter", methods=["POST"])
@guarded("/api/copywriter")
def copywriter():
    payload: Dict[str, Any] = json_body()
    require_fields(payload, "audience", "goal", message="Missing 'audience' or 'goal'")
    out = build_copy(payload["audience"], payload["goal"], payload.get("tone"))
    return jsonify(out)
