"""Public routes: GET / (health) and GET /debug/env

Neither route is behind the token gate. The debug route reports only
whether a token is configured and how long it is, never its value.
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from magician_api.auth import get_config
from magician_api.config import TOKEN_ENV_VAR


health_bp = Blueprint("health", __name__)


@health_bp.get("/")
def health_check():
    return jsonify({"status": "Website Magician API is alive"})


@health_bp.get("/debug/env")
def debug_env():
    cfg = get_config()
    has_token = cfg.token_configured
    if has_token:
        note = f"{TOKEN_ENV_VAR} is loaded correctly."
    else:
        note = f"{TOKEN_ENV_VAR} is missing. Check your Vercel environment variables."
    return jsonify({"envDetected": has_token, "tokenLength": cfg.token_length, "note": note})
