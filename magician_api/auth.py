"""Bearer-token gate for protected routes.

Installs a ``before_request`` hook that rejects any request to a
non-public endpoint unless its ``Authorization`` header is exactly
``Bearer <token>``. Unknown paths are gated too, so they answer 403
until the caller is authenticated.
"""

from __future__ import annotations

import hmac
import logging
from typing import Optional

from flask import Flask, current_app, request

from magician_api.config import Config
from magician_api.errors import Forbidden


logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = "Forbidden: Invalid or missing API token"

PUBLIC_ENDPOINTS = frozenset({"health.health_check", "health.debug_env", "static"})


def get_config() -> Config:
    return current_app.extensions["magician_config"]


def expected_header(token: Optional[str]) -> Optional[str]:
    if not token:
        return None
    return f"Bearer {token}"


def is_authorized(header: Optional[str], token: Optional[str]) -> bool:
    expected = expected_header(token)
    # Fail closed when no token is configured
    if expected is None or header is None:
        return False
    return hmac.compare_digest(header.encode("utf-8"), expected.encode("utf-8"))


def require_api_token():
    # Let flask-cors answer preflight requests
    if request.method == "OPTIONS":
        return None
    if request.endpoint in PUBLIC_ENDPOINTS:
        return None
    if is_authorized(request.headers.get("Authorization"), get_config().API_TOKEN):
        return None
    logger.info(f"Rejected {request.method} {request.path}: bad or missing token")
    raise Forbidden(FORBIDDEN_MESSAGE)


def init_auth(app: Flask) -> None:
    app.before_request(require_api_token)
