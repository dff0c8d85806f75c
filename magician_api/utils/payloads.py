"""Request body helpers shared by the protected routes.

Provides:
- ``json_body()``: the request's JSON object, or ``{}`` for anything else.
- ``is_present(value)``: JSON truthiness (``[]`` and ``{}`` count as present).
- ``require_fields(payload, *names, message=...)``: raise BadRequest when
  any named field is not present.
"""

from __future__ import annotations

import math
from typing import Any, Dict

from flask import request

from magician_api.errors import BadRequest


def json_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def is_present(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        # NaN is falsy in JavaScript too; Flask's JSON parser accepts the NaN literal
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    return True


def require_fields(payload: Dict[str, Any], *names: str, message: str) -> None:
    if not all(is_present(payload.get(n)) for n in names):
        raise BadRequest(message)
