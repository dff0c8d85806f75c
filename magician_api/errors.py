"""Error types and JSON error responses.

Every failure the API reports is a JSON body with a single ``error``
string. ``guarded()`` wraps route bodies so unexpected faults turn into
a generic 500 instead of escaping the handler.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(ApiError):
    status_code = 400


class Forbidden(ApiError):
    status_code = 403


class InternalError(ApiError):
    status_code = 500

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE):
        super().__init__(message)


def resp_error(message: str, status: int = 400):
    return jsonify({"error": message}), status


def guarded(route_name: str) -> Callable:
    """Wrap a view so ApiErrors render as JSON and anything else is a logged 500."""

    def decorator(view: Callable) -> Callable:
        @functools.wraps(view)
        def wrapper(*args: Any, **kwargs: Any):
            try:
                return view(*args, **kwargs)
            except ApiError as e:
                return resp_error(e.message, e.status_code)
            except Exception:
                logger.exception(f"Error in {route_name}")
                err = InternalError()
                return resp_error(err.message, err.status_code)

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):
        return resp_error(e.message, e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return resp_error(e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return handle_api_error(InternalError())
