"""Flask app factory and blueprint registration.

Defines `create_app()` to build the Flask app from an explicit Config,
enable CORS, install the bearer-token gate and JSON error handlers, and
register route blueprints.
"""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from magician_api.auth import init_auth
from magician_api.config import TOKEN_ENV_VAR, Config
from magician_api.errors import register_error_handlers
from magician_api.routes.analyze import analyze_bp
from magician_api.routes.copywriter import copywriter_bp
from magician_api.routes.health import health_bp
from magician_api.routes.layout import layout_bp
from magician_api.routes.summarize import summarize_bp


logger = logging.getLogger(__name__)


def create_app(cfg: Optional[Config] = None) -> Flask:
    cfg = cfg if cfg is not None else Config.from_env()

    app = Flask(__name__)
    app.extensions["magician_config"] = cfg
    # Keep non-ASCII text (e.g. the summary's dash) readable in responses
    app.json.ensure_ascii = False

    if not cfg.token_configured:
        logger.warning(f"{TOKEN_ENV_VAR} is not set; every protected route will answer 403")

    CORS(
        app,
        resources={r"/*": {"origins": cfg.CORS_ORIGINS}},
        send_wildcard=True,
        supports_credentials=False,
        allow_headers=list(cfg.CORS_HEADERS),
        methods=list(cfg.CORS_METHODS),
    )

    init_auth(app)
    register_error_handlers(app)

    # Blueprints
    app.register_blueprint(health_bp)
    app.register_blueprint(analyze_bp)
    app.register_blueprint(copywriter_bp)
    app.register_blueprint(layout_bp)
    app.register_blueprint(summarize_bp)

    return app
