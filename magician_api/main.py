"""Process entrypoint for the Flask API.

Usage:
- python -m magician_api.main
- FLASK_APP=magician_api.main:app flask run

On Vercel the module-level `app` is imported as the request handler and
no socket is bound here.
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from magician_api import create_app
from magician_api.config import Config

# Load .env for local dev
load_dotenv()

config = Config.from_env()

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("magician_api")

app = create_app(config)


def main(cfg: Config = config) -> None:
    if cfg.SERVERLESS:
        logger.info("Serverless host detected; exporting app without binding a port")
        return
    logger.info(f"Server running locally on port {cfg.PORT}")
    app.run(host=cfg.HOST, port=cfg.PORT)


if __name__ == "__main__":
    main()
