"""Configuration for environment variables and runtime knobs.

Provides a frozen config value built once at startup and handed to
`create_app()`. Route handlers read it from the app, never from the
process environment directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


TOKEN_ENV_VAR = "MAGICIAN_API_TOKEN"
DEFAULT_PORT = 3001


@dataclass(frozen=True)
class Config:
    # Shared secret for the bearer gate; None or "" means not configured
    API_TOKEN: Optional[str] = None

    # Local server
    HOST: str = "127.0.0.1"
    PORT: int = DEFAULT_PORT

    # Set when running under Vercel, which imports the app instead of us binding
    SERVERLESS: bool = False

    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "*"
    CORS_METHODS: tuple = ("GET", "POST", "OPTIONS")
    CORS_HEADERS: tuple = ("Content-Type", "Authorization")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        port_raw = env.get("PORT") or str(DEFAULT_PORT)
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port_raw!r}")
        return cls(
            API_TOKEN=env.get(TOKEN_ENV_VAR),
            HOST=env.get("HOST", "127.0.0.1"),
            PORT=port,
            SERVERLESS=bool(env.get("VERCEL")),
            LOG_LEVEL=env.get("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def token_configured(self) -> bool:
        return bool(self.API_TOKEN)

    @property
    def token_length(self) -> int:
        return len(self.API_TOKEN) if self.API_TOKEN else 0
