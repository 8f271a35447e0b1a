"""Application settings and environment configuration loading."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BACKEND_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_ENV_FILE = BACKEND_ROOT / ".env"
DEFAULT_DATA_FILE = BACKEND_ROOT / "data" / "db.json"
JWT_SECRET_MIN_LENGTH = 32
JWT_SECRET_PLACEHOLDERS = frozenset(
    {
        "change-me",
        "changeme",
        "replace-me",
        "my-secret-key",
        "replace-with-strong-random-secret",
    },
)


class Settings(BaseSettings):
    """Typed runtime configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        # Load `backend/.env` regardless of current working directory.
        env_file=[DEFAULT_ENV_FILE, ".env"],
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "dev"

    # Flat-file datastore
    data_file: Path = DEFAULT_DATA_FILE

    # Session tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    session_ttl_seconds: int = Field(default=3600, gt=0)
    session_cookie_name: str = "token"
    session_cookie_secure: bool = True

    # Password hashing cost; bcrypt accepts 4..31.
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    cors_origins: str = ""

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"
    log_use_utc: bool = False
    request_log_slow_ms: int = Field(default=1000, ge=0)
    request_log_include_health: bool = False

    @model_validator(mode="after")
    def _defaults(self) -> Self:
        secret = self.jwt_secret.strip()
        if (
            not secret
            or len(secret) < JWT_SECRET_MIN_LENGTH
            or secret.lower() in JWT_SECRET_PLACEHOLDERS
        ):
            raise ValueError(
                "JWT_SECRET must be at least 32 characters and non-placeholder.",
            )
        self.jwt_secret = secret
        if self.log_format not in {"text", "json"}:
            raise ValueError("LOG_FORMAT must be one of: text, json.")
        return self


settings = Settings()
