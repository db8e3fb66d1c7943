# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

import warnings

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_SECRET_KEY = "dev-secret-change-me"


class Settings(BaseSettings):
    """Runtime configuration.

    Every field can be overridden by an environment variable of the same
    name (case-insensitive) or by an entry in ``.env``.
    """

    app_name: str = "Business Admin Dashboard"
    database_url: str = "sqlite:///./bizadmin.db"
    secret_key: str = _DEFAULT_SECRET_KEY
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:5173"

    # Sessions
    session_expiry_days: int = 7
    session_cookie_secure: bool = False

    # Registration after the first user exists
    registration_enabled: bool = False

    # Create tables and seed RBAC data in the app lifespan
    init_db_on_startup: bool = True

    recent_activity_limit: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("secret_key")
    @classmethod
    def warn_on_weak_secret(cls, v: str) -> str:
        if v == _DEFAULT_SECRET_KEY or len(v) < 32:
            warnings.warn(
                "SECRET_KEY is a development default or shorter than 32 characters",
                UserWarning,
                stacklevel=2,
            )
        return v

    def get_cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
