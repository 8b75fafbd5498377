# backend/ers/core/config.py

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_env: str = "dev"

    # SQLite for local dev, Postgres URL in prod
    database_url: str = "sqlite:///./ers.db"

    jwt_secret_key: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    session_cookie_name: str = "ers_session"

    # comma-separated allowlist, e.g. "https://ers.example.com,http://localhost:3000"
    cors_origins: str = "http://localhost:3000"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def allow_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
