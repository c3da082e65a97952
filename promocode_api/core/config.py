"""
API and seeding configuration.
All values are overridable via env or .env.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

_ROOT_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_PATH = _ROOT_DIR / ".env"


class Settings(BaseSettings):
    """Application settings; override via env or .env for deployment."""

    app_title: str = "Promo Code Factory API"

    # Resource routes live under this prefix; /health does not
    api_prefix: str = "/api/v1"

    # Server (bind to 0.0.0.0, set PORT via env)
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS: comma-separated origins, or "*" for allow-all
    cors_origins: str = "*"

    log_level: str = "INFO"

    # Fill the in-memory store from the fixture set at startup
    seed_fixtures: bool = True

    # Validity window of promo codes issued through POST /promocodes
    promo_code_validity_days: int = 30

    model_config = {
        "env_file": str(_ENV_PATH) if _ENV_PATH.exists() else ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def cors_origins_list(self) -> list[str]:
        if not self.cors_origins or self.cors_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
