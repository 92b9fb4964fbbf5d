from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NOTAS_API_URL = "https://api-notasrust.testingpage.store"


class Settings(BaseSettings):
    """Environment-backed settings for the notes client.

    Loads from env with support for repo ".env" files. Avoids manual load_dotenv().
    """

    _app_env = (os.getenv("APP_ENV") or "").strip().lower()
    _env_files = (
        []
        if _app_env in {"test", "ci"}
        else [
            str((Path(__file__).resolve().parents[1] / ".env")),  # apps/notas/.env
            str((Path(__file__).resolve().parents[3] / ".env")),  # repo root .env
        ]
    )

    # Load env vars from apps/notas/.env first, then repo root .env
    model_config = SettingsConfigDict(
        env_file=_env_files,
        case_sensitive=False,
        extra="ignore",
    )

    # --- App / Core ---
    app_env: str = Field(default="dev", alias="APP_ENV")

    # --- Notes API ---
    notas_api_url: str = Field(default=DEFAULT_NOTAS_API_URL, alias="NOTAS_API_URL")
    # JSON object in the environment, e.g. NOTAS_API_HEADERS='{"X-Trace": "1"}'
    notas_api_headers: dict[str, str] = Field(default_factory=dict, alias="NOTAS_API_HEADERS")
    notas_api_timeout: Optional[float] = Field(default=None, alias="NOTAS_API_TIMEOUT", gt=0)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
